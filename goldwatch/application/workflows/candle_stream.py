"""Live candle stream workflow for the futures chart.

Holds the candle buffer for one symbol/interval, merges streamed kline
events into it and re-runs the analysis after each merge. The transport
(websocket, reconnects) belongs to the caller, which feeds decoded events
to on_event() in arrival order.
"""

import logging

from goldwatch.adapters.mappers.kline_mapper import parse_kline_event, parse_klines
from goldwatch.application.queries.analyze_market import MarketAnalysis, analyze_market
from goldwatch.domain.models.enums import TimeFrame
from goldwatch.domain.models.market import PriceSample
from goldwatch.domain.rules import CANDLE_BUFFER_SIZE, MIN_INDICATOR_SAMPLES
from goldwatch.domain.services.candles import merge_candle
from goldwatch.domain.services.signal_generator import SignalGenerator

logger = logging.getLogger(__name__)


class CandleStream:
    """Candle buffer plus analysis for one symbol and timeframe.

    Usage:
        stream = CandleStream("XAUUSDT", TimeFrame.H1)
        stream.load(rest_klines)
        analysis = stream.on_event(ws_message)
    """

    def __init__(
        self,
        symbol: str,
        timeframe: TimeFrame,
        max_candles: int = CANDLE_BUFFER_SIZE,
        generator: SignalGenerator | None = None,
        min_samples: int = MIN_INDICATOR_SAMPLES,
    ) -> None:
        self.symbol = symbol
        self.timeframe = timeframe
        self._max_candles = max_candles
        self._generator = generator or SignalGenerator()
        self._min_samples = min_samples
        self._candles: list[PriceSample] = []

    @property
    def candles(self) -> list[PriceSample]:
        """Current buffer, oldest first."""
        return list(self._candles)

    @property
    def current_price(self) -> float:
        """Close of the latest candle (0 before any data)."""
        return self._candles[-1].close if self._candles else 0.0

    def load(self, rows: list[list]) -> MarketAnalysis:
        """Replace the buffer with a REST klines response and analyze it."""
        candles = parse_klines(rows)
        self._candles = candles[-self._max_candles:]
        logger.info(
            "Loaded %d %s candles for %s",
            len(self._candles),
            self.timeframe.label,
            self.symbol,
        )
        return self.analyze()

    def on_event(self, event: dict) -> MarketAnalysis | None:
        """Merge one websocket kline event.

        Returns:
            Fresh analysis, or None if the message carried no kline
        """
        candle = parse_kline_event(event)
        if candle is None:
            return None

        self._candles = merge_candle(self._candles, candle, self._max_candles)
        return self.analyze()

    def analyze(self) -> MarketAnalysis:
        """Analyze the current buffer at the latest close."""
        return analyze_market(
            self._candles,
            current_price=self.current_price,
            generator=self._generator,
            min_samples=self._min_samples,
        )
