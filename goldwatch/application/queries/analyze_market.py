"""Market analysis query: indicators and trading signal for a price series."""

import logging
from dataclasses import dataclass

from goldwatch.domain.models.indicators import IndicatorSnapshot
from goldwatch.domain.models.market import PriceSample
from goldwatch.domain.models.signal import TradingSignal
from goldwatch.domain.rules import MIN_INDICATOR_SAMPLES
from goldwatch.domain.services.aggregator import compute_indicators
from goldwatch.domain.services.signal_generator import SignalGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketAnalysis:
    """Indicators and signal computed for one series."""

    current_price: float
    sample_count: int
    indicators: IndicatorSnapshot
    signal: TradingSignal

    @property
    def is_degenerate(self) -> bool:
        """True when the series was too short for real indicators."""
        return self.indicators.bollinger.is_degenerate


def analyze_market(
    series: list[PriceSample],
    current_price: float | None = None,
    generator: SignalGenerator | None = None,
    min_samples: int = MIN_INDICATOR_SAMPLES,
) -> MarketAnalysis:
    """Compute the indicator snapshot and trading signal for a series.

    Args:
        series: Price samples, oldest first
        current_price: Spot price (default: last close, 0 for an empty series)
        generator: Signal rules (default thresholds if None)
        min_samples: Minimum samples for non-neutral indicators

    Returns:
        MarketAnalysis
    """
    if current_price is None:
        current_price = series[-1].close if series else 0.0
    if generator is None:
        generator = SignalGenerator()

    indicators = compute_indicators(series, min_samples=min_samples)
    signal = generator.generate(current_price, indicators, series)

    if len(series) < min_samples:
        logger.info("Only %d samples, indicators are neutral", len(series))

    logger.debug(
        "Signal %s (%s) at %.2f: %s",
        signal.type.value,
        signal.strength.value,
        current_price,
        signal.primary_reason,
    )

    return MarketAnalysis(
        current_price=current_price,
        sample_count=len(series),
        indicators=indicators,
        signal=signal,
    )
