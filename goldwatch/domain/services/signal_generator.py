"""Signal generation from an indicator snapshot.

Scores independent pieces of buy and sell evidence, in this order:

1. RSI zone (oversold/overbought +2, leaning low/high +1, 45-55 neutral)
2. MACD line versus signal line (+1)
3. Price near support or near resistance (+2, mutually exclusive)
4. Price versus MA20 and MA50 (+1)
5. MA20 versus MA50 trend, golden/death cross (+1)

The side with the higher score wins; a tie is a hold. Every rule that fires
contributes a reason, and reasons keep evaluation order so that the same
inputs always yield the same primary reason.
"""

from dataclasses import dataclass, field

from goldwatch.domain.models.enums import SignalStrength, SignalType
from goldwatch.domain.models.indicators import IndicatorSnapshot
from goldwatch.domain.models.market import PriceSample
from goldwatch.domain.models.signal import TradingSignal
from goldwatch.domain.rules import (
    FALLBACK_BAND,
    MODERATE_SCORE_GAP,
    RANGE_STDDEV_MULTIPLIER,
    RESISTANCE_PROXIMITY,
    RSI_LEAN_HIGH,
    RSI_LEAN_LOW,
    RSI_OVERBOUGHT,
    RSI_OVERSOLD,
    STRONG_SCORE_GAP,
    SUPPORT_PROXIMITY,
    round_half_up,
)
from goldwatch.domain.services.statistics import stddev

NO_SIGNAL_REASON = "No clear signal - wait for the next direction"


@dataclass
class _Evidence:
    """Accumulated buy/sell scores and reasons."""

    buy_score: int = 0
    sell_score: int = 0
    reasons: list[str] = field(default_factory=list)

    def buy(self, points: int, reason: str) -> None:
        self.buy_score += points
        self.reasons.append(reason)

    def sell(self, points: int, reason: str) -> None:
        self.sell_score += points
        self.reasons.append(reason)


def range_support_resistance(
    series: list[PriceSample],
    stddev_multiplier: float = RANGE_STDDEV_MULTIPLIER,
) -> tuple[float, float]:
    """Support/resistance from the range of a raw series.

    support = lowest low - k × stddev(closes)
    resistance = highest high + k × stddev(closes)

    Args:
        series: Non-empty price series
        stddev_multiplier: k (default 0.5)

    Returns:
        Tuple of (support, resistance)
    """
    closes = [sample.close for sample in series]
    mean = sum(closes) / len(closes)
    deviation = stddev(closes, mean)

    highest = max(sample.high for sample in series)
    lowest = min(sample.low for sample in series)

    return lowest - deviation * stddev_multiplier, highest + deviation * stddev_multiplier


class SignalGenerator:
    """Rule engine turning an indicator snapshot into a trading signal.

    Thresholds default to the constants in goldwatch.domain.rules and can be
    overridden per instance. The generator holds no state between calls.
    """

    def __init__(
        self,
        rsi_oversold: float = RSI_OVERSOLD,
        rsi_overbought: float = RSI_OVERBOUGHT,
        rsi_lean_low: float = RSI_LEAN_LOW,
        rsi_lean_high: float = RSI_LEAN_HIGH,
        support_proximity: float = SUPPORT_PROXIMITY,
        resistance_proximity: float = RESISTANCE_PROXIMITY,
        fallback_band: float = FALLBACK_BAND,
        strong_gap: int = STRONG_SCORE_GAP,
        moderate_gap: int = MODERATE_SCORE_GAP,
    ) -> None:
        self.rsi_oversold = rsi_oversold
        self.rsi_overbought = rsi_overbought
        self.rsi_lean_low = rsi_lean_low
        self.rsi_lean_high = rsi_lean_high
        self.support_proximity = support_proximity
        self.resistance_proximity = resistance_proximity
        self.fallback_band = fallback_band
        self.strong_gap = strong_gap
        self.moderate_gap = moderate_gap

    def support_resistance(
        self,
        current_price: float,
        snapshot: IndicatorSnapshot,
        series: list[PriceSample] | None = None,
    ) -> tuple[float, float]:
        """Derive support and resistance levels.

        Bollinger lower/upper by default. If either band is zero and a
        series is available, both come from the series range instead. Any
        level still zero falls back to current price ∓ 2%.

        Returns:
            Tuple of (support, resistance), unrounded
        """
        support = snapshot.bollinger.lower
        resistance = snapshot.bollinger.upper

        if (support == 0 or resistance == 0) and series:
            support, resistance = range_support_resistance(series)

        if support == 0:
            support = current_price * (1 - self.fallback_band)
        if resistance == 0:
            resistance = current_price * (1 + self.fallback_band)

        return support, resistance

    def strength_for(self, gap: int) -> SignalStrength:
        """Map a score gap to a verdict strength."""
        if gap >= self.strong_gap:
            return SignalStrength.STRONG
        if gap >= self.moderate_gap:
            return SignalStrength.MODERATE
        return SignalStrength.WEAK

    def generate(
        self,
        current_price: float,
        snapshot: IndicatorSnapshot,
        series: list[PriceSample] | None = None,
    ) -> TradingSignal:
        """Score the evidence and produce a verdict.

        Args:
            current_price: Latest spot price
            snapshot: Indicators computed from the series
            series: Raw series, used only for degenerate Bollinger Bands

        Returns:
            TradingSignal with levels rounded to whole price units
        """
        support, resistance = self.support_resistance(current_price, snapshot, series)
        evidence = _Evidence()

        self._score_rsi(snapshot.rsi, evidence)
        self._score_macd(snapshot, evidence)
        self._score_levels(current_price, support, resistance, evidence)
        self._score_moving_averages(current_price, snapshot, evidence)

        signal_type = SignalType.HOLD
        strength = SignalStrength.WEAK

        if evidence.buy_score > evidence.sell_score:
            signal_type = SignalType.BUY
            strength = self.strength_for(evidence.buy_score - evidence.sell_score)
        elif evidence.sell_score > evidence.buy_score:
            signal_type = SignalType.SELL
            strength = self.strength_for(evidence.sell_score - evidence.buy_score)

        reasons = evidence.reasons or [NO_SIGNAL_REASON]

        return TradingSignal(
            type=signal_type,
            strength=strength,
            primary_reason=reasons[0],
            all_reasons=reasons,
            support_level=round_half_up(support),
            resistance_level=round_half_up(resistance),
            buy_score=evidence.buy_score,
            sell_score=evidence.sell_score,
        )

    def _score_rsi(self, rsi: float, evidence: _Evidence) -> None:
        if rsi < self.rsi_oversold:
            evidence.buy(2, f"RSI below {self.rsi_oversold:g} (oversold) - price is in the oversold zone")
        elif rsi > self.rsi_overbought:
            evidence.sell(2, f"RSI above {self.rsi_overbought:g} (overbought) - price is in the overbought zone")
        elif rsi < self.rsi_lean_low:
            evidence.buy(1, "RSI is low - bias towards a move up")
        elif rsi > self.rsi_lean_high:
            evidence.sell(1, "RSI is high - bias towards a move down")

    def _score_macd(self, snapshot: IndicatorSnapshot, evidence: _Evidence) -> None:
        macd = snapshot.macd
        if macd.histogram > 0 and macd.macd > macd.signal:
            evidence.buy(1, "MACD crossed above the signal line - buy signal")
        elif macd.histogram < 0 and macd.macd < macd.signal:
            evidence.sell(1, "MACD crossed below the signal line - sell signal")

    def _score_levels(
        self,
        current_price: float,
        support: float,
        resistance: float,
        evidence: _Evidence,
    ) -> None:
        if current_price <= support * self.support_proximity:
            evidence.buy(2, "Price is near support - likely to rebound")
        elif current_price >= resistance * self.resistance_proximity:
            evidence.sell(2, "Price is near resistance - likely to pull back")

    def _score_moving_averages(
        self,
        current_price: float,
        snapshot: IndicatorSnapshot,
        evidence: _Evidence,
    ) -> None:
        ma20 = snapshot.moving_averages.ma20
        ma50 = snapshot.moving_averages.ma50

        if current_price > ma20 and current_price > ma50:
            evidence.buy(1, "Price is above MA20 and MA50")
        elif current_price < ma20 and current_price < ma50:
            evidence.sell(1, "Price is below MA20 and MA50")

        # Trend only counts when both averages exist
        if ma20 > 0 and ma50 > 0:
            if ma20 > ma50:
                evidence.buy(1, "MA20 is above MA50 (golden cross) - uptrend")
            elif ma20 < ma50:
                evidence.sell(1, "MA20 is below MA50 (death cross) - downtrend")


def generate_signal(
    current_price: float,
    snapshot: IndicatorSnapshot,
    series: list[PriceSample] | None = None,
) -> TradingSignal:
    """Generate a trading signal with the default rule thresholds.

    Pure function version of SignalGenerator.generate().
    """
    return SignalGenerator().generate(current_price, snapshot, series)
