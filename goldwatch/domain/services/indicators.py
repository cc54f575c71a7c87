"""Indicator calculators: RSI, MACD, Bollinger Bands and moving averages.

Each calculator works on close prices (oldest first) and degrades instead of
raising when the series is shorter than its nominal period:

- RSI shrinks its lookback to the available deltas, neutral 50 without any
- MACD shrinks fast/slow/signal periods to fit, and below the minimum
  reports the last price delta as a low-confidence trend
- Bollinger Bands and moving averages clamp their window to the series
"""

import math

from goldwatch.domain.models.indicators import BollingerBands, MACDValues, MovingAverages
from goldwatch.domain.rules import (
    BOLLINGER_MULTIPLIER,
    BOLLINGER_PERIOD,
    MA_WINDOWS,
    MACD_FAST_PERIOD,
    MACD_SIGNAL_PERIOD,
    MACD_SLOW_FRACTION,
    MACD_SLOW_PERIOD,
    MIN_MACD_FAST_PERIOD,
    NEUTRAL_RSI,
    RSI_PERIOD,
)
from goldwatch.domain.services.statistics import ema, ema_series, sma, stddev


def calculate_rsi(values: list[float], period: int = RSI_PERIOD) -> float:
    """Calculate the Relative Strength Index.

    Uses simple averages of gains and losses over the last
    `min(period, len(values) - 1)` deltas:

    RSI = 100 - 100 / (1 + avg_gain / avg_loss)

    Args:
        values: Close prices, oldest first
        period: Lookback in deltas (default 14)

    Returns:
        RSI in [0, 100]; 50 with fewer than two values or a flat series,
        100 when there were gains but no losses
    """
    effective = min(period, len(values) - 1)
    if effective < 1:
        return NEUTRAL_RSI

    gains = 0.0
    losses = 0.0

    # Walk the last `effective` deltas, most recent first
    for i in range(1, effective + 1):
        change = values[-i] - values[-i - 1]
        if change > 0:
            gains += change
        else:
            losses += -change

    avg_gain = gains / effective
    avg_loss = losses / effective

    if avg_loss == 0:
        return 100.0 if avg_gain > 0 else NEUTRAL_RSI

    rs = avg_gain / avg_loss
    rsi = 100 - (100 / (1 + rs))

    return min(100.0, max(0.0, rsi))


def macd_periods(length: int) -> tuple[int, int, int]:
    """Fast, slow and signal periods adapted to a series length.

    fast = min(12, n // 2), slow = min(26, floor(0.8 n)), signal = min(9, n // 3)
    """
    fast = min(MACD_FAST_PERIOD, length // 2)
    slow = min(MACD_SLOW_PERIOD, math.floor(length * MACD_SLOW_FRACTION))
    signal = min(MACD_SIGNAL_PERIOD, length // 3)
    return fast, slow, signal


def calculate_macd(
    values: list[float],
    min_fast_period: int = MIN_MACD_FAST_PERIOD,
) -> MACDValues:
    """Calculate MACD line, signal line and histogram.

    MACD = EMA(fast) - EMA(slow). The signal line is the EMA of the MACD
    values of every prefix from index `slow` to the end, with period
    min(signal, number of such values). Histogram = MACD - signal.

    When there is too little data (fast < min_fast_period or slow <= fast)
    the last price delta d is reported as (d, d/2, d/2).

    Args:
        values: Close prices, oldest first
        min_fast_period: Smallest usable fast period (default 2)

    Returns:
        MACDValues
    """
    fast, slow, signal_period = macd_periods(len(values))

    if fast < min_fast_period or slow <= fast:
        recent_change = values[-1] - values[-2] if len(values) > 1 else 0.0
        return MACDValues(
            macd=recent_change,
            signal=recent_change * 0.5,
            histogram=recent_change * 0.5,
        )

    fast_series = ema_series(values, fast)
    slow_series = ema_series(values, slow)
    macd = fast_series[-1] - slow_series[-1]

    # fast_series[j] covers values[: fast + j], slow_series[j] values[: slow + j];
    # align both on prefixes ending at indices slow .. n-1
    fast_offset = slow - fast + 1
    macd_line = [
        fast_series[fast_offset + j] - slow_series[1 + j]
        for j in range(len(values) - slow)
    ]

    if macd_line:
        signal = ema(macd_line, min(signal_period, len(macd_line)))
    else:
        signal = macd * 0.5

    return MACDValues(macd=macd, signal=signal, histogram=macd - signal)


def calculate_bollinger_bands(
    values: list[float],
    period: int = BOLLINGER_PERIOD,
    multiplier: float = BOLLINGER_MULTIPLIER,
) -> BollingerBands:
    """Calculate Bollinger Bands over the trailing window.

    middle = SMA(window), upper/lower = middle ± multiplier × stddev(window),
    window = min(period, len(values)).

    Args:
        values: Close prices, oldest first
        period: Window length (default 20)
        multiplier: Standard deviation multiplier (default 2)

    Returns:
        BollingerBands (all zero for an empty series)
    """
    effective = min(period, len(values))
    if effective < 1:
        return BollingerBands()

    window = values[-effective:]
    middle = sma(values, effective)
    deviation = stddev(window, middle)

    return BollingerBands(
        upper=middle + deviation * multiplier,
        middle=middle,
        lower=middle - deviation * multiplier,
    )


def calculate_moving_averages(
    values: list[float],
    windows: tuple[int, int, int, int] = MA_WINDOWS,
) -> MovingAverages:
    """Calculate the 5/10/20/50 SMAs, each clamped to the available length."""
    ma5, ma10, ma20, ma50 = (sma(values, min(window, len(values))) for window in windows)
    return MovingAverages(ma5=ma5, ma10=ma10, ma20=ma20, ma50=ma50)
