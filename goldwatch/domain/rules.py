"""Technical analysis rules configuration.

This module defines the indicator periods, signal thresholds and history
limits as constants, making them explicit and testable. The degeneracy
thresholds (minimum samples, minimum MACD fast period) are heuristics kept
for compatibility with the dashboard's historical output; every service that
uses them accepts an override.
"""

import math
from datetime import timedelta
from typing import Final

# =============================================================================
# INDICATOR PERIODS
# =============================================================================

# Relative Strength Index lookback (number of price deltas)
RSI_PERIOD: Final[int] = 14

# MACD periods (upper bounds, shrunk to fit short series)
MACD_FAST_PERIOD: Final[int] = 12
MACD_SLOW_PERIOD: Final[int] = 26
MACD_SIGNAL_PERIOD: Final[int] = 9
MACD_SLOW_FRACTION: Final[float] = 0.8  # slow period <= 80% of the series

# Bollinger Bands: 20-period SMA ± 2 standard deviations
BOLLINGER_PERIOD: Final[int] = 20
BOLLINGER_MULTIPLIER: Final[float] = 2.0

# Simple moving average windows reported in the snapshot
MA_WINDOWS: Final[tuple[int, int, int, int]] = (5, 10, 20, 50)


# =============================================================================
# DEGENERACY THRESHOLDS
# =============================================================================

# Below this many closes every indicator reports the neutral snapshot
MIN_INDICATOR_SAMPLES: Final[int] = 5

# MACD falls back to the last price delta when fast period is below this
MIN_MACD_FAST_PERIOD: Final[int] = 2

# RSI reported when there is no data or no volatility
NEUTRAL_RSI: Final[float] = 50.0


# =============================================================================
# SIGNAL RULES
# =============================================================================

RSI_OVERSOLD: Final[float] = 30.0  # +2 buy
RSI_OVERBOUGHT: Final[float] = 70.0  # +2 sell
RSI_LEAN_LOW: Final[float] = 45.0  # +1 buy
RSI_LEAN_HIGH: Final[float] = 55.0  # +1 sell

# Price within 0.5% of support/resistance counts as "near"
SUPPORT_PROXIMITY: Final[float] = 1.005
RESISTANCE_PROXIMITY: Final[float] = 0.995

# Range-based support/resistance: extreme ± 0.5 stddev of closes
RANGE_STDDEV_MULTIPLIER: Final[float] = 0.5

# Last-resort support/resistance: ±2% of the current price
FALLBACK_BAND: Final[float] = 0.02

# Score gap needed for each verdict strength
STRONG_SCORE_GAP: Final[int] = 3
MODERATE_SCORE_GAP: Final[int] = 2


# =============================================================================
# PRICE HISTORY
# =============================================================================

# Maximum intraday price updates retained (oldest evicted first)
HISTORY_MAX_ENTRIES: Final[int] = 100

# Live candle buffer size for the futures chart feed
CANDLE_BUFFER_SIZE: Final[int] = 500


# =============================================================================
# ALERTS & CALCULATOR
# =============================================================================

# Minimum time between two notifications for the same alert
ALERT_COOLDOWN: Final[timedelta] = timedelta(minutes=5)

# 1 baht of gold = 15.244 grams
BAHT_TO_GRAM: Final[float] = 15.244


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity.

    Python's round() uses banker's rounding; price levels shown on the
    dashboard round 0.5 up.
    """
    return int(math.floor(value + 0.5))

