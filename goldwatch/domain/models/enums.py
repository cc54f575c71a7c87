"""Domain enumerations for the gold price analysis system."""

from enum import Enum


class SignalType(str, Enum):
    """Trading signal verdict."""

    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class SignalStrength(str, Enum):
    """Confidence of a verdict, from the buy/sell score gap."""

    STRONG = "strong"  # gap >= 3
    MODERATE = "moderate"  # gap >= 2
    WEAK = "weak"


class AlertDirection(str, Enum):
    """Side of the target price that triggers a price alert."""

    ABOVE = "above"  # price >= target
    BELOW = "below"  # price <= target


class WeightUnit(str, Enum):
    """Unit of a gold holding."""

    BAHT = "baht"  # Thai gold weight, 15.244 g
    GRAM = "gram"


class TimeFrame(str, Enum):
    """Candle interval on the futures chart feed (Binance notation)."""

    M5 = "5m"
    M15 = "15m"
    M30 = "30m"
    H1 = "1h"
    H4 = "4h"
    D1 = "1d"
    W1 = "1w"

    @property
    def label(self) -> str:
        """Chart label, e.g. 'H1' for the 1h interval."""
        return self.name

    @property
    def minutes(self) -> int:
        """Duration of one candle in minutes."""
        return _TIMEFRAME_MINUTES[self.value]


_TIMEFRAME_MINUTES: dict[str, int] = {
    "5m": 5,
    "15m": 15,
    "30m": 30,
    "1h": 60,
    "4h": 240,
    "1d": 1440,
    "1w": 10080,
}
