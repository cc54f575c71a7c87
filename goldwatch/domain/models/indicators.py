"""Indicator value objects."""

from pydantic import BaseModel


class MACDValues(BaseModel):
    """MACD line, signal line and histogram."""

    model_config = {"frozen": True}

    macd: float = 0.0
    signal: float = 0.0
    histogram: float = 0.0


class BollingerBands(BaseModel):
    """Bollinger Bands around a simple moving average."""

    model_config = {"frozen": True}

    upper: float = 0.0
    middle: float = 0.0
    lower: float = 0.0

    @property
    def is_degenerate(self) -> bool:
        """True when either band is zero (neutral snapshot)."""
        return self.upper == 0 or self.lower == 0


class MovingAverages(BaseModel):
    """Simple moving averages at the 5/10/20/50 windows."""

    model_config = {"frozen": True}

    ma5: float = 0.0
    ma10: float = 0.0
    ma20: float = 0.0
    ma50: float = 0.0

    @classmethod
    def flat(cls, value: float) -> "MovingAverages":
        """All windows set to the same value."""
        return cls(ma5=value, ma10=value, ma20=value, ma50=value)


class IndicatorSnapshot(BaseModel):
    """All indicators computed from one price series.

    Recomputed on demand; carries no identity and is never mutated.
    """

    model_config = {"frozen": True}

    rsi: float
    macd: MACDValues
    bollinger: BollingerBands
    moving_averages: MovingAverages
