"""Domain models for the gold price analysis system."""

from goldwatch.domain.models.alert import PriceAlert
from goldwatch.domain.models.enums import (
    AlertDirection,
    SignalStrength,
    SignalType,
    TimeFrame,
    WeightUnit,
)
from goldwatch.domain.models.indicators import (
    BollingerBands,
    IndicatorSnapshot,
    MACDValues,
    MovingAverages,
)
from goldwatch.domain.models.market import PriceSample, closes
from goldwatch.domain.models.profit import ProfitLossResult
from goldwatch.domain.models.quote import (
    GoldPriceSnapshot,
    OpeningPrice,
    PriceQuote,
    PriceUpdateRecord,
    SessionStats,
)
from goldwatch.domain.models.signal import TradingSignal

__all__ = [
    # Enums
    "SignalType",
    "SignalStrength",
    "AlertDirection",
    "WeightUnit",
    "TimeFrame",
    # Market data
    "PriceSample",
    "closes",
    # Indicators
    "MACDValues",
    "BollingerBands",
    "MovingAverages",
    "IndicatorSnapshot",
    # Signals
    "TradingSignal",
    # Quotes & history
    "PriceQuote",
    "GoldPriceSnapshot",
    "PriceUpdateRecord",
    "OpeningPrice",
    "SessionStats",
    # Alerts & calculator
    "PriceAlert",
    "ProfitLossResult",
]
