"""Trading signal model."""

from pydantic import BaseModel, Field

from goldwatch.domain.models.enums import SignalStrength, SignalType


class TradingSignal(BaseModel):
    """Composite buy/sell/hold verdict with its ranked rationale.

    Deterministic for a given snapshot, price and series: the reasons are
    listed in rule evaluation order and the first one is the primary reason.
    """

    model_config = {"frozen": True}

    type: SignalType
    strength: SignalStrength
    primary_reason: str
    all_reasons: list[str] = Field(default_factory=list)
    support_level: int
    resistance_level: int
    buy_score: int = 0
    sell_score: int = 0

    @property
    def score_gap(self) -> int:
        """Absolute difference between buy and sell evidence."""
        return abs(self.buy_score - self.sell_score)
