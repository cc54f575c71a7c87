"""Profit/loss calculator result model."""

from pydantic import BaseModel

from goldwatch.domain.models.enums import WeightUnit


class ProfitLossResult(BaseModel):
    """Mark-to-market result for a gold holding."""

    model_config = {"frozen": True}

    buy_price: float  # per baht of gold
    current_price: float  # per baht of gold
    weight: float
    weight_unit: WeightUnit
    profit_loss: float
    profit_loss_percent: float
    total_value: float
    total_cost: float
