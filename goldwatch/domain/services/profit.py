"""Profit/loss calculation for a gold holding.

Prices are quoted per baht of gold; holdings in grams are converted with
1 baht = 15.244 g.
"""

from goldwatch.domain.models.enums import WeightUnit
from goldwatch.domain.models.profit import ProfitLossResult
from goldwatch.domain.rules import BAHT_TO_GRAM


def to_baht(weight: float, unit: WeightUnit) -> float:
    """Convert a weight to baht."""
    if unit == WeightUnit.GRAM:
        return weight / BAHT_TO_GRAM
    return weight


def calculate_profit_loss(
    buy_price: float,
    current_price: float,
    weight: float,
    unit: WeightUnit = WeightUnit.BAHT,
) -> ProfitLossResult | None:
    """Mark a holding to market.

    Args:
        buy_price: Purchase price per baht
        current_price: Current price per baht
        weight: Holding size in `unit`
        unit: Weight unit (default baht)

    Returns:
        ProfitLossResult, or None if buy price or weight is not positive
    """
    if buy_price <= 0 or weight <= 0:
        return None

    weight_in_baht = to_baht(weight, unit)
    total_cost = buy_price * weight_in_baht
    total_value = current_price * weight_in_baht
    profit_loss = total_value - total_cost

    return ProfitLossResult(
        buy_price=buy_price,
        current_price=current_price,
        weight=weight,
        weight_unit=unit,
        profit_loss=profit_loss,
        profit_loss_percent=(profit_loss / total_cost) * 100,
        total_value=total_value,
        total_cost=total_cost,
    )
