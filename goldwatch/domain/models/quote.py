"""Gold price quote, history record and session statistics models."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class PriceQuote(BaseModel):
    """Buy/sell quote for one gold product (bar or ornament).

    `change` and `change_percent` are relative to the day's opening sell price.
    """

    model_config = {"frozen": True}

    buy: float
    sell: float
    change: float = 0.0
    change_percent: float = 0.0


class GoldPriceSnapshot(BaseModel):
    """One reading of the gold price feed, as published."""

    model_config = {"frozen": True}

    gold_bar: PriceQuote
    gold_ornament: PriceQuote
    last_update: str = ""  # publisher's own date/time text
    round: int | None = None  # intraday disclosure round, if announced


class PriceUpdateRecord(BaseModel):
    """One observed tick of the gold price feed, kept in the history log."""

    model_config = {"frozen": True}

    timestamp: datetime
    round: int = Field(..., ge=1)
    gold_bar: PriceQuote
    gold_ornament: PriceQuote


class OpeningPrice(BaseModel):
    """First sell prices captured on a calendar day.

    Stored apart from the trimmed history so that the day's net change
    survives eviction of the earliest records.
    """

    model_config = {"frozen": True}

    gold_bar_sell: float
    gold_ornament_sell: float
    date: date


class SessionStats(BaseModel):
    """Aggregates over the day's price history (gold bar quotes)."""

    model_config = {"frozen": True}

    max_sell: float
    min_sell: float
    max_buy: float
    min_buy: float
    total_change: float
    total_change_percent: float
    up_ticks: int
    down_ticks: int
    update_count: int
