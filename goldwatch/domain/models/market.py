"""Market data domain models."""

from datetime import datetime

from pydantic import BaseModel


class PriceSample(BaseModel):
    """One OHLC observation (daily, hourly or tick level) - immutable value object.

    Ordering and OHLC consistency are the producer's responsibility; the
    analysis services consume samples read-only and never validate them.
    """

    model_config = {"frozen": True}

    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float | None = None


def closes(series: list[PriceSample]) -> list[float]:
    """Project a price series onto its close prices."""
    return [sample.close for sample in series]
