"""Price alert model."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from goldwatch.domain.models.enums import AlertDirection


class PriceAlert(BaseModel):
    """A user-defined price threshold on the gold bar sell price.

    Alerts are replaced (model_copy) rather than mutated when toggled or
    marked as notified.
    """

    model_config = {"frozen": True}

    id: str = Field(default_factory=lambda: uuid4().hex)
    target_price: float = Field(..., gt=0)
    direction: AlertDirection
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    last_notified: datetime | None = None
