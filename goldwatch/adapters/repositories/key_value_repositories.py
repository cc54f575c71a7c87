"""Key-value store implementations of the state repositories.

Values are JSON documents under the same keys the dashboard uses in browser
local storage, so exported storage can be loaded as is. Unreadable values
are logged and treated as absent.
"""

import logging
from datetime import date

from pydantic import TypeAdapter, ValidationError

from goldwatch.domain.interfaces.repositories import (
    KeyValueStore,
    OpeningPriceRepository,
    PriceAlertRepository,
    PriceHistoryRepository,
)
from goldwatch.domain.models.alert import PriceAlert
from goldwatch.domain.models.quote import OpeningPrice, PriceUpdateRecord
from goldwatch.domain.services.price_history import filter_today

logger = logging.getLogger(__name__)

HISTORY_KEY = "goldPriceHistory"
OPENING_PRICE_KEY_PREFIX = "goldOpeningPrice_"
ALERTS_KEY = "goldPriceAlerts"

_history_adapter = TypeAdapter(list[PriceUpdateRecord])
_alerts_adapter = TypeAdapter(list[PriceAlert])


class KeyValuePriceHistoryRepository(PriceHistoryRepository):
    """Price update log stored as one JSON array."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load(self, today: date | None = None) -> list[PriceUpdateRecord]:
        raw = self._store.get(HISTORY_KEY)
        if raw is None:
            return []

        try:
            history = _history_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable price history: %s", e)
            return []

        todays = filter_today(history, today)
        return sorted(todays, key=lambda record: record.timestamp)

    def save(self, history: list[PriceUpdateRecord]) -> None:
        self._store.set(HISTORY_KEY, _history_adapter.dump_json(history).decode())


class KeyValueOpeningPriceRepository(OpeningPriceRepository):
    """Opening prices stored under one key per day."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @staticmethod
    def key_for(day: date) -> str:
        """Storage key for a day's opening prices."""
        return f"{OPENING_PRICE_KEY_PREFIX}{day.isoformat()}"

    def get(self, day: date) -> OpeningPrice | None:
        raw = self._store.get(self.key_for(day))
        if raw is None:
            return None

        try:
            return OpeningPrice.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable opening price for %s: %s", day, e)
            return None

    def save(self, opening: OpeningPrice) -> None:
        self._store.set(self.key_for(opening.date), opening.model_dump_json())


class KeyValuePriceAlertRepository(PriceAlertRepository):
    """Price alerts stored as one JSON array."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get_all(self) -> list[PriceAlert]:
        raw = self._store.get(ALERTS_KEY)
        if raw is None:
            return []

        try:
            return _alerts_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable price alerts: %s", e)
            return []

    def save_all(self, alerts: list[PriceAlert]) -> None:
        self._store.set(ALERTS_KEY, _alerts_adapter.dump_json(alerts).decode())
