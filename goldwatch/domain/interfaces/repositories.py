"""Repository interfaces (ports) for persisted state.

Only three pieces of state outlive a recomputation pass:
- the day's price update history (trimmed log)
- the day's opening prices (kept apart so they survive eviction)
- the user's price alerts
"""

from abc import ABC, abstractmethod
from datetime import date

from goldwatch.domain.models.alert import PriceAlert
from goldwatch.domain.models.quote import OpeningPrice, PriceUpdateRecord


class KeyValueStore(ABC):
    """Opaque string key-value store (browser local storage, a file, ...)."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key; absent keys are ignored."""
        ...


class PriceHistoryRepository(ABC):
    """Repository interface for the intraday price update log."""

    @abstractmethod
    def load(self, today: date | None = None) -> list[PriceUpdateRecord]:
        """Load today's records, oldest first.

        Args:
            today: Date to keep (default: local today)

        Returns:
            Records from `today` sorted by timestamp; empty if none
        """
        ...

    @abstractmethod
    def save(self, history: list[PriceUpdateRecord]) -> None:
        """Replace the persisted log with `history`."""
        ...


class OpeningPriceRepository(ABC):
    """Repository interface for per-day opening prices."""

    @abstractmethod
    def get(self, day: date) -> OpeningPrice | None:
        """Get the opening prices captured on a day, if any."""
        ...

    @abstractmethod
    def save(self, opening: OpeningPrice) -> None:
        """Persist opening prices under their own date."""
        ...


class PriceAlertRepository(ABC):
    """Repository interface for user price alerts."""

    @abstractmethod
    def get_all(self) -> list[PriceAlert]:
        """Get every alert in creation order."""
        ...

    @abstractmethod
    def save_all(self, alerts: list[PriceAlert]) -> None:
        """Replace the persisted alerts with `alerts`."""
        ...
