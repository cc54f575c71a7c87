"""Alert notifier interface (port) - defines how triggered alerts are delivered."""

from abc import ABC, abstractmethod

from goldwatch.domain.models.alert import PriceAlert


class AlertNotifier(ABC):
    """Abstract interface for delivering price alert notifications.

    Implementations are constructed by the caller and passed in; there is no
    process-wide notifier instance.
    """

    @abstractmethod
    def notify(self, alert: PriceAlert, current_price: float) -> None:
        """Deliver a notification for a triggered alert.

        Args:
            alert: The alert whose condition was met
            current_price: Price that triggered it
        """
        ...
