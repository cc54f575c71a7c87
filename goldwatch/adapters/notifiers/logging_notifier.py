"""Alert notifier that writes triggered alerts to the log."""

import logging
from collections import deque

from goldwatch.domain.interfaces.notifier import AlertNotifier
from goldwatch.domain.models.alert import PriceAlert
from goldwatch.domain.models.enums import AlertDirection


class LoggingAlertNotifier(AlertNotifier):
    """Logs one WARNING line per triggered alert.

    Keeps the last `max_sent` delivered alerts in `sent` so callers can
    report them.
    """

    def __init__(self, logger: logging.Logger | None = None, max_sent: int = 100) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self.sent: deque[tuple[PriceAlert, float]] = deque(maxlen=max_sent)

    def notify(self, alert: PriceAlert, current_price: float) -> None:
        side = "above" if alert.direction == AlertDirection.ABOVE else "below"
        self._logger.warning(
            "Price alert %s: %.2f is %s target %.2f",
            alert.id,
            current_price,
            side,
            alert.target_price,
        )
        self.sent.append((alert, current_price))
