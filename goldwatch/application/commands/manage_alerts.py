"""Price alert management command.

Adds, removes, toggles and stamps alerts, persisting the full list through a
PriceAlertRepository after every change.
"""

import logging
from datetime import datetime

from goldwatch.domain.interfaces.repositories import PriceAlertRepository
from goldwatch.domain.models.alert import PriceAlert
from goldwatch.domain.models.enums import AlertDirection

logger = logging.getLogger(__name__)


class AlertManager:
    """Manages the user's price alerts.

    Usage:
        manager = AlertManager(alert_repo)
        alert = manager.add(41000.0, AlertDirection.BELOW)
        manager.toggle(alert.id)
    """

    def __init__(self, repo: PriceAlertRepository) -> None:
        """Initialize the alert manager.

        Args:
            repo: Repository holding the alerts
        """
        self._repo = repo

    def all_alerts(self) -> list[PriceAlert]:
        """All alerts in creation order."""
        return self._repo.get_all()

    def add(self, target_price: float, direction: AlertDirection) -> PriceAlert:
        """Create an active alert.

        Args:
            target_price: Price threshold
            direction: Trigger at or above / at or below the target

        Returns:
            The new alert
        """
        alert = PriceAlert(target_price=target_price, direction=direction)
        self._repo.save_all([*self._repo.get_all(), alert])
        logger.info("Added %s alert %s at %.2f", direction.value, alert.id, target_price)
        return alert

    def remove(self, alert_id: str) -> bool:
        """Delete an alert; returns False if it did not exist."""
        alerts = self._repo.get_all()
        remaining = [alert for alert in alerts if alert.id != alert_id]
        if len(remaining) == len(alerts):
            return False
        self._repo.save_all(remaining)
        return True

    def toggle(self, alert_id: str) -> PriceAlert | None:
        """Flip an alert between active and inactive."""
        return self._update(alert_id, lambda alert: {"is_active": not alert.is_active})

    def mark_notified(self, alert_id: str, when: datetime | None = None) -> PriceAlert | None:
        """Record that a notification was delivered for an alert."""
        stamp = when or datetime.now()
        return self._update(alert_id, lambda alert: {"last_notified": stamp})

    def reset_notification(self, alert_id: str) -> PriceAlert | None:
        """Clear an alert's last notification time."""
        return self._update(alert_id, lambda alert: {"last_notified": None})

    def _update(self, alert_id: str, changes) -> PriceAlert | None:
        alerts = self._repo.get_all()
        updated: PriceAlert | None = None
        result: list[PriceAlert] = []

        for alert in alerts:
            if alert.id == alert_id:
                updated = alert.model_copy(update=changes(alert))
                result.append(updated)
            else:
                result.append(alert)

        if updated is not None:
            self._repo.save_all(result)
        return updated
