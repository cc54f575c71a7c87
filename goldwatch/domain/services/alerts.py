"""Price alert evaluation.

An active alert is triggered while the price sits on its side of the target
(above: price >= target, below: price <= target). Notification happens only
on the transition into the triggered state, and at most once per cooldown
for the same alert.
"""

from datetime import datetime, timedelta

from goldwatch.domain.interfaces.notifier import AlertNotifier
from goldwatch.domain.models.alert import PriceAlert
from goldwatch.domain.models.enums import AlertDirection
from goldwatch.domain.rules import ALERT_COOLDOWN


def is_triggered(alert: PriceAlert, price: float) -> bool:
    """Check if an alert's condition holds at a price."""
    if not alert.is_active:
        return False
    if alert.direction == AlertDirection.ABOVE:
        return price >= alert.target_price
    return price <= alert.target_price


def check_alerts(alerts: list[PriceAlert], price: float) -> list[PriceAlert]:
    """Return the alerts triggered at a price, in their original order."""
    return [alert for alert in alerts if is_triggered(alert, price)]


def is_notification_due(
    alert: PriceAlert,
    now: datetime,
    cooldown: timedelta = ALERT_COOLDOWN,
) -> bool:
    """Check if the cooldown since the alert's last notification has passed."""
    if alert.last_notified is None:
        return True
    return now - alert.last_notified > cooldown


class AlertMonitor:
    """Detects newly triggered alerts and hands them to a notifier.

    Remembers which alerts were triggered on the previous check, so an alert
    that stays triggered across polls is notified once. The notifier is
    injected; the monitor itself performs no delivery.

    Usage:
        monitor = AlertMonitor(notifier)
        notified = monitor.check(alerts, price=41250.0)
    """

    def __init__(
        self,
        notifier: AlertNotifier,
        cooldown: timedelta = ALERT_COOLDOWN,
    ) -> None:
        self._notifier = notifier
        self._cooldown = cooldown
        self._previous_triggered: set[str] = set()

    @property
    def triggered_ids(self) -> set[str]:
        """Ids of the alerts triggered on the last check."""
        return set(self._previous_triggered)

    def check(
        self,
        alerts: list[PriceAlert],
        price: float,
        now: datetime | None = None,
    ) -> list[PriceAlert]:
        """Evaluate alerts at a price and notify the newly triggered ones.

        Args:
            alerts: All known alerts
            price: Current price
            now: Evaluation time (default: now)

        Returns:
            Alerts that were passed to the notifier on this check
        """
        if now is None:
            now = datetime.now()

        triggered = check_alerts(alerts, price)
        notified: list[PriceAlert] = []

        for alert in triggered:
            if alert.id in self._previous_triggered:
                continue
            if not is_notification_due(alert, now, self._cooldown):
                continue
            self._notifier.notify(alert, price)
            notified.append(alert)

        self._previous_triggered = {alert.id for alert in triggered}
        return notified
