"""Gold price tracking workflow.

Runs once per poll of the gold price feed (the caller owns the timer):

1. Load today's history and opening prices
2. Capture the opening prices on the first reading of the day
3. Fill change fields relative to the opening prices
4. Append the reading if it differs from the last record, then persist
5. Recompute session statistics
6. Check price alerts against the gold bar sell price

A PriceTracker is the single writer of the history log; do not share one
store between trackers running concurrently.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from goldwatch.application.commands.manage_alerts import AlertManager
from goldwatch.domain.interfaces.repositories import (
    OpeningPriceRepository,
    PriceAlertRepository,
    PriceHistoryRepository,
)
from goldwatch.domain.models.alert import PriceAlert
from goldwatch.domain.models.quote import (
    GoldPriceSnapshot,
    OpeningPrice,
    PriceUpdateRecord,
    SessionStats,
)
from goldwatch.domain.rules import HISTORY_MAX_ENTRIES
from goldwatch.domain.services.alerts import AlertMonitor
from goldwatch.domain.services.price_history import (
    append_record,
    apply_opening_change,
    build_update_record,
    compute_session_stats,
    local_date,
    opening_from_snapshot,
    should_append,
)

logger = logging.getLogger(__name__)


@dataclass
class TrackingResult:
    """Result of recording one gold price reading."""

    snapshot: GoldPriceSnapshot  # with change fields filled
    opening: OpeningPrice
    history: list[PriceUpdateRecord]
    stats: SessionStats | None
    appended: bool
    notified_alerts: list[PriceAlert] = field(default_factory=list)

    @property
    def current_price(self) -> float:
        """Gold bar sell price, the dashboard's headline price."""
        return self.snapshot.gold_bar.sell


class PriceTracker:
    """Accumulates gold price readings into today's history."""

    def __init__(
        self,
        history_repo: PriceHistoryRepository,
        opening_repo: OpeningPriceRepository,
        alert_repo: PriceAlertRepository | None = None,
        alert_monitor: AlertMonitor | None = None,
        max_entries: int = HISTORY_MAX_ENTRIES,
    ) -> None:
        """Initialize the tracker.

        Args:
            history_repo: Repository for the price update log
            opening_repo: Repository for per-day opening prices
            alert_repo: Repository for price alerts (alerts skipped if None)
            alert_monitor: Monitor delivering triggered alerts (skipped if None)
            max_entries: History cap (default 100)
        """
        self._history_repo = history_repo
        self._opening_repo = opening_repo
        self._alert_repo = alert_repo
        self._alert_monitor = alert_monitor
        self._max_entries = max_entries

    def record(
        self,
        snapshot: GoldPriceSnapshot,
        now: datetime | None = None,
    ) -> TrackingResult:
        """Record one reading of the gold price feed.

        Args:
            snapshot: Reading as published (change fields ignored)
            now: Observation time (default: now)

        Returns:
            TrackingResult with the updated history and statistics
        """
        if now is None:
            now = datetime.now()
        today = local_date(now)

        history = self._history_repo.load(today)

        opening = self._opening_repo.get(today)
        if opening is None:
            opening = opening_from_snapshot(snapshot, today)
            self._opening_repo.save(opening)
            logger.info(
                "Captured opening prices for %s: bar %.2f, ornament %.2f",
                today,
                opening.gold_bar_sell,
                opening.gold_ornament_sell,
            )

        snapshot = snapshot.model_copy(
            update={
                "gold_bar": apply_opening_change(snapshot.gold_bar, opening.gold_bar_sell),
                "gold_ornament": apply_opening_change(
                    snapshot.gold_ornament, opening.gold_ornament_sell
                ),
            }
        )

        last_record = history[-1] if history else None
        appended = should_append(last_record, snapshot)

        if appended:
            record = build_update_record(snapshot, last_record, now)
            history = append_record(history, record, self._max_entries)
            self._history_repo.save(history)
            logger.info(
                "Recorded round %d: bar sell %.2f (%+.2f)",
                record.round,
                record.gold_bar.sell,
                record.gold_bar.change,
            )
        else:
            logger.debug("No price change since round %d", last_record.round)

        stats = compute_session_stats(history, opening.gold_bar_sell)
        notified = self._check_alerts(snapshot.gold_bar.sell, now)

        return TrackingResult(
            snapshot=snapshot,
            opening=opening,
            history=history,
            stats=stats,
            appended=appended,
            notified_alerts=notified,
        )

    def _check_alerts(self, price: float, now: datetime) -> list[PriceAlert]:
        if self._alert_repo is None or self._alert_monitor is None:
            return []

        notified = self._alert_monitor.check(self._alert_repo.get_all(), price, now)
        if notified:
            manager = AlertManager(self._alert_repo)
            for alert in notified:
                manager.mark_notified(alert.id, now)
        return notified
