"""Unit tests for the gold price tracking workflow."""

from datetime import date, datetime, timedelta, timezone

import pytest

from goldwatch.adapters.notifiers.logging_notifier import LoggingAlertNotifier
from goldwatch.adapters.repositories.key_value_repositories import (
    KeyValueOpeningPriceRepository,
    KeyValuePriceAlertRepository,
    KeyValuePriceHistoryRepository,
)
from goldwatch.adapters.storage.key_value_store import InMemoryKeyValueStore
from goldwatch.application.commands.manage_alerts import AlertManager
from goldwatch.application.workflows.price_tracking import PriceTracker
from goldwatch.domain.models.enums import AlertDirection
from goldwatch.domain.models.quote import OpeningPrice
from goldwatch.domain.services.alerts import AlertMonitor

MORNING = datetime(2026, 10, 18, 9, 30)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def notifier():
    return LoggingAlertNotifier()


@pytest.fixture
def tracker(store, notifier):
    return PriceTracker(
        history_repo=KeyValuePriceHistoryRepository(store),
        opening_repo=KeyValueOpeningPriceRepository(store),
        alert_repo=KeyValuePriceAlertRepository(store),
        alert_monitor=AlertMonitor(notifier),
    )


class TestRecord:
    """Tests for PriceTracker.record."""

    def test_first_reading_of_day(self, tracker, store, make_gold_snapshot):
        """Captures the opening price and starts the history."""
        result = tracker.record(make_gold_snapshot(41600.0), now=MORNING)

        assert result.appended
        assert result.opening.gold_bar_sell == 41600.0
        assert result.opening.date == date(2026, 10, 18)
        assert len(result.history) == 1
        assert result.history[0].round == 1
        assert result.stats.update_count == 1
        assert result.stats.total_change == 0.0
        assert result.current_price == 41600.0
        assert KeyValueOpeningPriceRepository(store).get(date(2026, 10, 18)) == result.opening

    def test_change_relative_to_opening(self, tracker, make_gold_snapshot):
        """Later readings carry change from the opening sell."""
        tracker.record(make_gold_snapshot(41600.0), now=MORNING)

        result = tracker.record(make_gold_snapshot(41800.0), now=MORNING + timedelta(minutes=30))

        assert result.snapshot.gold_bar.change == 200.0
        assert result.snapshot.gold_bar.change_percent == pytest.approx(200.0 / 41600.0 * 100)
        assert result.history[-1].gold_bar.change == 200.0
        assert result.history[-1].round == 2
        assert result.stats.up_ticks == 1

    def test_duplicate_reading_not_appended(self, tracker, make_gold_snapshot):
        """Unchanged prices are not recorded twice."""
        tracker.record(make_gold_snapshot(41600.0), now=MORNING)

        result = tracker.record(make_gold_snapshot(41600.0), now=MORNING + timedelta(minutes=1))

        assert not result.appended
        assert len(result.history) == 1

    def test_announced_round_is_kept(self, tracker, make_gold_snapshot):
        """Feed round numbers win over the running count."""
        result = tracker.record(make_gold_snapshot(41600.0, round=4), now=MORNING)

        assert result.history[0].round == 4

    def test_history_persists_between_trackers(self, store, tracker, make_gold_snapshot):
        """A new tracker on the same store continues the day."""
        tracker.record(make_gold_snapshot(41600.0), now=MORNING)
        other = PriceTracker(
            KeyValuePriceHistoryRepository(store),
            KeyValueOpeningPriceRepository(store),
        )

        result = other.record(make_gold_snapshot(41500.0), now=MORNING + timedelta(hours=1))

        assert len(result.history) == 2
        assert result.stats.down_ticks == 1
        assert result.notified_alerts == []

    def test_new_day_starts_fresh(self, tracker, make_gold_snapshot):
        """Yesterday's records and opening are not carried over."""
        tracker.record(make_gold_snapshot(41600.0), now=MORNING - timedelta(days=1))

        result = tracker.record(make_gold_snapshot(41900.0), now=MORNING)

        assert len(result.history) == 1
        assert result.opening.gold_bar_sell == 41900.0

    def test_stored_opening_survives_eviction(self, store, make_gold_snapshot):
        """Net change uses the stored opening even after the cap trims history."""
        KeyValueOpeningPriceRepository(store).save(
            OpeningPrice(gold_bar_sell=41000.0, gold_ornament_sell=41500.0, date=date(2026, 10, 18))
        )
        tracker = PriceTracker(
            KeyValuePriceHistoryRepository(store),
            KeyValueOpeningPriceRepository(store),
            max_entries=2,
        )

        for i, price in enumerate([41100.0, 41200.0, 41300.0]):
            result = tracker.record(make_gold_snapshot(price), now=MORNING + timedelta(minutes=i))

        assert [r.gold_bar.sell for r in result.history] == [41200.0, 41300.0]
        assert result.stats.total_change == 300.0

    def test_aware_clock_keeps_local_day(self, tracker, store, bangkok_tz, make_gold_snapshot):
        """A UTC clock past 17:00 is the next Bangkok day for both history and opening."""
        evening_utc = datetime(2026, 10, 18, 20, 0, tzinfo=timezone.utc)

        tracker.record(make_gold_snapshot(41600.0), now=evening_utc)
        result = tracker.record(make_gold_snapshot(41650.0), now=evening_utc + timedelta(minutes=1))

        assert len(result.history) == 2
        assert result.stats.update_count == 2
        assert result.stats.total_change == 50.0
        assert result.opening.date == date(2026, 10, 19)
        assert KeyValueOpeningPriceRepository(store).get(date(2026, 10, 19)) == result.opening


class TestAlerts:
    """Tests for alert checks during tracking."""

    def test_triggered_alert_is_notified_and_stamped(self, tracker, store, notifier, make_gold_snapshot):
        manager = AlertManager(KeyValuePriceAlertRepository(store))
        alert = manager.add(41500.0, AlertDirection.BELOW)

        result = tracker.record(make_gold_snapshot(41450.0), now=MORNING)

        assert [a.id for a in result.notified_alerts] == [alert.id]
        assert len(notifier.sent) == 1
        assert manager.all_alerts()[0].last_notified == MORNING

    def test_not_triggered(self, tracker, store, notifier, make_gold_snapshot):
        AlertManager(KeyValuePriceAlertRepository(store)).add(42000.0, AlertDirection.ABOVE)

        result = tracker.record(make_gold_snapshot(41600.0), now=MORNING)

        assert result.notified_alerts == []
        assert not notifier.sent

    def test_stays_triggered_notifies_once(self, tracker, store, notifier, make_gold_snapshot):
        """Consecutive polls below target do not repeat the notification."""
        AlertManager(KeyValuePriceAlertRepository(store)).add(41500.0, AlertDirection.BELOW)

        tracker.record(make_gold_snapshot(41450.0), now=MORNING)
        tracker.record(make_gold_snapshot(41400.0), now=MORNING + timedelta(minutes=10))

        assert len(notifier.sent) == 1
