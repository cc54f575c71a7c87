#!/usr/bin/env python3
"""Record a Thai gold price API reading into the local store.

Reads the JSON payload of the gold price API (fetched separately, e.g. by a
cron job every minute), appends it to today's history, and prints the
session statistics and any newly triggered price alerts.

Usage:
    python scripts/record_quote.py latest.json
    curl -s https://api.chnwt.dev/thai-gold-api/latest | python scripts/record_quote.py -
    python scripts/record_quote.py latest.json --add-alert 42000 above
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path and load environment
sys.path.insert(0, str(Path(__file__).parent.parent))
load_dotenv(Path(__file__).parent.parent / ".env")

from goldwatch.adapters.mappers.gold_api_mapper import GoldApiPayloadError, snapshot_from_payload
from goldwatch.adapters.notifiers.logging_notifier import LoggingAlertNotifier
from goldwatch.adapters.repositories.key_value_repositories import (
    KeyValueOpeningPriceRepository,
    KeyValuePriceAlertRepository,
    KeyValuePriceHistoryRepository,
)
from goldwatch.adapters.storage.key_value_store import JsonFileKeyValueStore
from goldwatch.application.commands.manage_alerts import AlertManager
from goldwatch.application.workflows.price_tracking import PriceTracker, TrackingResult
from goldwatch.domain.models.enums import AlertDirection
from goldwatch.domain.services.alerts import AlertMonitor
from goldwatch.infrastructure.config import get_settings

logger = logging.getLogger(__name__)


def print_result(result: TrackingResult) -> None:
    """Print the reading and the session statistics."""
    bar = result.snapshot.gold_bar
    print()
    print("=" * 60)
    print(f" GOLD BAR  buy {bar.buy:,.2f}  sell {bar.sell:,.2f}  ({bar.change:+,.2f}, {bar.change_percent:+.2f}%)")
    print("=" * 60)
    print(f"  {'new update recorded' if result.appended else 'no change since last update'}")

    stats = result.stats
    if stats is None:
        print("  (no history yet)")
        return

    print(f"  Updates today: {stats.update_count}  (up {stats.up_ticks} / down {stats.down_ticks})")
    print(f"  Sell range:    {stats.min_sell:,.2f} - {stats.max_sell:,.2f}")
    print(f"  Buy range:     {stats.min_buy:,.2f} - {stats.max_buy:,.2f}")
    print(f"  Since open:    {stats.total_change:+,.2f} ({stats.total_change_percent:+.2f}%)")

    for alert in result.notified_alerts:
        print(f"  ALERT: {alert.direction.value} {alert.target_price:,.2f}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Record a gold price API reading")
    parser.add_argument("path", help="API payload JSON file, or - for stdin")
    parser.add_argument(
        "--add-alert",
        nargs=2,
        metavar=("PRICE", "DIRECTION"),
        help="Add a price alert before recording (DIRECTION: above|below)",
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    store = JsonFileKeyValueStore(settings.store_path)
    alert_repo = KeyValuePriceAlertRepository(store)

    if args.add_alert:
        price, direction = args.add_alert
        try:
            AlertManager(alert_repo).add(float(price), AlertDirection(direction))
        except ValueError as e:
            logger.error("Invalid alert %s %s: %s", price, direction, e)
            return 2

    try:
        if args.path == "-":
            payload = json.load(sys.stdin)
        else:
            with open(args.path, encoding="utf-8") as f:
                payload = json.load(f)
        snapshot = snapshot_from_payload(payload)
    except (OSError, json.JSONDecodeError, GoldApiPayloadError) as e:
        logger.error("Cannot read gold price payload from %s: %s", args.path, e)
        return 1

    tracker = PriceTracker(
        history_repo=KeyValuePriceHistoryRepository(store),
        opening_repo=KeyValueOpeningPriceRepository(store),
        alert_repo=alert_repo,
        alert_monitor=AlertMonitor(LoggingAlertNotifier(), cooldown=settings.alert_cooldown),
        max_entries=settings.history_max_entries,
    )
    print_result(tracker.record(snapshot))
    return 0


if __name__ == "__main__":
    sys.exit(main())
