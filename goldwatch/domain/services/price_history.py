"""Intraday price history accumulation and session statistics.

The history log keeps today's gold price updates only, oldest first, capped
at HISTORY_MAX_ENTRIES with the oldest records evicted first. Consecutive
duplicates are suppressed so that up/down tick counts are not diluted by
polls that saw no change.

The functions return new lists and never mutate their input. Appends from
several call sites must be serialized by the caller.
"""

from datetime import date, datetime

from goldwatch.domain.models.quote import (
    GoldPriceSnapshot,
    OpeningPrice,
    PriceQuote,
    PriceUpdateRecord,
    SessionStats,
)
from goldwatch.domain.rules import HISTORY_MAX_ENTRIES


def local_date(timestamp: datetime) -> date:
    """Calendar date of a timestamp on the local clock."""
    return timestamp.astimezone().date() if timestamp.tzinfo else timestamp.date()


def should_append(
    last_record: PriceUpdateRecord | None,
    snapshot: GoldPriceSnapshot,
) -> bool:
    """Check if a new reading differs from the most recent record.

    A reading is new when there is no previous record, the gold bar sell or
    buy price moved, or the feed announced a different disclosure round.

    Args:
        last_record: Most recent history record, if any
        snapshot: Latest feed reading

    Returns:
        True if the reading should be appended
    """
    if last_record is None:
        return True

    if last_record.gold_bar.sell != snapshot.gold_bar.sell:
        return True
    if last_record.gold_bar.buy != snapshot.gold_bar.buy:
        return True

    return snapshot.round is not None and snapshot.round != last_record.round


def append_record(
    history: list[PriceUpdateRecord],
    record: PriceUpdateRecord,
    max_entries: int = HISTORY_MAX_ENTRIES,
) -> list[PriceUpdateRecord]:
    """Append a record and keep only the most recent `max_entries`."""
    updated = [*history, record]
    if len(updated) > max_entries:
        updated = updated[-max_entries:]
    return updated


def filter_today(
    history: list[PriceUpdateRecord],
    today: date | None = None,
) -> list[PriceUpdateRecord]:
    """Keep records whose local calendar date is today.

    Evaluated when history is loaded from storage, not continuously.

    Args:
        history: Records as persisted
        today: Date to keep (default: local today)

    Returns:
        Records from `today`, in their original order
    """
    if today is None:
        today = date.today()
    return [record for record in history if local_date(record.timestamp) == today]


def compute_session_stats(
    history: list[PriceUpdateRecord],
    opening_price: float | None = None,
) -> SessionStats | None:
    """Aggregate the day's gold bar quotes.

    Args:
        history: Today's records, oldest first
        opening_price: Day's opening gold bar sell price; the first record's
            sell price is used when unknown

    Returns:
        SessionStats, or None for an empty history
    """
    if not history:
        return None

    sells = [record.gold_bar.sell for record in history]
    buys = [record.gold_bar.buy for record in history]

    if opening_price is None:
        opening_price = sells[0]

    total_change = sells[-1] - opening_price
    total_change_percent = (total_change / opening_price) * 100 if opening_price != 0 else 0.0

    up_ticks = 0
    down_ticks = 0
    for previous, current in zip(sells, sells[1:]):
        if current > previous:
            up_ticks += 1
        elif current < previous:
            down_ticks += 1

    return SessionStats(
        max_sell=max(sells),
        min_sell=min(sells),
        max_buy=max(buys),
        min_buy=min(buys),
        total_change=total_change,
        total_change_percent=total_change_percent,
        up_ticks=up_ticks,
        down_ticks=down_ticks,
        update_count=len(history),
    )


def apply_opening_change(quote: PriceQuote, opening_sell: float) -> PriceQuote:
    """Fill a quote's change fields relative to the day's opening sell price."""
    change = quote.sell - opening_sell
    change_percent = (change / opening_sell) * 100 if opening_sell != 0 else 0.0
    return quote.model_copy(update={"change": change, "change_percent": change_percent})


def opening_from_snapshot(snapshot: GoldPriceSnapshot, day: date) -> OpeningPrice:
    """Opening prices for a day taken from its first reading."""
    return OpeningPrice(
        gold_bar_sell=snapshot.gold_bar.sell,
        gold_ornament_sell=snapshot.gold_ornament.sell,
        date=day,
    )


def build_update_record(
    snapshot: GoldPriceSnapshot,
    last_record: PriceUpdateRecord | None,
    timestamp: datetime,
) -> PriceUpdateRecord:
    """Create the history record for a new reading.

    The round is the feed's announced round, else the previous record's
    round plus one, else 1.
    """
    if snapshot.round:
        round_number = snapshot.round
    elif last_record is not None:
        round_number = last_record.round + 1
    else:
        round_number = 1

    return PriceUpdateRecord(
        timestamp=timestamp,
        round=round_number,
        gold_bar=snapshot.gold_bar,
        gold_ornament=snapshot.gold_ornament,
    )
