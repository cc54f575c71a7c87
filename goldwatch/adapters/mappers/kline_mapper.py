"""Mapping from Binance futures kline payloads to PriceSample.

REST klines are arrays:
    [open_time_ms, "open", "high", "low", "close", "volume", close_time_ms, ...]

Websocket kline events carry the same fields under "k":
    {"e": "kline", "k": {"t": open_time_ms, "o": "...", "h": "...",
                         "l": "...", "c": "...", "v": "..."}}
"""

from datetime import datetime, timezone

from goldwatch.domain.models.market import PriceSample


class KlinePayloadError(ValueError):
    """Raised when a kline payload cannot be parsed."""

    pass


def _open_time(milliseconds: int | float) -> datetime:
    # Candles are aligned to whole seconds
    return datetime.fromtimestamp(int(milliseconds) // 1000, tz=timezone.utc)


def parse_kline(kline: list) -> PriceSample:
    """Convert one REST kline row to a PriceSample.

    Raises:
        KlinePayloadError: If the row is too short or not numeric
    """
    if len(kline) < 6:
        raise KlinePayloadError(f"Kline row has {len(kline)} fields, need at least 6")

    try:
        return PriceSample(
            timestamp=_open_time(kline[0]),
            open=float(kline[1]),
            high=float(kline[2]),
            low=float(kline[3]),
            close=float(kline[4]),
            volume=float(kline[5]),
        )
    except (TypeError, ValueError) as e:
        raise KlinePayloadError(f"Malformed kline row: {e}") from e


def parse_klines(rows: list[list], max_candles: int | None = None) -> list[PriceSample]:
    """Convert a REST klines response, keeping its (ascending) order.

    With `max_candles`, only the newest rows are kept.
    """
    if max_candles is not None:
        rows = rows[-max_candles:]
    return [parse_kline(row) for row in rows]


def parse_kline_event(event: dict) -> PriceSample | None:
    """Convert a websocket kline event; None for messages without a kline.

    Raises:
        KlinePayloadError: If the kline body is malformed
    """
    kline = event.get("k")
    if not kline:
        return None

    try:
        return PriceSample(
            timestamp=_open_time(kline["t"]),
            open=float(kline["o"]),
            high=float(kline["h"]),
            low=float(kline["l"]),
            close=float(kline["c"]),
            volume=float(kline["v"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise KlinePayloadError(f"Malformed kline event: {e}") from e
