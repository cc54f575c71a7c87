"""Live candle buffer maintenance for the futures chart feed."""

from goldwatch.domain.models.market import PriceSample
from goldwatch.domain.rules import CANDLE_BUFFER_SIZE


def merge_candle(
    candles: list[PriceSample],
    candle: PriceSample,
    max_candles: int = CANDLE_BUFFER_SIZE,
) -> list[PriceSample]:
    """Merge a streamed candle into the buffer.

    A candle with the same open time as the last one replaces it (the bar is
    still forming); otherwise it is appended and the oldest candles are
    dropped beyond `max_candles`.

    Args:
        candles: Current buffer, oldest first
        candle: Streamed candle
        max_candles: Buffer capacity (default 500)

    Returns:
        New buffer
    """
    if candles and candles[-1].timestamp == candle.timestamp:
        return [*candles[:-1], candle]

    merged = [*candles, candle]
    if len(merged) > max_candles:
        merged = merged[-max_candles:]
    return merged
