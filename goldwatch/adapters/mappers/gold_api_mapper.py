"""Mapping from the Thai gold price API payload to domain models.

Payload shape (already fetched and JSON-decoded by the caller):

    {
      "status": "success",
      "response": {
        "update_date": "18/10/2569",
        "update_time": "เวลา 09:31 น. (ครั้งที่ 3)",
        "price": {
          "gold":     {"buy": "41,050.00", "sell": "41,850.00"},
          "gold_bar": {"buy": "41,500.00", "sell": "41,600.00"}
        }
      }
    }

Prices are Thai-formatted strings with thousands separators; the intraday
disclosure round is embedded in the update time as "ครั้งที่ <n>".
"""

import re

from goldwatch.domain.models.quote import GoldPriceSnapshot, PriceQuote

ROUND_PATTERN = re.compile(r"ครั้งที่\s*(\d+)")


class GoldApiPayloadError(ValueError):
    """Raised when a gold API payload does not have the expected structure."""

    pass


def parse_thai_number(value: str | None) -> float:
    """Parse a Thai-formatted number, e.g. "71,631.00" -> 71631.0.

    Missing or empty values parse as 0.
    """
    if not value:
        return 0.0
    try:
        return float(value.replace(",", ""))
    except ValueError as e:
        raise GoldApiPayloadError(f"Not a number: {value!r}") from e


def parse_round(update_time: str | None) -> int | None:
    """Extract the disclosure round from the update time text, if present."""
    if not update_time:
        return None
    match = ROUND_PATTERN.search(update_time)
    return int(match.group(1)) if match else None


def _quote(prices: dict, product: str) -> PriceQuote:
    product_prices = prices.get(product) or {}
    return PriceQuote(
        buy=parse_thai_number(product_prices.get("buy")),
        sell=parse_thai_number(product_prices.get("sell")),
    )


def snapshot_from_payload(payload: dict) -> GoldPriceSnapshot:
    """Convert a decoded API payload to a GoldPriceSnapshot.

    Change fields are left at zero; they are relative to the day's opening
    price, which the payload does not carry.

    Args:
        payload: JSON-decoded API response

    Returns:
        GoldPriceSnapshot

    Raises:
        GoldApiPayloadError: If the status is not success or the response
            body is missing
    """
    if payload.get("status") != "success" or not payload.get("response"):
        raise GoldApiPayloadError("Invalid API response structure")

    response = payload["response"]
    prices = response.get("price") or {}
    update_date = response.get("update_date", "")
    update_time = response.get("update_time", "")

    return GoldPriceSnapshot(
        gold_bar=_quote(prices, "gold_bar"),
        gold_ornament=_quote(prices, "gold"),
        last_update=f"{update_date} {update_time}".strip(),
        round=parse_round(update_time),
    )
