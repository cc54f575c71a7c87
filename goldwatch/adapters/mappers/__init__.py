"""Mappers for adapting external payloads to domain models."""

from goldwatch.adapters.mappers.gold_api_mapper import (
    GoldApiPayloadError,
    parse_round,
    parse_thai_number,
    snapshot_from_payload,
)
from goldwatch.adapters.mappers.kline_mapper import (
    KlinePayloadError,
    parse_kline,
    parse_kline_event,
    parse_klines,
)

__all__ = [
    "GoldApiPayloadError",
    "parse_round",
    "parse_thai_number",
    "snapshot_from_payload",
    "KlinePayloadError",
    "parse_kline",
    "parse_kline_event",
    "parse_klines",
]
