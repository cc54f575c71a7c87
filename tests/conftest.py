"""Pytest configuration and fixtures for all tests."""

import time
from datetime import datetime, timedelta

import pytest

from goldwatch.domain.models.indicators import (
    BollingerBands,
    IndicatorSnapshot,
    MACDValues,
    MovingAverages,
)
from goldwatch.domain.models.market import PriceSample
from goldwatch.domain.models.quote import GoldPriceSnapshot, PriceQuote, PriceUpdateRecord

SERIES_START = datetime(2026, 10, 1, 9, 0)


def _series_from_closes(
    closes: list[float],
    spread: float = 1.0,
    step: timedelta = timedelta(hours=1),
) -> list[PriceSample]:
    """Build an hourly series where high/low sit `spread` around each close."""
    return [
        PriceSample(
            timestamp=SERIES_START + step * i,
            open=close,
            high=close + spread,
            low=close - spread,
            close=close,
        )
        for i, close in enumerate(closes)
    ]


def _make_snapshot(
    rsi: float = 50.0,
    macd: tuple[float, float, float] = (0.0, 0.0, 0.0),
    bollinger: tuple[float, float, float] = (0.0, 0.0, 0.0),
    ma20: float = 0.0,
    ma50: float = 0.0,
) -> IndicatorSnapshot:
    """Build an indicator snapshot; bollinger is (upper, middle, lower)."""
    return IndicatorSnapshot(
        rsi=rsi,
        macd=MACDValues(macd=macd[0], signal=macd[1], histogram=macd[2]),
        bollinger=BollingerBands(upper=bollinger[0], middle=bollinger[1], lower=bollinger[2]),
        moving_averages=MovingAverages(ma5=ma20, ma10=ma20, ma20=ma20, ma50=ma50),
    )


def _make_gold_snapshot(
    bar_sell: float,
    bar_buy: float | None = None,
    round: int | None = None,
    ornament_sell: float | None = None,
) -> GoldPriceSnapshot:
    """Build a gold feed reading with the usual 100 baht bar spread."""
    if bar_buy is None:
        bar_buy = bar_sell - 100
    if ornament_sell is None:
        ornament_sell = bar_sell + 500
    return GoldPriceSnapshot(
        gold_bar=PriceQuote(buy=bar_buy, sell=bar_sell),
        gold_ornament=PriceQuote(buy=bar_buy - 400, sell=ornament_sell),
        round=round,
    )


def _make_record(
    timestamp: datetime,
    bar_sell: float,
    bar_buy: float | None = None,
    round: int = 1,
) -> PriceUpdateRecord:
    """Build a history record."""
    snapshot = _make_gold_snapshot(bar_sell, bar_buy)
    return PriceUpdateRecord(
        timestamp=timestamp,
        round=round,
        gold_bar=snapshot.gold_bar,
        gold_ornament=snapshot.gold_ornament,
    )


@pytest.fixture
def sample_price():
    """Sample gold bar sell price (THB per baht) for testing."""
    return 41600.0


@pytest.fixture
def trending_series():
    """60 hourly samples rising by 1 per hour from 100."""
    return _series_from_closes([100.0 + i for i in range(60)])


@pytest.fixture
def flat_series():
    """30 hourly samples all closing at 100."""
    return _series_from_closes([100.0] * 30)


@pytest.fixture
def series_from_closes():
    """Factory for hourly price series built from closing prices."""
    return _series_from_closes


@pytest.fixture
def make_snapshot():
    """Factory for indicator snapshots."""
    return _make_snapshot


@pytest.fixture
def make_gold_snapshot():
    """Factory for gold feed readings."""
    return _make_gold_snapshot


@pytest.fixture
def make_record():
    """Factory for price history records."""
    return _make_record


@pytest.fixture
def bangkok_tz(monkeypatch):
    """Run the test with the process local time zone set to Asia/Bangkok."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Asia/Bangkok")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
