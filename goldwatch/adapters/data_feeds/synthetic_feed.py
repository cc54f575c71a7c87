"""Synthetic price history for backfilling charts.

The gold price API only publishes the latest quote, so the dashboard fills
its 24h/7d/30d/1y charts with a random walk anchored on the current price.
This is chart decoration, never an input to tests of the indicator math; the
random source is injected so runs can be reproduced.
"""

import random
from datetime import datetime, timedelta

from goldwatch.domain.models.market import PriceSample

DAILY_MOVE = 0.02  # close-to-close change within ±1%
DAILY_OPEN_GAP = 0.005
DAILY_WICK = 0.008

HOURLY_VOLATILITY = 0.0015
HOURLY_WICK = 0.002
OPENING_SPREAD = 0.01  # simulated open within ±0.5% of current
MARKET_OPEN_HOUR = 9


class SyntheticHistoryGenerator:
    """Random-walk OHLC generator.

    Usage:
        generator = SyntheticHistoryGenerator(random.Random(42))
        month = generator.daily(30, base_price=41600.0)
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def _jitter(self, scale: float) -> float:
        return (self._rng.random() - 0.5) * scale

    def daily(
        self,
        days: int,
        base_price: float,
        now: datetime | None = None,
    ) -> list[PriceSample]:
        """Generate `days + 1` daily samples ending today, oldest first."""
        if now is None:
            now = datetime.now()

        today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        price = base_price
        samples: list[PriceSample] = []

        for offset in range(days, -1, -1):
            price = price * (1 + self._jitter(DAILY_MOVE))
            open_ = price * (1 + self._jitter(DAILY_OPEN_GAP))
            samples.append(
                PriceSample(
                    timestamp=today - timedelta(days=offset),
                    open=open_,
                    high=max(open_, price) * (1 + self._rng.random() * DAILY_WICK),
                    low=min(open_, price) * (1 - self._rng.random() * DAILY_WICK),
                    close=price,
                )
            )

        return samples

    def intraday(
        self,
        base_price: float,
        now: datetime | None = None,
    ) -> list[PriceSample]:
        """Generate hourly samples from market open to `now`, drifting to base_price.

        Before market open a single sample at `now` is produced.
        """
        if now is None:
            now = datetime.now()

        start_hour = MARKET_OPEN_HOUR
        end_hour = max(now.hour, start_hour)
        hours = end_hour - start_hour + 1

        open_price = base_price * (1 + self._jitter(OPENING_SPREAD))
        trend = (base_price - open_price) / hours / open_price
        price = open_price
        samples: list[PriceSample] = []

        for hour in range(start_hour, end_hour + 1):
            if hour == end_hour:
                timestamp = now.replace(second=0, microsecond=0)
            else:
                timestamp = now.replace(hour=hour, minute=0, second=0, microsecond=0)

            previous = price
            price = price * (1 + trend + self._jitter(HOURLY_VOLATILITY * 2))
            samples.append(
                PriceSample(
                    timestamp=timestamp,
                    open=previous,
                    high=max(previous, price) * (1 + self._rng.random() * HOURLY_WICK),
                    low=min(previous, price) * (1 - self._rng.random() * HOURLY_WICK),
                    close=price,
                )
            )

        return samples
