"""Indicator aggregation: one snapshot from one price series."""

from goldwatch.domain.models.indicators import (
    BollingerBands,
    IndicatorSnapshot,
    MACDValues,
    MovingAverages,
)
from goldwatch.domain.models.market import PriceSample, closes
from goldwatch.domain.rules import (
    BOLLINGER_PERIOD,
    MIN_INDICATOR_SAMPLES,
    NEUTRAL_RSI,
    RSI_PERIOD,
)
from goldwatch.domain.services.indicators import (
    calculate_bollinger_bands,
    calculate_macd,
    calculate_moving_averages,
    calculate_rsi,
)


def neutral_snapshot(values: list[float]) -> IndicatorSnapshot:
    """Snapshot reported for sparse data.

    RSI 50, zeroed MACD and Bollinger Bands, every moving average equal to
    the last close (0 for an empty series).
    """
    last_close = values[-1] if values else 0.0
    return IndicatorSnapshot(
        rsi=NEUTRAL_RSI,
        macd=MACDValues(),
        bollinger=BollingerBands(),
        moving_averages=MovingAverages.flat(last_close),
    )


def compute_indicators(
    series: list[PriceSample],
    min_samples: int = MIN_INDICATOR_SAMPLES,
) -> IndicatorSnapshot:
    """Compute every indicator from the close prices of a series.

    Pure function with no caching; callers that poll may memoize on the
    content of the series.

    Args:
        series: Price samples, oldest first
        min_samples: Below this many samples the neutral snapshot is
            returned (default 5)

    Returns:
        IndicatorSnapshot
    """
    values = closes(series)

    if len(values) < min_samples:
        return neutral_snapshot(values)

    length = len(values)
    return IndicatorSnapshot(
        rsi=calculate_rsi(values, min(RSI_PERIOD, length - 1)),
        macd=calculate_macd(values),
        bollinger=calculate_bollinger_bands(values, min(BOLLINGER_PERIOD, length)),
        moving_averages=calculate_moving_averages(values),
    )
