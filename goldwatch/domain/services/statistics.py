"""Series statistics primitives: SMA, EMA and standard deviation.

Pure functions over a list of floats, oldest first. None of them raise on
short input: a series shorter than the period is averaged over what is
available, and an empty series yields 0.0.
"""

import math


def sma(values: list[float], period: int) -> float:
    """Simple moving average of the last `min(period, len(values))` values."""
    if not values:
        return 0.0

    window = values[-max(1, min(period, len(values))):]
    return sum(window) / len(window)


def ema(values: list[float], period: int) -> float:
    """Exponential moving average of the whole series.

    Seed = SMA of the first `effective` values, then
    EMA = (price - EMA) × k + EMA with k = 2 / (effective + 1),
    where effective = min(period, len(values)).

    A period of one (or a single value) returns the last value unchanged.
    """
    series = ema_series(values, period)
    if not series:
        return values[-1] if values else 0.0
    return series[-1]


def ema_series(values: list[float], period: int) -> list[float]:
    """Running EMA of every prefix at least `effective` values long.

    Entry j is the EMA of values[: effective + j]; the last entry equals
    ema(values, period). Returns an empty list when effective <= 1.
    """
    effective = min(period, len(values))
    if effective <= 1:
        return []

    multiplier = 2 / (effective + 1)
    current = sum(values[:effective]) / effective
    result = [current]

    for price in values[effective:]:
        current = (price - current) * multiplier + current
        result.append(current)

    return result


def stddev(values: list[float], mean: float) -> float:
    """Population standard deviation (divides by N) around a given mean."""
    if not values:
        return 0.0

    variance = sum((value - mean) ** 2 for value in values) / len(values)
    return math.sqrt(variance)
