"""Unit tests for indicator calculators."""

import pytest

from goldwatch.domain.services.indicators import (
    calculate_bollinger_bands,
    calculate_macd,
    calculate_moving_averages,
    calculate_rsi,
    macd_periods,
)
from goldwatch.domain.services.statistics import ema


def sawtooth(slope: float, length: int = 40) -> list[float]:
    """Rising series that dips by 1 on every fifth step."""
    values = [1000.0]
    for i in range(1, length):
        values.append(values[-1] - 1 if i % 5 == 0 else values[-1] + slope)
    return values


class TestRSI:
    """Tests for Relative Strength Index."""

    @pytest.mark.parametrize("values", [[], [41600.0]])
    def test_neutral_without_deltas(self, values):
        """Fewer than two prices -> 50."""
        assert calculate_rsi(values) == 50.0

    def test_flat_series_is_neutral(self):
        """No gains and no losses -> 50."""
        assert calculate_rsi([100.0] * 20) == 50.0

    def test_only_gains_is_100(self):
        """Strictly increasing series has no losses -> 100."""
        assert calculate_rsi([float(i) for i in range(1, 21)]) == 100.0

    def test_only_losses_is_0(self):
        """Strictly decreasing series -> 0."""
        assert calculate_rsi([float(i) for i in range(20, 0, -1)]) == 0.0

    def test_simple_average_of_short_series(self):
        """Lookback shrinks to the 4 available deltas."""
        # deltas +1, -1, +2, -1 -> avg gain 0.75, avg loss 0.5, RS 1.5
        assert calculate_rsi([10.0, 11.0, 10.0, 12.0, 11.0]) == pytest.approx(60.0)

    def test_uses_most_recent_deltas(self):
        """Older deltas beyond the period are ignored."""
        values = [100.0, 50.0] + [50.0 + i for i in range(1, 15)]
        # The crash from 100 to 50 is the 15th delta back
        assert calculate_rsi(values, period=14) == 100.0

    def test_steeper_rise_approaches_100(self):
        """Same dips, larger gains -> higher RSI."""
        gentle = calculate_rsi(sawtooth(slope=2))
        steep = calculate_rsi(sawtooth(slope=20))

        assert gentle < steep < 100.0
        assert steep > 95.0

    def test_always_within_bounds(self):
        """RSI stays in [0, 100] for non-negative prices."""
        values = [float((i * 37) % 11) for i in range(60)]
        for end in range(1, len(values) + 1):
            assert 0.0 <= calculate_rsi(values[:end]) <= 100.0


class TestMACD:
    """Tests for MACD."""

    def test_periods_shrink_to_fit(self):
        """Short series get proportionally shorter periods."""
        assert macd_periods(100) == (12, 26, 9)
        assert macd_periods(10) == (5, 8, 3)
        assert macd_periods(5) == (2, 4, 1)

    def test_single_delta_fallback(self):
        """Too little data reports the last delta with half signal."""
        macd = calculate_macd([100.0, 103.0])

        assert macd.macd == 3.0
        assert macd.signal == 1.5
        assert macd.histogram == 1.5

    def test_single_value_fallback(self):
        """One price -> zero trend."""
        macd = calculate_macd([100.0])

        assert macd.macd == 0.0
        assert macd.signal == 0.0
        assert macd.histogram == 0.0

    def test_flat_series(self):
        """Flat prices -> zero MACD and histogram."""
        macd = calculate_macd([100.0] * 40)

        assert macd.macd == pytest.approx(0.0)
        assert macd.histogram == pytest.approx(0.0)

    def test_uptrend_is_positive(self):
        """Fast EMA leads the slow EMA in a rising market."""
        macd = calculate_macd([100.0 + i for i in range(60)])

        assert macd.macd > 0
        assert macd.histogram == pytest.approx(macd.macd - macd.signal)

    def test_downtrend_is_negative(self):
        """Fast EMA trails below the slow EMA in a falling market."""
        macd = calculate_macd([200.0 - i for i in range(60)])

        assert macd.macd < 0

    @pytest.mark.parametrize("length", [5, 9, 17, 40, 80])
    def test_signal_line_matches_prefix_recomputation(self, length):
        """Incremental signal line equals recomputing EMAs for every prefix."""
        values = [100.0 + ((i * 7) % 13) - i * 0.5 for i in range(length)]
        fast, slow, signal_period = macd_periods(length)

        macd_line = [
            ema(values[: i + 1], fast) - ema(values[: i + 1], slow)
            for i in range(slow, length)
        ]
        expected_signal = ema(macd_line, min(signal_period, len(macd_line)))
        expected_macd = ema(values, fast) - ema(values, slow)

        macd = calculate_macd(values)

        assert macd.macd == pytest.approx(expected_macd)
        assert macd.signal == pytest.approx(expected_signal)
        assert macd.histogram == pytest.approx(expected_macd - expected_signal)


class TestBollingerBands:
    """Tests for Bollinger Bands."""

    def test_known_values(self):
        """Middle 5, population stddev 2 -> bands at 1 and 9."""
        bands = calculate_bollinger_bands([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])

        assert bands.middle == 5.0
        assert bands.upper == 9.0
        assert bands.lower == 1.0

    def test_flat_series_collapses(self):
        """No volatility -> upper = middle = lower."""
        bands = calculate_bollinger_bands([100.0] * 25)

        assert bands.upper == bands.middle == bands.lower == 100.0

    def test_uses_trailing_window(self):
        """Only the last `period` closes count."""
        values = [1000.0] * 10 + [100.0] * 20

        bands = calculate_bollinger_bands(values, period=20)

        assert bands.middle == 100.0
        assert bands.upper == 100.0

    def test_custom_multiplier(self):
        """Band width scales with the multiplier."""
        bands = calculate_bollinger_bands([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0], multiplier=1)

        assert bands.upper == 7.0
        assert bands.lower == 3.0

    def test_empty_series(self):
        """Empty series -> zeroed bands."""
        bands = calculate_bollinger_bands([])

        assert bands.upper == bands.middle == bands.lower == 0.0


class TestMovingAverages:
    """Tests for the 5/10/20/50 SMAs."""

    def test_full_windows(self):
        """Each window averages its trailing closes."""
        averages = calculate_moving_averages([float(i) for i in range(1, 61)])

        assert averages.ma5 == 58.0
        assert averages.ma10 == 55.5
        assert averages.ma20 == 50.5
        assert averages.ma50 == 35.5

    def test_windows_clamp_independently(self):
        """Short series -> every window averages what exists."""
        averages = calculate_moving_averages([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])

        assert averages.ma5 == 5.0
        assert averages.ma10 == 4.0
        assert averages.ma20 == 4.0
        assert averages.ma50 == 4.0
