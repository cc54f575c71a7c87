"""Unit tests for indicator aggregation."""

import pytest

from goldwatch.domain.services.aggregator import compute_indicators, neutral_snapshot


class TestNeutralSnapshot:
    """Tests for the sparse-data snapshot."""

    def test_four_samples_are_neutral(self, series_from_closes):
        """Below 5 samples every indicator is neutral."""
        snapshot = compute_indicators(series_from_closes([100.0, 104.0, 98.0, 102.0]))

        assert snapshot.rsi == 50.0
        assert snapshot.macd.macd == snapshot.macd.signal == snapshot.macd.histogram == 0.0
        assert snapshot.bollinger.upper == snapshot.bollinger.middle == snapshot.bollinger.lower == 0.0
        averages = snapshot.moving_averages
        assert averages.ma5 == averages.ma10 == averages.ma20 == averages.ma50 == 102.0

    def test_empty_series(self):
        """No samples -> moving averages are 0."""
        snapshot = compute_indicators([])

        assert snapshot.rsi == 50.0
        assert snapshot.moving_averages.ma50 == 0.0

    def test_neutral_snapshot_is_degenerate(self):
        """Zeroed bands flag the snapshot as degenerate."""
        assert neutral_snapshot([1.0]).bollinger.is_degenerate


class TestComputeIndicators:
    """Tests for the full snapshot."""

    def test_five_samples_are_computed(self, series_from_closes):
        """At the threshold real indicators are reported."""
        snapshot = compute_indicators(series_from_closes([1.0, 2.0, 3.0, 4.0, 5.0]))

        assert snapshot.rsi == 100.0
        assert snapshot.bollinger.middle == 3.0
        assert snapshot.bollinger.upper > snapshot.bollinger.middle
        assert not snapshot.bollinger.is_degenerate

    def test_flat_series(self, flat_series):
        """Flat closes -> RSI 50, zero histogram, collapsed bands."""
        snapshot = compute_indicators(flat_series)

        assert snapshot.rsi == 50.0
        assert snapshot.macd.histogram == pytest.approx(0.0)
        assert snapshot.bollinger.upper == snapshot.bollinger.middle == snapshot.bollinger.lower

    def test_trending_series(self, trending_series):
        """Rising closes -> overbought RSI, positive MACD, stacked averages."""
        snapshot = compute_indicators(trending_series)
        averages = snapshot.moving_averages

        assert snapshot.rsi == 100.0
        assert snapshot.macd.macd > 0
        assert averages.ma5 > averages.ma10 > averages.ma20 > averages.ma50

    def test_uses_close_prices(self, series_from_closes):
        """Highs and lows do not enter the indicators."""
        narrow = series_from_closes([100.0 + i for i in range(10)], spread=0.5)
        wide = series_from_closes([100.0 + i for i in range(10)], spread=50.0)

        assert compute_indicators(narrow) == compute_indicators(wide)

    def test_min_samples_override(self, series_from_closes):
        """The sparse-data threshold is configurable."""
        series = series_from_closes([100.0, 104.0, 98.0, 102.0])

        snapshot = compute_indicators(series, min_samples=3)

        assert snapshot.bollinger.middle == 101.0
        assert snapshot.bollinger.upper > 101.0

    def test_same_series_same_snapshot(self, trending_series):
        """Pure function: identical input, identical output."""
        assert compute_indicators(trending_series) == compute_indicators(list(trending_series))
