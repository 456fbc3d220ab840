"""Tests for RSI and MACD."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tickerlens.indicators.oscillators import RSI_EPSILON, calculate_macd, calculate_rsi

from test_series import price_series


class TestRSI:
    """
    Wilder RSI: SMA-seeded averages, epsilon guard on a zero average loss.
    """

    def test_known_values(self):
        # Seed over +1, -1 -> 0.5 / 0.5; then +1 -> 0.75 / 0.25; then -1 -> 0.375 / 0.625
        result = calculate_rsi([1.0, 2.0, 1.0, 2.0, 1.0], period=2)

        assert result[:2] == [None, None]
        assert result[2:] == pytest.approx([50.0, 75.0, 37.5])

    def test_strictly_increasing_approaches_100(self):
        closes = [100.0 + i for i in range(20)]
        result = calculate_rsi(closes, period=14)

        expected = 100 - 100 / (1 + 1 / RSI_EPSILON)
        assert result[-1] == pytest.approx(expected)
        assert result[-1] == pytest.approx(100.0, abs=0.01)
        assert result[-1] <= 100.0

    def test_strictly_decreasing_is_zero(self):
        closes = [100.0 - i for i in range(10)]
        result = calculate_rsi(closes, period=5)

        assert result[-1] == 0.0
        assert all(v == 0.0 for v in result[5:])

    def test_flat_prices_give_zero(self):
        """No gains and no losses: RS is 0 / epsilon."""
        result = calculate_rsi([100.0] * 20, period=14)

        assert result[14:] == [0.0] * 6

    def test_requires_more_than_period_values(self):
        assert calculate_rsi([1.0] * 14, period=14) == [None] * 14

        result = calculate_rsi([float(i) for i in range(15)], period=14)
        assert result[:14] == [None] * 14
        assert result[14] is not None

    def test_invalid_period(self):
        assert calculate_rsi([1.0, 2.0, 3.0], period=0) == [None, None, None]

    @given(prices=price_series(min_length=1, max_length=150), period=st.integers(min_value=2, max_value=30))
    @settings(max_examples=100, deadline=None)
    def test_bounds_and_alignment(self, prices: list[float], period: int):
        """RSI stays in [0, 100]; first `period` values undefined, rest defined."""
        result = calculate_rsi(prices, period)

        assert len(result) == len(prices)
        if len(prices) <= period:
            assert all(v is None for v in result)
            return

        assert all(v is None for v in result[:period])
        for value in result[period:]:
            assert value is not None
            assert 0 <= value <= 100


class TestMACD:
    """MACD line, right-aligned signal line and histogram."""

    def test_flat_prices_are_zero(self):
        result = calculate_macd([100.0] * 40)

        assert result.macd_line[:25] == [None] * 25
        assert result.macd_line[25:] == [0.0] * 15
        assert result.signal_line[:33] == [None] * 33
        assert result.signal_line[33:] == [0.0] * 7
        assert result.histogram[:33] == [None] * 33
        assert result.histogram[33:] == [0.0] * 7

    def test_short_input_is_undefined(self):
        result = calculate_macd([100.0 + i for i in range(20)])

        assert result.macd_line == [None] * 20
        assert result.signal_line == [None] * 20
        assert result.histogram == [None] * 20

    def test_signal_needs_enough_macd_values(self):
        # 30 prices -> 5 MACD values, fewer than the 9 needed for the signal EMA
        result = calculate_macd([100.0 + i for i in range(30)])

        assert all(v is not None for v in result.macd_line[25:])
        assert result.signal_line == [None] * 30
        assert result.histogram == [None] * 30

    def test_linear_trend_converges(self):
        """A linear trend puts each EMA at a constant lag of slope * (n - 1) / 2."""
        result = calculate_macd([100.0 + 2 * i for i in range(60)])

        # 2 * (12.5 - 5.5)
        for value in result.macd_line[25:]:
            assert value == pytest.approx(14.0)
        for value in result.histogram[33:]:
            assert value == pytest.approx(0.0, abs=1e-9)

    def test_custom_periods(self):
        result = calculate_macd([100.0 + i for i in range(20)], fast=3, slow=6, signal=4)

        assert result.macd_line[:5] == [None] * 5
        assert result.macd_line[5] is not None
        assert result.signal_line[:8] == [None] * 8
        assert result.signal_line[8] is not None

    @given(prices=price_series(min_length=1, max_length=150))
    @settings(max_examples=100, deadline=None)
    def test_alignment_and_histogram(self, prices: list[float]):
        """Series are index-aligned and histogram == macd - signal exactly."""
        result = calculate_macd(prices)

        assert len(result.macd_line) == len(prices)
        assert len(result.signal_line) == len(prices)
        assert len(result.histogram) == len(prices)

        for i, (m, s, h) in enumerate(zip(result.macd_line, result.signal_line, result.histogram)):
            if m is None or s is None:
                assert h is None
            else:
                assert h == m - s

            expected_signal = len(prices) >= 34 and i >= 33
            assert (s is not None) == expected_signal
