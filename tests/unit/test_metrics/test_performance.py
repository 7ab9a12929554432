"""Tests for folio_analytics/metrics/performance.py - core performance metrics."""

from datetime import datetime

import numpy as np
import pandas as pd
import pytest

from folio_analytics.exceptions import (
    AnalyticsError,
    DivisionByZeroError,
    InsufficientDataError,
    InvalidArgumentError,
)
from folio_analytics.metrics.performance import (
    calculate_average_hold_time,
    calculate_drawdown_series,
    calculate_max_drawdown,
    calculate_sharpe_ratio,
    calculate_volatility,
    calculate_win_rate,
)
from folio_analytics.portfolio import Position, PositionStatus


class TestCalculateSharpeRatio:
    """Tests for calculate_sharpe_ratio function."""

    def test_known_value(self) -> None:
        """Excess [0.03, 0.01, 0.05, -0.01]: mean 0.02, population std sqrt(0.0005)."""
        returns = [0.05, 0.03, 0.07, 0.01]
        result = calculate_sharpe_ratio(returns, risk_free_rate=0.02)
        assert result == pytest.approx(0.02 / np.sqrt(0.0005))

    def test_default_risk_free_rate(self) -> None:
        """Default risk-free rate is 0.02."""
        returns = [0.05, 0.03, 0.07, 0.01]
        assert calculate_sharpe_ratio(returns) == pytest.approx(
            calculate_sharpe_ratio(returns, risk_free_rate=0.02)
        )

    def test_zero_risk_free_rate(self) -> None:
        """Mean 0.02 over population std 0.01."""
        result = calculate_sharpe_ratio([0.01, 0.03], risk_free_rate=0.0)
        assert result == pytest.approx(2.0)

    def test_negative_excess_return(self) -> None:
        result = calculate_sharpe_ratio([0.0, 0.01], risk_free_rate=0.02)
        assert result < 0

    def test_accepts_numpy_and_pandas(self) -> None:
        returns = [0.05, 0.03, 0.07, 0.01]
        expected = calculate_sharpe_ratio(returns)
        assert calculate_sharpe_ratio(np.array(returns)) == pytest.approx(expected)
        assert calculate_sharpe_ratio(pd.Series(returns)) == pytest.approx(expected)

    def test_empty_raises_insufficient_data(self) -> None:
        """Empty series is an error, not NaN."""
        with pytest.raises(InsufficientDataError):
            calculate_sharpe_ratio([])

    def test_constant_returns_raise_division_by_zero(self) -> None:
        """Zero volatility is distinguishable from missing data."""
        with pytest.raises(DivisionByZeroError):
            calculate_sharpe_ratio([0.01, 0.01, 0.01])

    def test_single_return_raises_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            calculate_sharpe_ratio([0.05])

    def test_nan_input_raises_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgumentError):
            calculate_sharpe_ratio([0.01, float("nan")])

    def test_does_not_mutate_input(self) -> None:
        returns = np.array([0.05, 0.03, 0.07, 0.01])
        calculate_sharpe_ratio(returns)
        np.testing.assert_array_equal(returns, [0.05, 0.03, 0.07, 0.01])


class TestCalculateMaxDrawdown:
    """Tests for calculate_max_drawdown function."""

    def test_drawdown_after_new_peak(self) -> None:
        """Peak 100 -> 120, trough 60 after 120: (120 - 60) / 120."""
        assert calculate_max_drawdown([100, 80, 120, 60]) == pytest.approx(0.5)

    def test_monotonic_increase(self) -> None:
        assert calculate_max_drawdown([100.0, 110.0, 120.0]) == 0.0

    def test_single_value(self) -> None:
        assert calculate_max_drawdown([100.0]) == 0.0

    def test_total_loss(self) -> None:
        assert calculate_max_drawdown([100.0, 50.0, 0.0]) == pytest.approx(1.0)

    def test_within_unit_interval(self) -> None:
        """Max drawdown stays within [0, 1] for arbitrary positive series."""
        rng = np.random.default_rng(42)
        for _ in range(20):
            values = rng.uniform(1.0, 1000.0, size=50)
            result = calculate_max_drawdown(values)
            assert 0.0 <= result <= 1.0

    def test_empty_raises_insufficient_data(self) -> None:
        with pytest.raises(InsufficientDataError):
            calculate_max_drawdown([])

    def test_zero_peak_raises_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            calculate_max_drawdown([0.0, 10.0, 5.0])

    def test_negative_value_raises_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgumentError):
            calculate_max_drawdown([100.0, -5.0])


class TestCalculateDrawdownSeries:
    def test_basic(self) -> None:
        dd = calculate_drawdown_series([100.0, 110.0, 99.0, 120.0])
        assert dd[0] == 0.0
        assert dd[1] == 0.0
        assert dd[2] == pytest.approx(0.1)
        assert dd[3] == 0.0

    def test_length_matches_input(self) -> None:
        values = [100.0, 90.0, 95.0, 80.0, 120.0]
        assert len(calculate_drawdown_series(values)) == len(values)


class TestCalculateVolatility:
    """Tests for calculate_volatility function."""

    def test_population_std(self) -> None:
        assert calculate_volatility([0.01, -0.01]) == pytest.approx(0.01)

    def test_constant_returns(self) -> None:
        assert calculate_volatility([0.02] * 10) == 0.0

    def test_single_return(self) -> None:
        assert calculate_volatility([0.05]) == 0.0

    def test_non_negative(self) -> None:
        rng = np.random.default_rng(7)
        for _ in range(20):
            assert calculate_volatility(rng.normal(0.0, 0.02, size=30)) >= 0.0

    def test_empty_raises_insufficient_data(self) -> None:
        with pytest.raises(InsufficientDataError):
            calculate_volatility([])


class TestCalculateWinRate:
    """Tests for calculate_win_rate function."""

    def test_mixed_positions(self, mixed_positions: list[Position]) -> None:
        """Two of four closed positions win; open positions are ignored."""
        assert calculate_win_rate(mixed_positions) == pytest.approx(50.0)

    def test_empty_is_zero(self) -> None:
        assert calculate_win_rate([]) == 0.0

    def test_only_open_positions_is_zero(self, open_positions: list[Position]) -> None:
        assert calculate_win_rate(open_positions) == 0.0

    def test_breakeven_is_not_a_win(self) -> None:
        positions = [Position(status=PositionStatus.CLOSED, gross_pl=0.0)]
        assert calculate_win_rate(positions) == 0.0

    def test_all_winners(self) -> None:
        positions = [Position(status=PositionStatus.CLOSED, gross_pl=10.0)] * 3
        assert calculate_win_rate(positions) == 100.0

    def test_order_invariant(self, mixed_positions: list[Position]) -> None:
        forward = calculate_win_rate(mixed_positions)
        backward = calculate_win_rate(list(reversed(mixed_positions)))
        assert forward == backward

    def test_accepts_generator(self, closed_positions: list[Position]) -> None:
        assert calculate_win_rate(p for p in closed_positions) == pytest.approx(50.0)


class TestCalculateAverageHoldTime:
    """Tests for calculate_average_hold_time function."""

    def test_average_days(self, closed_positions: list[Position]) -> None:
        """10 and 5 days; positions without timestamps are skipped."""
        assert calculate_average_hold_time(closed_positions) == pytest.approx(7.5)

    def test_fractional_days(self) -> None:
        positions = [
            Position(
                status=PositionStatus.CLOSED,
                open_time=datetime(2024, 3, 1, 9, 0),
                close_time=datetime(2024, 3, 1, 21, 0),
            )
        ]
        assert calculate_average_hold_time(positions) == pytest.approx(0.5)

    def test_open_positions_ignored(self, mixed_positions: list[Position]) -> None:
        assert calculate_average_hold_time(mixed_positions) == pytest.approx(7.5)

    def test_no_timestamps_raises_insufficient_data(self) -> None:
        positions = [Position(status=PositionStatus.CLOSED, gross_pl=10.0)]
        with pytest.raises(InsufficientDataError):
            calculate_average_hold_time(positions)

    def test_empty_raises_insufficient_data(self) -> None:
        with pytest.raises(InsufficientDataError):
            calculate_average_hold_time([])

    def test_close_before_open_raises(self) -> None:
        positions = [
            Position(
                status=PositionStatus.CLOSED,
                open_time=datetime(2024, 3, 10),
                close_time=datetime(2024, 3, 1),
            )
        ]
        with pytest.raises(InvalidArgumentError):
            calculate_average_hold_time(positions)


class TestErrorTypes:
    """Engine errors double as the matching builtin exceptions."""

    def test_insufficient_data_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            calculate_volatility([])

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            calculate_sharpe_ratio([0.01, 0.01])

    def test_all_share_base_class(self) -> None:
        with pytest.raises(AnalyticsError):
            calculate_max_drawdown([])


def test_win_rate_with_string_status() -> None:
    positions = [Position(status="closed", gross_pl=10.0)]  # type: ignore[arg-type]
    assert calculate_win_rate(positions) == 100.0
