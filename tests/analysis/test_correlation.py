"""Tests for Pearson correlation and the correlation matrix"""

import pytest

from dsfm_app.analysis.correlation import (
    align_series,
    build_correlation_matrix,
    calculate_correlation,
    get_correlation,
    get_top_correlated_pairs,
)
from dsfm_app.data.models import ReturnSeries


class TestCalculateCorrelation:
    """Test the Pearson coefficient"""

    def test_self_correlation(self):
        """Test a non-constant series is perfectly correlated with itself"""
        x = [0.01, -0.02, 0.015, 0.03, -0.005]
        assert calculate_correlation(x, x) == pytest.approx(1.0)

    def test_positive_scalar_multiple(self):
        """Test a positive multiple gives +1"""
        x = [0.01, -0.02, 0.015, 0.03, -0.005]
        y = [3.5 * v for v in x]
        assert calculate_correlation(x, y) == pytest.approx(1.0)

    def test_negative_scalar_multiple(self):
        """Test a negative multiple gives -1"""
        x = [0.01, -0.02, 0.015, 0.03, -0.005]
        y = [-0.25 * v for v in x]
        assert calculate_correlation(x, y) == pytest.approx(-1.0)

    def test_known_value(self):
        """Test a hand-computed coefficient"""
        # dx = [-1, 0, 1], dy = [-1, 1, 0] -> cov 1, ss 2 and 2 -> 0.5
        assert calculate_correlation([1, 2, 3], [1, 3, 2]) == pytest.approx(0.5)

    def test_symmetric_in_arguments(self):
        """Test corr(a, b) == corr(b, a)"""
        a = [0.02, -0.01, 0.005, 0.01]
        b = [0.01, 0.03, -0.02, 0.0]
        assert calculate_correlation(a, b) == calculate_correlation(b, a)

    def test_zero_variance_is_zero(self):
        """Test a constant series yields 0 instead of NaN"""
        assert calculate_correlation([0.01, 0.01, 0.01], [0.01, 0.02, 0.03]) == 0.0
        assert calculate_correlation([0.0, 0.0], [0.0, 0.0]) == 0.0

    def test_empty_series(self):
        """Test empty input yields 0"""
        assert calculate_correlation([], []) == 0.0

    def test_single_observation(self):
        """Test one observation has no variance"""
        assert calculate_correlation([0.01], [0.02]) == 0.0

    def test_length_mismatch(self):
        """Test unaligned input yields 0"""
        assert calculate_correlation([0.01, 0.02], [0.01, 0.02, 0.03]) == 0.0


class TestAlignSeries:
    """Test tail alignment"""

    def test_keeps_most_recent_values(self):
        """Test the longer series loses its oldest observations"""
        a, b = align_series([1, 2, 3, 4, 5], [30, 40, 50])
        assert a == [3, 4, 5]
        assert b == [30, 40, 50]

    def test_equal_lengths_unchanged(self):
        a, b = align_series([1, 2], [3, 4])
        assert a == [1, 2]
        assert b == [3, 4]

    def test_empty_side(self):
        assert align_series([], [1, 2]) == ([], [])


class TestBuildCorrelationMatrix:
    """Test matrix assembly"""

    def test_scenario_identical_and_negated(self, scenario_a_series):
        """Test identical series correlate at 1 and the negation at -1"""
        matrix = build_correlation_matrix(scenario_a_series)

        assert matrix.symbols == ("A", "B", "C")
        assert get_correlation(matrix, "A", "B") == pytest.approx(1.0)
        assert get_correlation(matrix, "A", "C") == pytest.approx(-1.0)
        assert get_correlation(matrix, "B", "C") == pytest.approx(-1.0)

    def test_matrix_invariants(self, market_series):
        """Test symmetry, unit diagonal and bounds"""
        matrix = build_correlation_matrix(market_series)
        n = matrix.size

        assert n == len(market_series)
        for i in range(n):
            assert matrix.matrix[i][i] == 1.0
            for j in range(n):
                assert matrix.matrix[i][j] == matrix.matrix[j][i]
                assert -1.0 - 1e-9 <= matrix.matrix[i][j] <= 1.0 + 1e-9

    def test_uses_tail_alignment(self):
        """Test series of different depth are compared on their latest returns"""
        recent = [0.01, -0.02, 0.03, -0.01]
        long_series = ReturnSeries.of("LONG", [0.5, 0.4, 0.3] + recent)
        short_series = ReturnSeries.of("SHORT", recent)

        matrix = build_correlation_matrix([long_series, short_series])
        assert get_correlation(matrix, "LONG", "SHORT") == pytest.approx(1.0)

    def test_single_instrument(self):
        """Test one instrument gives [[1.0]]"""
        matrix = build_correlation_matrix([ReturnSeries.of("ONLY", [0.01, 0.02])])
        assert matrix.symbols == ("ONLY",)
        assert matrix.matrix == ((1.0,),)

    def test_empty_input(self):
        matrix = build_correlation_matrix([])
        assert matrix.size == 0
        assert matrix.matrix == ()

    def test_degenerate_series_stay_finite(self):
        """Test constant and one-point series produce 0, not NaN"""
        series = [
            ReturnSeries.of("FLAT", [0.0, 0.0, 0.0]),
            ReturnSeries.of("ONE", [0.02]),
            ReturnSeries.of("MOVE", [0.01, -0.01, 0.02]),
        ]
        matrix = build_correlation_matrix(series)

        assert get_correlation(matrix, "FLAT", "MOVE") == 0.0
        assert get_correlation(matrix, "ONE", "MOVE") == 0.0
        assert matrix.matrix[0][0] == 1.0

    def test_to_dict_is_plain_data(self, scenario_a_series):
        data = build_correlation_matrix(scenario_a_series).to_dict()
        assert data["symbols"] == ["A", "B", "C"]
        assert isinstance(data["matrix"], list)
        assert isinstance(data["matrix"][0], list)


class TestMatrixQueries:
    """Test read-only lookups"""

    def test_get_correlation_unknown_symbol(self, star_matrix):
        """Test absent symbols resolve to 0"""
        assert get_correlation(star_matrix, "X", "MISSING") == 0.0
        assert get_correlation(star_matrix, "MISSING", "X") == 0.0

    def test_get_correlation_diagonal(self, star_matrix):
        assert get_correlation(star_matrix, "A", "A") == 1.0

    def test_top_pairs_sorted_by_absolute_value(self, make_matrix):
        """Test ranking uses |corr| and keeps the sign"""
        matrix = make_matrix(
            ["A", "B", "C", "D"],
            {("A", "B"): 0.3, ("A", "C"): -0.9, ("B", "D"): 0.6},
        )
        pairs = get_top_correlated_pairs(matrix, top_n=3)

        assert [(p.symbol1, p.symbol2) for p in pairs] == [("A", "C"), ("B", "D"), ("A", "B")]
        assert pairs[0].correlation == -0.9

    def test_top_pairs_ties_keep_input_order(self, make_matrix):
        matrix = make_matrix(
            ["A", "B", "C"],
            {("A", "B"): 0.5, ("A", "C"): -0.5, ("B", "C"): 0.5},
        )
        pairs = get_top_correlated_pairs(matrix, top_n=10)
        assert [(p.symbol1, p.symbol2) for p in pairs] == [("A", "B"), ("A", "C"), ("B", "C")]

    def test_top_pairs_enumerates_each_pair_once(self, star_matrix):
        pairs = get_top_correlated_pairs(star_matrix, top_n=100)
        assert len(pairs) == 10

    def test_top_pairs_limit(self, star_matrix):
        pairs = get_top_correlated_pairs(star_matrix, top_n=2)
        assert [(p.symbol1, p.symbol2) for p in pairs] == [("X", "D"), ("X", "A")]
