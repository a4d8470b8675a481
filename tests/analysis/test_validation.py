"""Tests for the analysis validation report"""

import math

from dsfm_app.analysis.correlation import build_correlation_matrix
from dsfm_app.analysis.network import build_network_graph
from dsfm_app.analysis.validation import ValidationReport, validate_analysis
from dsfm_app.config.defaults import ValidationParams
from dsfm_app.data.models import ReturnSeries
from dsfm_app.models.correlation import CorrelationMatrix
from dsfm_app.models.network import NetworkGraph, NetworkNode


class TestValidateAnalysis:
    """Test the run-level consistency checks"""

    def test_clean_run(self, market_series):
        matrix = build_correlation_matrix(market_series)
        graph = build_network_graph(matrix, threshold=0.5)

        report = validate_analysis(market_series, matrix, graph)

        assert report.is_valid
        assert report.issues == []
        assert f"Total instruments loaded: {len(market_series)}" in report.info
        assert f"Network nodes: {len(market_series)}" in report.info
        assert any(line.startswith("Average absolute correlation") for line in report.info)
        assert any(line.startswith("Betweenness range") for line in report.info)

    def test_length_spread_warning(self, market_series):
        """Test the 60 vs 40 return histories are flagged"""
        matrix = build_correlation_matrix(market_series)
        report = validate_analysis(market_series, matrix, build_network_graph(matrix))

        assert "Return series length varies significantly: min=40, max=60" in report.warnings
        assert "Return series length: 40-60 data points" in report.info

    def test_short_series_warning(self, scenario_a_series):
        matrix = build_correlation_matrix(scenario_a_series)
        report = validate_analysis(scenario_a_series, matrix, build_network_graph(matrix))

        assert "3 instruments have less than 10 data points" in report.warnings
        assert report.is_valid

    def test_no_series(self):
        report = validate_analysis([], None, None)
        assert report.issues == ["No return series available"]
        assert not report.is_valid

    def test_missing_matrix(self, scenario_a_series):
        report = validate_analysis(scenario_a_series, None, None)
        assert report.issues == ["Correlation matrix not computed"]

    def test_missing_graph(self, scenario_a_series):
        matrix = build_correlation_matrix(scenario_a_series)
        report = validate_analysis(scenario_a_series, matrix, None)
        assert report.issues == ["Network graph not computed"]

    def test_broken_matrix(self):
        """Test out-of-range, off-diagonal and asymmetric entries are reported"""
        series = [ReturnSeries.of(s, [0.01, 0.02]) for s in ("A", "B", "C")]
        matrix = CorrelationMatrix(
            symbols=["A", "B", "C"],
            matrix=[
                [1.0, 0.2, math.nan],
                [0.5, 0.9, 0.0],
                [0.3, 0.0, 1.0],
            ],
        )
        graph = NetworkGraph(
            nodes=[NetworkNode(id=s, label=s, degree=0, betweenness=0.0) for s in ("A", "B", "C")],
            edges=[],
        )

        report = validate_analysis(series, matrix, graph)

        assert "1 invalid correlation values found" in report.issues
        assert "1 diagonal values are not 1.0" in report.issues
        # (A, B) differ by 0.3; (A, C) compares NaN which is never > tolerance
        assert "1 correlation pairs are not symmetric" in report.issues

    def test_negative_betweenness(self, scenario_a_series):
        matrix = build_correlation_matrix(scenario_a_series)
        graph = NetworkGraph(
            nodes=[
                NetworkNode(id="A", label="A", degree=2, betweenness=-0.1),
                NetworkNode(id="B", label="B", degree=2, betweenness=0.0),
                NetworkNode(id="C", label="C", degree=2, betweenness=0.0),
            ],
            edges=[],
        )

        report = validate_analysis(scenario_a_series, matrix, graph)
        assert "1 nodes have negative betweenness" in report.issues

    def test_custom_params(self, scenario_a_series):
        matrix = build_correlation_matrix(scenario_a_series)
        params = ValidationParams(min_returns=2, strong_correlation=0.95)

        report = validate_analysis(scenario_a_series, matrix, build_network_graph(matrix), params)

        assert report.warnings == []
        assert "Strong correlations (>=0.95): 3" in report.info

    def test_to_dict(self):
        report = ValidationReport(issues=["x"], warnings=[], info=["y"])
        assert report.to_dict() == {"valid": False, "issues": ["x"], "warnings": [], "info": ["y"]}
