"""
Consistency checks over a finished analysis run.

Produces a report of blocking issues, warnings and informational lines
covering input completeness, matrix invariants (finite, bounded, unit
diagonal, symmetric) and network sanity (non-negative betweenness).
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..config.defaults import ValidationParams
from ..data.models import ReturnSeries
from ..models.correlation import CorrelationMatrix
from ..models.network import NetworkGraph


@dataclass
class ValidationReport:
    """Outcome of validate_analysis"""
    issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    info: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "issues": list(self.issues),
            "warnings": list(self.warnings),
            "info": list(self.info),
        }


def _check_series(report: ValidationReport, series_list: Sequence[ReturnSeries],
                  params: ValidationParams) -> None:
    report.info.append(f"Total instruments loaded: {len(series_list)}")

    short = [s for s in series_list if len(s) < params.min_returns]
    if short:
        report.warnings.append(
            f"{len(short)} instruments have less than {params.min_returns} data points"
        )

    lengths = [len(s) for s in series_list]
    min_length, max_length = min(lengths), max(lengths)
    if max_length - min_length > params.max_length_spread:
        report.warnings.append(
            f"Return series length varies significantly: min={min_length}, max={max_length}"
        )
    report.info.append(f"Return series length: {min_length}-{max_length} data points")


def _check_matrix(report: ValidationReport, matrix: CorrelationMatrix,
                  params: ValidationParams) -> None:
    n = matrix.size

    invalid = 0
    for row in matrix.matrix:
        for value in row:
            if math.isnan(value) or math.isinf(value) or value < -1 - 1e-9 or value > 1 + 1e-9:
                invalid += 1
    if invalid:
        report.issues.append(f"{invalid} invalid correlation values found")

    diagonal_issues = sum(1 for i in range(n) if abs(matrix.matrix[i][i] - 1.0) > params.tolerance)
    if diagonal_issues:
        report.issues.append(f"{diagonal_issues} diagonal values are not 1.0")

    symmetry_issues = 0
    for i in range(n):
        for j in range(i + 1, n):
            if abs(matrix.matrix[i][j] - matrix.matrix[j][i]) > params.tolerance:
                symmetry_issues += 1
    if symmetry_issues:
        report.issues.append(f"{symmetry_issues} correlation pairs are not symmetric")


def _check_graph(report: ValidationReport, graph: NetworkGraph) -> None:
    report.info.append(f"Network nodes: {len(graph.nodes)}")
    report.info.append(f"Network edges: {len(graph.edges)}")

    if not graph.nodes:
        return

    betweenness = [node.betweenness for node in graph.nodes]
    report.info.append(f"Betweenness range: {min(betweenness):.4f} - {max(betweenness):.4f}")

    negative = sum(1 for value in betweenness if value < 0)
    if negative:
        report.issues.append(f"{negative} nodes have negative betweenness")

    degrees = [node.degree for node in graph.nodes]
    report.info.append(f"Average degree: {sum(degrees) / len(degrees):.2f}")
    report.info.append(f"Max degree: {max(degrees)}")


def _correlation_statistics(report: ValidationReport, matrix: CorrelationMatrix,
                            params: ValidationParams) -> None:
    values = [abs(v) for v in matrix.off_diagonal()]
    if not values:
        return

    report.info.append(f"Average absolute correlation: {sum(values) / len(values):.4f}")
    strong = sum(1 for v in values if v >= params.strong_correlation)
    report.info.append(f"Strong correlations (>={params.strong_correlation}): {strong}")


def validate_analysis(
    series_list: Sequence[ReturnSeries],
    matrix: Optional[CorrelationMatrix],
    graph: Optional[NetworkGraph],
    params: Optional[ValidationParams] = None,
) -> ValidationReport:
    """
    Validate inputs and outputs of an analysis run

    Args:
        series_list: Return series the run was built from
        matrix: Correlation matrix (None if not computed)
        graph: Network graph (None if not computed)
        params: Thresholds for warnings and tolerances

    Returns:
        ValidationReport; checks stop at the first missing stage
    """
    params = params or ValidationParams()
    report = ValidationReport()

    if not series_list:
        report.issues.append("No return series available")
        return report

    _check_series(report, series_list, params)

    if matrix is None:
        report.issues.append("Correlation matrix not computed")
        return report

    _check_matrix(report, matrix, params)

    if graph is None:
        report.issues.append("Network graph not computed")
        return report

    _check_graph(report, graph)
    _correlation_statistics(report, matrix, params)

    return report
