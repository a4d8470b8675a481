"""Pytest configuration and shared fixtures."""

import math

import pytest
from typing import Dict, List

from dsfm_app.analysis.network import build_network_graph
from dsfm_app.data.models import ReturnSeries
from dsfm_app.models.correlation import CorrelationMatrix


def matrix_from_values(symbols: List[str], values: Dict[tuple, float]) -> CorrelationMatrix:
    """Build a symmetric correlation matrix from {(sym1, sym2): corr} pairs; others are 0."""
    index = {symbol: i for i, symbol in enumerate(symbols)}
    n = len(symbols)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 1.0
    for (a, b), value in values.items():
        matrix[index[a]][index[b]] = value
        matrix[index[b]][index[a]] = value
    return CorrelationMatrix(symbols=symbols, matrix=matrix)


def matrix_from_edges(symbols: List[str], edges: List[tuple], strength: float = 0.8) -> CorrelationMatrix:
    """Matrix whose thresholded network at 0.5 is exactly the given edge list."""
    return matrix_from_values(symbols, {edge: strength for edge in edges})


@pytest.fixture
def scenario_a_series() -> List[ReturnSeries]:
    """Two identical series and one exact negation."""
    base = [0.01, 0.02, -0.01, 0.03]
    return [
        ReturnSeries.of("A", base),
        ReturnSeries.of("B", base),
        ReturnSeries.of("C", [-r for r in base]),
    ]


@pytest.fixture
def star_matrix() -> CorrelationMatrix:
    """X correlates >= 0.5 with four instruments that barely correlate with each other."""
    symbols = ["X", "A", "B", "C", "D"]
    values = {
        ("X", "A"): 0.8,
        ("X", "B"): 0.7,
        ("X", "C"): 0.6,
        ("X", "D"): 0.9,
    }
    for i, a in enumerate(symbols[1:]):
        for b in symbols[i + 2:]:
            values[(a, b)] = 0.1
    return matrix_from_values(symbols, values)


@pytest.fixture
def star_graph(star_matrix):
    return build_network_graph(star_matrix, threshold=0.5)


@pytest.fixture
def sector_lookup() -> Dict[str, str]:
    return {
        "X": "Energy",
        "A": "Energy",
        "B": "Banking",
        "C": "IT",
    }


@pytest.fixture
def market_series() -> List[ReturnSeries]:
    """Deterministic return series with a mix of strong, weak and inverse co-movement."""
    length = 60
    driver = [0.01 * math.sin(0.7 * t) for t in range(length)]
    other = [0.01 * math.cos(1.3 * t) for t in range(length)]
    noise = [0.002 * math.sin(5.1 * t + 1.0) for t in range(length)]

    return [
        ReturnSeries.of("RELIANCE.NS", driver),
        ReturnSeries.of("ONGC.NS", [d + n for d, n in zip(driver, noise)]),
        ReturnSeries.of("TCS.NS", other),
        ReturnSeries.of("INFY.NS", [o - n for o, n in zip(other, noise)]),
        ReturnSeries.of("HDFCBANK.NS", [-d for d in driver]),
        # Shorter history; must be tail-aligned against the others
        ReturnSeries.of("SBIN.NS", [0.5 * d + 0.5 * o for d, o in zip(driver, other)][-40:]),
    ]


@pytest.fixture
def make_matrix():
    """Factory for matrices given explicit pair correlations."""
    return matrix_from_values


@pytest.fixture
def make_edge_matrix():
    """Factory for matrices given the edges of the 0.5-thresholded network."""
    return matrix_from_edges
