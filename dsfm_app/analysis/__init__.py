"""Correlation, network and shock engines for market structure analysis"""

from .communities import detect_communities
from .correlation import (
    build_correlation_matrix,
    calculate_correlation,
    get_correlation,
    get_top_correlated_pairs,
)
from .insights import generate_insights
from .network import (
    build_network_graph,
    calculate_betweenness_centrality,
    calculate_degree_centrality,
    get_top_bridge_nodes,
)
from .shock import get_affected_sectors, simulate_shock
from .validation import ValidationReport, validate_analysis

__all__ = [
    "calculate_correlation",
    "build_correlation_matrix",
    "get_correlation",
    "get_top_correlated_pairs",
    "calculate_degree_centrality",
    "calculate_betweenness_centrality",
    "build_network_graph",
    "get_top_bridge_nodes",
    "detect_communities",
    "simulate_shock",
    "get_affected_sectors",
    "validate_analysis",
    "ValidationReport",
    "generate_insights",
]
