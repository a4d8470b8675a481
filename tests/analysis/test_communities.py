"""Tests for community grouping"""

import pytest

from dsfm_app.analysis.communities import (
    detect_communities,
    label_propagation_communities,
    one_hop_communities,
)
from dsfm_app.analysis.network import build_network_graph
from dsfm_app.errors import ConfigurationError


class TestOneHopCommunities:
    """Test the default one-hop absorption"""

    def test_star_is_one_community(self, star_graph):
        communities = detect_communities(star_graph)
        assert set(communities.values()) == {0}
        assert set(communities) == {"X", "A", "B", "C", "D"}

    def test_absorption_is_not_transitive(self, make_edge_matrix):
        """Test a chain splits because neighbours of neighbours are not followed"""
        matrix = make_edge_matrix(["A", "B", "C", "D"], [("A", "B"), ("B", "C"), ("C", "D")])
        graph = build_network_graph(matrix, threshold=0.5)

        assert one_hop_communities(graph) == {"A": 0, "B": 0, "C": 1, "D": 1}

    def test_isolated_nodes_get_own_community(self, make_matrix):
        matrix = make_matrix(["A", "B", "C"], {})
        graph = build_network_graph(matrix, threshold=0.5)

        assert detect_communities(graph) == {"A": 0, "B": 1, "C": 2}

    def test_every_node_assigned(self, market_series):
        from dsfm_app.analysis.correlation import build_correlation_matrix

        graph = build_network_graph(build_correlation_matrix(market_series), threshold=0.5)
        communities = detect_communities(graph)
        assert set(communities) == {node.id for node in graph.nodes}


class TestLabelPropagation:
    """Test the label propagation alternative"""

    def test_disjoint_triangles(self, make_edge_matrix):
        matrix = make_edge_matrix(
            ["A", "B", "C", "D", "E", "F"],
            [("A", "B"), ("B", "C"), ("C", "A"), ("D", "E"), ("E", "F"), ("F", "D")],
        )
        graph = build_network_graph(matrix, threshold=0.5)

        communities = detect_communities(graph, method="label_propagation")
        assert communities == {"A": 0, "B": 0, "C": 0, "D": 1, "E": 1, "F": 1}

    def test_chain_is_transitive(self, make_edge_matrix):
        """Test labels spread beyond one hop"""
        matrix = make_edge_matrix(["A", "B", "C", "D"], [("A", "B"), ("B", "C"), ("C", "D")])
        graph = build_network_graph(matrix, threshold=0.5)

        communities = label_propagation_communities(graph)
        assert len(set(communities.values())) == 1

    def test_isolated_node(self, make_edge_matrix):
        matrix = make_edge_matrix(["A", "B", "C"], [("A", "B")])
        graph = build_network_graph(matrix, threshold=0.5)

        communities = label_propagation_communities(graph)
        assert communities["A"] == communities["B"]
        assert communities["C"] != communities["A"]

    def test_deterministic(self, star_graph):
        first = label_propagation_communities(star_graph)
        second = label_propagation_communities(star_graph)
        assert first == second


class TestDetectCommunities:

    def test_unknown_method(self, star_graph):
        with pytest.raises(ConfigurationError):
            detect_communities(star_graph, method="louvain")
