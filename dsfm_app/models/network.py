"""Data models for the thresholded correlation network"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class NetworkNode:
    """Instrument node with its centrality metrics"""
    id: str
    label: str
    degree: int
    betweenness: float
    sector: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "degree": self.degree,
            "betweenness": self.betweenness,
            "sector": self.sector,
        }


@dataclass(frozen=True)
class NetworkEdge:
    """Undirected edge between two instruments whose |correlation| meets the threshold"""
    source: str
    target: str
    weight: float           # |correlation|
    correlation: float      # signed

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "weight": self.weight,
            "correlation": self.correlation,
        }


@dataclass(frozen=True)
class NetworkGraph:
    """Immutable correlation network"""
    nodes: tuple[NetworkNode, ...]
    edges: tuple[NetworkEdge, ...]
    threshold: float = 0.5

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

    def get_node(self, node_id: str) -> Optional[NetworkNode]:
        """Find a node by id, None if absent"""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def neighbors(self, node_id: str) -> list[str]:
        """Direct neighbours in edge order"""
        result = []
        for edge in self.edges:
            if edge.source == node_id:
                result.append(edge.target)
            elif edge.target == node_id:
                result.append(edge.source)
        return result

    def to_dict(self) -> dict[str, Any]:
        return {
            "threshold": self.threshold,
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
