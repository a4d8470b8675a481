"""
Result models module.

Immutable data structures produced by the correlation, network and shock
engines. Every result type offers ``to_dict()`` for export by the caller.
"""

from .correlation import CorrelatedPair, CorrelationMatrix
from .network import NetworkEdge, NetworkGraph, NetworkNode
from .shock import SectorImpact, ShockImpact, ShockSimulation

__all__ = [
    "CorrelationMatrix",
    "CorrelatedPair",
    "NetworkNode",
    "NetworkEdge",
    "NetworkGraph",
    "ShockImpact",
    "ShockSimulation",
    "SectorImpact",
]
