"""Data models for shock propagation results"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ShockImpact:
    """Estimated impact of a shock on one instrument"""
    symbol: str
    impact: float
    original_correlation: float     # signed correlation to the shocked instrument
    centrality: float               # this instrument's own betweenness

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "impact": self.impact,
            "originalCorrelation": self.original_correlation,
            "centrality": self.centrality,
        }


@dataclass(frozen=True)
class ShockSimulation:
    """Outcome of shocking one instrument"""
    shock_symbol: str
    shock_magnitude: float
    impacts: tuple[ShockImpact, ...]   # sorted by impact descending
    total_affected: int
    max_impact: float
    average_impact: float

    def __post_init__(self):
        object.__setattr__(self, "impacts", tuple(self.impacts))

    def get_impact(self, symbol: str) -> float:
        """Impact on one instrument, 0 if it was not part of the simulation"""
        for impact in self.impacts:
            if impact.symbol == symbol:
                return impact.impact
        return 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "shockSymbol": self.shock_symbol,
            "shockMagnitude": self.shock_magnitude,
            "impacts": [impact.to_dict() for impact in self.impacts],
            "totalAffected": self.total_affected,
            "maxImpact": self.max_impact,
            "averageImpact": self.average_impact,
        }


@dataclass(frozen=True)
class SectorImpact:
    """Shock impact aggregated over one sector"""
    sector: str
    total_impact: float
    stock_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "sector": self.sector,
            "totalImpact": self.total_impact,
            "stockCount": self.stock_count,
        }
