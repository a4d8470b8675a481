"""Shock propagation over the correlation network"""

from typing import Mapping, Optional

from ..config.defaults import ShockParams
from ..errors import UnknownSymbolError
from ..logging.config import get_logger
from ..models.correlation import CorrelationMatrix
from ..models.network import NetworkGraph
from ..models.shock import SectorImpact, ShockImpact, ShockSimulation

logger = get_logger(__name__)

UNKNOWN_SECTOR = "Unknown"


def calculate_amplifier(shock_betweenness: float, params: Optional[ShockParams] = None) -> float:
    """
    Centrality amplifier applied to every impact

    amplifier = offset + betweenness / scale
    """
    params = params or ShockParams()
    return params.centrality_offset + shock_betweenness / params.centrality_scale


def simulate_shock(
    shock_symbol: str,
    shock_magnitude: float,
    correlation_matrix: CorrelationMatrix,
    network_graph: NetworkGraph,
    params: Optional[ShockParams] = None,
) -> ShockSimulation:
    """
    Estimate how a price shock in one instrument spreads to the others

    impact(x) = |corr(shock, x)| * (offset + betweenness(shock) / scale) * magnitude

    Args:
        shock_symbol: Instrument receiving the shock
        shock_magnitude: Shock size (percent)
        correlation_matrix: Correlation matrix of the analysis run
        network_graph: Network built from the same matrix
        params: Amplifier constants and materiality floor

    Returns:
        ShockSimulation with impacts sorted descending

    Raises:
        UnknownSymbolError: If shock_symbol is not in the matrix
    """
    params = params or ShockParams()

    shock_index = correlation_matrix.index_of(shock_symbol)
    if shock_index is None:
        raise UnknownSymbolError(shock_symbol, available_symbols=list(correlation_matrix.symbols))

    betweenness = {node.id: node.betweenness for node in network_graph.nodes}
    amplifier = calculate_amplifier(betweenness.get(shock_symbol, 0.0), params)

    impacts = []
    for idx, symbol in enumerate(correlation_matrix.symbols):
        if idx == shock_index:
            continue

        correlation = correlation_matrix.matrix[shock_index][idx]
        impacts.append(ShockImpact(
            symbol=symbol,
            impact=abs(correlation) * amplifier * shock_magnitude,
            original_correlation=correlation,
            centrality=betweenness.get(symbol, 0.0),
        ))

    impacts.sort(key=lambda impact: impact.impact, reverse=True)

    total_affected = sum(1 for impact in impacts if impact.impact > params.materiality_floor)
    max_impact = impacts[0].impact if impacts else 0.0
    average_impact = sum(impact.impact for impact in impacts) / len(impacts) if impacts else 0.0

    logger.debug(
        "Shock simulated",
        shock_symbol=shock_symbol,
        shock_magnitude=shock_magnitude,
        amplifier=amplifier,
        total_affected=total_affected,
    )

    return ShockSimulation(
        shock_symbol=shock_symbol,
        shock_magnitude=shock_magnitude,
        impacts=impacts,
        total_affected=total_affected,
        max_impact=max_impact,
        average_impact=average_impact,
    )


def get_affected_sectors(
    simulation: ShockSimulation,
    sector_lookup: Mapping[str, str],
) -> list[SectorImpact]:
    """
    Aggregate shock impacts by sector

    Args:
        simulation: Result of simulate_shock
        sector_lookup: symbol -> sector; missing symbols go to "Unknown"

    Returns:
        Sectors ordered by total impact, highest first
    """
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}

    for impact in simulation.impacts:
        sector = sector_lookup.get(impact.symbol) or UNKNOWN_SECTOR
        totals[sector] = totals.get(sector, 0.0) + impact.impact
        counts[sector] = counts.get(sector, 0) + 1

    sectors = [
        SectorImpact(sector=sector, total_impact=total, stock_count=counts[sector])
        for sector, total in totals.items()
    ]
    sectors.sort(key=lambda s: s.total_impact, reverse=True)
    return sectors
