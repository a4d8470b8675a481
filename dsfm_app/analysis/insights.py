"""Plain-language summaries of an analysis run"""

from typing import Optional

from ..models.correlation import CorrelationMatrix
from ..models.network import NetworkGraph
from ..models.shock import ShockSimulation
from .network import make_label

HIGH_CONNECTIVITY = 0.5
STRONG_COMOVEMENT = 0.6
SYSTEMIC_SHARE = 0.5


def network_density(graph: NetworkGraph) -> float:
    """Share of possible undirected edges present, 0 for fewer than 2 nodes"""
    n = len(graph.nodes)
    possible = n * (n - 1) / 2
    if possible == 0:
        return 0.0
    return len(graph.edges) / possible


def sector_betweenness(graph: NetworkGraph) -> list[tuple[str, float]]:
    """Total betweenness per sector tag, highest first; untagged nodes are ignored"""
    totals: dict[str, float] = {}
    for node in graph.nodes:
        if node.sector:
            totals[node.sector] = totals.get(node.sector, 0.0) + node.betweenness
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def average_absolute_correlation(matrix: CorrelationMatrix) -> float:
    values = matrix.off_diagonal()
    if not values:
        return 0.0
    return sum(abs(v) for v in values) / len(values)


def generate_insights(
    graph: Optional[NetworkGraph],
    matrix: Optional[CorrelationMatrix] = None,
    simulation: Optional[ShockSimulation] = None,
    mode: str = "stock",
) -> list[str]:
    """
    Summarize the network and an optional shock run as short sentences

    Args:
        graph: Network graph
        matrix: Correlation matrix, used for sector-mode co-movement
        simulation: Optional shock simulation to summarize
        mode: "stock" or "sector", only changes wording and checks

    Returns:
        Insight sentences; a placeholder when there is nothing to report
    """
    unit = "stock" if mode == "stock" else "sector"
    insights = []

    if graph is not None and graph.nodes:
        top_node = max(graph.nodes, key=lambda node: node.betweenness)
        insights.append(
            f"Most influential {unit} this period is {top_node.label} "
            f"with a betweenness centrality of {top_node.betweenness:.2f}."
        )

        density = network_density(graph)
        if density > HIGH_CONNECTIVITY:
            insights.append(
                f"Market is currently highly interconnected ({density * 100:.1f}% connectivity), "
                "indicating strong co-movement patterns."
            )
        else:
            insights.append(
                f"Market shows moderate connectivity ({density * 100:.1f}% connectivity), "
                f"with some fragmentation between {unit}s."
            )

        if mode == "stock":
            top_sectors = sector_betweenness(graph)[:2]
            if len(top_sectors) >= 2:
                insights.append(
                    f"Sectors most interlinked are {top_sectors[0][0]} and {top_sectors[1][0]}, "
                    "showing strong cross-sector dependencies."
                )
        elif matrix is not None:
            average = average_absolute_correlation(matrix)
            if average > STRONG_COMOVEMENT:
                insights.append(
                    f"Sector indices show strong co-movement (avg correlation: {average:.2f}), "
                    "indicating synchronized market movements."
                )

    if simulation is not None and simulation.impacts:
        shocked = graph.get_node(simulation.shock_symbol) if graph is not None else None
        shock_label = shocked.label if shocked else make_label(simulation.shock_symbol)
        insights.append(
            f"A {simulation.shock_magnitude}% shock in {shock_label} impacts "
            f"{simulation.total_affected} {unit}s, with maximum impact of {simulation.max_impact:.2f}%."
        )

        if graph is not None and simulation.total_affected > len(graph.nodes) * SYSTEMIC_SHARE:
            insights.append(
                "This indicates systemic vulnerability in the market, with shock propagation "
                "affecting more than 50% of the network."
            )

    if not insights:
        insights.append("Run analysis to generate insights about market connectivity and systemic risk.")

    return insights
