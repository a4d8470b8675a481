"""
Correlation network construction and centrality metrics.

Betweenness uses Brandes' accumulation for unweighted graphs: one BFS per
source records shortest-path counts and predecessors, then dependencies are
back-propagated in reverse BFS order. Each source is an independent pure
computation whose partial result is summed in a separate reduction step, so
the sources can be fanned out over any concurrent.futures executor.
"""

from collections import deque
from concurrent.futures import Executor
from functools import partial
from typing import Iterable, Mapping, Optional, Sequence

from ..logging.config import get_logger
from ..models.correlation import CorrelationMatrix
from ..models.network import NetworkEdge, NetworkGraph, NetworkNode

logger = get_logger(__name__)

DEFAULT_LABEL_SUFFIXES = (".NS",)


def calculate_degree_centrality(matrix: CorrelationMatrix, threshold: float = 0.5) -> dict[str, int]:
    """
    Count each instrument's neighbours in the thresholded network

    Args:
        matrix: Correlation matrix
        threshold: Minimum absolute correlation for a connection

    Returns:
        symbol -> number of other instruments with |corr| >= threshold
    """
    centrality = {}
    n = matrix.size

    for i, symbol in enumerate(matrix.symbols):
        degree = 0
        for j in range(n):
            if i != j and abs(matrix.matrix[i][j]) >= threshold:
                degree += 1
        centrality[symbol] = degree

    return centrality


def build_adjacency(matrix: CorrelationMatrix, threshold: float = 0.5) -> list[list[int]]:
    """Unweighted adjacency list; only the threshold gate matters"""
    n = matrix.size
    return [
        [j for j in range(n) if i != j and abs(matrix.matrix[i][j]) >= threshold]
        for i in range(n)
    ]


def single_source_dependencies(adjacency: Sequence[Sequence[int]], source: int) -> dict[int, float]:
    """
    Brandes dependency accumulation from one source

    Args:
        adjacency: Adjacency list indexed by node
        source: Index of the source node

    Returns:
        node index -> dependency of source on that node (source itself excluded,
        zero entries omitted)
    """
    n = len(adjacency)
    stack = []
    predecessors: list[list[int]] = [[] for _ in range(n)]
    sigma = [0] * n
    dist = [-1] * n
    delta = [0.0] * n

    sigma[source] = 1
    dist[source] = 0

    queue = deque([source])
    while queue:
        v = queue.popleft()
        stack.append(v)

        for w in adjacency[v]:
            if dist[w] < 0:
                queue.append(w)
                dist[w] = dist[v] + 1

            if dist[w] == dist[v] + 1:
                sigma[w] += sigma[v]
                predecessors[w].append(v)

    contributions = {}
    while stack:
        w = stack.pop()
        for v in predecessors[w]:
            delta[v] += (sigma[v] / sigma[w]) * (1 + delta[w])
        if w != source and delta[w] > 0:
            contributions[w] = delta[w]

    return contributions


def reduce_dependencies(partials: Iterable[Mapping[int, float]], n: int) -> list[float]:
    """Sum per-source dependency maps into raw betweenness per node"""
    totals = [0.0] * n
    for partial_map in partials:
        for node, value in partial_map.items():
            totals[node] += value
    return totals


def calculate_betweenness_centrality(
    matrix: CorrelationMatrix,
    threshold: float = 0.5,
    executor: Optional[Executor] = None,
) -> dict[str, float]:
    """
    Calculate normalized betweenness centrality of the thresholded network

    Raw values are divided by (n-1)(n-2)/2. With fewer than three nodes no
    node can lie between two others and every value is 0.

    Args:
        matrix: Correlation matrix
        threshold: Minimum absolute correlation for a connection
        executor: Optional executor to run the per-source traversals on

    Returns:
        symbol -> non-negative betweenness
    """
    n = matrix.size
    if n < 3:
        return {symbol: 0.0 for symbol in matrix.symbols}

    adjacency = build_adjacency(matrix, threshold)
    per_source = partial(single_source_dependencies, adjacency)

    if executor is None:
        partials = map(per_source, range(n))
    else:
        partials = executor.map(per_source, range(n))

    raw = reduce_dependencies(partials, n)

    normalization_factor = (n - 1) * (n - 2) / 2
    betweenness = {
        symbol: raw[idx] / normalization_factor
        for idx, symbol in enumerate(matrix.symbols)
    }

    logger.debug(
        "Betweenness centrality calculated",
        nodes=n,
        threshold=threshold,
        parallel=executor is not None,
    )

    return betweenness


def make_label(symbol: str, suffixes: Sequence[str] = DEFAULT_LABEL_SUFFIXES) -> str:
    """Display label: symbol without its exchange suffix"""
    for suffix in suffixes:
        if suffix and symbol.endswith(suffix):
            return symbol[:-len(suffix)]
    return symbol


def build_network_graph(
    matrix: CorrelationMatrix,
    threshold: float = 0.5,
    sector_lookup: Optional[Mapping[str, str]] = None,
    executor: Optional[Executor] = None,
    label_suffixes: Sequence[str] = DEFAULT_LABEL_SUFFIXES,
) -> NetworkGraph:
    """
    Build the thresholded correlation network

    Args:
        matrix: Correlation matrix
        threshold: Minimum absolute correlation for an edge
        sector_lookup: Optional symbol -> sector tags for nodes
        executor: Optional executor for the betweenness traversals
        label_suffixes: Exchange suffixes stripped from node labels

    Returns:
        NetworkGraph with one node per symbol and one edge per qualifying pair
    """
    degree_centrality = calculate_degree_centrality(matrix, threshold)
    betweenness_centrality = calculate_betweenness_centrality(matrix, threshold, executor)
    sectors = sector_lookup or {}

    nodes = [
        NetworkNode(
            id=symbol,
            label=make_label(symbol, label_suffixes),
            degree=degree_centrality.get(symbol, 0),
            betweenness=betweenness_centrality.get(symbol, 0.0),
            sector=sectors.get(symbol),
        )
        for symbol in matrix.symbols
    ]

    edges = []
    n = matrix.size
    for i in range(n):
        for j in range(i + 1, n):
            correlation = matrix.matrix[i][j]
            if abs(correlation) >= threshold:
                edges.append(NetworkEdge(
                    source=matrix.symbols[i],
                    target=matrix.symbols[j],
                    weight=abs(correlation),
                    correlation=correlation,
                ))

    logger.debug("Network graph built", nodes=len(nodes), edges=len(edges), threshold=threshold)

    return NetworkGraph(nodes=nodes, edges=edges, threshold=threshold)


def get_top_bridge_nodes(graph: NetworkGraph, top_n: int = 10) -> list[NetworkNode]:
    """
    Rank nodes by betweenness, highest first

    Args:
        graph: Network graph
        top_n: Number of nodes to return

    Returns:
        Bridge candidates; ties keep node order
    """
    ranked = sorted(graph.nodes, key=lambda node: node.betweenness, reverse=True)
    return ranked[:max(top_n, 0)]
