"""Community grouping over the correlation network"""

from collections import Counter

from ..errors import ConfigurationError
from ..models.network import NetworkGraph


def one_hop_communities(graph: NetworkGraph) -> dict[str, int]:
    """
    Group nodes by one-hop absorption

    Nodes are visited in order; every unvisited node opens a new community
    and pulls in its unvisited direct neighbours. Neighbours of neighbours
    are not followed, so this is an approximation of connected clusters,
    not a modularity-optimal partition.

    Args:
        graph: Network graph

    Returns:
        symbol -> community id (0-based, in order of creation)
    """
    communities = {}
    community_id = 0

    for node in graph.nodes:
        if node.id in communities:
            continue

        communities[node.id] = community_id
        for neighbor in graph.neighbors(node.id):
            if neighbor not in communities:
                communities[neighbor] = community_id

        community_id += 1

    return communities


def label_propagation_communities(graph: NetworkGraph, max_iterations: int = 100) -> dict[str, int]:
    """
    Group nodes by asynchronous label propagation

    Every node starts with its own label and repeatedly adopts the label
    carried by most of its neighbours. Ties go to the smallest label, i.e.
    the one seeded earliest in node order, which keeps the result
    deterministic. Stops once no label
    changes or after max_iterations sweeps.

    Args:
        graph: Network graph
        max_iterations: Upper bound on sweeps over the nodes

    Returns:
        symbol -> community id, renumbered 0.. in node order
    """
    order = {node.id: idx for idx, node in enumerate(graph.nodes)}
    adjacency = {node.id: graph.neighbors(node.id) for node in graph.nodes}
    labels = dict(order)

    for _ in range(max_iterations):
        changed = False
        for node in graph.nodes:
            neighbors = adjacency[node.id]
            if not neighbors:
                continue

            counts = Counter(labels[neighbor] for neighbor in neighbors)
            best_count = max(counts.values())
            best_label = min(label for label, count in counts.items() if count == best_count)

            # Keep the current label when it is already among the best
            if counts.get(labels[node.id], 0) == best_count:
                continue

            labels[node.id] = best_label
            changed = True

        if not changed:
            break

    renumbered: dict[int, int] = {}
    communities = {}
    for node in graph.nodes:
        label = labels[node.id]
        if label not in renumbered:
            renumbered[label] = len(renumbered)
        communities[node.id] = renumbered[label]

    return communities


_METHODS = {
    "one_hop": one_hop_communities,
    "label_propagation": label_propagation_communities,
}


def detect_communities(graph: NetworkGraph, method: str = "one_hop") -> dict[str, int]:
    """
    Partition the network into communities

    Args:
        graph: Network graph
        method: "one_hop" (default) or "label_propagation"

    Returns:
        symbol -> community id

    Raises:
        ConfigurationError: If the method is unknown
    """
    try:
        detector = _METHODS[method]
    except KeyError:
        raise ConfigurationError(
            f"Unknown community detection method: {method}",
            context={"available": sorted(_METHODS)},
        ) from None

    return detector(graph)
