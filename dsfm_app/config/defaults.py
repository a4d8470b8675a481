"""Default configuration parameters for the market structure analysis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CorrelationParams:
    """Correlation engine parameters."""
    min_observations: int = 1                       # Returns needed to enter the matrix
    top_pairs: int = 10                             # Pairs reported by the engine


@dataclass(frozen=True)
class NetworkParams:
    """Correlation network parameters."""
    threshold: float = 0.5                          # Min |correlation| for an edge
    community_method: str = "one_hop"               # one_hop | label_propagation
    label_suffixes: tuple = (".NS",)                # Exchange suffixes stripped from labels
    parallel_min_nodes: int = 64                    # Node count before an executor is used
    top_bridges: int = 20                           # Bridge nodes reported by the engine


@dataclass(frozen=True)
class ShockParams:
    """Shock propagation parameters."""
    centrality_scale: float = 100.0                 # Betweenness divisor in the amplifier
    centrality_offset: float = 1.0                  # Baseline amplifier
    materiality_floor: float = 0.01                 # Impact needed to count as affected
    default_magnitude: float = 5.0
    min_magnitude: float = 1.0
    max_magnitude: float = 15.0


@dataclass(frozen=True)
class ValidationParams:
    """Analysis output validation parameters."""
    min_returns: int = 10                           # Shorter series produce a warning
    max_length_spread: int = 5                      # Allowed max-min series length gap
    tolerance: float = 0.01                         # Diagonal/symmetry tolerance
    strong_correlation: float = 0.7                 # Reported strong |correlation| level


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    correlation: CorrelationParams
    network: NetworkParams
    shock: ShockParams
    validation: ValidationParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        correlation=CorrelationParams(),
        network=NetworkParams(),
        shock=ShockParams(),
        validation=ValidationParams(),
    )
