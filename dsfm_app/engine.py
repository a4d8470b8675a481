"""
Main analysis engine coordinator.

Orchestrates the market structure pipeline, coordinating return series
preparation, correlation, network construction, community grouping,
validation and shock simulation.
"""

import time
from concurrent.futures import Executor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

import structlog

from .analysis.communities import detect_communities
from .analysis.correlation import build_correlation_matrix, get_top_correlated_pairs
from .analysis.network import build_network_graph, get_top_bridge_nodes
from .analysis.shock import get_affected_sectors, simulate_shock
from .analysis.validation import ValidationReport, validate_analysis
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader, build_config
from .config.validation import ConfigValidator
from .data.models import ReturnSeries
from .data.returns import prepare_series
from .errors import (
    AnalysisCalculationError,
    ConfigurationError,
    DataQualityError,
    UsageError,
)
from .logging.config import get_analysis_logger, log_stage_complete
from .models.correlation import CorrelatedPair, CorrelationMatrix
from .models.network import NetworkGraph, NetworkNode
from .models.shock import SectorImpact, ShockSimulation

logger = structlog.get_logger(__name__)
analysis_logger = get_analysis_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis run produces"""
    series: tuple[ReturnSeries, ...]
    matrix: CorrelationMatrix
    graph: NetworkGraph
    communities: dict[str, int]
    bridges: tuple[NetworkNode, ...]
    top_pairs: tuple[CorrelatedPair, ...]
    validation: ValidationReport

    def to_dict(self) -> dict[str, Any]:
        return {
            "matrix": self.matrix.to_dict(),
            "graph": self.graph.to_dict(),
            "communities": dict(self.communities),
            "bridges": [node.to_dict() for node in self.bridges],
            "topPairs": [pair.to_dict() for pair in self.top_pairs],
            "validation": self.validation.to_dict(),
        }


class MarketStructureEngine:
    """
    Main coordinator for the market structure analysis.

    Manages the analysis pipeline:
    Return Series → Correlation Matrix → Network Graph → Shock Simulation
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        """
        Initialize the analysis engine.

        Args:
            config: Ready configuration; skips file loading when given
            config_dir: Directory holding analysis.yaml and sectors.yaml
            overrides: Per-run overrides merged over analysis.yaml
            executor: Optional executor for betweenness on large networks

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.logger = logger
        self.analysis_logger = analysis_logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config = config or self._load_config(overrides)
        self.sector_map = self.config_loader.load_sector_map()
        self.executor = executor

        self.logger.info(
            "Market structure engine initialized",
            threshold=self.config.network.threshold,
            community_method=self.config.network.community_method,
            sectors=len(self.sector_map),
        )

    def _load_config(self, overrides: Optional[dict[str, Any]]) -> DefaultConfig:
        merged = self.config_loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid analysis configuration", errors=error_msgs)

        return build_config(merged)

    def analyze(
        self,
        series_list: Iterable[Union[ReturnSeries, Mapping[str, Any]]],
        threshold: Optional[float] = None,
        sector_lookup: Optional[Mapping[str, str]] = None,
    ) -> AnalysisResult:
        """
        Run the full pipeline on a snapshot of return series.

        Args:
            series_list: ReturnSeries objects or {"symbol", "returns"} mappings
            threshold: Edge threshold; defaults to the configured one
            sector_lookup: symbol -> sector; defaults to sectors.yaml

        Returns:
            AnalysisResult with matrix, graph and derived rankings

        Raises:
            DataQualityError: If the input series are malformed
            AnalysisCalculationError: If a pipeline stage fails unexpectedly
        """
        threshold = self.config.network.threshold if threshold is None else threshold
        sectors = self.sector_map if sector_lookup is None else sector_lookup

        series = self._run_stage(
            "prepare",
            lambda: prepare_series(series_list, self.config.correlation.min_observations),
        )
        if len(series) < 2:
            self.analysis_logger.warning(
                "Fewer than two usable series, network will have no edges",
                available_count=len(series),
            )

        matrix = self._run_stage(
            "correlation",
            lambda: build_correlation_matrix(series),
            {"instruments": len(series)},
        )

        executor = self.executor if len(series) >= self.config.network.parallel_min_nodes else None
        graph = self._run_stage(
            "network",
            lambda: build_network_graph(
                matrix,
                threshold,
                sectors,
                executor=executor,
                label_suffixes=self.config.network.label_suffixes,
            ),
            {"threshold": threshold, "parallel": executor is not None},
        )

        communities = self._run_stage(
            "communities",
            lambda: detect_communities(graph, self.config.network.community_method),
            {"method": self.config.network.community_method},
        )

        validation = self._run_stage(
            "validation",
            lambda: validate_analysis(series, matrix, graph, self.config.validation),
        )
        for warning in validation.warnings:
            self.analysis_logger.warning("Analysis validation warning", detail=warning)
        for issue in validation.issues:
            self.analysis_logger.error("Analysis validation issue", detail=issue)

        return AnalysisResult(
            series=tuple(series),
            matrix=matrix,
            graph=graph,
            communities=communities,
            bridges=tuple(get_top_bridge_nodes(graph, self.config.network.top_bridges)),
            top_pairs=tuple(get_top_correlated_pairs(matrix, self.config.correlation.top_pairs)),
            validation=validation,
        )

    def simulate(
        self,
        result: AnalysisResult,
        shock_symbol: str,
        magnitude: Optional[float] = None,
    ) -> ShockSimulation:
        """
        Simulate a shock on one instrument of a finished analysis.

        Raises:
            UnknownSymbolError: If shock_symbol was not part of the analysis
        """
        params = self.config.shock
        magnitude = params.default_magnitude if magnitude is None else magnitude

        if not params.min_magnitude <= magnitude <= params.max_magnitude:
            self.analysis_logger.warning(
                "Shock magnitude outside configured range",
                magnitude=magnitude,
                min_magnitude=params.min_magnitude,
                max_magnitude=params.max_magnitude,
            )

        return self._run_stage(
            "shock",
            lambda: simulate_shock(shock_symbol, magnitude, result.matrix, result.graph, params),
            {"shock_symbol": shock_symbol, "magnitude": magnitude},
        )

    def affected_sectors(
        self,
        simulation: ShockSimulation,
        sector_lookup: Optional[Mapping[str, str]] = None,
    ) -> list[SectorImpact]:
        """Aggregate a simulation by sector, using sectors.yaml by default."""
        sectors = self.sector_map if sector_lookup is None else sector_lookup
        return get_affected_sectors(simulation, sectors)

    def _run_stage(self, stage: str, func, context: Optional[dict[str, Any]] = None):
        """Run one pipeline stage with timing and error classification."""
        started = time.perf_counter()
        try:
            outcome = func()
        except (DataQualityError, UsageError, ConfigurationError, AnalysisCalculationError):
            # Re-raise known error types
            raise
        except Exception as e:
            self.analysis_logger.error("Stage failed", stage=stage, error=str(e))
            raise AnalysisCalculationError(
                f"{stage} stage failed: {str(e)}",
                stage=stage,
                calculation_input=context,
            ) from e

        log_stage_complete(
            self.analysis_logger,
            stage,
            (time.perf_counter() - started) * 1000,
            context,
        )
        return outcome
