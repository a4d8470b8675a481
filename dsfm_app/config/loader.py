"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    CorrelationParams,
    DefaultConfig,
    NetworkParams,
    ShockParams,
    ValidationParams,
    get_default_config,
)

_SECTION_TYPES = {
    "correlation": CorrelationParams,
    "network": NetworkParams,
    "shock": ShockParams,
    "validation": ValidationParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_analysis_config(self) -> dict[str, Any]:
        """Load file-level overrides from analysis.yaml."""
        return self._load_yaml("analysis.yaml")

    def load_sector_map(self) -> dict[str, str]:
        """Load the symbol -> sector mapping from sectors.yaml."""
        sectors_config = self._load_yaml("sectors.yaml")
        sectors = sectors_config.get("sectors") or {}
        return {str(symbol): str(sector) for symbol, sector in sectors.items()}

    def merge_config(self, run_overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-run overrides (highest priority)
        2. analysis.yaml overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_analysis_config())

        if run_overrides:
            config = self._deep_merge(config, run_overrides)

        return config

    def load(self, run_overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge all tiers and return a typed configuration."""
        return build_config(self.merge_config(run_overrides))

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self.config_dir / filename

        if not path.exists():
            return {}

        with open(path) as f:
            loaded = yaml.safe_load(f)

        return loaded or {}

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> DefaultConfig:
    """Build a typed DefaultConfig from a merged configuration dict.

    Unknown keys are ignored; missing keys keep their defaults.
    """
    sections = {}
    for section, params_type in _SECTION_TYPES.items():
        values = config.get(section) or {}
        known = {f.name for f in fields(params_type)}
        kwargs = {key: value for key, value in values.items() if key in known}
        if "label_suffixes" in kwargs:
            kwargs["label_suffixes"] = tuple(kwargs["label_suffixes"])
        sections[section] = params_type(**kwargs)

    return DefaultConfig(**sections)
