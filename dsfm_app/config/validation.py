"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

COMMUNITY_METHODS = ("one_hop", "label_propagation")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_correlation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate correlation parameters."""
        errors = []

        if "min_observations" in params:
            value = params["min_observations"]
            if not _is_int(value) or value < 1:
                errors.append(ValidationError(
                    field="min_observations",
                    message="Must be an integer of at least 1",
                    value=value
                ))

        if "top_pairs" in params:
            value = params["top_pairs"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="top_pairs",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_network_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate network parameters."""
        errors = []

        if "threshold" in params:
            value = params["threshold"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="threshold",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        if "community_method" in params:
            value = params["community_method"]
            if value not in COMMUNITY_METHODS:
                errors.append(ValidationError(
                    field="community_method",
                    message=f"Must be one of {', '.join(COMMUNITY_METHODS)}",
                    value=value
                ))

        if "label_suffixes" in params:
            value = params["label_suffixes"]
            if not isinstance(value, (list, tuple)) or not all(isinstance(s, str) for s in value):
                errors.append(ValidationError(
                    field="label_suffixes",
                    message="Must be a list of strings",
                    value=value
                ))

        if "parallel_min_nodes" in params:
            value = params["parallel_min_nodes"]
            if not _is_int(value) or value < 1:
                errors.append(ValidationError(
                    field="parallel_min_nodes",
                    message="Must be a positive integer",
                    value=value
                ))

        if "top_bridges" in params:
            value = params["top_bridges"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="top_bridges",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_shock_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate shock propagation parameters."""
        errors = []

        if "centrality_scale" in params:
            value = params["centrality_scale"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="centrality_scale",
                    message="Must be a positive number",
                    value=value
                ))

        if "centrality_offset" in params:
            value = params["centrality_offset"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="centrality_offset",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "materiality_floor" in params:
            value = params["materiality_floor"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="materiality_floor",
                    message="Must be a non-negative number",
                    value=value
                ))

        min_magnitude = params.get("min_magnitude", 1.0)
        max_magnitude = params.get("max_magnitude", 15.0)
        for name in ("min_magnitude", "max_magnitude"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        if _is_number(min_magnitude) and _is_number(max_magnitude) and min_magnitude > max_magnitude:
            errors.append(ValidationError(
                field="min_magnitude",
                message="Must not exceed max_magnitude",
                value=min_magnitude
            ))

        if "default_magnitude" in params:
            value = params["default_magnitude"]
            if not _is_number(value):
                errors.append(ValidationError(
                    field="default_magnitude",
                    message="Must be a number",
                    value=value
                ))
            elif _is_number(min_magnitude) and _is_number(max_magnitude) and not (
                min_magnitude <= value <= max_magnitude
            ):
                errors.append(ValidationError(
                    field="default_magnitude",
                    message="Must lie between min_magnitude and max_magnitude",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_validation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output validation parameters."""
        errors = []

        for name in ("min_returns", "max_length_spread"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        if "tolerance" in params:
            value = params["tolerance"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="tolerance",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "strong_correlation" in params:
            value = params["strong_correlation"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="strong_correlation",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        section_validators = {
            "correlation": ConfigValidator.validate_correlation_params,
            "network": ConfigValidator.validate_network_params,
            "shock": ConfigValidator.validate_shock_params,
            "validation": ConfigValidator.validate_validation_params,
        }

        for section, validator in section_validators.items():
            if section not in config:
                continue

            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of parameters",
                    value=params
                ))
                continue

            errors.extend(validator(params))

        return errors
