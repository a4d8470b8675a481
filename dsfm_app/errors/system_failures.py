"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures inside the analysis pipeline itself or
in its configuration, which retrying with the same inputs cannot fix.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class AnalysisCalculationError(SystemFailureError):
    """Critical error in one of the pipeline stages."""

    def __init__(self, message: str, stage: Optional[str] = None,
                 calculation_input: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.stage = stage
        self.calculation_input = calculation_input


class ConfigurationError(SystemFailureError):
    """Configuration values that cannot be used to run an analysis."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
