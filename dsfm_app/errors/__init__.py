"""
Error classification system for the market structure analysis core.

This module provides the exception hierarchy for data quality problems,
pipeline failures and API misuse.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    AnalysisCalculationError,
    ConfigurationError,
)
from .usage import (
    UsageError,
    UnknownSymbolError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "AnalysisCalculationError",
    "ConfigurationError",
    # API Misuse
    "UsageError",
    "UnknownSymbolError",
]
