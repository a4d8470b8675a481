"""
Logging configuration and utilities for the DSFM analysis core.
"""
from .config import configure_logging, get_analysis_logger, get_logger, log_stage_complete

__all__ = ["configure_logging", "get_logger", "get_analysis_logger", "log_stage_complete"]
