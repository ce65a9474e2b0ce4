"""Shared utilities for schema-tree navigation.

This module provides configuration, result types, and logging helpers used
across the schema and navigation layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    NavigatorConfig,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
    NavigationMetrics,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "NavigatorConfig",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "NavigationMetrics",
]
