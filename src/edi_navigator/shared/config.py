"""Configuration for schema-tree navigation.

This module provides the immutable configuration object consumed by
:class:`~edi_navigator.navigation.navigator.SegmentNavigator`.
"""

import json
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Optional

VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class NavigatorConfig:
    """Configuration for segment navigation.

    Thread-safe due to frozen dataclass implementation, so one instance can be
    shared by navigators running on separate threads.
    """

    # Upper bound on candidate token nodes tested per segment (None = unbounded)
    max_candidates: Optional[int] = None

    # Diagnostics and logging
    trace_candidates: bool = False
    collect_diagnostics: bool = True
    enable_metrics: bool = True
    logging_level: str = "INFO"
    correlation_id: Optional[str] = None

    # Namespace applied when schema nodes are converted to XML elements
    target_namespace: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate navigator configuration."""
        if self.max_candidates is not None and self.max_candidates <= 0:
            raise ConfigValidationError(
                "max_candidates must be > 0 or None",
                field_name="max_candidates",
                suggestions=["Use None to examine every reachable candidate"],
            )
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {VALID_LOGGING_LEVELS}",
                field_name="logging_level",
            )
        if self.target_namespace is not None and not self.target_namespace.strip():
            raise ConfigValidationError(
                "target_namespace cannot be blank",
                field_name="target_namespace",
                suggestions=["Use None for unqualified element names"],
            )

    def override(self, **kwargs: Any) -> "NavigatorConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = NavigatorConfig()
            >>> config.override(max_candidates=50).max_candidates
            50
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {unknown}",
                field_name=unknown[0],
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NavigatorConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected rather than silently dropped.
        """
        return cls().override(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "NavigatorConfig":
        """Create configuration from JSON string."""
        data = json.loads(json_str)
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def default(cls) -> "NavigatorConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def tracing(cls) -> "NavigatorConfig":
        """Create configuration that logs every candidate examined."""
        return cls(trace_candidates=True, logging_level="DEBUG")

    @classmethod
    def minimal(cls) -> "NavigatorConfig":
        """Create configuration with diagnostics and metrics switched off."""
        return cls(
            collect_diagnostics=False,
            enable_metrics=False,
            logging_level="WARNING",
        )
