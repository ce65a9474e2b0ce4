"""Diagnostic and metric types for schema-tree navigation.

These objects are attached to every navigation step so callers can inspect
what the enumerator examined and why a segment was or was not placed.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    DEBUG = auto()      # Traversal detail
    INFO = auto()       # Informational messages
    WARNING = auto()    # Suspicious but usable outcome
    ERROR = auto()      # Segment could not be placed
    CRITICAL = auto()   # Schema integrity problem


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")


@dataclass
class NavigationMetrics:
    """Counters collected while resolving a single segment."""

    processing_time_ms: float = 0.0
    candidates_examined: int = 0
    nodes_visited: int = 0

    @property
    def candidates_per_second(self) -> float:
        """Calculate candidate token nodes examined per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.candidates_examined * 1000.0) / self.processing_time_ms

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processing_time_ms": self.processing_time_ms,
            "candidates_examined": self.candidates_examined,
            "nodes_visited": self.nodes_visited,
        }
