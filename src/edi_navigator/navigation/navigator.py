"""Segment navigator: one driver step per input segment.

The navigator remembers the last matched segment node. For each incoming
segment identity it enumerates candidates from that position, takes the first
one that matches, and reports the anchor path the output document builder
should open before attaching the segment. It never touches the output
document itself.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from lxml import etree

from edi_navigator.navigation.anchor import resolve_anchor
from edi_navigator.navigation.chains import iter_parents
from edi_navigator.navigation.identity import TokenIdentity, matches
from edi_navigator.navigation.serialization import path_to_xml
from edi_navigator.navigation.traversal import TokenNodeEnumerator, enumerate_token_nodes
from edi_navigator.schema.model import SchemaNode, StructuralError
from edi_navigator.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    NavigationMetrics,
    NavigatorConfig,
    get_logger,
)


@dataclass
class NavigationResult:
    """Outcome of placing one input segment."""

    identity: TokenIdentity
    success: bool = False
    node: Optional[SchemaNode] = None
    path: List[SchemaNode] = field(default_factory=list)
    candidates_examined: int = 0

    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    metrics: NavigationMetrics = field(default_factory=NavigationMetrics)
    correlation_id: Optional[str] = None

    @property
    def path_names(self) -> List[str]:
        return [node.name for node in self.path]

    @property
    def opened_containers(self) -> List[SchemaNode]:
        """Containers to instantiate before attaching the segment."""
        return self.path[:-1]

    def add_diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        component: str,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Add diagnostic entry to result."""
        entry = DiagnosticEntry(
            severity=severity,
            message=message,
            component=component,
            details=details,
            correlation_id=self.correlation_id
        )
        self.diagnostics.append(entry)

    def has_errors(self) -> bool:
        return any(
            diag.severity in (DiagnosticSeverity.ERROR, DiagnosticSeverity.CRITICAL)
            for diag in self.diagnostics
        )

    def summary(self) -> Dict[str, Any]:
        return {
            "segment": str(self.identity),
            "success": self.success,
            "node": self.node.name if self.node else None,
            "path": self.path_names,
            "candidates_examined": self.candidates_examined,
            "diagnostics": [
                {"severity": d.severity.name, "message": d.message}
                for d in self.diagnostics
            ],
            "metrics": self.metrics.to_dict(),
        }


class SegmentNavigator:
    """Places a flat sequence of segments against a shared schema tree.

    One navigator serves one parse; the schema tree may be shared by any
    number of navigators.
    """

    def __init__(
        self,
        schema_root: SchemaNode,
        config: Optional[NavigatorConfig] = None,
        start: Optional[SchemaNode] = None,
    ) -> None:
        """Initialize navigator.

        Args:
            schema_root: Root of the schema tree
            config: Navigation configuration, defaults to NavigatorConfig()
            start: Initial position; defaults to the first segment of the schema

        Raises:
            StructuralError: If no start segment can be determined, or the given
                start is not a segment of this schema
        """
        self.schema_root = schema_root
        self.config = config or NavigatorConfig()
        self.correlation_id = self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "segment_navigator")
        self._level = getattr(logging, self.config.logging_level)

        self._position = self._initial_position(start)

        if self._emits(logging.INFO):
            self.logger.info(
                "Navigator ready",
                extra={"schema_root": schema_root.name, "position": self._position.name},
            )

    @property
    def position(self) -> SchemaNode:
        """Last matched segment node."""
        return self._position

    def reset(self, start: Optional[SchemaNode] = None) -> None:
        """Move back to the initial position, e.g. at a message boundary."""
        self._position = self._initial_position(start)
        if self._emits(logging.DEBUG):
            self.logger.debug("Navigator reset", extra={"position": self._position.name})

    def candidates(self) -> TokenNodeEnumerator:
        """Fresh candidate enumeration from the current position."""
        return enumerate_token_nodes(self._position)

    def advance(self, identity: TokenIdentity) -> NavigationResult:
        """Place one input segment.

        On success the position moves to the matched node. When no candidate
        matches, the result is unsuccessful and the position is unchanged.

        Raises:
            StructuralError: If the schema tree turns out to be malformed
        """
        start_time = time.time()
        result = NavigationResult(identity=identity, correlation_id=self.correlation_id)
        limit = self.config.max_candidates
        trace = self.config.trace_candidates and self._emits(logging.DEBUG)

        try:
            enumerator = self.candidates()
            for candidate in enumerator:
                result.candidates_examined += 1
                if trace:
                    self.logger.debug(
                        "Testing candidate",
                        extra={"segment": str(identity), "candidate": candidate.name},
                    )

                if matches(candidate, identity):
                    result.success = True
                    result.node = candidate
                    result.path = resolve_anchor(candidate, self._position)
                    break

                if limit is not None and result.candidates_examined >= limit:
                    break
        except StructuralError:
            self.logger.exception(
                "Schema tree is malformed",
                extra={"segment": str(identity), "position": self._position.name},
            )
            raise

        if self.config.enable_metrics:
            result.metrics.processing_time_ms = (time.time() - start_time) * 1000
            result.metrics.candidates_examined = result.candidates_examined
            result.metrics.nodes_visited = enumerator.visited_count

        if result.success:
            if self._emits(logging.DEBUG):
                self.logger.debug(
                    "Segment placed",
                    extra={"segment": str(identity), "path": result.path_names},
                )
            self._position = result.node
        else:
            self._record_unexpected(result, limit)

        return result

    def path_elements(self, result: NavigationResult) -> List[etree._Element]:
        """Empty lxml elements for the result's path, in the target namespace."""
        return path_to_xml(result.path, self.config.target_namespace)

    def _emits(self, level: int) -> bool:
        """Records below the configured level are dropped for this navigator only."""
        return level >= self._level and self.logger.is_enabled_for(level)

    def _initial_position(self, start: Optional[SchemaNode]) -> SchemaNode:
        if start is not None:
            if not start.is_token:
                raise StructuralError(
                    f"Start position {start.name} is not a segment", node_name=start.name
                )
            if not any(parent is self.schema_root for parent in iter_parents(start)):
                raise StructuralError(
                    f"Start position {start.name} is not part of schema {self.schema_root.name}",
                    node_name=start.name,
                )
            return start

        first = self.schema_root.first_token()
        if first is None:
            raise StructuralError(
                f"Schema {self.schema_root.name} declares no segments",
                node_name=self.schema_root.name,
            )
        return first

    def _record_unexpected(self, result: NavigationResult, limit: Optional[int]) -> None:
        if self._emits(logging.WARNING):
            self.logger.warning(
                "Unexpected segment",
                extra={
                    "segment": str(result.identity),
                    "position": self._position.name,
                    "candidates_examined": result.candidates_examined,
                },
            )
        if not self.config.collect_diagnostics:
            return

        details: Dict[str, Any] = {
            "position": self._position.name,
            "candidates_examined": result.candidates_examined,
        }
        message = f"Unexpected segment {result.identity} after {self._position.name}"
        if limit is not None and result.candidates_examined >= limit:
            details["max_candidates"] = limit
            message += f" (stopped after {limit} candidates)"

        result.add_diagnostic(
            DiagnosticSeverity.ERROR,
            message,
            "segment_navigator",
            details=details,
        )
