"""Schema tree model for EDI message navigation.

A schema tree is the static template of a message format: which segments may
appear, and how loops and composites nest them. Nodes are built once when the
schema is loaded and are read-only afterwards, so a single tree can back any
number of concurrent parses.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Optional, Union


class StructuralError(Exception):
    """Raised when the schema tree is malformed or misused.

    These are data-integrity errors and are never recovered from locally.
    """

    def __init__(self, message: str, node_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.node_name = node_name


class NodeKind(Enum):
    """Structural kind of a schema node.

    Values are the conventional EDI grammar prefixes.
    """

    TOKEN = "S"       # Segment: a concrete, matchable unit of input
    GROUP = "G"       # Repeatable loop opened by its trigger segment
    CONTAINER = "M"   # Plain composite (message, transaction set)
    UNIT = "U"        # Composite that may be escaped once exhausted
    WILDCARD = "A"    # Unconstrained fallback, e.g. "all" sequences

    @classmethod
    def parse(cls, value: Union[str, "NodeKind"]) -> "NodeKind":
        """Resolve a kind from either its member name or its prefix.

        Raises:
            StructuralError: If the value names no known kind
        """
        if isinstance(value, cls):
            return value

        text = str(value).strip()
        try:
            return cls(text.upper())
        except ValueError:
            pass
        try:
            return cls[text.upper()]
        except KeyError:
            raise StructuralError(f"Unsupported node kind: {value!r}") from None


@dataclass(eq=False)
class SchemaNode:
    """A node in the schema tree.

    Nodes compare and hash by identity, which lets traversal keep per-call
    visited sets without putting any state on the shared tree.
    """

    name: str
    kind: NodeKind
    wire_name: Optional[str] = None
    children: List["SchemaNode"] = field(default_factory=list)
    parent: Optional["SchemaNode"] = field(default=None, repr=False)
    is_trigger: bool = False
    first_qualifier_values: FrozenSet[str] = frozenset()
    second_qualifier_values: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate node values and establish parent-child relationships."""
        if not self.name:
            raise ValueError("Node name cannot be empty")
        if isinstance(self.kind, str):
            self.kind = NodeKind.parse(self.kind)
        if self.wire_name is None:
            self.wire_name = self.name
        self.first_qualifier_values = frozenset(self.first_qualifier_values)
        self.second_qualifier_values = frozenset(self.second_qualifier_values)

        for child in self.children:
            child.parent = self

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_token(self) -> bool:
        return self.kind is NodeKind.TOKEN

    @property
    def depth(self) -> int:
        """Number of ancestors above this node (root is 0)."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    def add_child(self, child: "SchemaNode") -> "SchemaNode":
        """Append a child during schema construction and return it."""
        if not isinstance(child, SchemaNode):
            raise TypeError("Child must be a SchemaNode instance")

        child.parent = self
        self.children.append(child)
        return child

    def add_children(self, children: Iterable["SchemaNode"]) -> None:
        for child in children:
            self.add_child(child)

    def iter_descendants(self) -> Iterator["SchemaNode"]:
        """Yield this node and every node beneath it, pre-order, in declaration order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, name: str) -> Optional["SchemaNode"]:
        """Find the node with the given unique name in this subtree."""
        for node in self.iter_descendants():
            if node.name == name:
                return node
        return None

    def first_token(self) -> Optional["SchemaNode"]:
        """First segment node of this subtree in declaration order."""
        for node in self.iter_descendants():
            if node.kind is NodeKind.TOKEN:
                return node
        return None

    def get_path(self) -> str:
        """Slash-separated names from the root down to this node."""
        names = []
        current: Optional[SchemaNode] = self
        while current is not None:
            names.append(current.name)
            current = current.parent
        return "/" + "/".join(reversed(names))

    def __repr__(self) -> str:
        return f"SchemaNode({self.kind.name if isinstance(self.kind, NodeKind) else self.kind}:{self.name})"
