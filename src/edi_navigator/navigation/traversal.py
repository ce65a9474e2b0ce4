"""Depth-first enumeration of candidate segment nodes.

Starting from the last matched segment, the enumerator walks the schema tree
with an explicit stack, following the neighbour rule, and yields every segment
node it reaches exactly once. Candidates therefore come out in the order a
parser should try them for the next input segment.
"""

from typing import Iterator, List, Set

from edi_navigator.navigation.chains import ancestor_chain
from edi_navigator.navigation.neighbours import neighbours
from edi_navigator.schema.model import NodeKind, SchemaNode


class TokenNodeEnumerator:
    """Lazy, single-pass iterator over reachable segment nodes.

    All traversal state lives on the iterator, so it can be drained partially
    and dropped at any point. The ancestor chain of the start node is computed
    on construction and never changes afterwards.
    """

    def __init__(self, start: SchemaNode) -> None:
        self.start = start
        self.chain: List[SchemaNode] = ancestor_chain(start)
        self._visited: Set[SchemaNode] = set()
        self._stack: List[SchemaNode] = [start]

    @property
    def visited_count(self) -> int:
        """Number of schema nodes popped and expanded so far."""
        return len(self._visited)

    @property
    def exhausted(self) -> bool:
        return not self._stack

    def __iter__(self) -> Iterator[SchemaNode]:
        return self

    def __next__(self) -> SchemaNode:
        while self._stack:
            current = self._stack.pop()
            if current in self._visited:
                continue
            self._visited.add(current)

            # Segments are expanded as well, so a walk seeded at a segment
            # continues upward through its parent.
            pending = [
                n for n in neighbours(current, self.chain) if n not in self._visited
            ]
            self._stack.extend(reversed(pending))

            if current.kind is NodeKind.TOKEN:
                return current

        raise StopIteration


def enumerate_token_nodes(start: SchemaNode) -> TokenNodeEnumerator:
    """Enumerate segment nodes reachable from ``start`` in match-priority order."""
    return TokenNodeEnumerator(start)
