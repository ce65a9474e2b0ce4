"""Navigation engine for placing flat segment streams in a schema tree.

Key Components:
    ancestor_chain: Root-to-node path used as the exploration boundary
    neighbours: Kind-dependent adjacency rule
    TokenNodeEnumerator: Lazy depth-first enumeration of candidate segments
    matches: Segment identity comparison against a schema segment node
    resolve_anchor: Containers to open when attaching a newly matched segment
    SegmentNavigator: One driver step per input segment
"""

from .anchor import resolve_anchor
from .chains import (
    ancestor_chain,
    child_index_continuing_chain,
    children_after_exclusion,
    iter_parents,
)
from .identity import TokenIdentity, matches
from .navigator import NavigationResult, SegmentNavigator
from .neighbours import neighbours
from .serialization import path_to_xml, to_xml
from .traversal import TokenNodeEnumerator, enumerate_token_nodes

__all__ = [
    "ancestor_chain",
    "child_index_continuing_chain",
    "children_after_exclusion",
    "iter_parents",
    "neighbours",
    "TokenNodeEnumerator",
    "enumerate_token_nodes",
    "TokenIdentity",
    "matches",
    "resolve_anchor",
    "NavigationResult",
    "SegmentNavigator",
    "to_xml",
    "path_to_xml",
]
