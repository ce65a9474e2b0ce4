"""EDI Navigator.

Places a flat stream of EDI segments into a hierarchical document by walking
a static schema tree that declares how segments nest into loops and
composites.

Progressive API Disclosure:
- Level 1: Core functions - enumerate_token_nodes(), matches(), resolve_anchor()
- Level 2: Driver step - SegmentNavigator with NavigatorConfig
"""

__version__ = "0.1.0"
__author__ = "EDI Navigator Team"

from .navigation import (
    NavigationResult,
    SegmentNavigator,
    TokenIdentity,
    TokenNodeEnumerator,
    ancestor_chain,
    enumerate_token_nodes,
    matches,
    resolve_anchor,
    to_xml,
)
from .schema import (
    NodeKind,
    SchemaDefinitionError,
    SchemaNode,
    StructuralError,
    build_schema,
    load_schema,
)
from .shared.config import NavigatorConfig

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Schema model
    "NodeKind",
    "SchemaNode",
    "StructuralError",
    "SchemaDefinitionError",
    "build_schema",
    "load_schema",

    # Level 1: Core navigation functions
    "ancestor_chain",
    "enumerate_token_nodes",
    "TokenNodeEnumerator",
    "TokenIdentity",
    "matches",
    "resolve_anchor",
    "to_xml",

    # Level 2: Driver step
    "SegmentNavigator",
    "NavigationResult",
    "NavigatorConfig",
]
