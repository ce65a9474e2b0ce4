"""Schema tree model and loaders.

Key Components:
    SchemaNode: Immutable-after-build node with kind, children and parent link
    NodeKind: Closed set of structural kinds driving traversal policy
    build_schema / load_schema: Construct trees from mapping or JSON definitions
"""

from .loader import (
    SchemaDefinitionError,
    build_schema,
    load_schema,
    schema_to_dict,
)
from .model import (
    NodeKind,
    SchemaNode,
    StructuralError,
)

__all__ = [
    "NodeKind",
    "SchemaNode",
    "StructuralError",
    "SchemaDefinitionError",
    "build_schema",
    "load_schema",
    "schema_to_dict",
]
