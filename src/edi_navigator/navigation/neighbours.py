"""Kind-dependent adjacency rule for schema traversal.

The order of the returned neighbours is the match priority of the
depth-first enumeration, so it must not be rearranged.

=========  ===============================================================
Kind       Neighbours
=========  ===============================================================
TOKEN      parent
GROUP      open children on the chain, first child, parent
CONTAINER  open children on the chain, or all children when none are open
UNIT       as CONTAINER, then parent
WILDCARD   all children, then parent
=========  ===============================================================
"""

from typing import List, Sequence

from edi_navigator.navigation.chains import children_after_exclusion
from edi_navigator.schema.model import NodeKind, SchemaNode, StructuralError


def neighbours(node: SchemaNode, chain: Sequence[SchemaNode]) -> List[SchemaNode]:
    """Nodes to explore after ``node``, given the start node's ancestor chain.

    The root has no parent, so no upward neighbour is produced for it.

    Raises:
        StructuralError: For an unsupported kind or a group with no children
    """
    result: List[SchemaNode] = []
    kind = node.kind

    if kind is NodeKind.TOKEN:
        _append_parent(result, node)

    elif kind is NodeKind.GROUP:
        if not node.children:
            raise StructuralError(f"Group {node.name} has no children", node_name=node.name)
        result.extend(children_after_exclusion(node, chain))
        result.append(node.children[0])
        _append_parent(result, node)

    elif kind is NodeKind.CONTAINER:
        result.extend(children_after_exclusion(node, chain))
        if not result:
            result.extend(node.children)

    elif kind is NodeKind.UNIT:
        result.extend(children_after_exclusion(node, chain))
        if not result:
            result.extend(node.children)
        _append_parent(result, node)

    elif kind is NodeKind.WILDCARD:
        result.extend(node.children)
        _append_parent(result, node)

    else:
        raise StructuralError(f"Unsupported node prefix: {kind}", node_name=node.name)

    return result


def _append_parent(result: List[SchemaNode], node: SchemaNode) -> None:
    if node.parent is not None:
        result.append(node.parent)
