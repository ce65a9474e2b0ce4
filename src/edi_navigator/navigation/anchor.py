"""Anchor resolution between consecutive matched segments.

Given the previously matched segment and the newly matched one, the anchor
path lists the containers that must be opened in the output document,
outermost first, followed by the new segment itself. Containers shared with
the previous segment stay open and are not part of the path.
"""

from typing import List

from edi_navigator.navigation.chains import iter_parents
from edi_navigator.schema.model import NodeKind, SchemaNode, StructuralError


def resolve_anchor(new_node: SchemaNode, previous_node: SchemaNode) -> List[SchemaNode]:
    """Compute the attachment path for ``new_node``.

    The pivot is the nearest parent of ``new_node`` whose name also appears
    among the parents of ``previous_node``. A trigger segment whose parent is
    already the pivot still reopens that parent, starting a new loop
    iteration.

    Raises:
        StructuralError: If ``new_node`` is not a segment or the two nodes
            share no ancestor
    """
    if new_node.kind is not NodeKind.TOKEN:
        raise StructuralError(f"Not a segment {new_node.name}", node_name=new_node.name)

    previous_names = {parent.name for parent in iter_parents(previous_node)}
    parents = list(iter_parents(new_node))

    pivot_name = next((p.name for p in parents if p.name in previous_names), None)
    if pivot_name is None:
        raise StructuralError(
            f"{new_node.name} and {previous_node.name} share no common ancestor",
            node_name=new_node.name,
        )

    result: List[SchemaNode] = []
    for parent in parents:
        if parent.name == pivot_name:
            break
        result.append(parent)
    result.reverse()

    if not result and new_node.is_trigger:
        result.append(new_node.parent)

    result.append(new_node)
    return result
