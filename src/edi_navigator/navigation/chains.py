"""Ancestor-chain utilities.

An ancestor chain is the list of schema nodes from the root down to a node,
inclusive. During one traversal the chain of the start node doubles as the
record of what has already been explored: an ancestor on the chain only offers
children at or after the one the chain passes through.
"""

from typing import Iterator, List, Sequence

from edi_navigator.schema.model import SchemaNode, StructuralError


def _index_of(node: SchemaNode, nodes: Sequence[SchemaNode]) -> int:
    for index, candidate in enumerate(nodes):
        if candidate is node:
            return index
    return -1


def iter_parents(node: SchemaNode) -> Iterator[SchemaNode]:
    """Yield the parents of ``node``, nearest first, ending at the root.

    Raises:
        StructuralError: If the parent links loop back on themselves
    """
    seen = {id(node)}
    current = node.parent
    while current is not None:
        if id(current) in seen:
            raise StructuralError(
                f"Parent links of {node.name} form a cycle at {current.name}",
                node_name=node.name,
            )
        seen.add(id(current))
        yield current
        current = current.parent


def ancestor_chain(node: SchemaNode) -> List[SchemaNode]:
    """Return the nodes from the root down to ``node``, inclusive.

    Raises:
        StructuralError: If the reconstructed chain does not end at the
            node's parent
    """
    chain = list(iter_parents(node))
    chain.reverse()

    last = chain[-1] if chain else None
    if last is not node.parent:
        raise StructuralError("Incorrect parent collection.", node_name=node.name)

    chain.append(node)
    return chain


def child_index_continuing_chain(node: SchemaNode, chain: Sequence[SchemaNode]) -> int:
    """Index, within ``node.children``, of the chain element following ``node``.

    Raises:
        StructuralError: If ``node`` is not on the chain, is its last element,
            or the following element is not one of its children
    """
    index = _index_of(node, chain)
    if index == -1:
        raise StructuralError("Child is not part of the parents list.", node_name=node.name)
    if index + 1 == len(chain):
        raise StructuralError(
            "Child is in the last position in the parents list.", node_name=node.name
        )

    following = chain[index + 1]
    child_index = _index_of(following, node.children)
    if child_index == -1:
        raise StructuralError(
            f"{following.name} is on the chain below {node.name} but is not one of its children.",
            node_name=following.name,
        )
    return child_index


def children_after_exclusion(node: SchemaNode, chain: Sequence[SchemaNode]) -> List[SchemaNode]:
    """Children of ``node`` still open for exploration.

    Off the chain, nothing is offered. On the chain, the child the chain passes
    through and every sibling declared after it are offered.
    """
    if _index_of(node, chain) == -1:
        return []

    index = child_index_continuing_chain(node, chain)
    return list(node.children[index:])
