"""Segment identity matching.

An input segment is identified by its tag plus up to two qualifier values
(typically the first data elements, e.g. ``N1*BT`` vs ``N1*ST``). Qualifiers
only narrow a match when both the schema node and the input carry them.
"""

from dataclasses import dataclass
from typing import Optional

from edi_navigator.schema.model import NodeKind, SchemaNode, StructuralError


@dataclass(frozen=True)
class TokenIdentity:
    """Identity of one input segment as read by the lexer."""

    wire_name: str
    first_value: Optional[str] = None
    second_value: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.wire_name:
            raise ValueError("Segment wire name cannot be empty")

    def __str__(self) -> str:
        values = [v for v in (self.first_value, self.second_value) if v]
        return "*".join([self.wire_name, *values])


def matches(node: SchemaNode, identity: TokenIdentity) -> bool:
    """Check whether a segment node accepts the given input identity.

    Raises:
        StructuralError: If ``node`` is not a segment node
    """
    if node.kind is not NodeKind.TOKEN:
        raise StructuralError(f"Can't compare non segments: {node.name}", node_name=node.name)

    if node.wire_name != identity.wire_name:
        return False

    # No qualifier to compare on one side or the other
    if not identity.first_value or not node.first_qualifier_values:
        return True

    if identity.first_value not in node.first_qualifier_values:
        return False

    if node.second_qualifier_values and identity.second_value:
        return identity.second_value in node.second_qualifier_values

    return True
