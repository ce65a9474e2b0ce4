"""Build schema trees from plain mapping definitions.

The definition format is a nested mapping, one per node::

    {
        "name": "M_810",
        "kind": "M",
        "children": [
            {"name": "S_BIG", "kind": "S", "wire_name": "BIG"},
            {"name": "G_N1", "kind": "G", "children": [
                {"name": "S_N1", "kind": "S", "wire_name": "N1",
                 "trigger": true, "first_values": ["BT", "ST"]}
            ]}
        ]
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Set, Union

from edi_navigator.schema.model import NodeKind, SchemaNode, StructuralError
from edi_navigator.shared.logging import get_logger

logger = get_logger(__name__, component="schema_loader")

_KNOWN_KEYS = {
    "name", "kind", "wire_name", "trigger",
    "first_values", "second_values", "children",
}


class SchemaDefinitionError(StructuralError):
    """Raised when a schema definition cannot be turned into a tree."""


def build_schema(definition: Mapping[str, Any]) -> SchemaNode:
    """Build a schema tree from a nested mapping definition.

    Args:
        definition: Root node definition

    Returns:
        Root SchemaNode with all parent links established

    Raises:
        SchemaDefinitionError: On missing names, unknown kinds, unknown keys,
            duplicate names, malformed values, or children declared under a segment
    """
    seen: Set[str] = set()
    root = _build_node(definition, seen, "")
    logger.debug(
        "Schema built",
        extra={"root": root.name, "node_count": len(seen)},
    )
    return root


def load_schema(path: Union[str, Path]) -> SchemaNode:
    """Load a schema tree from a JSON file holding a mapping definition."""
    schema_path = Path(path)
    with schema_path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise SchemaDefinitionError(f"Schema file {schema_path} must hold a JSON object")

    logger.info("Loading schema", extra={"path": str(schema_path)})
    return build_schema(data)


def _build_node(definition: Mapping[str, Any], seen: Set[str], location: str) -> SchemaNode:
    if not isinstance(definition, Mapping):
        raise SchemaDefinitionError(f"Node definition at {location or '/'} must be a mapping")

    unknown = set(definition) - _KNOWN_KEYS
    if unknown:
        raise SchemaDefinitionError(
            f"Unknown keys {sorted(unknown)} at {location or '/'}"
        )

    name = definition.get("name")
    if not name:
        raise SchemaDefinitionError(f"Node definition at {location or '/'} has no name")
    if name in seen:
        raise SchemaDefinitionError(f"Duplicate node name: {name}", node_name=name)
    seen.add(name)

    try:
        kind = NodeKind.parse(definition.get("kind", ""))
    except StructuralError as e:
        raise SchemaDefinitionError(str(e), node_name=name) from e

    trigger = definition.get("trigger", False)
    if not isinstance(trigger, bool):
        raise SchemaDefinitionError(f"trigger of {name} must be true or false", node_name=name)

    children = definition.get("children", [])
    if not isinstance(children, (list, tuple)):
        raise SchemaDefinitionError(f"children of {name} must be a list", node_name=name)

    node = SchemaNode(
        name=name,
        kind=kind,
        wire_name=definition.get("wire_name"),
        is_trigger=trigger,
        first_qualifier_values=_qualifier_values(definition, "first_values", name),
        second_qualifier_values=_qualifier_values(definition, "second_values", name),
    )

    if children and kind is NodeKind.TOKEN:
        raise SchemaDefinitionError(f"Segment {name} cannot declare children", node_name=name)

    path = f"{location}/{name}"
    for child_definition in children:
        node.add_child(_build_node(child_definition, seen, path))

    return node


def _qualifier_values(definition: Mapping[str, Any], key: str, name: str) -> FrozenSet[str]:
    values = definition.get(key, ())
    if not isinstance(values, (list, tuple)) or not all(isinstance(v, str) for v in values):
        raise SchemaDefinitionError(f"{key} of {name} must be a list of strings", node_name=name)
    return frozenset(values)


def schema_to_dict(node: SchemaNode) -> Dict[str, Any]:
    """Convert a schema tree back to its mapping definition."""
    result: Dict[str, Any] = {"name": node.name, "kind": node.kind.value}
    if node.wire_name != node.name:
        result["wire_name"] = node.wire_name
    if node.is_trigger:
        result["trigger"] = True
    if node.first_qualifier_values:
        result["first_values"] = sorted(node.first_qualifier_values)
    if node.second_qualifier_values:
        result["second_values"] = sorted(node.second_qualifier_values)
    if node.children:
        result["children"] = [schema_to_dict(child) for child in node.children]
    return result
