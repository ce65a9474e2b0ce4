#!/usr/bin/env python3
"""
Demonstration of placing a flat EDI segment stream into a document tree.

The navigator only says which containers to open for each segment; this demo
plays the role of the output document builder and assembles an lxml tree from
those paths.
"""

import sys
from pathlib import Path
from typing import Dict

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lxml import etree

from edi_navigator import NavigatorConfig, SegmentNavigator, TokenIdentity, build_schema
from edi_navigator.shared import configure_logging


INVOICE = {
    "name": "M_810",
    "kind": "M",
    "children": [
        {"name": "S_ST", "kind": "S", "wire_name": "ST"},
        {"name": "S_BIG", "kind": "S", "wire_name": "BIG"},
        {
            "name": "G_N1",
            "kind": "G",
            "children": [
                {"name": "S_N1", "kind": "S", "wire_name": "N1",
                 "trigger": True, "first_values": ["BT", "ST"]},
                {"name": "S_N3", "kind": "S", "wire_name": "N3"},
            ],
        },
        {
            "name": "G_IT1",
            "kind": "G",
            "children": [
                {"name": "S_IT1", "kind": "S", "wire_name": "IT1", "trigger": True},
                {"name": "S_PID", "kind": "S", "wire_name": "PID"},
            ],
        },
        {"name": "S_TDS", "kind": "S", "wire_name": "TDS"},
        {"name": "S_SE", "kind": "S", "wire_name": "SE"},
    ],
}

SEGMENTS = [
    "ST*810*0001",
    "BIG*20240115*INV001",
    "N1*BT*ACME CORP",
    "N3*1 MAIN ST",
    "N1*ST*ACME WAREHOUSE",
    "IT1*1*10*EA*9.99",
    "PID*F****WIDGET",
    "IT1*2*5*EA*19.99",
    "TDS*19985",
    "SE*9*0001",
]


def read_identity(raw: str) -> TokenIdentity:
    """Minimal lexer: tag plus the first data element as qualifier."""
    parts = raw.split("*")
    first = parts[1] if len(parts) > 1 else None
    return TokenIdentity(parts[0], first)


def main() -> int:
    schema = build_schema(INVOICE)
    config = NavigatorConfig(target_namespace="urn:edi:x12:810")
    configure_logging(config.logging_level)
    navigator = SegmentNavigator(schema, config)

    root = etree.Element(etree.QName("urn:edi:x12:810", schema.name).text)
    open_elements: Dict[str, etree._Element] = {schema.name: root}

    for raw in SEGMENTS:
        result = navigator.advance(read_identity(raw))
        if not result.success:
            print(f"✗ {raw}: {result.diagnostics[0].message}")
            return 1

        print(f"✓ {raw:<24} -> {' / '.join(result.path_names)}")
        for schema_node, element in zip(result.path, navigator.path_elements(result)):
            open_elements[schema_node.parent.name].append(element)
            open_elements[schema_node.name] = element
        element.text = raw

    print()
    print(etree.tostring(root, pretty_print=True).decode())
    return 0


if __name__ == "__main__":
    sys.exit(main())
