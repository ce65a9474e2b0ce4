"""Pytest configuration and shared fixtures."""

import pytest

from edi_navigator.schema import SchemaNode, build_schema


INVOICE_DEFINITION = {
    "name": "M_810",
    "kind": "M",
    "children": [
        {"name": "S_ST", "kind": "S", "wire_name": "ST"},
        {"name": "S_BIG", "kind": "S", "wire_name": "BIG"},
        {"name": "S_REF", "kind": "S", "wire_name": "REF", "first_values": ["IA", "VR"]},
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
                {
                    "name": "G_SAC",
                    "kind": "G",
                    "children": [
                        {"name": "S_SAC", "kind": "S", "wire_name": "SAC", "trigger": True},
                        {"name": "S_TXI", "kind": "S", "wire_name": "TXI"},
                    ],
                },
            ],
        },
        {"name": "S_TDS", "kind": "S", "wire_name": "TDS"},
        {"name": "S_SE", "kind": "S", "wire_name": "SE"},
    ],
}


@pytest.fixture
def invoice_definition():
    """Mapping definition of a trimmed-down 810 invoice."""
    return INVOICE_DEFINITION


@pytest.fixture
def invoice_schema() -> SchemaNode:
    """Schema tree of a trimmed-down 810 invoice.

    M_810
      S_ST, S_BIG, S_REF
      G_N1:  S_N1 (trigger), S_N3
      G_IT1: S_IT1 (trigger), S_PID
             G_SAC: S_SAC (trigger), S_TXI
      S_TDS, S_SE
    """
    return build_schema(INVOICE_DEFINITION)


@pytest.fixture
def node(invoice_schema):
    """Lookup helper: node("S_N1") returns the schema node by name."""
    def _lookup(name: str) -> SchemaNode:
        found = invoice_schema.find(name)
        assert found is not None, f"no node named {name}"
        return found
    return _lookup
