"""Tests for the kind-dependent neighbour rule."""

from typing import List

import pytest

from edi_navigator.navigation.chains import ancestor_chain
from edi_navigator.navigation.neighbours import neighbours
from edi_navigator.schema import NodeKind, SchemaNode, StructuralError


def _names(nodes: List[SchemaNode]) -> List[str]:
    return [n.name for n in nodes]


def _composite(kind: NodeKind) -> SchemaNode:
    """Root container P holding composite X of ``kind`` with segments A, B, C."""
    composite = SchemaNode(
        name="X",
        kind=kind,
        children=[
            SchemaNode(name="A", kind=NodeKind.TOKEN),
            SchemaNode(name="B", kind=NodeKind.TOKEN),
            SchemaNode(name="C", kind=NodeKind.TOKEN),
        ],
    )
    SchemaNode(
        name="P",
        kind=NodeKind.CONTAINER,
        children=[SchemaNode(name="OUTSIDE", kind=NodeKind.TOKEN), composite],
    )
    return composite


class TestTokenNeighbours:
    """Test neighbours of segment nodes."""

    def test_token_offers_only_parent(self, node) -> None:
        """Test a segment only leads back up to its parent."""
        chain = ancestor_chain(node("S_N3"))
        assert neighbours(node("S_N3"), chain) == [node("G_N1")]

    def test_parentless_token_offers_nothing(self) -> None:
        """Test a segment used as root has no neighbours."""
        lone = SchemaNode(name="S_LONE", kind=NodeKind.TOKEN)
        assert neighbours(lone, [lone]) == []


class TestGroupNeighbours:
    """Test neighbours of repeatable groups."""

    def test_group_off_chain_offers_first_child_then_parent(self) -> None:
        """Test an unexplored group can only be entered through its first child."""
        group = _composite(NodeKind.GROUP)
        chain = ancestor_chain(group.parent.children[0])
        assert _names(neighbours(group, chain)) == ["A", "P"]

    def test_group_on_chain_offers_remaining_children_first_child_parent(self) -> None:
        """Test a group on the chain offers forward progress, a repeat, then escape."""
        group = _composite(NodeKind.GROUP)
        chain = ancestor_chain(group.children[1])
        assert _names(neighbours(group, chain)) == ["B", "C", "A", "P"]

    def test_group_on_chain_at_first_child_repeats_it(self) -> None:
        """Test the first child appears both as forward progress and as repeat."""
        group = _composite(NodeKind.GROUP)
        chain = ancestor_chain(group.children[0])
        assert _names(neighbours(group, chain)) == ["A", "B", "C", "A", "P"]

    def test_group_without_children_raises_error(self) -> None:
        """Test an empty group is treated as a malformed schema."""
        empty = SchemaNode(name="G_EMPTY", kind=NodeKind.GROUP)
        with pytest.raises(StructuralError, match="no children"):
            neighbours(empty, [empty])


class TestContainerNeighbours:
    """Test neighbours of plain containers."""

    def test_container_on_chain_offers_remaining_children(self) -> None:
        """Test only children at or after the chain's child are offered."""
        container = _composite(NodeKind.CONTAINER)
        chain = ancestor_chain(container.children[2])
        assert _names(neighbours(container, chain)) == ["C"]

    def test_container_off_chain_offers_all_children(self) -> None:
        """Test an unexplored container falls back to all of its children."""
        container = _composite(NodeKind.CONTAINER)
        chain = ancestor_chain(container.parent.children[0])
        assert _names(neighbours(container, chain)) == ["A", "B", "C"]

    def test_container_never_offers_parent(self) -> None:
        """Test containers do not escape upward."""
        container = _composite(NodeKind.CONTAINER)
        chain = ancestor_chain(container.children[0])
        assert "P" not in _names(neighbours(container, chain))

    def test_empty_container_offers_nothing(self) -> None:
        """Test a childless container off the chain has no neighbours."""
        empty = SchemaNode(name="M_EMPTY", kind=NodeKind.CONTAINER)
        SchemaNode(name="ROOT", kind=NodeKind.CONTAINER, children=[empty])
        assert neighbours(empty, []) == []


class TestUnitNeighbours:
    """Test neighbours of units."""

    def test_unit_on_chain_offers_remaining_children_then_parent(self) -> None:
        """Test units behave like containers and then escape upward."""
        unit = _composite(NodeKind.UNIT)
        chain = ancestor_chain(unit.children[1])
        assert _names(neighbours(unit, chain)) == ["B", "C", "P"]

    def test_unit_off_chain_offers_all_children_then_parent(self) -> None:
        """Test an unexplored unit offers every child before its parent."""
        unit = _composite(NodeKind.UNIT)
        chain = ancestor_chain(unit.parent.children[0])
        assert _names(neighbours(unit, chain)) == ["A", "B", "C", "P"]


class TestWildcardNeighbours:
    """Test neighbours of wildcard nodes."""

    def test_wildcard_ignores_chain(self) -> None:
        """Test a wildcard offers every child and its parent regardless of the chain."""
        wildcard = _composite(NodeKind.WILDCARD)
        on_chain = ancestor_chain(wildcard.children[2])
        off_chain = ancestor_chain(wildcard.parent.children[0])

        assert _names(neighbours(wildcard, on_chain)) == ["A", "B", "C", "P"]
        assert _names(neighbours(wildcard, off_chain)) == ["A", "B", "C", "P"]


class TestUnsupportedKind:
    """Test handling of unknown node kinds."""

    def test_unknown_kind_raises_error(self) -> None:
        """Test a node carrying an unrecognised kind is rejected."""
        odd = SchemaNode(name="Q", kind=NodeKind.CONTAINER)
        odd.kind = "Q"  # type: ignore[assignment]

        with pytest.raises(StructuralError, match="Unsupported node prefix"):
            neighbours(odd, [odd])
