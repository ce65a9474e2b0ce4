"""Tests for schema node to lxml element conversion."""

from lxml import etree

from edi_navigator.navigation.serialization import path_to_xml, to_xml


class TestToXml:
    """Test name-only element creation."""

    def test_element_named_after_node(self, node) -> None:
        """Test the element tag is the schema node name."""
        element = to_xml(node("G_N1"))
        assert element.tag == "G_N1"
        assert len(element) == 0
        assert element.text is None
        assert dict(element.attrib) == {}

    def test_element_in_namespace(self, node) -> None:
        """Test a namespace qualifies the tag."""
        element = to_xml(node("S_N1"), "urn:edi:x12")
        assert element.tag == "{urn:edi:x12}S_N1"
        assert etree.QName(element).localname == "S_N1"
        assert etree.QName(element).namespace == "urn:edi:x12"

    def test_each_call_creates_new_element(self, node) -> None:
        """Test elements are never shared between calls."""
        assert to_xml(node("S_ST")) is not to_xml(node("S_ST"))


class TestPathToXml:
    """Test conversion of whole anchor paths."""

    def test_path_order_is_preserved(self, node) -> None:
        """Test one element per node, outermost first."""
        path = [node("G_IT1"), node("G_SAC"), node("S_SAC")]
        assert [e.tag for e in path_to_xml(path)] == ["G_IT1", "G_SAC", "S_SAC"]

    def test_empty_path(self) -> None:
        """Test an empty path gives no elements."""
        assert path_to_xml([]) == []
