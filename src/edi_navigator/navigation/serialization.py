"""Conversion of schema nodes to lxml elements.

Only the node name is carried over; the output document builder decides what
goes inside each element.
"""

from typing import List, Optional, Sequence

from lxml import etree

from edi_navigator.schema.model import SchemaNode


def to_xml(node: SchemaNode, namespace: Optional[str] = None) -> etree._Element:
    """Create an empty element named after ``node``.

    Args:
        node: Schema node to convert
        namespace: Optional target namespace URI for the element

    Returns:
        A new lxml element without children, text or attributes
    """
    tag = etree.QName(namespace, node.name).text if namespace else node.name
    return etree.Element(tag)


def path_to_xml(path: Sequence[SchemaNode], namespace: Optional[str] = None) -> List[etree._Element]:
    """Convert an anchor path to elements, one per node, in path order."""
    return [to_xml(node, namespace) for node in path]
