"""
Attr implementation for the DOM.
This module implements the DOM Attr interface according to HTML5 specifications.
"""

from typing import Optional

XHTML_NAMESPACE = 'http://www.w3.org/1999/xhtml'
SVG_NAMESPACE = 'http://www.w3.org/2000/svg'
MATHML_NAMESPACE = 'http://www.w3.org/1998/Math/MathML'
XLINK_NAMESPACE = 'http://www.w3.org/1999/xlink'
XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'
XMLNS_NAMESPACE = 'http://www.w3.org/2000/xmlns/'

# Namespace prefix -> namespace URI; an empty or unknown prefix means XHTML
NAMESPACES = {
    'svg': SVG_NAMESPACE,
    'math': MATHML_NAMESPACE,
    'xlink': XLINK_NAMESPACE,
    'xml': XML_NAMESPACE,
    'xmlns': XMLNS_NAMESPACE,
}


def namespace_uri(prefix: Optional[str]) -> str:
    """Map a namespace prefix to its URI."""
    return NAMESPACES.get(prefix or '', XHTML_NAMESPACE)


class Attr:
    """
    Attribute node implementation for the DOM.

    This class represents an attribute of an Element node.
    """

    def __init__(self, name: str, value: str, owner_element: Optional['Element'] = None):
        """
        Initialize a new attribute.

        Args:
            name: The qualified attribute name
            value: The attribute value
            owner_element: The element that owns this attribute
        """
        self.name = name
        self.value = value
        self.owner_element = owner_element

        self.prefix: Optional[str] = None
        self.local_name = name

        # Handle namespaced attributes
        if ':' in name:
            self.prefix, self.local_name = name.split(':', 1)

    @property
    def namespace_uri(self) -> str:
        return namespace_uri(self.prefix)

    def __repr__(self) -> str:
        return f"Attr({self.name!r}, {self.value!r})"
