"""
Element implementation for the DOM.
This module implements the DOM Element interface according to HTML5 specifications.
"""

from typing import Dict, List, Optional

from .node import Node, NodeType
from .attr import Attr, namespace_uri

VOID_ELEMENTS = frozenset({
    'area', 'base', 'basefont', 'bgsound', 'br', 'col', 'embed', 'frame', 'hr',
    'img', 'input', 'keygen', 'link', 'meta', 'param', 'source', 'track', 'wbr'
})

# Children of these elements are serialized without escaping
RAW_TEXT_ELEMENTS = frozenset({
    'script', 'style', 'xmp', 'iframe', 'noembed', 'noframes', 'plaintext', 'noscript'
})


def escape_text(text: str) -> str:
    return (text.replace('&', '&amp;').replace('\xa0', '&nbsp;')
            .replace('<', '&lt;').replace('>', '&gt;'))


def escape_attribute(value: str) -> str:
    return (value.replace('&', '&amp;').replace('\xa0', '&nbsp;')
            .replace('"', '&quot;'))


class Element(Node):
    """
    Element node implementation for the DOM.

    This class implements HTML elements, including foreign (SVG and MathML)
    elements which carry a namespace prefix.
    """

    def __init__(self,
                 tag_name: str,
                 namespace_prefix: str = "",
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            namespace_prefix: "" for HTML, "svg" or "math" for foreign content
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        # Foreign elements keep their case (e.g. "foreignObject")
        self.tag_name = tag_name if namespace_prefix else tag_name.lower()
        self.namespace_prefix = namespace_prefix
        self.node_name = self.tag_name

        # Element attributes, in source order
        self.attributes: Dict[str, Attr] = {}

        self.is_void_element = not namespace_prefix and self.tag_name in VOID_ELEMENTS

    @property
    def namespace_uri(self) -> str:
        return namespace_uri(self.namespace_prefix)

    @property
    def id(self) -> str:
        """Get the ID of the element."""
        return self.get_attribute('id') or ""

    @property
    def class_name(self) -> str:
        """Get the class attribute of the element."""
        return self.get_attribute('class') or ""

    @property
    def class_list(self) -> List[str]:
        """Get the whitespace-separated class tokens, in source order."""
        return self.class_name.split()

    def has_attribute(self, name: str) -> bool:
        """
        Check if the element has an attribute.

        Args:
            name: The attribute name

        Returns:
            True if the element has the attribute, False otherwise
        """
        return name in self.attributes

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if the attribute doesn't exist
        """
        attr = self.attributes.get(name)
        return attr.value if attr is not None else None

    def get_attribute_node(self, name: str) -> Optional[Attr]:
        """
        Get an attribute node.

        Args:
            name: The attribute name

        Returns:
            The attribute node, or None if the attribute doesn't exist
        """
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        """
        Set an attribute while the tree is being built.

        Args:
            name: The attribute name
            value: The attribute value
        """
        self.attributes[name] = Attr(name, value, self)

    def has_attributes(self) -> bool:
        """Check if the element has any attributes."""
        return len(self.attributes) > 0

    @property
    def inner_html(self) -> str:
        """Get the serialized HTML content of the element."""
        return "".join(serialize_node(child, self) for child in self.child_nodes)

    @property
    def outer_html(self) -> str:
        """Get the outer HTML of the element, including the element itself."""
        return serialize_node(self, self.parent_node)

    def _format_attributes(self) -> str:
        """Format the attributes for a start tag."""
        return "".join(f' {attr.name}="{escape_attribute(attr.value)}"'
                       for attr in self.attributes.values())


def serialize_node(node: Node, parent: Optional[Node] = None) -> str:
    """
    Serialize a node and its subtree to HTML.

    Args:
        node: The node to serialize
        parent: The node's parent, which decides whether text is escaped

    Returns:
        The HTML markup
    """
    if node.node_type == NodeType.ELEMENT_NODE:
        start = f"<{node.tag_name}{node._format_attributes()}>"
        if node.is_void_element:
            return start
        return f"{start}{node.inner_html}</{node.tag_name}>"

    if node.node_type == NodeType.TEXT_NODE:
        text = node.node_value or ""
        if (parent is not None and parent.node_type == NodeType.ELEMENT_NODE
                and not parent.namespace_prefix and parent.tag_name in RAW_TEXT_ELEMENTS):
            return text
        return escape_text(text)

    if node.node_type == NodeType.COMMENT_NODE:
        return f"<!--{node.node_value or ''}-->"

    if node.node_type == NodeType.DOCUMENT_TYPE_NODE:
        return f"<!DOCTYPE {node.name}>"

    return "".join(serialize_node(child, node) for child in node.child_nodes)
