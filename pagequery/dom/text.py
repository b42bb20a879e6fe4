"""
Text node implementation for the DOM.
This module implements the DOM Text interface according to HTML5 specifications.
"""

from typing import Optional
from .node import Node, NodeType


class Text(Node):
    """
    Text node implementation for the DOM.

    This class represents a text node in the DOM tree.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a text node.

        Args:
            data: The text content
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.TEXT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#text"
        self.node_value = data

    @property
    def data(self) -> str:
        return self.node_value

    def append_data(self, data: str) -> None:
        """Append text; used while merging adjacent text runs."""
        self.node_value += data
