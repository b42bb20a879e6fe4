"""
Comment node implementation for the DOM.
"""

from typing import Optional
from .node import Node, NodeType


class Comment(Node):
    """Represents a comment node in the DOM tree."""

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        super().__init__(NodeType.COMMENT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#comment"
        self.node_value = data

    @property
    def data(self) -> str:
        return self.node_value


class DocumentType(Node):
    """The <!DOCTYPE> node of a document."""

    def __init__(self, name: str, public_id: str = "", system_id: str = "",
                 owner_document: Optional['Document'] = None):
        super().__init__(NodeType.DOCUMENT_TYPE_NODE, owner_document)
        self.name = name or ""
        self.public_id = public_id or ""
        self.system_id = system_id or ""
        self.node_name = self.name
