"""
DOM implementation for pagequery.
This package provides the read-only node tree that selections walk.
"""

from typing import Optional

from .node import Node, NodeType
from .element import Element
from .attr import Attr
from .text import Text
from .comment import Comment, DocumentType
from .document import Document
from .selector_engine import SelectorEngine


class Parser:
    """HTML Parser for creating DOM trees from HTML content."""

    def __init__(self, selector_engine: Optional[SelectorEngine] = None, keep_errors: bool = True):
        """
        Initialize the HTML parser.

        Args:
            selector_engine: Engine shared by every document this parser builds
            keep_errors: Whether documents record recoverable parse errors
        """
        self.selector_engine = selector_engine or SelectorEngine()
        self.keep_errors = keep_errors

    def parse(self, html_content: str) -> Document:
        """
        Parse HTML content into a Document.

        Args:
            html_content: The HTML content to parse

        Returns:
            The parsed Document
        """
        document = Document(self.selector_engine)
        document.parse_html(html_content, self.keep_errors)
        return document


__all__ = [
    'Node', 'NodeType', 'Element', 'Attr', 'Text', 'Comment', 'DocumentType',
    'Document', 'SelectorEngine', 'Parser'
]
