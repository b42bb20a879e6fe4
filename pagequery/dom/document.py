"""
Document implementation for the DOM.
This module implements the DOM Document interface and builds the node tree
from html5lib's parse output.
"""

import logging
from typing import List, Optional

import html5lib
from html5lib.constants import namespaces

from .node import Node, NodeType
from .element import Element, serialize_node
from .text import Text
from .comment import Comment, DocumentType
from .selector_engine import SelectorEngine
from ..exceptions import ParseError
from ..utils.logging import log_exception

logger = logging.getLogger(__name__)

# html5lib namespace URI -> element namespace prefix
NAMESPACE_PREFIXES = {
    namespaces['html']: '',
    namespaces['svg']: 'svg',
    namespaces['mathml']: 'math',
}

# Node type codes used by xml.dom.minidom
_MINIDOM_ELEMENT = 1
_MINIDOM_TEXT = 3
_MINIDOM_CDATA = 4
_MINIDOM_COMMENT = 8
_MINIDOM_DOCTYPE = 10


class Document(Node):
    """
    Document node implementation for the DOM.

    This class represents a parsed HTML document. Once `parse_html` has run
    the tree is never modified.
    """

    def __init__(self, selector_engine: Optional[SelectorEngine] = None):
        """
        Initialize a new Document object.

        Args:
            selector_engine: Engine used for CSS selector matching
        """
        super().__init__(NodeType.DOCUMENT_NODE)
        self.owner_document = None
        self.node_name = "#document"
        self.document_element: Optional[Element] = None
        self.head: Optional[Element] = None
        self.body: Optional[Element] = None

        # Recoverable parse errors reported by html5lib
        self.errors: List[str] = []

        self._selector_engine = selector_engine or SelectorEngine()

        logger.debug("HTML Document initialized")

    @property
    def selector_engine(self) -> SelectorEngine:
        return self._selector_engine

    @property
    def doctype(self) -> Optional[DocumentType]:
        """Get the document type node, if the source declared one."""
        for child in self.child_nodes:
            if child.node_type == NodeType.DOCUMENT_TYPE_NODE:
                return child
        return None

    @property
    def title(self) -> str:
        for element in self.get_elements_by_tag_name('title'):
            return " ".join(element.text_content.split())
        return ""

    @property
    def inner_html(self) -> str:
        return "".join(serialize_node(child, self) for child in self.child_nodes)

    @property
    def outer_html(self) -> str:
        return self.inner_html

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        """
        Get an element by its ID.

        Args:
            element_id: The ID of the element to find

        Returns:
            The first element in document order with the given ID, or None
        """
        for node in self.descendants():
            if node.is_element and node.get_attribute('id') == element_id:
                return node
        return None

    def get_elements_by_tag_name(self, tag_name: str) -> List[Element]:
        return get_elements_by_tag_name(self, tag_name)

    def get_elements_by_class_name(self, class_name: str) -> List[Element]:
        return get_elements_by_class_name(self, class_name)

    def query_selector_all(self, selector: str) -> List[Element]:
        return self._selector_engine.select(selector, self)

    def query_selector(self, selector: str) -> Optional[Element]:
        matches = self._selector_engine.select(selector, self)
        return matches[0] if matches else None

    def parse_html(self, html_content: str, keep_errors: bool = True) -> 'Document':
        """
        Parse HTML content into this document.

        Args:
            html_content: The HTML content to parse
            keep_errors: Whether to record html5lib's recoverable parse errors

        Returns:
            This document

        Raises:
            ParseError: If the content cannot be tree-built at all
        """
        if html_content is None:
            raise ParseError("cannot parse None as HTML")

        if isinstance(html_content, bytes):
            try:
                html_content = html_content.decode('utf-8')
            except UnicodeDecodeError as e:
                log_exception(logger, e, "Error decoding HTML content")
                raise ParseError(f"cannot decode HTML content: {e}") from e

        if not isinstance(html_content, str):
            raise ParseError(f"cannot parse a '{type(html_content).__name__}' as HTML")

        logger.debug(f"Parsing HTML content (first 100 chars): {html_content[:100]}")

        parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
        try:
            parsed = parser.parse(html_content)
        except Exception as e:
            log_exception(logger, e, "Error in HTML parser")
            raise ParseError(f"cannot parse HTML: {e}") from e

        if parsed is None:
            raise ParseError("HTML parser produced no document")

        self._convert_parsed_nodes(parsed, self)
        self._update_references()

        if keep_errors:
            for position, code, data in parser.errors:
                message = f"{position[0]}:{position[1]}: {code}"
                self.errors.append(message)
                logger.debug(f"Recoverable parse error at {message}")

        return self

    def _convert_parsed_nodes(self, parsed, parent: Node) -> None:
        """
        Convert the children of a parsed html5lib node to our DOM structure.

        Args:
            parsed: The parsed node from html5lib
            parent: The parent node in our DOM structure
        """
        for child in parsed.childNodes:
            node_type = child.nodeType

            if node_type in (_MINIDOM_TEXT, _MINIDOM_CDATA):
                # html5lib emits one text node per character token
                last = parent.last_child
                if last is not None and last.node_type == NodeType.TEXT_NODE:
                    last.append_data(child.data)
                else:
                    parent.append_child(Text(child.data, self))
            elif node_type == _MINIDOM_COMMENT:
                parent.append_child(Comment(child.data, self))
            elif node_type == _MINIDOM_DOCTYPE:
                parent.append_child(DocumentType(child.name, child.publicId,
                                                 child.systemId, self))
            elif node_type == _MINIDOM_ELEMENT:
                element = self._convert_element(child)
                parent.append_child(element)
                self._convert_parsed_nodes(child, element)

    def _convert_element(self, parsed) -> Element:
        """
        Convert an html5lib element to our Element implementation.

        Args:
            parsed: The element from html5lib to convert

        Returns:
            Our Element implementation
        """
        prefix = NAMESPACE_PREFIXES.get(parsed.namespaceURI, '')
        element = Element(parsed.tagName, prefix, self)

        for name, value in parsed.attributes.items():
            element.set_attribute(name, value)

        return element

    def _update_references(self) -> None:
        """Update references to important elements like head and body."""
        self.document_element = self.first_element_child
        if self.document_element is None:
            return

        for child in self.document_element.children:
            if child.tag_name == 'head' and self.head is None:
                self.head = child
            elif child.tag_name in ('body', 'frameset') and self.body is None:
                self.body = child


def get_elements_by_tag_name(root: Node, tag_name: str) -> List[Element]:
    """
    Get all descendant elements with the given tag name.

    Args:
        root: The node to search under
        tag_name: The tag name, or "*" for all elements

    Returns:
        Matching elements in document order
    """
    tag_name = tag_name.lower()
    return [node for node in root.descendants()
            if node.is_element and (tag_name == '*' or node.tag_name.lower() == tag_name)]


def get_elements_by_class_name(root: Node, class_names: str) -> List[Element]:
    """
    Get all descendant elements that carry every one of the given classes.

    Args:
        root: The node to search under
        class_names: Whitespace-separated class names

    Returns:
        Matching elements in document order
    """
    wanted = class_names.split()
    if not wanted:
        return []
    return [node for node in root.descendants()
            if node.is_element and all(name in node.class_list for name in wanted)]
