"""
Node implementation for the DOM.
This module implements the read-only parts of the DOM Node interface that the
query layer walks.
"""

from enum import IntEnum
from typing import List, Optional, Iterator


class NodeType(IntEnum):
    """Node types as defined in the HTML5 specification."""
    ELEMENT_NODE = 1
    ATTRIBUTE_NODE = 2
    TEXT_NODE = 3
    CDATA_SECTION_NODE = 4
    PROCESSING_INSTRUCTION_NODE = 7
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10
    DOCUMENT_FRAGMENT_NODE = 11


class Node:
    """
    Base Node implementation for the DOM.

    Nodes are linked to their parent and siblings when appended; after the
    document is built the tree is never modified.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        self.first_child: Optional['Node'] = None
        self.last_child: Optional['Node'] = None
        self.previous_sibling: Optional['Node'] = None
        self.next_sibling: Optional['Node'] = None

        # Node properties
        self.node_name: str = "#node"
        self.node_value: Optional[str] = None

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def child_element_count(self) -> int:
        """Get the number of child elements."""
        return sum(1 for child in self.child_nodes if child.is_element)

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.is_element]

    @property
    def parent_element(self) -> Optional['Element']:
        parent = self.parent_node
        if parent is not None and parent.is_element:
            return parent
        return None

    @property
    def first_element_child(self) -> Optional['Element']:
        for child in self.child_nodes:
            if child.is_element:
                return child
        return None

    @property
    def last_element_child(self) -> Optional['Element']:
        for child in reversed(self.child_nodes):
            if child.is_element:
                return child
        return None

    @property
    def previous_element_sibling(self) -> Optional['Element']:
        sibling = self.previous_sibling
        while sibling is not None and not sibling.is_element:
            sibling = sibling.previous_sibling
        return sibling

    @property
    def next_element_sibling(self) -> Optional['Element']:
        sibling = self.next_sibling
        while sibling is not None and not sibling.is_element:
            sibling = sibling.next_sibling
        return sibling

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        child.parent_node = self

        if self.child_nodes:
            last_child = self.child_nodes[-1]
            last_child.next_sibling = child
            child.previous_sibling = last_child

        self.child_nodes.append(child)

        if not self.first_child:
            self.first_child = child
        self.last_child = child

        return child

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    def ancestors(self) -> Iterator['Node']:
        """Yield every ancestor, nearest first."""
        current = self.parent_node
        while current is not None:
            yield current
            current = current.parent_node

    def descendants(self) -> Iterator['Node']:
        """Yield every descendant in document order."""
        stack = list(reversed(self.child_nodes))
        while stack:
            node = stack.pop()
            yield node
            if node.child_nodes:
                stack.extend(reversed(node.child_nodes))

    def contains(self, other: Optional['Node']) -> bool:
        """
        Check if this node contains another node.

        A node contains itself, as with DOM Node.contains.

        Args:
            other: The node to check

        Returns:
            True if this node contains the other node, False otherwise
        """
        if other is None:
            return False

        if other is self:
            return True

        return any(ancestor is self for ancestor in other.ancestors())

    @property
    def text_content(self) -> str:
        """
        Get the text content of this node and all its descendants.

        Returns:
            The concatenated text of all descendant text nodes
        """
        if self.node_type in (NodeType.TEXT_NODE, NodeType.COMMENT_NODE):
            return self.node_value or ""

        return "".join(node.node_value or "" for node in self.descendants()
                       if node.node_type == NodeType.TEXT_NODE)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.node_name}>"
