"""
Element facade.

An Element wraps one node of a selection. Navigation always returns new
facades or selections, never raw tree nodes. Facades are cheap and are
created on demand; two facades over the same node are the same node for
`is_same_node`.
"""

from typing import Any, Dict, List, Optional

from ..dom.attr import Attr, namespace_uri
from ..dom.document import get_elements_by_class_name, get_elements_by_tag_name
from ..dom.node import Node, NodeType
from ..dom.selector_engine import element_lang
from .aliases import CamelCaseAliases
from .attributes import (attr_as_int, attr_as_string, attr_as_url, attr_as_url_string,
                         attr_is_present, split_attr)


class Attribute(CamelCaseAliases):
    """
    A read-only view of one attribute node of an element.

    Attributes:
        attr: The DOM attribute node
        owner_element: The Element facade the attribute was read from
    """

    def __init__(self, attr: Attr, owner_element: 'Element'):
        self.attr = attr
        self.owner_element = owner_element

    @property
    def name(self) -> str:
        return self.attr.name

    @property
    def value(self) -> str:
        return self.attr.value

    def prefix(self) -> str:
        return self.attr.prefix or ""

    def local_name(self) -> str:
        return self.attr.local_name

    def namespace_uri(self) -> str:
        return self.attr.namespace_uri

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.value!r})"


class Element(CamelCaseAliases):
    """
    Read-only facade over a single node.

    Attributes:
        node: The wrapped DOM node
        sel: The selection this element was produced from
    """

    def __init__(self, node: Node, sel):
        """
        Initialize the facade.

        Args:
            node: The DOM node to wrap
            sel: The selection the node was taken from; it supplies the base
                URL and builds new selections
        """
        self.node = node
        self.sel = sel

    @property
    def base_url(self) -> str:
        return self.sel.base_url

    def selection(self):
        """Get a single-node selection holding this element."""
        return self.sel.derive([self.node])

    def _wrap(self, node: Optional[Node]) -> Optional['Element']:
        if node is None:
            return None
        return self.sel.wrap(node)

    def _wrap_all(self, nodes) -> List['Element']:
        return [self.sel.wrap(node) for node in nodes]

    # Attribute helpers shared by the per-tag classes

    def attr_as_string(self, name: str) -> str:
        return attr_as_string(self.node, name)

    def attr_as_int(self, name: str, default: int) -> int:
        return attr_as_int(self.node, name, default)

    def attr_is_present(self, name: str) -> bool:
        return attr_is_present(self.node, name)

    def attr_as_url(self, name: str) -> Optional[str]:
        return attr_as_url(self.node, name, self.base_url)

    def attr_as_url_string(self, name: str, default: str = "") -> str:
        return attr_as_url_string(self.node, name, self.base_url, default)

    def split_attr(self, name: str) -> List[str]:
        return split_attr(self.node, name)

    def document_root(self) -> Node:
        """Get the topmost ancestor of this node."""
        root = self.node
        for ancestor in self.node.ancestors():
            root = ancestor
        return root

    def find_in_document(self, predicate) -> List[Node]:
        """Get the elements of the whole document that satisfy a predicate."""
        return [node for node in self.document_root().descendants()
                if node.is_element and predicate(node)]

    def closest_node(self, *tag_names: str) -> Optional[Node]:
        """Get the nearest ancestor-or-self element with one of the tag names."""
        node = self.node
        while node is not None and node.is_element:
            if node.tag_name in tag_names:
                return node
            node = node.parent_node
        return None

    def ancestor_node(self, *tag_names: str) -> Optional[Node]:
        """Get the nearest strict ancestor element with one of the tag names."""
        for ancestor in self.node.ancestors():
            if ancestor.is_element and ancestor.tag_name in tag_names:
                return ancestor
        return None

    def owner_form_node(self) -> Optional[Node]:
        """
        Find the form this element belongs to.

        Returns:
            The enclosing form, else the form named by the `form` attribute,
            else None
        """
        form = self.closest_node('form')
        if form is not None:
            return form

        form_id = self.attr_as_string('form')
        if not form_id:
            return None

        matches = self.find_in_document(lambda node: node.get_attribute('id') == form_id)
        return matches[0] if matches else None

    def owner_form(self) -> Optional['Element']:
        return self._wrap(self.owner_form_node())

    def elem_labels(self) -> List['Element']:
        """Get the wrapping label and the labels whose `for` names this element."""
        labels = []
        wrapper = self.closest_node('label')
        if wrapper is not None:
            labels.append(wrapper)

        elem_id = self.attr_as_string('id')
        if elem_id:
            for label in self.find_in_document(
                    lambda node: node.tag_name == 'label' and node.get_attribute('for') == elem_id):
                if label is not wrapper:
                    labels.append(label)

        return self._wrap_all(labels)

    # Node identity and content

    def node_name(self) -> str:
        if self.node.is_element:
            return self.node.tag_name.lower()
        return self.node.node_name

    def node_type(self) -> int:
        return int(self.node.node_type)

    def node_value(self) -> Optional[str]:
        if self.node.node_type in (NodeType.TEXT_NODE, NodeType.COMMENT_NODE):
            return self.node.node_value
        return None

    def text_content(self) -> str:
        return self.node.text_content

    def inner_html(self) -> str:
        inner = getattr(self.node, 'inner_html', None)
        return inner if inner is not None else ""

    def outer_html(self) -> str:
        outer = getattr(self.node, 'outer_html', None)
        return outer if outer is not None else (self.node.node_value or "")

    def id(self) -> str:
        return self.attr_as_string('id')

    def class_name(self) -> str:
        return self.attr_as_string('class')

    def class_list(self) -> List[str]:
        return self.split_attr('class')

    def lang(self) -> str:
        if not self.node.is_element:
            return ""
        return element_lang(self.node)

    def to_string(self) -> str:
        if self.node.is_element:
            return "[object html.Node]"
        return f"[object {self.node.node_name}]"

    # Attributes

    def get_attribute(self, name: str) -> Optional[str]:
        if not self.node.is_element:
            return None
        return self.node.get_attribute(name)

    def has_attribute(self, name: str) -> bool:
        return self.attr_is_present(name)

    def has_attributes(self) -> bool:
        return self.node.is_element and self.node.has_attributes()

    def get_attribute_node(self, name: str) -> Optional[Attribute]:
        if not self.node.is_element:
            return None
        attr = self.node.get_attribute_node(name)
        return Attribute(attr, self) if attr is not None else None

    def attributes(self) -> Dict[str, Attribute]:
        if not self.node.is_element:
            return {}
        return {name: Attribute(attr, self) for name, attr in self.node.attributes.items()}

    # Tree navigation

    def first_child(self) -> Optional['Element']:
        return self._wrap(self.node.first_child)

    def last_child(self) -> Optional['Element']:
        return self._wrap(self.node.last_child)

    def first_element_child(self) -> Optional['Element']:
        return self._wrap(self.node.first_element_child)

    def last_element_child(self) -> Optional['Element']:
        return self._wrap(self.node.last_element_child)

    def previous_sibling(self) -> Optional['Element']:
        return self._wrap(self.node.previous_sibling)

    def next_sibling(self) -> Optional['Element']:
        return self._wrap(self.node.next_sibling)

    def previous_element_sibling(self) -> Optional['Element']:
        return self._wrap(self.node.previous_element_sibling)

    def next_element_sibling(self) -> Optional['Element']:
        return self._wrap(self.node.next_element_sibling)

    def parent_node(self) -> Optional['Element']:
        return self._wrap(self.node.parent_node)

    def parent_element(self) -> Optional['Element']:
        return self._wrap(self.node.parent_element)

    def owner_document(self) -> Optional['Element']:
        for ancestor in self.node.ancestors():
            if ancestor.node_type == NodeType.DOCUMENT_NODE:
                return self._wrap(ancestor)
        return None

    def child_nodes(self) -> List['Element']:
        return self._wrap_all(self.node.child_nodes)

    def children(self) -> List['Element']:
        return self._wrap_all(self.node.children)

    def child_element_count(self) -> int:
        return self.node.child_element_count

    def has_child_nodes(self) -> bool:
        return self.node.has_child_nodes()

    def get_elements_by_class_name(self, class_names: str) -> List['Element']:
        return self._wrap_all(get_elements_by_class_name(self.node, class_names))

    def get_elements_by_tag_name(self, tag_name: str) -> List['Element']:
        return self._wrap_all(get_elements_by_tag_name(self.node, tag_name))

    def query_selector(self, selector: str) -> Optional['Element']:
        matches = self.sel.engine.select(selector, self.node)
        return self._wrap(matches[0]) if matches else None

    def query_selector_all(self, selector: str) -> List['Element']:
        return self._wrap_all(self.sel.engine.select(selector, self.node))

    # Comparison

    def is_same_node(self, other: Any) -> bool:
        return getattr(other, 'node', None) is self.node

    def is_equal_node(self, other: Any) -> bool:
        other_node = getattr(other, 'node', None)
        if other_node is None:
            return False
        return (self.node.node_type == other_node.node_type
                and self.outer_html() == Element(other_node, self.sel).outer_html())

    def contains(self, other: Any) -> bool:
        """Check whether `other` is a strict descendant of this node."""
        other_node = getattr(other, 'node', None)
        if other_node is None or other_node is self.node:
            return False
        return self.node.contains(other_node)

    def matches(self, selector: str) -> bool:
        return self.sel.engine.matches(self.node, selector)

    def namespace_uri(self) -> str:
        return namespace_uri(getattr(self.node, 'namespace_prefix', ''))

    def is_default_namespace(self) -> bool:
        return not getattr(self.node, 'namespace_prefix', '')

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Element) and other.node is self.node

    def __hash__(self) -> int:
        return id(self.node)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.node_name()}>"
