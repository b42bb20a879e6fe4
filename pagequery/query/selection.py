"""
Selection: an immutable, ordered, de-duplicated set of nodes.

Every traversal returns a new Selection that remembers the one it was
derived from (see `end`) and carries the same base URL. The underlying
tree is never modified.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from ..dom.node import Node
from ..dom.selector_engine import SelectorEngine
from .aliases import CamelCaseAliases
from .data import element_data
from .element import Element
from .elements import ElementFactory
from .form import FormValue, control_value, serialize, serialize_array, serialize_object
from .matchers import Matcher, require_callable

logger = logging.getLogger(__name__)

SelectorLike = Union[None, str, 'Selection', Element, Node, Callable[[int, 'Selection'], Any]]

_default_engine: Optional[SelectorEngine] = None


def _fallback_engine() -> SelectorEngine:
    global _default_engine
    if _default_engine is None:
        logger.debug("Creating selector engine for selections without a document")
        _default_engine = SelectorEngine()
    return _default_engine


def unique_nodes(nodes: Iterable[Node]) -> List[Node]:
    """De-duplicate nodes by identity, keeping first occurrences in order."""
    seen = set()
    result = []
    for node in nodes:
        if id(node) not in seen:
            seen.add(id(node))
            result.append(node)
    return result


class Selection(CamelCaseAliases):
    """
    A jQuery-like view over nodes of a parsed document.

    Attributes:
        nodes: The selected nodes, without duplicates
        base_url: Base URL used to resolve URL-valued attributes
        document: The document the nodes belong to
    """

    def __init__(self,
                 nodes: Iterable[Node] = (),
                 base_url: str = "",
                 document: Optional[Node] = None,
                 previous: Optional['Selection'] = None):
        """
        Initialize a selection.

        Args:
            nodes: The nodes to select; duplicates are dropped
            base_url: Base URL for resolving URL attributes
            document: The owning document, used for selector engine lookups
            previous: The selection this one was derived from
        """
        self.nodes = tuple(unique_nodes(nodes))
        self.base_url = base_url or ""
        self.document = document
        self.previous = previous

    @property
    def engine(self) -> SelectorEngine:
        engine = getattr(self.document, 'selector_engine', None)
        return engine if engine is not None else _fallback_engine()

    def derive(self, nodes: Iterable[Node]) -> 'Selection':
        """Create a selection derived from this one."""
        return Selection(nodes, self.base_url, self.document, self)

    def wrap(self, node: Node) -> Element:
        """Create the element facade for one node."""
        return ElementFactory.create_element(node, self)

    def _matcher(self, selector: Any) -> Matcher:
        return Matcher(self, selector)

    def _filtered(self, nodes: Iterable[Node], selector: Any = None) -> 'Selection':
        """Derive a selection, keeping only matches of an optional filter."""
        nodes = unique_nodes(nodes)
        if selector is not None:
            nodes = self._matcher(selector).filter(nodes)
        return self.derive(nodes)

    # Finding and filtering

    def find(self, selector: SelectorLike) -> 'Selection':
        """
        Get the descendants of each node that match a selector.

        Args:
            selector: CSS selector, Selection, Element or predicate function

        Returns:
            The matching descendants, in document order per node
        """
        matcher = self._matcher(selector)
        if matcher.kind == "selector":
            found = []
            for node in self.nodes:
                found.extend(self.engine.select(selector, node))
            return self.derive(found)

        if matcher.kind == "nodes":
            return self.derive(candidate for candidate in matcher.nodes
                               if any(node is not candidate and node.contains(candidate)
                                      for node in self.nodes))

        descendants = unique_nodes(child for node in self.nodes
                                   for child in node.descendants() if child.is_element)
        return self.derive(matcher.filter(descendants))

    def filter(self, selector: SelectorLike) -> 'Selection':
        """Keep the nodes that match a selector, Selection, Element or predicate."""
        return self.derive(self._matcher(selector).filter(self.nodes))

    def not_(self, selector: SelectorLike) -> 'Selection':
        """Remove the nodes that match a selector, Selection, Element or predicate."""
        return self.derive(self._matcher(selector).reject(self.nodes))

    def is_(self, selector: SelectorLike) -> bool:
        """Check whether at least one node matches."""
        matcher = self._matcher(selector)
        return any(matcher.matches(node, index) for index, node in enumerate(self.nodes))

    def has(self, selector: SelectorLike) -> 'Selection':
        """Keep the nodes that have a matching descendant."""
        matcher = self._matcher(selector)
        if matcher.is_none:
            return self.derive([])

        if matcher.kind == "selector":
            return self.derive(node for node in self.nodes
                               if self.engine.select(selector, node))

        kept = []
        for node in self.nodes:
            descendants = [child for child in node.descendants() if child.is_element]
            if matcher.filter(descendants):
                kept.append(node)
        return self.derive(kept)

    def closest(self, selector: SelectorLike) -> 'Selection':
        """Get the first ancestor-or-self of each node that matches."""
        matcher = self._matcher(selector)
        found = []
        for node in self.nodes:
            current = node
            while current is not None and current.is_element:
                if matcher.matches(current):
                    found.append(current)
                    break
                current = current.parent_node
        return self.derive(found)

    def add(self, selector: SelectorLike) -> 'Selection':
        """
        Add more nodes to the selection.

        A selector string is matched against the whole document.

        Returns:
            The union, in first-occurrence order
        """
        matcher = self._matcher(selector)
        if matcher.kind == "nodes":
            return self.derive(list(self.nodes) + matcher.nodes)

        if matcher.is_none or self.document is None:
            return self.derive(self.nodes)

        if matcher.kind == "selector":
            added = self.engine.select(selector, self.document)
        else:
            added = matcher.filter(node for node in self.document.descendants() if node.is_element)
        return self.derive(list(self.nodes) + added)

    # Adjacency

    def children(self, selector: Optional[str] = None) -> 'Selection':
        return self._filtered((child for node in self.nodes for child in node.children), selector)

    def contents(self, selector: Optional[str] = None) -> 'Selection':
        """Get the child nodes of each node, including text and comment nodes."""
        return self._filtered((child for node in self.nodes for child in node.child_nodes), selector)

    def parent(self, selector: Optional[str] = None) -> 'Selection':
        parents = (node.parent_element for node in self.nodes)
        return self._filtered((parent for parent in parents if parent is not None), selector)

    def parents(self, selector: Optional[str] = None) -> 'Selection':
        """Get the element ancestors of each node, nearest first."""
        return self.parents_until(None, selector)

    def parents_until(self, until: SelectorLike = None, selector: Optional[str] = None) -> 'Selection':
        """
        Get ancestors up to, but not including, the first one that matches `until`.

        Args:
            until: Stop condition; None walks to the root
            selector: Filter applied to the collected ancestors

        Returns:
            The collected ancestors, nearest first
        """
        return self._walk(lambda node: node.parent_element, until, selector)

    def next(self, selector: Optional[str] = None) -> 'Selection':
        siblings = (node.next_element_sibling for node in self.nodes)
        return self._filtered((sibling for sibling in siblings if sibling is not None), selector)

    def next_all(self, selector: Optional[str] = None) -> 'Selection':
        return self.next_until(None, selector)

    def next_until(self, until: SelectorLike = None, selector: Optional[str] = None) -> 'Selection':
        """Get the following element siblings up to, but not including, a match of `until`."""
        return self._walk(lambda node: node.next_element_sibling, until, selector)

    def prev(self, selector: Optional[str] = None) -> 'Selection':
        siblings = (node.previous_element_sibling for node in self.nodes)
        return self._filtered((sibling for sibling in siblings if sibling is not None), selector)

    def prev_all(self, selector: Optional[str] = None) -> 'Selection':
        """Get the preceding element siblings of each node, nearest first."""
        return self.prev_until(None, selector)

    def prev_until(self, until: SelectorLike = None, selector: Optional[str] = None) -> 'Selection':
        """Get the preceding element siblings up to, but not including, a match of `until`."""
        return self._walk(lambda node: node.previous_element_sibling, until, selector)

    def siblings(self, selector: Optional[str] = None) -> 'Selection':
        """Get the element siblings of each node, in document order, excluding the node."""
        found = []
        for node in self.nodes:
            if node.parent_node is None:
                continue
            found.extend(sibling for sibling in node.parent_node.children if sibling is not node)
        return self._filtered(found, selector)

    def _walk(self, step: Callable[[Node], Optional[Node]], until: SelectorLike,
              selector: Optional[str]) -> 'Selection':
        stop = self._matcher(until)
        collected = []
        for node in self.nodes:
            current = step(node)
            while current is not None:
                if not stop.is_none and stop.matches(current):
                    break
                collected.append(current)
                current = step(current)
        return self._filtered(collected, selector)

    # Positional access

    def eq(self, index: int) -> 'Selection':
        """Get the node at an index; negative indices count from the end."""
        if index < 0:
            index += len(self.nodes)
        if index < 0 or index >= len(self.nodes):
            return self.derive([])
        return self.derive([self.nodes[index]])

    def first(self) -> 'Selection':
        return self.eq(0)

    def last(self) -> 'Selection':
        return self.eq(-1)

    def slice(self, start: int, end: Optional[int] = None) -> 'Selection':
        """Get a range of nodes; bounds are clamped to the selection."""
        return self.derive(self.nodes[start:end])

    def get(self, index: Optional[int] = None) -> Union[List[Element], Element, None]:
        """
        Get element facades for the selected nodes.

        Args:
            index: Position to read; negative indices count from the end

        Returns:
            All elements when no index is given, otherwise the element at
            the index or None when it is out of range
        """
        if index is None:
            return [self.wrap(node) for node in self.nodes]

        if index < 0:
            index += len(self.nodes)
        if index < 0 or index >= len(self.nodes):
            return None
        return self.wrap(self.nodes[index])

    def to_array(self) -> List['Selection']:
        """Get one single-node selection per node."""
        return [self.derive([node]) for node in self.nodes]

    def size(self) -> int:
        return len(self.nodes)

    @property
    def length(self) -> int:
        return len(self.nodes)

    def index(self, selector: SelectorLike = None) -> int:
        """
        Get the position of the first node.

        Args:
            selector: None for the position among its element siblings, a
                Selection or Element for the position within it, or a CSS
                selector for the position among the document's matches

        Returns:
            The 0-based position, or -1 when it cannot be found
        """
        if not self.nodes:
            return -1
        first = self.nodes[0]

        if selector is None:
            parent = first.parent_node
            if parent is None:
                return 0
            # Text and comment nodes count among all child nodes
            return _position(parent.children if first.is_element else parent.child_nodes, first)

        matcher = self._matcher(selector)
        if matcher.kind == "selector":
            if self.document is None:
                return -1
            return _position(self.engine.select(selector, self.document), first)
        if matcher.kind == "nodes":
            return _position(matcher.nodes, first)

        candidates = [node for node in self.document.descendants() if node.is_element] \
            if self.document is not None else []
        return _position(matcher.filter(candidates), first)

    def end(self) -> 'Selection':
        """Get the selection this one was derived from."""
        if self.previous is not None:
            return self.previous
        return Selection((), self.base_url, self.document)

    # Iteration

    def each(self, fn: Callable[[int, Element], Any]) -> 'Selection':
        """
        Call a function for each node, in order.

        Exceptions raised by the function propagate and stop the iteration.
        """
        require_callable('each', fn)
        for index, node in enumerate(self.nodes):
            fn(index, self.wrap(node))
        return self

    def map(self, fn: Callable[[int, Element], Any]) -> List[Any]:
        """Collect the return value of a function for each node, in order."""
        require_callable('map', fn)
        return [fn(index, self.wrap(node)) for index, node in enumerate(self.nodes)]

    # Reading values

    def attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get an attribute of the first node, or `default` when it is absent."""
        for node in self.nodes:
            if node.is_element:
                value = node.get_attribute(name)
                return default if value is None else value
            break
        return default

    def html(self) -> Optional[str]:
        """Get the inner markup of the first node."""
        if not self.nodes:
            return None
        return self.wrap(self.nodes[0]).inner_html()

    def text(self) -> str:
        """Get the combined text content of all nodes."""
        return "".join(node.text_content for node in self.nodes)

    def val(self) -> Union[str, List[str], None]:
        """Get the current value of the first node if it is a form element."""
        if not self.nodes:
            return None
        return control_value(self.nodes[0])

    def data(self, name: Optional[str] = None) -> Any:
        """Get typed data-* attribute values of the first node."""
        return element_data(self.nodes[0] if self.nodes else None, name)

    def serialize(self) -> str:
        return serialize(self)

    def serialize_array(self) -> List[FormValue]:
        return serialize_array(self)

    def serialize_object(self) -> Dict[str, Union[str, List[str]]]:
        return serialize_object(self)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Element]:
        for node in self.nodes:
            yield self.wrap(node)

    def __repr__(self) -> str:
        names = ", ".join(node.node_name for node in self.nodes[:5])
        more = ", ..." if len(self.nodes) > 5 else ""
        return f"<Selection [{names}{more}]>"


def _position(nodes: Iterable[Node], node: Node) -> int:
    for i, candidate in enumerate(nodes):
        if candidate is node:
            return i
    return -1
