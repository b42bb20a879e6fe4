"""
Dispatch for selector-like arguments.

Selection methods accept a CSS selector string, another Selection, a single
element, a predicate function or None. Every method converts its argument
through `Matcher` so the type checks live in one place.
"""

from typing import Any, Callable, Iterable, List, Optional

from ..dom.node import Node
from ..exceptions import CallbackError, SelectorTypeError


def nodes_of(value: Any) -> Optional[List[Node]]:
    """
    Get the nodes behind a Selection, element facade or DOM node.

    Returns:
        The node list, or None if the value is not node-like
    """
    nodes = getattr(value, 'nodes', None)
    if nodes is not None:
        return list(nodes)
    node = getattr(value, 'node', None)
    if isinstance(node, Node):
        return [node]
    if isinstance(value, Node):
        return [value]
    return None


def require_callable(method: str, fn: Any) -> Callable:
    if not callable(fn):
        raise CallbackError(method, fn)
    return fn


class Matcher:
    """
    A compiled selector-like argument.

    Attributes:
        kind: One of "none", "selector", "nodes" or "function"
    """

    def __init__(self, selection, value: Any):
        """
        Classify a selector-like value.

        Args:
            selection: The selection the argument is applied to
            value: The selector-like argument

        Raises:
            SelectorTypeError: If the value is not selector-like
        """
        self.selection = selection
        self.value = value
        self.nodes: List[Node] = []

        if value is None:
            self.kind = "none"
        elif isinstance(value, str):
            self.kind = "selector"
        else:
            nodes = nodes_of(value)
            if nodes is not None:
                self.kind = "nodes"
                self.nodes = nodes
            elif callable(value):
                self.kind = "function"
            else:
                raise SelectorTypeError(value)

        self._ids = {id(node) for node in self.nodes}

    @property
    def is_none(self) -> bool:
        return self.kind == "none"

    def matches(self, node: Node, index: int = 0) -> bool:
        """
        Test one node.

        Args:
            node: The candidate node
            index: The candidate's position, passed to predicate functions

        Returns:
            True if the node matches; None matches nothing
        """
        if self.kind == "selector":
            return self.selection.engine.matches(node, self.value)
        if self.kind == "nodes":
            return id(node) in self._ids
        if self.kind == "function":
            return bool(self.value(index, self.selection.derive([node])))
        return False

    def filter(self, nodes: Iterable[Node]) -> List[Node]:
        """Keep the nodes that match, numbering candidates from zero."""
        return [node for index, node in enumerate(nodes) if self.matches(node, index)]

    def reject(self, nodes: Iterable[Node]) -> List[Node]:
        """Keep the nodes that do not match."""
        return [node for index, node in enumerate(nodes) if not self.matches(node, index)]
