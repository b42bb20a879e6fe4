"""
CSS Selector Engine implementation.
This module matches cssselect's parsed selector trees directly against the
DOM, without translating them to XPath.
"""

import logging
from collections import OrderedDict
from typing import Any, Iterator, List, Optional, Tuple

import cssselect
from cssselect.parser import parse_series

from .node import Node, NodeType

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 256

# Elements that can be disabled
DISABLEABLE_ELEMENTS = frozenset({
    'button', 'input', 'select', 'textarea', 'optgroup', 'option', 'fieldset', 'keygen'
})


class SelectorEngine:
    """
    CSS Selector Engine for DOM queries.

    Parsed selectors are kept in a bounded LRU cache. A selector that cannot
    be parsed, or that uses an unsupported pseudo-class, matches nothing.
    """

    def __init__(self, cache_size: int = DEFAULT_CACHE_SIZE):
        """
        Initialize the selector engine.

        Args:
            cache_size: Maximum number of parsed selectors to keep
        """
        self.cache_size = max(0, int(cache_size))
        self._selector_cache: 'OrderedDict[str, Optional[List[Any]]]' = OrderedDict()

        logger.debug(f"SelectorEngine initialized (cache size {self.cache_size})")

    def select(self, selector: str, root_node: Node) -> List['Element']:
        """
        Find all descendant elements matching a CSS selector.

        Args:
            selector: The CSS selector string
            root_node: The root node to search from

        Returns:
            List of matching elements in document order
        """
        parsed = self._get_parsed_selector(selector)
        if not parsed:
            return []

        try:
            return [node for node in root_node.descendants()
                    if node.is_element and self._matches_any(node, parsed)]
        except cssselect.SelectorError as e:
            self._reject(selector, e)
            return []

    def matches(self, element: Node, selector: str) -> bool:
        """
        Check if an element matches a CSS selector.

        Args:
            element: The element to check
            selector: The CSS selector

        Returns:
            True if the element matches the selector, False otherwise
        """
        if element is None or not element.is_element:
            return False

        parsed = self._get_parsed_selector(selector)
        if not parsed:
            return False

        try:
            return self._matches_any(element, parsed)
        except cssselect.SelectorError as e:
            self._reject(selector, e)
            return False

    def _get_parsed_selector(self, selector: str) -> Optional[List[Any]]:
        """
        Get a parsed selector, using the cache if available.

        Args:
            selector: The CSS selector string

        Returns:
            List of cssselect Selector objects, or None if the selector is invalid
        """
        if selector in self._selector_cache:
            self._selector_cache.move_to_end(selector)
            return self._selector_cache[selector]

        try:
            parsed = cssselect.parse(selector)
        except cssselect.SelectorError as e:
            logger.warning(f"Error parsing selector '{selector}': {e}")
            parsed = None

        self._remember(selector, parsed)
        return parsed

    def _remember(self, selector: str, parsed: Optional[List[Any]]) -> None:
        if self.cache_size == 0:
            return
        self._selector_cache[selector] = parsed
        self._selector_cache.move_to_end(selector)
        while len(self._selector_cache) > self.cache_size:
            self._selector_cache.popitem(last=False)

    def _reject(self, selector: str, error: Exception) -> None:
        logger.warning(f"Unsupported selector '{selector}': {error}")
        self._remember(selector, None)

    def _matches_any(self, element: Node, parsed: List[Any]) -> bool:
        for selector in parsed:
            if selector.pseudo_element is not None:
                raise cssselect.ExpressionError(
                    f"pseudo-element ::{selector.pseudo_element} cannot match an element")
            if self._matches_tree(element, selector.parsed_tree):
                return True
        return False

    def _matches_tree(self, element: Node, tree: Any) -> bool:
        """
        Match an element against one node of a cssselect selector tree.

        Args:
            element: The element to check
            tree: The selector tree node

        Returns:
            True if the element matches, False otherwise
        """
        # cssselect wraps nested selectors (:has, :is) in Selector objects
        tree = getattr(tree, 'parsed_tree', tree)
        kind = type(tree).__name__

        if kind == 'Element':
            if not tree.element or tree.element == '*':
                return True
            return element.tag_name.lower() == tree.element.lower()

        if kind == 'Hash':
            return (self._matches_tree(element, tree.selector)
                    and element.get_attribute('id') == tree.id)

        if kind == 'Class':
            return (self._matches_tree(element, tree.selector)
                    and tree.class_name in element.class_list)

        if kind == 'Attrib':
            return (self._matches_tree(element, tree.selector)
                    and self._matches_attribute(element, tree))

        if kind == 'Pseudo':
            return (self._matches_tree(element, tree.selector)
                    and self._matches_pseudo(element, tree.ident))

        if kind == 'Function':
            return (self._matches_tree(element, tree.selector)
                    and self._matches_function(element, tree.name, tree.arguments))

        if kind == 'Negation':
            return (self._matches_tree(element, tree.selector)
                    and not self._matches_tree(element, tree.subselector))

        if kind in ('Matching', 'SpecificityAdjustment'):
            return (self._matches_tree(element, tree.selector)
                    and any(self._matches_tree(element, sub) for sub in tree.selector_list))

        if kind == 'Relation':
            return (self._matches_tree(element, tree.selector)
                    and self._matches_relation(element, tree))

        if kind == 'CombinedSelector':
            if not self._matches_tree(element, tree.subselector):
                return False
            return any(self._matches_tree(candidate, tree.selector)
                       for candidate in self._combinator_candidates(element, tree.combinator))

        raise cssselect.ExpressionError(f"unsupported selector type {kind}")

    def _combinator_candidates(self, element: Node, combinator: str) -> Iterator[Node]:
        """Yield the elements on the left side of a combinator for `element`."""
        if combinator == ' ':
            for ancestor in element.ancestors():
                if ancestor.is_element:
                    yield ancestor
        elif combinator == '>':
            if element.parent_element is not None:
                yield element.parent_element
        elif combinator == '+':
            if element.previous_element_sibling is not None:
                yield element.previous_element_sibling
        elif combinator == '~':
            sibling = element.previous_element_sibling
            while sibling is not None:
                yield sibling
                sibling = sibling.previous_element_sibling
        else:
            raise cssselect.ExpressionError(f"unknown combinator {combinator!r}")

    def _matches_relation(self, element: Node, tree: Any) -> bool:
        """Match the relative selector list of :has() against an anchor element."""
        for combinator, subselector in tree.arguments:
            combinator = getattr(combinator, 'value', combinator)
            if not isinstance(combinator, str) or not combinator.strip():
                combinator = ' '
            if self._matches_relative(element, combinator,
                                      getattr(subselector, 'parsed_tree', subselector)):
                return True
        return False

    def _matches_relative(self, anchor: Node, combinator: str, tree: Any) -> bool:
        """
        Check whether a relative selector finds an element from `anchor`.

        The compound selectors are followed left to right starting at the
        anchor, so in `:has(> p a)` the `p` must be a child of the anchor.
        """
        steps = []
        while type(tree).__name__ == 'CombinedSelector':
            steps.append((tree.combinator, tree.subselector))
            tree = tree.selector
        steps.append((combinator, tree))
        steps.reverse()

        current = [anchor]
        for step_combinator, compound in steps:
            found = []
            seen = set()
            for node in current:
                for candidate in self._forward_candidates(node, step_combinator):
                    if id(candidate) not in seen and self._matches_tree(candidate, compound):
                        seen.add(id(candidate))
                        found.append(candidate)
            if not found:
                return False
            current = found
        return True

    def _forward_candidates(self, element: Node, combinator: str) -> Iterator[Node]:
        """Yield the elements on the right side of a combinator for `element`."""
        if combinator == ' ':
            for node in element.descendants():
                if node.is_element:
                    yield node
        elif combinator == '>':
            yield from element.children
        elif combinator == '+':
            if element.next_element_sibling is not None:
                yield element.next_element_sibling
        elif combinator == '~':
            yield from self._following_siblings(element)
        else:
            raise cssselect.ExpressionError(f"unknown relative combinator {combinator!r}")

    @staticmethod
    def _following_siblings(element: Node) -> Iterator[Node]:
        sibling = element.next_element_sibling
        while sibling is not None:
            yield sibling
            sibling = sibling.next_element_sibling

    def _matches_attribute(self, element: Node, tree: Any) -> bool:
        """
        Match an attribute selector.

        Args:
            element: The element to check
            tree: The cssselect Attrib node

        Returns:
            True if the element matches, False otherwise
        """
        name = tree.attrib if element.namespace_prefix else tree.attrib.lower()
        if tree.namespace:
            name = f"{tree.namespace}:{name}"

        element_value = element.get_attribute(name)
        if element_value is None:
            return False

        operator = tree.operator
        if operator == 'exists':
            return True

        attr_value = getattr(tree.value, 'value', tree.value)

        if operator == '=':
            return element_value == attr_value
        elif operator == '~=':
            return bool(attr_value) and attr_value in element_value.split()
        elif operator == '|=':
            return element_value == attr_value or element_value.startswith(f"{attr_value}-")
        elif operator == '^=':
            return bool(attr_value) and element_value.startswith(attr_value)
        elif operator == '$=':
            return bool(attr_value) and element_value.endswith(attr_value)
        elif operator == '*=':
            return bool(attr_value) and attr_value in element_value
        elif operator == '!=':
            return element_value != attr_value

        raise cssselect.ExpressionError(f"unknown attribute operator {operator!r}")

    def _matches_pseudo(self, element: Node, name: str) -> bool:
        """
        Match a pseudo-class without arguments.

        Args:
            element: The element to check
            name: The lower-cased pseudo-class name

        Returns:
            True if the element matches, False otherwise
        """
        parent = element.parent_node

        if name == 'first-child':
            return element.previous_element_sibling is None
        elif name == 'last-child':
            return element.next_element_sibling is None
        elif name == 'only-child':
            return element.previous_element_sibling is None and element.next_element_sibling is None
        elif name == 'first-of-type':
            return self._type_position(element)[0] == 1
        elif name == 'last-of-type':
            position, count = self._type_position(element)
            return position == count
        elif name == 'only-of-type':
            return self._type_position(element)[1] == 1
        elif name == 'empty':
            return not any(child.node_type in (NodeType.ELEMENT_NODE, NodeType.TEXT_NODE)
                           for child in element.child_nodes)
        elif name == 'root':
            return parent is not None and parent.node_type == NodeType.DOCUMENT_NODE
        elif name == 'checked':
            if element.tag_name == 'input':
                return (element.get_attribute('type') or '').lower() in ('checkbox', 'radio') \
                    and element.has_attribute('checked')
            return element.tag_name == 'option' and element.has_attribute('selected')
        elif name == 'selected':
            return element.tag_name == 'option' and element.has_attribute('selected')
        elif name == 'disabled':
            return is_disabled(element)
        elif name == 'enabled':
            return element.tag_name in DISABLEABLE_ELEMENTS and not is_disabled(element)
        elif name in ('link', 'any-link'):
            return element.tag_name in ('a', 'area', 'link') and element.has_attribute('href')

        raise cssselect.ExpressionError(f"unsupported pseudo-class :{name}")

    def _matches_function(self, element: Node, name: str, arguments: List[Any]) -> bool:
        """
        Match a functional pseudo-class such as :nth-child(2n+1).

        Args:
            element: The element to check
            name: The lower-cased function name
            arguments: The cssselect argument tokens

        Returns:
            True if the element matches, False otherwise
        """
        if name in ('nth-child', 'nth-last-child', 'nth-of-type', 'nth-last-of-type'):
            try:
                a, b = parse_series(arguments)
            except ValueError as e:
                raise cssselect.ExpressionError(f"invalid series for :{name}(): {e}") from e

            if name.endswith('of-type'):
                position, count = self._type_position(element)
            else:
                position, count = self._child_position(element)
            if 'last' in name:
                position = count - position + 1
            return _nth_matches(a, b, position)

        argument = "".join(token.value for token in arguments
                           if token.type != 'S' and token.value is not None)

        if name == 'contains':
            return argument in element.text_content
        elif name == 'lang':
            lang = element_lang(element).lower()
            wanted = argument.lower()
            return lang == wanted or lang.startswith(f"{wanted}-")

        raise cssselect.ExpressionError(f"unsupported pseudo-class :{name}()")

    @staticmethod
    def _child_position(element: Node) -> Tuple[int, int]:
        siblings = element.parent_node.children if element.parent_node is not None else [element]
        return _index_of(siblings, element) + 1, len(siblings)

    @staticmethod
    def _type_position(element: Node) -> Tuple[int, int]:
        siblings = element.parent_node.children if element.parent_node is not None else [element]
        same_type = [sibling for sibling in siblings if sibling.tag_name == element.tag_name]
        return _index_of(same_type, element) + 1, len(same_type)


def _index_of(nodes: List[Node], node: Node) -> int:
    for i, candidate in enumerate(nodes):
        if candidate is node:
            return i
    return -1


def _nth_matches(a: int, b: int, position: int) -> bool:
    if a == 0:
        return position == b
    n, remainder = divmod(position - b, a)
    return remainder == 0 and n >= 0


def element_lang(element: Node) -> str:
    """Get the language of an element, inherited from its ancestors."""
    node = element
    while node is not None and node.is_element:
        lang = node.get_attribute('lang')
        if lang is None:
            lang = node.get_attribute('xml:lang')
        if lang is not None:
            return lang
        node = node.parent_node
    return ""


def is_disabled(element: Node) -> bool:
    """
    Check whether a form element is disabled, directly or by inheritance.

    Options inherit from a disabled optgroup; controls inherit from a disabled
    fieldset unless they sit in its first legend.
    """
    if element.tag_name not in DISABLEABLE_ELEMENTS:
        return False
    if element.has_attribute('disabled'):
        return True

    if element.tag_name == 'option':
        parent = element.parent_element
        return parent is not None and parent.tag_name == 'optgroup' and parent.has_attribute('disabled')

    child = element
    for ancestor in element.ancestors():
        if not ancestor.is_element:
            break
        if ancestor.tag_name == 'fieldset' and ancestor.has_attribute('disabled'):
            first_legend = next((c for c in ancestor.children if c.tag_name == 'legend'), None)
            if first_legend is None or first_legend is not child:
                return True
        child = ancestor
    return False
