"""
Attribute resolution for selections and element facades.

URL-valued attributes resolve against the base URL that a selection
carries. Resolution never raises: a value that cannot be resolved is
returned as written.
"""

import logging
import re
from typing import List, Optional

from ..dom.node import Node
from ..utils.url import resolve

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r'^[+-]?[0-9]+$')


def attr_as_string(node: Node, name: str) -> str:
    """
    Get an attribute value, or an empty string when it is absent.

    Args:
        node: The node to read
        name: The attribute name

    Returns:
        The attribute value
    """
    if not node.is_element:
        return ""
    return node.get_attribute(name) or ""


def attr_is_present(node: Node, name: str) -> bool:
    return node.is_element and node.has_attribute(name)


def attr_as_int(node: Node, name: str, default: int) -> int:
    """
    Parse an attribute as a base-10 integer.

    Args:
        node: The node to read
        name: The attribute name
        default: Returned when the attribute is absent or not an integer

    Returns:
        The parsed value or the default
    """
    value = node.get_attribute(name) if node.is_element else None
    if value is None or not _INTEGER_RE.match(value):
        return default
    return int(value)


def split_attr(node: Node, name: str) -> List[str]:
    """Split a whitespace-separated attribute into its tokens."""
    return attr_as_string(node, name).split()


def attr_as_url(node: Node, name: str, base_url: str) -> Optional[str]:
    """
    Resolve a URL-valued attribute against a base URL.

    Args:
        node: The node to read
        name: The attribute name
        base_url: The base URL; an empty base leaves the reference as is

    Returns:
        The resolved URL, the raw value if it cannot be resolved, or None
        if the attribute is absent
    """
    value = node.get_attribute(name) if node.is_element else None
    if value is None:
        return None

    resolved = resolve(base_url, value)
    if resolved is None:
        logger.debug(f"Keeping unresolved {name} value {value!r}")
        return value
    return resolved


def attr_as_url_string(node: Node, name: str, base_url: str, default: str = "") -> str:
    """
    Read a URL-valued attribute the way DOM URL reflection does.

    Without a base URL the raw attribute (or an empty string) is returned.
    With a base URL an absent attribute yields `default`.

    Args:
        node: The node to read
        name: The attribute name
        base_url: The selection's base URL
        default: Value for an absent attribute when a base URL is set

    Returns:
        The attribute as a URL string
    """
    if not base_url:
        return attr_as_string(node, name)

    url = attr_as_url(node, name, base_url)
    if url is None:
        return default
    return url


def value_or_html(node: Optional[Node]) -> str:
    """Get the value attribute of a node, falling back to its inner markup."""
    if node is None or not node.is_element:
        return ""
    value = node.get_attribute('value')
    if value is not None:
        return value
    return node.inner_html
