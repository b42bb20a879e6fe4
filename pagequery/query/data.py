"""
Typed access to data-* attributes.
"""

import json
import math
import re
from decimal import Decimal
from typing import Any, Dict, Optional

from ..dom.node import Node

DATA_PREFIX = "data-"

_UPPER_RE = re.compile(r'([A-Z])')
_DASHED_RE = re.compile(r'-(.)')


def property_to_attr(name: str) -> str:
    """Convert a camelCase property name to its kebab-case attribute form."""
    return _UPPER_RE.sub(lambda m: '-' + m.group(1).lower(), name)


def attr_to_property(name: str) -> str:
    """Convert a kebab-case attribute name to its camelCase property form."""
    return _DASHED_RE.sub(lambda m: m.group(1).upper(), name)


def coerce_value(value: str) -> Any:
    """
    Convert a data attribute string to a typed value.

    Args:
        value: The raw attribute value

    Returns:
        None, a bool, an int or float, a parsed JSON structure, or the
        string itself
    """
    if not value:
        return None

    if value[0] in '{[':
        try:
            return json.loads(value)
        except ValueError:
            return value

    if value == 'true':
        return True
    if value == 'false':
        return False
    if value in ('null', 'undefined'):
        return None

    return _coerce_number(value)


def _coerce_number(value: str) -> Any:
    # Only strings already in canonical decimal form become numbers,
    # so "1.50" and "1e3" stay strings.
    try:
        number = float(value)
    except ValueError:
        return value

    if not math.isfinite(number):
        return value

    canonical = format(Decimal(repr(number)), 'f')
    if '.' in canonical:
        canonical = canonical.rstrip('0').rstrip('.')

    if canonical != value:
        return value

    if '.' in canonical:
        return number
    return int(canonical)


def element_data(node: Optional[Node], name: Optional[str] = None) -> Any:
    """
    Read data-* attributes of a node.

    Args:
        node: The node to read, or None for an empty selection
        name: A camelCase name to read one attribute; None reads them all

    Returns:
        The coerced value of one attribute, a dict of all of them keyed by
        camelCase name, or None when there is nothing to read
    """
    if node is None or not node.is_element or not node.has_attributes():
        return None

    if name is not None:
        value = node.get_attribute(DATA_PREFIX + property_to_attr(name))
        if value is None:
            return None
        return coerce_value(value)

    data: Dict[str, Any] = {}
    for attr_name, attr in node.attributes.items():
        if attr_name.startswith(DATA_PREFIX) and len(attr_name) > len(DATA_PREFIX):
            data[attr_to_property(attr_name[len(DATA_PREFIX):])] = coerce_value(attr.value)
    return data
