"""
Form control values and form serialization.

Controls are serialized the way a browser submits them: only successful
controls are included, in document order.
"""

import logging
from typing import Dict, List, NamedTuple, Optional, Union
from urllib.parse import urlencode

from ..dom.node import Node
from .attributes import value_or_html

logger = logging.getLogger(__name__)

CONTROL_SELECTOR = "input,select,textarea,keygen"

# Input types that never contribute to a submission
UNSUBMITTED_TYPES = frozenset({'submit', 'button', 'reset', 'image', 'file'})
CHECKABLE_TYPES = frozenset({'checkbox', 'radio'})


class FormValue(NamedTuple):
    """One successful control: its name and its string or list value."""
    name: str
    value: Union[str, List[str]]


def input_type(node: Node) -> str:
    return (node.get_attribute('type') or '').lower()


def selected_options(node: Node) -> List[Node]:
    """Get the option descendants of a node that carry `selected`, in document order."""
    return [option for option in node.descendants()
            if option.is_element and option.tag_name == 'option' and option.has_attribute('selected')]


def control_value(node: Optional[Node]) -> Union[str, List[str], None]:
    """
    Read the current value of a form element.

    Args:
        node: The node to read

    Returns:
        The value, a list of values for a multiple select, or None for nodes
        that have no value
    """
    if node is None or not node.is_element:
        return None

    tag = node.tag_name
    if tag == 'input':
        value = node.get_attribute('value')
        if value is None and input_type(node) in CHECKABLE_TYPES:
            return 'on'
        return value or ''

    if tag in ('button', 'option'):
        return value_or_html(node)

    if tag == 'textarea':
        return node.inner_html

    if tag == 'select':
        selected = selected_options(node)
        if node.has_attribute('multiple'):
            return [value_or_html(option) for option in selected]

        if selected:
            return value_or_html(selected[0])
        # No option marked selected: the first option wins
        first = next((option for option in node.descendants()
                      if option.is_element and option.tag_name == 'option'), None)
        return value_or_html(first)

    return None


def is_successful(node: Node) -> bool:
    """
    Check whether a control contributes to a form submission.

    Args:
        node: A form control element

    Returns:
        True if the control has a name, is enabled, has a submittable type
        and, for checkboxes and radio buttons, is checked
    """
    if not node.get_attribute('name'):
        return False
    if node.has_attribute('disabled'):
        return False

    control_type = input_type(node)
    if control_type in UNSUBMITTED_TYPES:
        return False
    if control_type in CHECKABLE_TYPES and not node.has_attribute('checked'):
        return False

    return True


def serialize_array(selection) -> List[FormValue]:
    """
    Collect the successful controls of a form, or of a set of controls.

    Args:
        selection: A selection holding forms or form controls

    Returns:
        One FormValue per successful control, in document order
    """
    if selection.is_('form'):
        controls = selection.find(CONTROL_SELECTOR)
    else:
        controls = selection.filter(CONTROL_SELECTOR)

    values = [FormValue(node.get_attribute('name'), control_value(node))
              for node in controls.nodes if is_successful(node)]
    logger.debug(f"{len(values)} of {controls.size()} controls are successful")
    return values


def serialize_object(selection) -> Dict[str, Union[str, List[str]]]:
    """
    Fold the successful controls into a name -> value mapping.

    A name that appears more than once keeps its last value.
    """
    return {form_value.name: form_value.value for form_value in serialize_array(selection)}


def serialize(selection) -> str:
    """
    Encode the successful controls as an application/x-www-form-urlencoded string.

    List values are repeated once per item.
    """
    pairs = []
    for form_value in serialize_array(selection):
        if isinstance(form_value.value, list):
            pairs.extend((form_value.name, item) for item in form_value.value)
        else:
            pairs.append((form_value.name, form_value.value))
    return urlencode(pairs)
