"""
Query layer for pagequery.
This package provides the jQuery-like Selection API and the element facades
built over the DOM tree.
"""

from .selection import Selection
from .element import Attribute, Element
from .elements import ElementFactory, TAG_CLASSES
from .form import FormValue

__all__ = [
    'Selection', 'Attribute', 'Element', 'ElementFactory', 'TAG_CLASSES', 'FormValue'
]
