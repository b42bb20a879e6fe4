"""
pagequery - jQuery-style querying of parsed HTML documents.
"""

from pagequery.utils.config import get_config
from pagequery.utils.logging import setup_logging_from_config
from pagequery.exceptions import CallbackError, ParseError, SelectorTypeError
from pagequery.html import parse_html
from pagequery.query import Attribute, Element, FormValue, Selection

# Package information
__version__ = "0.1.0"
__description__ = "jQuery-style querying of parsed HTML documents"

logger = setup_logging_from_config(get_config())

logger.debug(f"pagequery v{__version__} initialized")

__all__ = [
    'parse_html', 'Selection', 'Element', 'Attribute', 'FormValue',
    'ParseError', 'SelectorTypeError', 'CallbackError', '__version__'
]
