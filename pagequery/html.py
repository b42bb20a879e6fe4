"""
Entry point for parsing HTML into a queryable Selection.
"""

import logging
import threading
from typing import Optional, Union

from .dom import Parser, SelectorEngine
from .query.selection import Selection
from .utils.config import get_config
from .utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)

_engine: Optional[SelectorEngine] = None
_engine_lock = threading.Lock()


def shared_selector_engine() -> SelectorEngine:
    """Get the selector engine shared by documents parsed with `parse_html`."""
    global _engine
    with _engine_lock:
        if _engine is None:
            cache_size = get_config().get("selector.cache_size", 256)
            _engine = SelectorEngine(cache_size)
        return _engine


def parse_html(source: Union[str, bytes], base_url: str = "") -> Selection:
    """
    Parse an HTML document.

    Args:
        source: The HTML source; bytes are decoded as UTF-8
        base_url: Base URL used to resolve URL-valued attributes

    Returns:
        A Selection holding the document node

    Raises:
        ParseError: If the source cannot be parsed
    """
    keep_errors = bool(get_config().get("parser.keep_parse_errors", True))
    parser = Parser(shared_selector_engine(), keep_errors=keep_errors)

    with PerformanceLogger(logger, "html").measure("parse"):
        document = parser.parse(source)

    if document.errors:
        logger.debug(f"Parsed document with {len(document.errors)} recoverable errors")

    return Selection([document], base_url, document)
