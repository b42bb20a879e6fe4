"""
Errors raised by pagequery.

Missing attributes, out-of-range indices and empty traversals are not
errors; they produce None or empty selections.
"""


class ParseError(ValueError):
    """The HTML source could not be turned into a document tree."""


class SelectorTypeError(TypeError):
    """A selector-like argument had an unsupported type."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"cannot use a '{type(value).__name__}' as a selector")


class CallbackError(TypeError):
    """A callback argument was not callable."""

    def __init__(self, method: str, value):
        self.value = value
        super().__init__(f"{method}() expects a function, got a '{type(value).__name__}'")
