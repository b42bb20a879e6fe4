"""
JavaScript-style method names for the query API.

Scripts written against the DOM call `nextUntil` or `innerHTML`; these
resolve to the snake_case methods `next_until` and `inner_html`.
"""

import re

_CAMEL_RE = re.compile(r'(?<=[a-z0-9])([A-Z])')

# Names the generic conversion gets wrong, or that are Python keywords
SPECIAL_NAMES = {
    'is': 'is_',
    'not': 'not_',
    'async': 'async_',
    'tHead': 'thead',
    'tFoot': 'tfoot',
    'tBodies': 'tbodies',
}


def snake_case(name: str) -> str:
    """Convert a camelCase name to snake_case."""
    if name in SPECIAL_NAMES:
        return SPECIAL_NAMES[name]
    return _CAMEL_RE.sub(r'_\1', name).lower()


class CamelCaseAliases:
    """Mixin that resolves camelCase attribute names to snake_case ones."""

    def __getattr__(self, name: str):
        if not name.startswith('_'):
            converted = snake_case(name)
            if converted != name and (converted in self.__dict__ or hasattr(type(self), converted)):
                return getattr(self, converted)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
