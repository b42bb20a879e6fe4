"""
URL utility for resolving and decomposing URLs found in attributes.
"""

import logging
import urllib.parse
from typing import Optional

logger = logging.getLogger(__name__)


def resolve(base_url: str, reference: str) -> Optional[str]:
    """
    Resolve a URL reference against a base URL.

    Args:
        base_url: Absolute base URL
        reference: Attribute value to resolve

    Returns:
        The resolved URL, or None if either side cannot be parsed
    """
    try:
        # urlsplit validates brackets and the like; urljoin alone is lenient
        urllib.parse.urlsplit(base_url)
        urllib.parse.urlsplit(reference)
        return urllib.parse.urljoin(base_url, reference)
    except ValueError as e:
        logger.debug(f"Unable to resolve {reference!r} against {base_url!r}: {e}")
        return None


class URL:
    """Decomposes a URL string into its DOM-visible parts."""

    # Default ports for common schemes
    DEFAULT_PORTS = {
        'http': '80',
        'https': '443',
        'ftp': '21'
    }

    def __init__(self, url: str):
        """
        Initialize with a URL string.

        Args:
            url: URL string to parse; unparseable input behaves like an empty URL
        """
        self._url = url or ""
        try:
            self._parsed = urllib.parse.urlsplit(self._url)
        except ValueError:
            logger.debug(f"Unparseable URL treated as empty: {url!r}")
            self._url = ""
            self._parsed = urllib.parse.urlsplit("")

    @property
    def scheme(self) -> str:
        """Get the URL scheme."""
        return self._parsed.scheme

    @property
    def host(self) -> str:
        """Host and port, without the port when it is the scheme default."""
        netloc = self._parsed.netloc.rpartition('@')[2]
        if not netloc:
            return ""

        hostname, port = self._split_host_port(netloc)
        if port and self.DEFAULT_PORTS.get(self.scheme) == port:
            return hostname if not hostname.count(':') else f"[{hostname}]"

        return netloc

    @property
    def hostname(self) -> str:
        """Get the URL hostname."""
        netloc = self._parsed.netloc.rpartition('@')[2]
        return self._split_host_port(netloc)[0]

    @property
    def port(self) -> str:
        """Get the explicit URL port, or an empty string."""
        netloc = self._parsed.netloc.rpartition('@')[2]
        return self._split_host_port(netloc)[1]

    @property
    def username(self) -> str:
        """Get the URL username."""
        userinfo, sep, _ = self._parsed.netloc.rpartition('@')
        if not sep:
            return ""
        return urllib.parse.unquote(userinfo.partition(':')[0])

    @property
    def password(self) -> str:
        """Get the URL password."""
        userinfo, sep, _ = self._parsed.netloc.rpartition('@')
        if not sep:
            return ""
        return urllib.parse.unquote(userinfo.partition(':')[2])

    @property
    def pathname(self) -> str:
        """Get the decoded URL path."""
        return urllib.parse.unquote(self._parsed.path)

    @property
    def protocol(self) -> str:
        """Get the scheme followed by a colon."""
        return f"{self.scheme}:"

    @property
    def search(self) -> str:
        """Get the query string with its leading '?', or an empty string."""
        query = self._parsed.query
        return f"?{query}" if query else ""

    @property
    def hash(self) -> str:
        """Get the fragment with its leading '#', or an empty string."""
        fragment = self._parsed.fragment
        return f"#{fragment}" if fragment else ""

    @property
    def origin(self) -> str:
        """Get the URL origin (scheme + netloc)."""
        if not self.scheme:
            return ""

        if self.scheme == 'file':
            return self._url

        return f"{self.scheme}://{self._parsed.netloc.rpartition('@')[2]}"

    @staticmethod
    def _split_host_port(netloc: str):
        if netloc.startswith('['):
            host, _, rest = netloc[1:].partition(']')
            return host, rest[1:] if rest.startswith(':') else ""

        host, sep, port = netloc.rpartition(':')
        if not sep:
            return netloc, ""
        return host, port

    def __str__(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"URL({self._url!r})"
