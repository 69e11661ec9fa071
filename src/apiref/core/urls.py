"""URL helpers shared by the fetcher and the registration workflow."""

from urllib.parse import urlsplit


def is_remote_url(value: str) -> bool:
    """Return True if value is an absolute http(s) URL with a host.

    Examples:
        >>> is_remote_url("https://example.com/openapi.json")
        True
        >>> is_remote_url("openapi/openapi.json")
        False
        >>> is_remote_url("ftp://example.com/openapi.json")
        False
        >>> is_remote_url("https://example.com:abc/openapi.json")
        False
    """
    try:
        parts = urlsplit(value)
        # hostname and port are parsed lazily and raise ValueError when malformed
        hostname, _ = parts.hostname, parts.port
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(hostname)
