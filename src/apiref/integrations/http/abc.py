"""HTTP operations abstraction for testing.

Remote documents and the package-version manifest are fetched through this
interface so that commands can be tested with an in-memory fake instead of
the network.
"""

from abc import ABC, abstractmethod
from collections.abc import Generator


class HttpRequestError(Exception):
    """A request failed: transport error, timeout, or non-2xx status.

    Attributes:
        url: URL that was requested
    """

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class HttpClient(ABC):
    """Abstract HTTP operations for dependency injection."""

    @abstractmethod
    def get_json(self, url: str) -> object:
        """GET url and decode the body as JSON.

        Args:
            url: Absolute URL to request

        Returns:
            Decoded JSON value

        Raises:
            HttpRequestError: If the request fails or returns a non-2xx status
            ValueError: If the body is not valid JSON
        """
        ...

    @abstractmethod
    def stream_bytes(self, url: str) -> Generator[bytes, None, None]:
        """GET url and yield the response body in chunks.

        The connection is held open while the generator is being consumed and
        released once it is exhausted or closed.

        Args:
            url: Absolute URL to request

        Yields:
            Body chunks in order

        Raises:
            HttpRequestError: If the request fails before or while streaming
        """
        ...
