from apiref.integrations.http.abc import HttpClient, HttpRequestError
from apiref.integrations.http.real import HttpxClient

__all__ = ["HttpClient", "HttpRequestError", "HttpxClient"]
