"""HTTP client for linkpull."""

from .client import DEFAULT_USER_AGENT, AsyncHttpClient
from .protocols import HttpClient, HttpResponse

__all__ = [
    "AsyncHttpClient",
    "DEFAULT_USER_AGENT",
    "HttpClient",
    "HttpResponse",
]
