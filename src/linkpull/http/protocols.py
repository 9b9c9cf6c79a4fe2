"""The fetch seam between PageFetcher and the network."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class HttpResponse:
    """
    A fetched page, whatever its status.

    `url` is where the redirect chain ended; relative links on the page
    resolve against it.
    """

    status_code: int
    content: bytes
    content_type: str
    headers: dict[str, str]
    url: str

    @property
    def is_html(self) -> bool:
        """True for text/html and XHTML content types."""
        content_type = self.content_type.lower()
        return "text/html" in content_type or "application/xhtml" in content_type


class HttpClient(Protocol):
    """
    What PageFetcher needs from a client: one GET and a way to turn the
    body into text. Tests pass a stub with these two methods.
    """

    async def get(
        self,
        url: str,
        *,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """
        Fetch `url`, following redirects.

        Error statuses are returned, not raised. Network failures and
        timeouts propagate.
        """
        ...

    def decode_content(self, response: HttpResponse) -> str:
        """Decode the response body to text."""
        ...
