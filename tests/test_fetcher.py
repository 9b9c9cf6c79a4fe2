"""Tests for single-page fetch orchestration."""

import asyncio

import aiohttp
import pytest

from linkpull.core.fetcher import PageFetcher, crawl_blocking
from linkpull.http import AsyncHttpClient, HttpResponse
from linkpull.models.config import ExtractorMode, FilterConfig, LinkpullConfig, LinkScope

PAGE = b"""
<html>
    <head><title>Home</title></head>
    <body>
        <a href="/about">About</a>
        <a href="https://other.com/x">Other</a>
        <img src="/logo.png">
        <script>fetch('/api/profile')</script>
    </body>
</html>
"""


class MockHttpClient:
    """Mock HTTP client for testing."""

    def __init__(self, responses: dict | None = None):
        """
        Initialize mock client.

        Args:
            responses: Dict mapping URLs to (status_code, content_type, content[, final_url])
                or to an exception instance to raise
        """
        self.responses = responses or {}
        self.requested: list[str] = []

    async def get(self, url: str, *, timeout: float | None = None, headers: dict | None = None):
        """Mock GET request."""
        self.requested.append(url)
        entry = self.responses.get(url)
        if entry is None:
            return HttpResponse(404, b"Not found", "text/html", {}, url)
        if isinstance(entry, BaseException):
            raise entry
        status, content_type, content, *rest = entry
        final_url = rest[0] if rest else url
        return HttpResponse(status, content, content_type, {}, final_url)

    def decode_content(self, response: HttpResponse) -> str:
        return response.content.decode("utf-8")


def make_fetcher(responses: dict, **config_kwargs) -> PageFetcher:
    config = LinkpullConfig(**config_kwargs)
    return PageFetcher(config, http_client=MockHttpClient(responses))


class TestCrawl:
    """Tests for PageFetcher.crawl."""

    @pytest.mark.asyncio
    async def test_successful_crawl(self):
        """Test that links, title and status are reported."""
        fetcher = make_fetcher({"https://testsite.com": (200, "text/html", PAGE)})
        result = await fetcher.crawl("https://testsite.com")

        assert result.ok
        assert result.status_code == 200
        assert result.title == "Home"
        assert result.crawler_type == "enhanced"
        assert set(result.links) == {
            "https://testsite.com/about",
            "https://other.com/x",
            "https://testsite.com/logo.png",
            "https://testsite.com/api/profile",
        }
        assert result.link_count == 4

    @pytest.mark.asyncio
    async def test_uses_config_url(self):
        """Test that config.url is crawled when no URL is passed."""
        fetcher = make_fetcher({"https://testsite.com": (200, "text/html", PAGE)}, url="https://testsite.com")
        result = await fetcher.crawl()
        assert result.url == "https://testsite.com"
        assert result.ok

    @pytest.mark.asyncio
    async def test_resolves_against_final_url(self):
        """Test that relative links resolve against the post-redirect URL."""
        responses = {
            "http://testsite.com/old": (200, "text/html", b'<a href="next">Next</a>', "https://www.testsite.com/new/")
        }
        fetcher = make_fetcher(responses)
        result = await fetcher.crawl("http://testsite.com/old")

        assert result.url == "http://testsite.com/old"
        assert result.final_url == "https://www.testsite.com/new/"
        assert result.links == ["https://www.testsite.com/new/next"]

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        """Test that 4xx/5xx responses become error results."""
        fetcher = make_fetcher({"https://testsite.com/missing": (404, "text/html", b"<a href='/x'>x</a>")})
        result = await fetcher.crawl("https://testsite.com/missing")

        assert not result.ok
        assert result.error == "Request failed with status code 404"
        assert result.status_code == 404
        assert result.links == []
        assert result.link_count == 0

    @pytest.mark.asyncio
    async def test_network_error(self):
        """Test that client errors become error results."""
        fetcher = make_fetcher({"https://down.example": aiohttp.ClientConnectionError("connection refused")})
        result = await fetcher.crawl("https://down.example")

        assert result.error == "connection refused"
        assert result.links == []
        assert result.status_code is None

    @pytest.mark.asyncio
    async def test_timeout(self):
        """Test that timeouts become error results."""
        fetcher = make_fetcher({"https://slow.example": asyncio.TimeoutError()})
        result = await fetcher.crawl("https://slow.example")
        assert result.error == "Timeout after 10s"

    @pytest.mark.asyncio
    async def test_oversize_body(self):
        """Test that size-limit errors become error results."""
        fetcher = make_fetcher({"https://big.example": ValueError("Content too large: 999999999 bytes")})
        result = await fetcher.crawl("https://big.example")
        assert result.error == "Content too large: 999999999 bytes"

    @pytest.mark.asyncio
    async def test_non_html_still_extracted(self):
        """Test that content type does not block extraction."""
        fetcher = make_fetcher({"https://testsite.com/x": (200, "text/plain", b'<a href="/y">y</a>')})
        result = await fetcher.crawl("https://testsite.com/x")
        assert result.links == ["https://testsite.com/y"]

    @pytest.mark.asyncio
    async def test_basic_mode(self):
        """Test that basic mode skips script links and reports its type."""
        fetcher = make_fetcher(
            {"https://testsite.com": (200, "text/html", PAGE)},
            extraction={"mode": ExtractorMode.BASIC},
        )
        result = await fetcher.crawl("https://testsite.com")

        assert result.crawler_type == "basic"
        assert "https://testsite.com/api/profile" not in result.links
        # "/logo.png" lacks an http or // prefix
        assert "https://testsite.com/logo.png" not in result.links
        assert "https://testsite.com/about" in result.links

    @pytest.mark.asyncio
    async def test_requires_url(self):
        fetcher = make_fetcher({})
        with pytest.raises(ValueError):
            await fetcher.crawl()

    @pytest.mark.asyncio
    async def test_requires_client(self):
        """Test that crawling outside the context manager fails loudly."""
        fetcher = PageFetcher(LinkpullConfig(url="https://testsite.com"))
        with pytest.raises(RuntimeError):
            await fetcher.crawl()

    def test_does_not_mutate_config(self):
        """Test that applying the mode preset leaves the caller's config alone."""
        config = LinkpullConfig(extraction={"mode": ExtractorMode.BASIC})
        PageFetcher(config, http_client=MockHttpClient())
        assert config.extraction.include_scripts is True


class TestRun:
    """Tests for PageFetcher.run (crawl + filter)."""

    @pytest.mark.asyncio
    async def test_internal_only(self):
        fetcher = make_fetcher(
            {"https://testsite.com": (200, "text/html", PAGE)},
            filter=FilterConfig(scope=LinkScope.INTERNAL),
        )
        result = await fetcher.run("https://testsite.com")
        assert "https://other.com/x" not in result.links
        assert "https://testsite.com/about" in result.links

    @pytest.mark.asyncio
    async def test_external_only(self):
        fetcher = make_fetcher(
            {"https://testsite.com": (200, "text/html", PAGE)},
            filter=FilterConfig(scope=LinkScope.EXTERNAL),
        )
        result = await fetcher.run("https://testsite.com")
        assert result.links == ["https://other.com/x"]

    @pytest.mark.asyncio
    async def test_exclude_patterns(self):
        fetcher = make_fetcher(
            {"https://testsite.com": (200, "text/html", PAGE)},
            filter=FilterConfig(exclude_patterns=[".png", "/api/"]),
        )
        result = await fetcher.run("https://testsite.com")
        assert set(result.links) == {"https://testsite.com/about", "https://other.com/x"}
        assert result.link_count == 2

    @pytest.mark.asyncio
    async def test_error_passthrough(self):
        fetcher = make_fetcher({}, filter=FilterConfig(scope=LinkScope.INTERNAL))
        result = await fetcher.run("https://testsite.com/nothing")
        assert result.error == "Request failed with status code 404"


class TestAsyncHttpClient:
    """Tests for AsyncHttpClient that need no network."""

    @pytest.mark.asyncio
    async def test_get_requires_context(self):
        client = AsyncHttpClient()
        with pytest.raises(RuntimeError):
            await client.get("https://example.com")

    def test_declared_charset(self):
        client = AsyncHttpClient()
        response = HttpResponse(200, "caf\xe9".encode("latin-1"), "text/html; charset=latin-1", {}, "https://x.com")
        assert client.decode_content(response) == "caf\xe9"

    def test_is_html(self):
        assert HttpResponse(200, b"", "text/html; charset=utf-8", {}, "u").is_html
        assert HttpResponse(200, b"", "application/xhtml+xml", {}, "u").is_html
        assert not HttpResponse(200, b"", "application/json", {}, "u").is_html


class TestCrawlBlocking:
    """Tests for the sync wrapper."""

    @pytest.mark.asyncio
    async def test_refuses_running_loop(self):
        with pytest.raises(RuntimeError):
            crawl_blocking("https://example.com")
