"""Single-page fetch orchestration."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType

import aiohttp

from ..extraction import LinkExtractor
from ..filters import LinkFilter
from ..http import AsyncHttpClient, HttpClient
from ..models.config import ExtractorMode, LinkpullConfig
from ..models.profiles import apply_mode
from ..models.results import CrawlResult

logger = logging.getLogger(__name__)

# Errors that turn into a failed CrawlResult instead of propagating
FETCH_ERRORS = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    ConnectionError,
    ValueError,
)


class PageFetcher:
    """
    Fetch one page and extract its links.

    The fetcher owns the network side (timeouts, redirects, status codes)
    and hands the decoded HTML plus the final URL to a LinkExtractor.
    Failures never raise out of crawl(); they come back as a CrawlResult
    with `error` set.

    Example:
        config = LinkpullConfig(url="https://example.com")

        async with PageFetcher(config) as fetcher:
            result = await fetcher.run()
            if result.ok:
                for link in result.links:
                    print(link)
    """

    def __init__(self, config: LinkpullConfig, http_client: HttpClient | None = None):
        """
        Initialize the PageFetcher.

        Args:
            config: Configuration for the crawl.
            http_client: Optional client to use instead of creating an AsyncHttpClient
        """
        self.config = config.model_copy(update={"extraction": apply_mode(config.extraction)})
        self._extractor = LinkExtractor.from_config(self.config.extraction)

        self._client: HttpClient | None = http_client
        self._owned_client: AsyncHttpClient | None = None

    @property
    def crawler_type(self) -> str:
        """Name of the extraction mode, reported on results."""
        mode: ExtractorMode = self.config.extraction.mode
        return mode.value

    async def __aenter__(self) -> PageFetcher:
        """Create the HTTP client unless one was injected."""
        if self._client is None:
            network = self.config.network
            self._owned_client = AsyncHttpClient(
                max_redirects=network.max_redirects,
                max_content_size=network.max_content_size,
                user_agent=network.user_agent,
                proxy=network.proxy,
                default_timeout=network.timeout,
            )
            await self._owned_client.__aenter__()
            self._client = self._owned_client
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owned_client is not None:
            await self._owned_client.__aexit__(exc_type, exc_val, exc_tb)
            self._owned_client = None
            self._client = None

    async def crawl(self, url: str | None = None) -> CrawlResult:
        """
        Fetch a page and extract every link from it (no filtering).

        Args:
            url: Page to crawl (defaults to config.url)

        Returns:
            CrawlResult with links and title, or with `error` on failure
        """
        target = url or self.config.url
        if not target:
            raise ValueError("No URL to crawl. Pass a URL or set config.url.")
        if self._client is None:
            raise RuntimeError("Fetcher not initialized. Use 'async with' context manager.")

        logger.info(f"Crawling: {target}")

        try:
            response = await self._client.get(target, timeout=self.config.network.timeout)
        except asyncio.TimeoutError:
            message = f"Timeout after {self.config.network.timeout:g}s"
            logger.error(f"Error crawling {target}: {message}")
            return self._failed(target, message)
        except FETCH_ERRORS as e:
            message = str(e) or e.__class__.__name__
            logger.error(f"Error crawling {target}: {message}")
            return self._failed(target, message)

        if response.status_code >= 400:
            message = f"Request failed with status code {response.status_code}"
            logger.error(f"Error crawling {target}: {message}")
            return self._failed(target, message, status_code=response.status_code, final_url=response.url)

        if not response.is_html:
            logger.debug(f"{response.url} is not HTML ({response.content_type!r}); extracting anyway")

        html = self._client.decode_content(response)
        extraction = self._extractor.extract(html, response.url)

        logger.info(f"Found {extraction.link_count} links on {response.url}")

        return CrawlResult(
            url=target,
            final_url=response.url,
            status_code=response.status_code,
            links=extraction.links,
            title=extraction.title,
            crawler_type=self.crawler_type,
        )

    def filter_result(self, result: CrawlResult) -> CrawlResult:
        """
        Apply the configured link filter to a crawl result.

        Internal/external classification uses config.filter.base_url, or the
        requested URL when that is not set.

        Args:
            result: Result from crawl()

        Returns:
            A copy of the result with filtered links
        """
        link_filter = LinkFilter(self.config.filter, base_url=result.url)
        return result.with_links(link_filter.apply(result.links))

    async def run(self, url: str | None = None) -> CrawlResult:
        """
        Crawl a page and filter its links according to the configuration.

        Args:
            url: Page to crawl (defaults to config.url)

        Returns:
            Filtered CrawlResult
        """
        result = await self.crawl(url)
        if not result.ok:
            return result
        return self.filter_result(result)

    def _failed(
        self,
        url: str,
        error: str,
        status_code: int | None = None,
        final_url: str | None = None,
    ) -> CrawlResult:
        return CrawlResult(
            url=url,
            error=error,
            status_code=status_code,
            final_url=final_url,
            crawler_type=self.crawler_type,
        )


def crawl_blocking(url: str, config: LinkpullConfig | None = None) -> CrawlResult:
    """
    Blocking crawl of a single page.

    This is a convenience wrapper for sync code that can't use async/await.
    For async code, use PageFetcher directly.

    WARNING: Do not call from within an existing event loop (e.g., Jupyter,
    asyncio-based frameworks). Use the async PageFetcher API instead.

    Args:
        url: The page to crawl
        config: Optional configuration (defaults to LinkpullConfig())

    Returns:
        Filtered CrawlResult

    Example:
        result = crawl_blocking("https://example.com")
        print(result.link_count)
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError("crawl_blocking() called from async context. Use 'async with PageFetcher()' instead.")

    config = config or LinkpullConfig()

    async def _run() -> CrawlResult:
        async with PageFetcher(config) as fetcher:
            return await fetcher.run(url)

    return asyncio.run(_run())
