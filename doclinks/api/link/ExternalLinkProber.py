"""Bounded-concurrency reachability probes for external links."""

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx

from ...constants import USER_AGENT
from ...utils.logger import get_logger
from .ExtractedLink import ExtractedLink
from .ResultCategory import ResultCategory
from .ValidationResult import ValidationResult

logger = get_logger("link.probe")


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of probing one URL, independent of where the URL was written."""

    category: ResultCategory
    error: str | None = None
    status_code: int | None = None
    redirect_url: str | None = None

    def to_result(self, link: ExtractedLink) -> ValidationResult:
        return ValidationResult(
            link=link,
            category=self.category,
            error=self.error,
            status_code=self.status_code,
            redirect_url=self.redirect_url,
        )


class ExternalLinkProber:
    """Probe external URLs with HEAD requests.

    At most ``concurrency`` requests are in flight at once; waiting probes are
    admitted in submission order. Outcomes are memoized by literal URL for the
    lifetime of the prober, and concurrent requests for the same URL share a
    single in-flight probe.

    Use as an async context manager so an owned HTTP client gets closed::

        async with ExternalLinkProber(timeout=5.0, concurrency=10) as prober:
            result = await prober.probe(link)
    """

    def __init__(
        self,
        timeout: float = 5.0,
        concurrency: int = 10,
        skip_domains: Iterable[str] = (),
        client: httpx.AsyncClient | None = None,
    ):
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")
        self.timeout = timeout
        self.concurrency = concurrency
        self.skip_domains = [domain for domain in skip_domains if domain]
        self._client = client
        self._owns_client = client is None
        self._semaphore = asyncio.Semaphore(concurrency)
        self._cache: dict[str, asyncio.Future[ProbeOutcome]] = {}

    async def __aenter__(self) -> "ExternalLinkProber":
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                follow_redirects=True,
                timeout=httpx.Timeout(self.timeout),
                headers={"User-Agent": USER_AGENT},
            )
        return self._client

    @property
    def cached_urls(self) -> list[str]:
        return list(self._cache)

    def is_skipped(self, url: str) -> bool:
        """True when the URL's hostname contains a skip-domain substring."""
        hostname = urlsplit(url).hostname or ""
        return any(domain in hostname for domain in self.skip_domains)

    async def probe(self, link: ExtractedLink) -> ValidationResult:
        """Probe a link's URL and tie the (possibly cached) outcome to the link."""
        outcome = await self.probe_url(link.url)
        return outcome.to_result(link)

    async def probe_url(self, url: str) -> ProbeOutcome:
        """Probe a URL, reusing a cached or in-flight outcome for the same URL."""
        future = self._cache.get(url)
        if future is None:
            future = asyncio.ensure_future(self._probe_uncached(url))
            self._cache[url] = future
        # Shield so one cancelled waiter does not cancel the shared probe
        return await asyncio.shield(future)

    async def _probe_uncached(self, url: str) -> ProbeOutcome:
        try:
            skipped = self.is_skipped(url)
        except ValueError as e:
            return ProbeOutcome(ResultCategory.NETWORK_ERROR, error=f"Invalid URL: {e}")
        if skipped:
            return ProbeOutcome(ResultCategory.EXTERNAL_SKIPPED, status_code=0)

        request_url = f"https:{url}" if url.startswith("//") else url
        async with self._semaphore:
            try:
                response = await asyncio.wait_for(self._get_client().head(request_url), timeout=self.timeout)
            except (asyncio.TimeoutError, httpx.TimeoutException):
                error = f"Request timeout after {round(self.timeout * 1000)}ms"
                logger.debug("%s: %s", url, error)
                return ProbeOutcome(ResultCategory.TIMEOUT, error=error)
            except Exception as e:
                error = str(e) or type(e).__name__
                logger.debug("%s: %s", url, error)
                return ProbeOutcome(ResultCategory.NETWORK_ERROR, error=error)

        status = response.status_code
        redirect_url = None
        if response.history and str(response.url) != request_url:
            redirect_url = str(response.url)

        if 200 <= status < 300:
            return ProbeOutcome(ResultCategory.EXTERNAL_VALID, status_code=status, redirect_url=redirect_url)

        error = f"HTTP {status} {response.reason_phrase}".rstrip()
        logger.debug("%s: %s", url, error)
        return ProbeOutcome(ResultCategory.HTTP_ERROR, error=error, status_code=status, redirect_url=redirect_url)
