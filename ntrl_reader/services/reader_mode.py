"""
Reader mode: fetch an article page and serve its readable text.

This module is the only I/O boundary of the neutralization pipeline. It:
- Serves cached articles for up to 6 hours without touching the network
- Fetches the page once with a hard 12s deadline (no retries at this layer)
- Runs the HTML extractor and quality scorer on the downloaded page
- Falls back to caller-supplied text when extraction is thin or the fetch fails

Failures never propagate to the caller: the worst case is None, which the
screen layer treats as "show the summary fields you already have".
"""

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

import httpx
from cachetools import LRUCache

from ntrl_reader.config import Settings, get_settings
from ntrl_reader.constants import ReaderLimits
from ntrl_reader.logging_config import log_operation
from ntrl_reader.services.html_extractor import extract_main_text, extract_title
from ntrl_reader.services.quality_scorer import ArticleQuality, calculate_quality
from ntrl_reader.services.url_validator import is_allowed_news_domain, validate_article_url

logger = logging.getLogger(__name__)


class ReaderFetchError(Exception):
    """Raised when an article page cannot be downloaded."""

    pass


class InvalidArticleURLError(ReaderFetchError):
    """Raised when a URL fails validation before fetching."""

    pass


@dataclass(frozen=True)
class ReadableArticle:
    """Readable text for one article URL, as cached by reader mode."""

    text: str
    quality: ArticleQuality
    title: str | None = None
    from_fallback: bool = False


class ReaderCache:
    """
    In-memory article cache with a fixed TTL.

    An entry is served while its age is at most the TTL. Expired entries are
    evicted lazily when the cache is read; there is no background sweep.
    Pass a custom timer to control time in tests.
    """

    def __init__(
        self,
        ttl_seconds: float = ReaderLimits.CACHE_TTL_SECONDS,
        maxsize: int = 200,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._timer = timer
        # url -> (stored_at, article), least recently used evicted first when full
        self._entries: LRUCache = LRUCache(maxsize=maxsize)

    def _is_expired(self, stored_at: float, now: float) -> bool:
        return now - stored_at > self.ttl_seconds

    def expire(self) -> None:
        """Drop every entry older than the TTL."""
        now = self._timer()
        for url in [url for url, (stored_at, _) in self._entries.items() if self._is_expired(stored_at, now)]:
            del self._entries[url]

    def get(self, url: str) -> ReadableArticle | None:
        entry = self._entries.get(url)
        if entry is None:
            return None

        stored_at, article = entry
        if self._is_expired(stored_at, self._timer()):
            del self._entries[url]
            return None
        return article

    def set(self, url: str, article: ReadableArticle) -> None:
        self._entries[url] = (self._timer(), article)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, url: str) -> bool:
        return self.get(url) is not None

    def __len__(self) -> int:
        self.expire()
        return len(self._entries)


class ReaderModeService:
    """Fetch, extract, and cache readable article text."""

    def __init__(
        self,
        cache: ReaderCache | None = None,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ):
        """
        Initialize reader mode.

        Args:
            cache: Cache to use; a fresh one sized from settings if omitted
            client: Shared HTTP client; a short-lived client per fetch if omitted
            settings: Settings override (defaults to get_settings())
        """
        self.settings = settings or get_settings()
        self.cache = cache if cache is not None else ReaderCache(
            ttl_seconds=self.settings.READER_CACHE_TTL_SECONDS,
            maxsize=self.settings.READER_CACHE_MAX_ENTRIES,
        )
        self._client = client

    @property
    def request_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.settings.READER_USER_AGENT,
            "Accept": ReaderLimits.ACCEPT_HEADER,
        }

    async def _follow(self, client: httpx.AsyncClient, url: str, timeout: float) -> httpx.Response:
        """GET, following up to MAX_REDIRECTS redirects and validating each target."""
        current = url
        for _ in range(ReaderLimits.MAX_REDIRECTS + 1):
            response = await client.get(
                current, headers=self.request_headers, timeout=timeout, follow_redirects=False
            )
            if not response.is_redirect:
                return response

            target = str(response.url.join(response.headers["location"]))
            validation = validate_article_url(target)
            if not validation.valid:
                raise InvalidArticleURLError(f"Redirect to invalid URL: {validation.reason.value}")
            logger.debug(f"[READER_MODE] Redirect {response.status_code}: {current} -> {target}")
            current = target

        raise ReaderFetchError(f"Too many redirects (max {ReaderLimits.MAX_REDIRECTS})")

    async def _get(self, url: str, timeout: float) -> str:
        if self._client is not None:
            response = await self._follow(self._client, url, timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout, headers=self.request_headers) as client:
                response = await self._follow(client, url, timeout)

        if not response.is_success:
            raise ReaderFetchError(f"HTTP {response.status_code}")
        return response.text

    async def fetch_html(self, url: str) -> str:
        """
        Fetch a page's HTML with URL validation and an overall deadline.

        Raises:
            InvalidArticleURLError: URL failed structural validation
            ReaderFetchError: Non-2xx response
            httpx.HTTPError / TimeoutError: Transport failure or deadline hit
        """
        validation = validate_article_url(url)
        if not validation.valid:
            raise InvalidArticleURLError(f"Invalid URL: {validation.reason.value}")

        if not is_allowed_news_domain(url):
            logger.info(f"[READER_MODE] Fetching from non-whitelisted domain: {validation.hostname}")

        timeout = self.settings.READER_FETCH_TIMEOUT_SECONDS
        with log_operation("fetch", url) as metrics:
            html = await asyncio.wait_for(self._get(url, timeout), timeout=timeout)
            metrics["size_bytes"] = len(html)
        return html

    def _use_fallback(self, url: str, fallback_text: str | None, title: str | None = None) -> ReadableArticle | None:
        """Cache and return the caller's fallback text if it is substantial."""
        if not fallback_text or len(fallback_text) < ReaderLimits.MIN_FALLBACK_CHARS:
            return None

        article = ReadableArticle(
            text=fallback_text,
            quality=calculate_quality(fallback_text),
            title=title,
            from_fallback=True,
        )
        self.cache.set(url, article)
        logger.info(
            f"[READER_MODE] Using fallback text for {url} ({len(fallback_text)} chars)",
            extra={"event": "reader_fallback", "url": url, "char_count": len(fallback_text)},
        )
        return article

    async def get_readable_article(self, url: str, fallback_text: str | None = None) -> ReadableArticle | None:
        """
        Get readable text for an article URL.

        Flow:
        1. Cache hit (younger than the TTL) -> return it, no network
        2. Fetch HTML, extract main text and title
        3. Extracted text >= 600 chars -> cache and return it
        4. Otherwise fallback_text >= 100 chars -> cache and return it
        5. Otherwise None

        Fetch errors and timeouts take the same fallback-or-None path.
        """
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug(f"[READER_MODE] Cache hit: {url}")
            return cached

        try:
            html = await self.fetch_html(url)
            text = extract_main_text(html)
            title = extract_title(html)
        except Exception as e:
            logger.warning(
                f"[READER_MODE] Fetch failed for {url}: {e!r}",
                extra={"event": "reader_fetch_failed", "url": url},
            )
            return self._use_fallback(url, fallback_text)

        quality = calculate_quality(text)

        if len(text) >= ReaderLimits.MIN_EXTRACTED_CHARS:
            article = ReadableArticle(text=text, quality=quality, title=title)
            self.cache.set(url, article)
            logger.info(
                f"[READER_MODE] Extracted {quality.char_count} chars, {quality.sentence_count} sentences, "
                f"ok_for_summary: {quality.ok_for_summary}",
                extra={
                    "event": "reader_extracted",
                    "url": url,
                    "char_count": quality.char_count,
                    "sentence_count": quality.sentence_count,
                    "ok_for_summary": quality.ok_for_summary,
                },
            )
            return article

        logger.info(f"[READER_MODE] Extraction too short: {len(text)} chars for {url}")
        return self._use_fallback(url, fallback_text, title=title)

    def clear_cache(self) -> None:
        self.cache.clear()


@lru_cache(maxsize=1)
def get_reader_mode_service() -> ReaderModeService:
    """Get or create the default reader mode service."""
    return ReaderModeService()


async def get_readable_article(url: str, fallback_text: str | None = None) -> ReadableArticle | None:
    """Get readable article text using the default service."""
    return await get_reader_mode_service().get_readable_article(url, fallback_text)


def clear_cache() -> None:
    """Clear the default service's cache."""
    get_reader_mode_service().clear_cache()
