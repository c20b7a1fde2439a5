"""
Page retrieval for index construction.

Pages are fetched one at a time through a fixed-window limiter: a batch of
requests goes out back to back, then the fetcher sleeps before the next batch.
Any failure surfaces as FetchError; the caller decides whether to skip the url.
"""

import logging
import time
from typing import Callable

import requests

from .config import Config


logger = logging.getLogger(__name__)


class FetchError(Exception):
    """A page could not be retrieved as HTML."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class BatchRateLimiter:
    """Let batch_size calls through, then sleep for pause seconds, and repeat."""

    def __init__(
        self,
        batch_size: int,
        pause: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if pause < 0:
            raise ValueError("pause must be non-negative")
        self.batch_size = batch_size
        self.pause = pause
        self._sleep = sleep
        self._in_window = 0

    def acquire(self) -> None:
        if self._in_window >= self.batch_size:
            logger.debug(f"Batch of {self.batch_size} requests done, pausing {self.pause}s")
            self._sleep(self.pause)
            self._in_window = 0
        self._in_window += 1


class DocumentFetcher:
    """Fetch page HTML with requests, honouring the configured rate limit."""

    def __init__(
        self,
        config: Config | None = None,
        session: requests.Session | None = None,
        limiter: BatchRateLimiter | None = None,
    ) -> None:
        self.config = config or Config()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})
        self.limiter = limiter or BatchRateLimiter(self.config.batch_size, self.config.pause)

    def fetch(self, url: str) -> str:
        """Return the HTML of url or raise FetchError."""
        self.limiter.acquire()
        try:
            resp = self.session.get(url, timeout=self.config.timeout, allow_redirects=True)
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        if not 200 <= resp.status_code < 300:
            raise FetchError(url, f"HTTP {resp.status_code}")
        content_type = resp.headers.get("Content-Type", "")
        if content_type and "html" not in content_type.lower():
            raise FetchError(url, f"not HTML ({content_type})")
        return resp.text

    def close(self) -> None:
        self.session.close()
