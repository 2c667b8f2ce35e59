"""Liveness check for a single external URL."""

import asyncio
import logging
from collections.abc import Container

import aiohttp

from .CheckResult import CheckResult
from .classify_status import classify_status

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

# Several providers block or misbehave for non-browser request signatures
BROWSER_HEADERS = {
    "user-agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36"
    ),
    "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "accept-language": "en-US,en;q=0.9",
}


async def _fetch_status(session: aiohttp.ClientSession, method: str, url: str, timeout: float) -> int:
    async with session.request(
        method,
        url,
        headers=BROWSER_HEADERS,
        allow_redirects=True,
        timeout=aiohttp.ClientTimeout(total=timeout),
    ) as response:
        return response.status


async def check_url(
    session: aiohttp.ClientSession,
    url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    accepted_statuses: Container[int] = (403, 429),
) -> CheckResult:
    """HEAD the URL, fall back to GET on an error status, and classify the result.

    Never raises for per-URL problems: timeouts and transport errors come
    back as failed ``CheckResult``s.
    """
    try:
        # Some providers (e.g. VS Marketplace, Bluesky) return 404 for HEAD
        # while the same URL works with GET in a browser.
        status = await _fetch_status(session, "HEAD", url, timeout)
        logger.debug("HEAD %s -> %d", url, status)

        if status >= 400 or status == 429:
            status = await _fetch_status(session, "GET", url, timeout)
            logger.debug("GET %s -> %d", url, status)

        result = classify_status(status, accepted_statuses)
    except asyncio.TimeoutError:
        result = CheckResult(ok=False, reason="timeout")
    except (aiohttp.ClientError, ValueError) as e:
        result = CheckResult(ok=False, reason=str(e) or "unknown error")

    if not result.ok:
        logger.info("Link check failed for %s: %s", url, result.reason)
    return result
