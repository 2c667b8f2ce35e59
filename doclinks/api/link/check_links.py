"""Check every unique URL and collect the failures."""

import aiohttp

from ..config.LinksConfig import LinksConfig
from .check_url import check_url
from .FailureReport import FailureReport
from .LinkRecord import LinkRecord
from .run_with_concurrency import run_with_concurrency


async def check_links(records: dict[str, LinkRecord], config: LinksConfig) -> list[FailureReport]:
    """Return a FailureReport per broken URL, sorted by URL."""
    failed: list[FailureReport] = []
    accepted = set(config.accepted_statuses)

    async with aiohttp.ClientSession() as session:

        async def _check(url: str) -> None:
            result = await check_url(session, url, config.timeout_seconds, accepted)
            if result.ok:
                return
            failed.append(
                FailureReport(
                    url=url,
                    reason=result.reason or "invalid status code",
                    occurrences=list(records[url].occurrences),
                )
            )

        await run_with_concurrency(list(records), config.max_concurrency, _check)

    failed.sort(key=lambda item: item.url)
    return failed
