"""Turn a final HTTP status into a liveness verdict."""

from collections.abc import Container

from .CheckResult import CheckResult


def classify_status(status: int, accepted_statuses: Container[int] = (403, 429)) -> CheckResult:
    """Classify the status of the last response.

    404 is always broken. Accepted statuses (bot protection, rate limiting)
    count as existing. Anything else outside 2xx/3xx is broken.
    """
    if status == 404:
        return CheckResult(ok=False, reason="HTTP 404")

    if status in accepted_statuses:
        return CheckResult(ok=True)

    if status < 200 or status >= 400:
        return CheckResult(ok=False, reason=f"HTTP {status}")

    return CheckResult(ok=True)
