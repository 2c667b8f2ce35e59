"""CheckResult dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckResult:
    """Liveness verdict for one URL. ``reason`` is only set on failure."""

    ok: bool
    reason: str | None = None
