"""FailureReport dataclass."""

from dataclasses import dataclass, field

from .Occurrence import Occurrence


@dataclass
class FailureReport:
    """A URL that failed the liveness check, with its source locations."""

    url: str
    reason: str
    occurrences: list[Occurrence] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "reason": self.reason,
            "occurrences": [o.to_dict() for o in self.occurrences],
        }
