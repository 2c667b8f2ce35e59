"""LinkRecord dataclass."""

from dataclasses import dataclass, field

from .Occurrence import Occurrence


@dataclass
class LinkRecord:
    """One unique URL and every place it was found, in scan order."""

    url: str
    occurrences: list[Occurrence] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"url": self.url, "occurrences": [o.to_dict() for o in self.occurrences]}
