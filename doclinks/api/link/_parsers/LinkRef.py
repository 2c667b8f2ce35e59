"""Link reference dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass
class LinkRef:
    """A raw link target found in a document, before URL filtering."""

    line_number: int
    raw_target: str
    link_type: str  # "markdown", "autolink", "html"
