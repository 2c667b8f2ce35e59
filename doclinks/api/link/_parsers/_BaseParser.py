"""Abstract base parser for link extraction."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .LinkRef import LinkRef


class BaseParser(ABC):
    """Abstract interface for document parsers.

    Parsers match over the whole (code-stripped) document, so a link may
    span several lines; line numbers come from the match start.
    """

    @abstractmethod
    def parse(self, text: str) -> Iterator[LinkRef]:
        """Parse text and yield found links."""
        pass
