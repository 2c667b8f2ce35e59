"""Link parsers package."""

from ._AutolinkParser import AutolinkParser
from ._BaseParser import BaseParser
from ._HTMLParser import HTMLParser
from ._MarkdownParser import MarkdownParser
from .LinkRef import LinkRef

_PARSERS: tuple[type[BaseParser], ...] = (MarkdownParser, AutolinkParser, HTMLParser)


def get_parsers() -> list[BaseParser]:
    """All parsers, applied independently to the same document."""
    return [parser_cls() for parser_cls in _PARSERS]


__all__ = [
    "AutolinkParser",
    "BaseParser",
    "HTMLParser",
    "LinkRef",
    "MarkdownParser",
    "get_parsers",
]
