"""Markdown link parser."""

import re
from collections.abc import Iterator

from ..extract_markdown_url import extract_markdown_url
from ..line_number_at import line_number_at
from ._BaseParser import BaseParser, LinkRef

# [text](target) not preceded by "!" (that form is an image)
MARKDOWN_LINK_PATTERN = re.compile(r"(?<!!)\[[^\]]*]\(([^)\n]+)\)")


class MarkdownParser(BaseParser):
    """Parser for inline markdown links."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        for match in MARKDOWN_LINK_PATTERN.finditer(text):
            url = extract_markdown_url(match.group(1))
            if not url:
                continue

            yield LinkRef(
                line_number=line_number_at(text, match.start()),
                raw_target=url,
                link_type="markdown",
            )
