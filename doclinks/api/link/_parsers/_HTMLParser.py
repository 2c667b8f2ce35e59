"""HTML anchor parser."""

import re
from collections.abc import Iterator

from ..line_number_at import line_number_at
from ._BaseParser import BaseParser, LinkRef

# Simple regex for <a ... href="..."> with either quote style
# Note: This is not a full HTML parser but sufficient for link checking
HREF_PATTERN = re.compile(r"""<a\b[^>]*\bhref=(["'])(.*?)\1""", re.IGNORECASE)


class HTMLParser(BaseParser):
    """Parser for HTML anchors embedded in markdown."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        for match in HREF_PATTERN.finditer(text):
            url = match.group(2).strip()
            if not url or url.startswith("#"):
                continue

            yield LinkRef(
                line_number=line_number_at(text, match.start()),
                raw_target=url,
                link_type="html",
            )
