"""Angle-bracket autolink parser."""

import re
from collections.abc import Iterator

from ..line_number_at import line_number_at
from ._BaseParser import BaseParser, LinkRef

AUTOLINK_PATTERN = re.compile(r"<(https?://[^>\s]+)>")


class AutolinkParser(BaseParser):
    """Parser for ``<https://...>`` autolinks."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        for match in AUTOLINK_PATTERN.finditer(text):
            yield LinkRef(
                line_number=line_number_at(text, match.start()),
                raw_target=match.group(1),
                link_type="autolink",
            )
