"""Build the deduplicated link set for a list of documents."""

import logging
from pathlib import Path

from ..config.LinksConfig import LinksConfig
from ._display_path import _display_path
from .collect_file_links import collect_file_links
from .LinkRecord import LinkRecord
from .Occurrence import Occurrence

logger = logging.getLogger(__name__)


def collect_links(files: list[Path], config: LinksConfig) -> tuple[dict[str, LinkRecord], int]:
    """Extract links from every file and merge them per URL.

    Returns:
        (records keyed by URL in first-seen order, total occurrences extracted)
    """
    records: dict[str, LinkRecord] = {}
    extracted = 0

    for file_path in files:
        # invalid bytes become U+FFFD so one legacy file does not stop the run
        text = file_path.read_text(encoding="utf-8", errors="replace")
        links = collect_file_links(text, config.image_extensions)
        logger.debug("Found %d external links in %s", len(links), file_path)
        extracted += len(links)

        relative_file = _display_path(file_path)
        for url, line in links:
            record = records.setdefault(url, LinkRecord(url=url))
            record.occurrences.append(Occurrence(file=relative_file, line=line))

    return records, extracted
