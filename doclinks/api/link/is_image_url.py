"""Classify URLs that point at image assets."""

import re
from collections.abc import Iterable
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from ..config.LinksConfig import DEFAULT_IMAGE_EXTENSIONS


def is_image_url(url: str, image_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS) -> bool:
    """True when the URL path, ignoring query and fragment, ends in an image extension."""
    no_query = re.split(r"[?#]", url, maxsplit=1)[0]
    try:
        path = urlsplit(no_query).path
    except ValueError:
        path = no_query
    suffix = PurePosixPath(path).suffix.lower()
    return suffix in {ext.lower() for ext in image_extensions}
