"""Extract external links from one document."""

from collections.abc import Iterable

from ..config.LinksConfig import DEFAULT_IMAGE_EXTENSIONS
from ._parsers import get_parsers
from .is_image_url import is_image_url
from .strip_code_blocks import strip_code_blocks
from .to_external_http_url import to_external_http_url


def collect_file_links(
    text: str, image_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS
) -> list[tuple[str, int]]:
    """Return ``(url, line)`` for every checkable external link in ``text``.

    Code blocks are blanked first; images and non-http(s) targets are dropped.
    """
    content = strip_code_blocks(text)
    image_extensions = list(image_extensions)
    links: list[tuple[str, int]] = []

    for parser in get_parsers():
        for ref in parser.parse(content):
            external = to_external_http_url(ref.raw_target)
            if not external or is_image_url(external, image_extensions):
                continue
            links.append((external, ref.line_number))

    return links
