"""Pull the URL out of a markdown link target."""


def extract_markdown_url(raw: str) -> str:
    """Return the URL portion of ``raw``.

    Handles ``<url>`` wrapping and a trailing ``"title"``:

        >>> extract_markdown_url('https://a.com "Title"')
        'https://a.com'
        >>> extract_markdown_url("<https://a.com/x y>")
        'https://a.com/x y'
    """
    trimmed = raw.strip()
    if not trimmed:
        return ""

    if trimmed.startswith("<") and ">" in trimmed:
        return trimmed[1 : trimmed.index(">")].strip()

    return trimmed.split()[0]
