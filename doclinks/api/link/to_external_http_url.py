"""Filter and normalize external http(s) URLs."""

import ipaddress
from urllib.parse import urlsplit, urlunsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}

# Code points a URL host may never contain (WHATWG forbidden host code points)
_FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/:<>?@[\\]^|")


def _is_valid_host(host: str) -> bool:
    if ":" in host:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True

    if any(ch in _FORBIDDEN_HOST_CHARS or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in host):
        return False

    if not host.isascii():
        try:
            host.encode("idna")
        except UnicodeError:
            return False

    return True


def to_external_http_url(raw: str) -> str | None:
    """Normalized absolute URL, or None when ``raw`` is not an external http(s) link.

    Relative paths, ``mailto:`` and other schemes, localhost and anything that
    fails to parse (including malformed hosts) are rejected without raising.
    """
    trimmed = raw.strip()
    if not trimmed:
        return None

    try:
        parts = urlsplit(trimmed)
        scheme = parts.scheme.lower()
        if scheme not in _DEFAULT_PORTS:
            return None
        host = parts.hostname
        port = parts.port
    except ValueError:
        return None

    if not host or host == "localhost" or not _is_valid_host(host):
        return None

    netloc = f"[{host}]" if ":" in host else host
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"
    if "@" in parts.netloc:
        netloc = f"{parts.netloc.rsplit('@', 1)[0]}@{netloc}"

    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, parts.fragment))
