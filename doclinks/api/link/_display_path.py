"""Path shown in occurrences."""

from pathlib import Path


def _display_path(path: Path) -> str:
    """Path relative to the working directory when possible, else absolute."""
    absolute = path.resolve()
    try:
        return str(absolute.relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(absolute)
