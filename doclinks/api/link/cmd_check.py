"""Link check API command."""

import asyncio
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkCheckOutput
from ..config.LinksConfig import LinksConfig
from ..StageResult import StageResult
from .check_links import check_links
from .collect_links import collect_links
from .find_markdown_files import find_markdown_files


def cmd_check(content_dir: str | None = None) -> StageResult:
    """Extract external links from the content tree and verify each one is live.

    Args:
        content_dir: Directory to scan. Falls back to the configured ``content_dir``.
    """

    def _fail(result_obj: StageResult, root: str, message: str) -> None:
        result_obj.output = LinkCheckOutput(
            errors=[message],
            warnings=[],
            content_dir=root,
            files_scanned=0,
            links_extracted=0,
            unique_links=0,
            failed_count=0,
            failures=[],
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = LinksConfig.load()
        except ValueError as e:
            _fail(result_obj, content_dir or "", str(e))
            return

        root = Path(content_dir or config.content_dir).expanduser()
        if not root.is_dir():
            _fail(result_obj, str(root), f"Content directory not found: {root}")
            return

        yield (0.2, "Listing documents...")
        files = find_markdown_files(root, config.file_extensions)

        yield (0.3, f"Extracting links from {len(files)} file(s)...")
        try:
            records, extracted = collect_links(files, config)
        except OSError as e:
            _fail(result_obj, str(root), f"Cannot read file: {e}")
            return

        yield (0.5, f"Checking {len(records)} unique link(s)...")
        failures = asyncio.run(check_links(records, config))

        yield (1.0, "Complete")
        result_obj.output = LinkCheckOutput(
            errors=[],
            warnings=[],
            content_dir=str(root),
            files_scanned=len(files),
            links_extracted=extracted,
            unique_links=len(records),
            failed_count=len(failures),
            failures=[failure.to_dict() for failure in failures],
        ).model_dump(mode="python")

        if failures:
            result_obj.result = f"Found {len(failures)} failed external link(s)"
            result_obj.success = False
        else:
            result_obj.result = f"All {len(records)} external link(s) are live"
            result_obj.success = True

    return StageResult(
        announce=f"Checking external links in {content_dir or 'configured content directory'}...",
        progress_callback=do_work,
    )
