"""Link scan API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkScanOutput
from ..config.LinksConfig import LinksConfig
from ..StageResult import StageResult
from .collect_links import collect_links
from .find_markdown_files import find_markdown_files
from .LinkRecord import LinkRecord


def cmd_scan(content_dir: str | None = None) -> StageResult:
    """List external links and where they appear, without any network access."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        errors: list[str] = []
        root_str = content_dir or ""
        files: list[Path] = []
        records: dict[str, LinkRecord] = {}
        extracted = 0

        try:
            config = LinksConfig.load()
            root = Path(content_dir or config.content_dir).expanduser()
            root_str = str(root)
            if not root.is_dir():
                errors.append(f"Content directory not found: {root}")
        except ValueError as e:
            errors.append(str(e))

        if not errors:
            yield (0.5, "Extracting links...")
            files = find_markdown_files(root, config.file_extensions)
            try:
                records, extracted = collect_links(files, config)
            except OSError as e:
                errors.append(f"Cannot read file: {e}")

        yield (1.0, "Complete")
        result_obj.output = LinkScanOutput(
            errors=errors,
            warnings=[],
            content_dir=root_str,
            files_scanned=len(files),
            links_extracted=extracted,
            unique_links=len(records),
            links=[records[url].to_dict() for url in sorted(records)],
        ).model_dump(mode="python")
        result_obj.result = errors[0] if errors else f"Found {len(records)} unique link(s) in {len(files)} file(s)"
        result_obj.success = not errors

    return StageResult(
        announce=f"Scanning for external links in {content_dir or 'configured content directory'}...",
        progress_callback=do_work,
    )
