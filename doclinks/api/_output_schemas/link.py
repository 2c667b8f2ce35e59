"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command."""
    content_dir: str = Field(..., description="Content directory that was scanned")
    files_scanned: int = Field(..., description="Number of markdown files read")
    links_extracted: int = Field(..., description="Number of external link occurrences found")
    unique_links: int = Field(..., description="Number of unique URLs checked")
    failed_count: int = Field(..., description="Number of URLs that failed the liveness check")
    failures: list[dict[str, Any]] = Field(
        ..., description="Failed URLs sorted by url, each with reason and occurrences [{file, line}]"
    )


class LinkScanOutput(BaseOutputSchema):
    """Output schema for link scan command."""
    content_dir: str = Field(..., description="Content directory that was scanned")
    files_scanned: int = Field(..., description="Number of markdown files read")
    links_extracted: int = Field(..., description="Number of external link occurrences found")
    unique_links: int = Field(..., description="Number of unique URLs found")
    links: list[dict[str, Any]] = Field(..., description="Unique URLs sorted by url, each with occurrences")


# Register all schemas
register_output_schema("link", "check", LinkCheckOutput)
register_output_schema("link", "scan", LinkScanOutput)
