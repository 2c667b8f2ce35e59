"""Top-level doclinks configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

CONFIG_ENV_VAR = "DOCLINKS_CONFIG"

DEFAULT_IMAGE_EXTENSIONS = [".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg", ".avif", ".bmp", ".ico"]


class LinksConfig(BaseModel):
    """Settings for link extraction and liveness checking."""

    model_config = ConfigDict(extra="forbid")

    content_dir: str = Field("content", description="Root of the documentation tree to scan")
    timeout_ms: int = Field(10_000, gt=0, description="Per-request timeout in milliseconds")
    max_concurrency: int = Field(15, ge=1, description="Maximum number of URL checks in flight")
    accepted_statuses: list[int] = Field(
        default_factory=lambda: [403, 429],
        description="Statuses treated as blocked-but-existing rather than broken",
    )
    image_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IMAGE_EXTENSIONS),
        description="URL path extensions skipped as image assets",
    )
    file_extensions: list[str] = Field(
        default_factory=lambda: [".md", ".mdx"],
        description="Document suffixes scanned for links",
    )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def get_config_path(cls) -> Path | None:
        """Path named by DOCLINKS_CONFIG, None when the variable is unset."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return None
        return Path(env_path).expanduser().resolve()

    @classmethod
    def load(cls) -> "LinksConfig":
        """Load and validate config.

        Without DOCLINKS_CONFIG the built-in defaults are returned.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()
        if path is None:
            return cls()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
