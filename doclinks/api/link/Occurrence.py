"""Occurrence dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Occurrence:
    """A single file location where a URL appears."""

    file: str
    line: int  # 1-based

    def to_dict(self) -> dict:
        return {"file": self.file, "line": self.line}
