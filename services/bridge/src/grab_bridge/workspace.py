"""
Resolve normalized frame paths against local workspace roots.

The editor integration only needs an absolute path plus a zero-based
position; this module produces exactly that and nothing else.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .trace_parser import NormalizedFrame


class ResourceNotFoundError(LookupError):
    def __init__(self, normalized_file: str):
        super().__init__(f'could not find "{normalized_file}" in any workspace folder')
        self.normalized_file = normalized_file


@dataclass(frozen=True)
class EditorTarget:
    frame: NormalizedFrame
    absolute_path: Path

    @property
    def line0(self) -> int:
        return max(0, self.frame.line - 1)

    @property
    def col0(self) -> int:
        return max(0, self.frame.col - 1)

    def to_dict(self) -> dict:
        return {
            "file": self.frame.normalized_file,
            "absolutePath": str(self.absolute_path),
            "line": self.frame.line,
            "col": self.frame.col,
            "line0": self.line0,
            "col0": self.col0,
            "name": self.frame.name,
            "raw": self.frame.raw,
        }


def resolve_to_absolute(normalized_file: str, roots: Iterable[str | Path]) -> Optional[Path]:
    """First root that directly contains the file wins (plain existence check)."""
    for root in roots:
        candidate = Path(root) / normalized_file
        if candidate.exists():
            return candidate
    return None


def build_target(frame: NormalizedFrame, roots: Iterable[str | Path]) -> EditorTarget:
    path = resolve_to_absolute(frame.normalized_file, roots)
    if path is None:
        raise ResourceNotFoundError(frame.normalized_file)
    return EditorTarget(frame=frame, absolute_path=path)
