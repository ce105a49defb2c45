"""
Rendered-by / used-in target selection.

Priority for rendered-by (candidates: frames under ``src/`` with a positive line):
  1. First named candidate in the same file as the innermost candidate
  2. The innermost candidate (anonymous accepted)

This is narrower than "first named candidate anywhere": a named frame in an
outer file does not outrank an anonymous innermost candidate, so a primitive
inside a shared component resolves to the shared component's file.

Priority for used-in (scanning outward from rendered-by):
  1. First non-wrapper frame in a different file
  2. First frame in a different file, wrapper or not
  3. The rendered-by frame itself

Frames are expected innermost first: index 0 is the frame closest to the
selected DOM element.

Wrapper detection is plain substring matching on names and paths, so a
real component called e.g. ``ContextMenu`` is treated as a wrapper too.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .trace_parser import NormalizedFrame

_WRAPPER_PATH_SEGMENTS = ("/context/", "/providers/")
_WRAPPER_NAME_PARTS = ("Provider", "Context", "Boundary")


@dataclass(frozen=True)
class RenderedBy:
    frame: NormalizedFrame
    index: int


@dataclass(frozen=True)
class Classification:
    rendered_by: Optional[NormalizedFrame] = None
    used_in: Optional[NormalizedFrame] = None

    def to_dict(self) -> dict:
        return {
            "renderedBy": self.rendered_by.to_dict() if self.rendered_by else None,
            "usedIn": self.used_in.to_dict() if self.used_in else None,
        }


def is_wrapper(frame: NormalizedFrame) -> bool:
    path = frame.normalized_file
    name = frame.name or ""
    if any(seg in path for seg in _WRAPPER_PATH_SEGMENTS):
        return True
    return any(part in name for part in _WRAPPER_NAME_PARTS)


def find_rendered_by(frames: Sequence[NormalizedFrame]) -> RenderedBy | None:
    candidates = [
        RenderedBy(frame=f, index=i)
        for i, f in enumerate(frames)
        if f.normalized_file.startswith("src/") and f.line > 0
    ]
    if not candidates:
        return None
    first = candidates[0]
    # a named frame only outranks the innermost one inside the same file;
    # anonymous JSX sites in another file still rendered the element
    for c in candidates:
        if c.frame.name is not None and c.frame.normalized_file == first.frame.normalized_file:
            return c
    return first


def find_used_in(frames: Sequence[NormalizedFrame], rendered: RenderedBy) -> NormalizedFrame:
    rendered_file = rendered.frame.normalized_file
    outer = frames[rendered.index + 1:]

    for f in outer:
        if not is_wrapper(f) and f.normalized_file != rendered_file:
            return f

    for f in outer:
        if f.normalized_file != rendered_file:
            return f

    return rendered.frame


def classify(frames: Sequence[NormalizedFrame]) -> Classification:
    """Pick the rendered-by and used-in frames for one selection."""
    rendered = find_rendered_by(frames)
    if rendered is None:
        return Classification()
    return Classification(
        rendered_by=rendered.frame,
        used_in=find_used_in(frames, rendered),
    )
