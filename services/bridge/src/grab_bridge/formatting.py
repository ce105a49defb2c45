"""Human-readable labels for frames and selections."""
from __future__ import annotations

from typing import Optional

from contracts.selection_v1 import SelectionPayloadV1

from .classifier import Classification
from .trace_parser import NormalizedFrame


def _location(frame: NormalizedFrame) -> str:
    return f"{frame.normalized_file}:{frame.line}:{frame.col}"


def frame_label(frame: NormalizedFrame) -> str:
    return f"{frame.name or '(anonymous)'} — {_location(frame)}"


def describe_selection(payload: SelectionPayloadV1, classification: Classification) -> str:
    parts = [f"DOM: {payload.dom_label or '(none)'} | Frames: {len(payload.frames)}"]
    rendered = classification.rendered_by
    if rendered:
        parts.append(f"Rendered by: {rendered.name or '(anon)'} @ {_location(rendered)}")
    used = classification.used_in
    if used:
        parts.append(f"Used in: {used.name or '(anon)'} @ {_location(used)}")
    return " | ".join(parts)


def selection_summary(payload: Optional[SelectionPayloadV1]) -> Optional[dict]:
    if payload is None:
        return None
    return {"domLabel": payload.dom_label, "frameCount": len(payload.frames)}
