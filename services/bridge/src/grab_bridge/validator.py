"""Structural gate for untrusted selection documents.

``validate_selection`` walks the decoded JSON and reports the first problem
it finds as a human-readable message, so the transport can hand it straight
back to the browser. Only documents that pass are turned into
``SelectionPayloadV1``.
"""
from __future__ import annotations

from typing import Any, Optional

from contracts.selection_v1 import SelectionPayloadV1


class SelectionValidationError(ValueError):
    """Raised when a selection document does not match the wire schema."""


def _is_positive_int(v: Any) -> bool:
    if isinstance(v, bool):
        return False
    if isinstance(v, int):
        return v >= 1
    # JSON has one number type; 12.0 is an integer there
    if isinstance(v, float):
        return v.is_integer() and v >= 1
    return False


_MISSING = object()


def _is_optional_str(v: Any) -> bool:
    # a missing key is neither null nor a string
    return v is None or isinstance(v, str)


def _validate_frame(i: int, f: Any) -> Optional[str]:
    if not isinstance(f, dict):
        return f"frames[{i}] must be an object"
    if not isinstance(f.get("raw"), str):
        return f"frames[{i}].raw must be a string"
    if not _is_optional_str(f.get("name", _MISSING)):
        return f"frames[{i}].name must be a string or null"
    if not isinstance(f.get("file"), str):
        return f"frames[{i}].file must be a string"
    if not _is_positive_int(f.get("line")):
        return f"frames[{i}].line must be a positive integer"
    if not _is_positive_int(f.get("col")):
        return f"frames[{i}].col must be a positive integer"
    return None


def validate_selection(document: Any) -> Optional[str]:
    """Return None when ``document`` is a valid selection, else the first error."""
    if not isinstance(document, dict):
        return "Body must be a JSON object"

    if not _is_optional_str(document.get("domLabel", _MISSING)):
        return "domLabel must be a string or null"

    frames = document.get("frames")
    if not isinstance(frames, list):
        return "frames must be an array"
    if len(frames) < 1:
        return "frames must have at least 1 entry"

    for i, f in enumerate(frames):
        err = _validate_frame(i, f)
        if err:
            return err

    return None


def parse_selection(document: Any) -> SelectionPayloadV1:
    err = validate_selection(document)
    if err:
        raise SelectionValidationError(err)
    return SelectionPayloadV1(
        dom_label=document["domLabel"],
        frames=[
            {
                "raw": f["raw"],
                "name": f["name"],
                "file": f["file"],
                "line": int(f["line"]),
                "col": int(f["col"]),
            }
            for f in document["frames"]
        ],
    )
