from .classifier import Classification, classify, find_rendered_by, find_used_in, is_wrapper
from .trace_parser import (
    Frame,
    NormalizedFrame,
    ParseFailure,
    normalize_frames,
    normalize_path,
    parse_frame,
    parse_selection_text,
    parse_stack_lines,
)
from .validator import SelectionValidationError, parse_selection, validate_selection

__all__ = [
    "Classification",
    "Frame",
    "NormalizedFrame",
    "ParseFailure",
    "SelectionValidationError",
    "classify",
    "find_rendered_by",
    "find_used_in",
    "is_wrapper",
    "normalize_frames",
    "normalize_path",
    "parse_frame",
    "parse_selection",
    "parse_selection_text",
    "parse_stack_lines",
    "validate_selection",
]
