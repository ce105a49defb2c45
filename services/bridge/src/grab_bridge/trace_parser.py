"""
Component stack parser and path normalizer.

Extracts structured frames from React Grab selection text (the
``in Name (at file:line:col)`` / ``in file:line:col`` lines), normalizes
paths by anchoring them at the project ``src/`` boundary, and drops
frames that do not point at a source file.
"""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Iterable, Optional, Union

from contracts.selection_v1 import FrameV1, SelectionPayloadV1

SOURCE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")


@dataclass(frozen=True)
class Frame:
    raw: str
    name: Optional[str]
    file: str
    line: int
    col: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class NormalizedFrame(Frame):
    normalized_file: str = ""

    def to_dict(self) -> dict:
        return {
            "raw": self.raw,
            "name": self.name,
            "file": self.file,
            "line": self.line,
            "col": self.col,
            "normalizedFile": self.normalized_file,
        }


# ── Parse results ─────────────────────────────────────────────────


@dataclass(frozen=True)
class NamedMatch:
    name: str
    file: str
    line: int
    col: int


@dataclass(frozen=True)
class PlainMatch:
    file: str
    line: int
    col: int


@dataclass(frozen=True)
class Unrecognized:
    text: str


FrameMatch = Union[NamedMatch, PlainMatch, Unrecognized]
ParseFailure = Unrecognized


# ── Frame patterns ────────────────────────────────────────────────
# RightPanel (at /(app-pages-browser)/./src/panels/RightPanel.tsx:28:86)
_NAMED_FRAME = re.compile(r"^(.+?)\s+\(at\s+(.+):(\d+):(\d+)\)$")

# /(app-pages-browser)/./src/components/spring-ui/tab-bar.tsx:68:11
_PLAIN_FRAME = re.compile(r"^(.+):(\d+):(\d+)$")

# "  in ..." marks a stack line; everything else is label / DOM preview
_STACK_LINE = re.compile(r"^\s*in\s+")

# @<TabBarItem>
_DOM_LABEL = re.compile(r"^@<(.+)>$")

# "/src/" boundary; "\src/" covers mixed separators
_SRC_SLASH = re.compile(r"[/\\]src/")


def normalize_path(file: str) -> str:
    """Anchor a captured path at its ``src/`` directory.

    Bundler route-group prefixes such as ``/(app-pages-browser)/./`` are
    dropped, and backslash separators are turned into forward slashes.
    """
    slash = _SRC_SLASH.search(file)
    backslash = file.find("src\\")
    if file.startswith(("src/", "src\\")):
        result = file
    elif slash:
        result = file[slash.start() + 1:]
    elif backslash != -1:
        result = file[backslash:]
    else:
        result = file
    # separators first so a leading backslash cannot survive as "/"
    return result.replace("\\", "/").lstrip("/")


def is_source_file(path: str) -> bool:
    return path.endswith(SOURCE_EXTENSIONS)


def match_frame(text: str) -> FrameMatch:
    """Classify one frame text as named, plain or unrecognized."""
    stripped = text.strip()
    m = _NAMED_FRAME.match(stripped)
    if m:
        return NamedMatch(
            name=m.group(1),
            file=m.group(2),
            line=int(m.group(3)),
            col=int(m.group(4)),
        )
    m = _PLAIN_FRAME.match(stripped)
    if m:
        return PlainMatch(file=m.group(1), line=int(m.group(2)), col=int(m.group(3)))
    return Unrecognized(text=text)


def _frame_from_match(raw: str, match: FrameMatch) -> Frame | ParseFailure:
    if isinstance(match, NamedMatch):
        return Frame(raw=raw, name=match.name, file=match.file, line=match.line, col=match.col)
    if isinstance(match, PlainMatch):
        return Frame(raw=raw, name=None, file=match.file, line=match.line, col=match.col)
    return match


def parse_frame(raw: str) -> Frame | ParseFailure:
    """Parse a single frame line (without the ``in`` marker)."""
    return _frame_from_match(raw.strip(), match_frame(raw))


def parse_stack_lines(text: str) -> list[Frame]:
    """Extract source frames from a multi-line selection text block.

    Lines without the ``in`` marker, unparseable lines, non-source files
    and non-positive positions are skipped rather than reported.
    """
    frames: list[Frame] = []
    for line in text.splitlines():
        marker = _STACK_LINE.match(line)
        if not marker:
            continue
        raw = line.strip()
        frame = _frame_from_match(raw, match_frame(line[marker.end():]))
        if isinstance(frame, Unrecognized):
            continue
        if not is_source_file(frame.file):
            continue
        if frame.line < 1 or frame.col < 1:
            continue
        frames.append(frame)
    return frames


def parse_dom_label(text: str) -> Optional[str]:
    for line in text.splitlines():
        m = _DOM_LABEL.match(line.strip())
        if m:
            return m.group(1)
    return None


def parse_selection_text(text: str) -> SelectionPayloadV1 | None:
    """Turn a copied React Grab block into a selection payload.

    Returns None when the block holds no usable frame.
    """
    frames = parse_stack_lines(text)
    if not frames:
        return None
    return SelectionPayloadV1(
        dom_label=parse_dom_label(text),
        frames=[FrameV1(**f.to_dict()) for f in frames],
    )


def normalize_frame(frame: Frame | FrameV1) -> NormalizedFrame:
    return NormalizedFrame(
        raw=frame.raw,
        name=frame.name,
        file=frame.file,
        line=frame.line,
        col=frame.col,
        normalized_file=normalize_path(frame.file),
    )


def normalize_frames(frames: Iterable[Frame | FrameV1]) -> list[NormalizedFrame]:
    return [normalize_frame(f) for f in frames]
