"""Minimal client for a running bridge, plus the canonical sample selections."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from contracts.selection_v1 import FrameV1, SelectionPayloadV1

from .trace_parser import Unrecognized, parse_frame

DEFAULT_ENDPOINT = "http://127.0.0.1:3344/selection"
_LOCAL_HOSTS = {"127.0.0.1", "localhost", "::1"}


def is_localhost(url: str) -> bool:
    try:
        return urlparse(url).hostname in _LOCAL_HOSTS
    except ValueError:
        return False


def build_payload(dom_label: Optional[str], raw_frames: list[str]) -> SelectionPayloadV1:
    """Build a payload from bare frame strings (no ``in`` marker)."""
    frames = []
    for raw in raw_frames:
        frame = parse_frame(raw)
        if isinstance(frame, Unrecognized):
            raise ValueError(f"Cannot parse frame: {raw}")
        frames.append(FrameV1(**frame.to_dict()))
    return SelectionPayloadV1(dom_label=dom_label, frames=frames)


# Primitive element inside a shared component, used from a panel
SAMPLE_A = (
    "div.tab-item",
    [
        "/(app-pages-browser)/./src/components/spring-ui/tab-bar.tsx:68:11",
        "/(app-pages-browser)/./src/components/spring-ui/tab-bar.tsx:43:11",
        "RightPanel (at /(app-pages-browser)/./src/components/designer/layout/panels/rightpanel/RightPanel.tsx:28:86)",
    ],
)

# Component, its parent, and a context provider above both
SAMPLE_B = (
    "button.canvas-bar-btn",
    [
        "CanvasBar (at /(app-pages-browser)/./src/components/designer/layout/CanvasBar.tsx:21:201)",
        "LayoutContentInner (at /(app-pages-browser)/./src/components/designer/layout/LayoutContent.tsx:37:11)",
        "CanvasSelectionProvider (at /(app-pages-browser)/./src/context/CanvasSelectionContext.tsx:21:11)",
    ],
)

SAMPLES = {"A": SAMPLE_A, "B": SAMPLE_B}


class BridgeClient:
    def __init__(self, endpoint_url: str = DEFAULT_ENDPOINT, allow_non_localhost: bool = False):
        if not allow_non_localhost and not is_localhost(endpoint_url):
            raise ValueError(f'refusing non-localhost endpoint "{endpoint_url}"')
        self._endpoint_url = endpoint_url

    def post_selection(self, payload: SelectionPayloadV1) -> dict[str, Any]:
        data = json.dumps(payload.to_wire()).encode("utf-8")
        req = Request(self._endpoint_url, data=data, method="POST")
        req.add_header("Content-Type", "application/json")

        try:
            with urlopen(req, timeout=5) as resp:
                return {"status_code": resp.status, "response": resp.read().decode("utf-8")}
        except HTTPError as e:
            # 4xx bodies carry the validation message
            return {"status_code": e.code, "response": e.read().decode("utf-8", errors="replace")}
        except URLError as e:
            raise RuntimeError(f"Bridge connection error: {e.reason}") from e


def main(argv=None) -> int:
    """Post sample A, sample B, or both to a running bridge."""
    parser = argparse.ArgumentParser(description="Post sample selections to a running bridge")
    parser.add_argument("which", nargs="?", default="", help="A, B, or empty for both")
    parser.add_argument("--endpoint", default=DEFAULT_ENDPOINT)
    args = parser.parse_args(argv)

    which = args.which.upper()
    names = [which] if which else sorted(SAMPLES)
    if any(n not in SAMPLES for n in names):
        parser.error(f"unknown sample {which!r}")

    client = BridgeClient(args.endpoint)
    for name in names:
        payload = build_payload(*SAMPLES[name])
        print(f"Sending sample {name}…")
        print(json.dumps(payload.to_wire(), indent=2))
        try:
            res = client.post_selection(payload)
        except RuntimeError as e:
            print(f"[{name}] {e}", file=sys.stderr)
            return 1
        print(f"[{name}] {res['status_code']} {res['response']}\n")
    return 0
