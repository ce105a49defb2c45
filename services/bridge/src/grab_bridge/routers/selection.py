"""
Selection endpoints.

POST /selection            → validate a JSON selection and keep it as the last one
POST /selection/text       → same, from a copied React Grab text block
GET  /selection            → last selection with normalized frames and targets
GET  /selection/rendered-by → editor target for the rendered-by frame
GET  /selection/used-in     → editor target for the used-in frame
"""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter, HTTPException, Request

from contracts.selection_v1 import SelectionPayloadV1

from ..classifier import classify
from ..formatting import describe_selection, frame_label
from ..log import log_event
from ..selection_store import SelectionStore
from ..settings import Settings
from ..trace_parser import normalize_frames, parse_selection_text
from ..validator import SelectionValidationError, parse_selection
from ..workspace import ResourceNotFoundError, build_target

router = APIRouter(prefix="/selection", tags=["selection"])

NO_SELECTION = "No selection received yet"


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def _store(request: Request) -> SelectionStore:
    return request.app.state.selection_store


async def _read_body(request: Request, *, json_body: bool) -> bytes:
    max_bytes = _settings(request).max_body_bytes

    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > max_bytes:
        raise HTTPException(status_code=413, detail="Body too large")

    content_type = request.headers.get("content-type", "")
    if json_body and content_type and "json" not in content_type.lower():
        raise HTTPException(status_code=415, detail="Content-Type must be application/json")

    # chunked uploads carry no content-length; stop pulling once over the limit
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise HTTPException(status_code=413, detail="Body too large")
    return bytes(body)


def _accept(store: SelectionStore, payload: SelectionPayloadV1, source: str) -> None:
    store.publish(payload)
    frames = normalize_frames(payload.frames)
    log_event(
        "selection_accepted",
        source=source,
        summary=describe_selection(payload, classify(frames)),
    )


@router.post("")
async def post_selection(request: Request):
    raw_body = await _read_body(request, json_body=True)

    try:
        document = json.loads(raw_body)
    except (ValueError, RecursionError):
        log_event("selection_rejected", logging.WARNING, reason="invalid_json")
        raise HTTPException(status_code=400, detail="Invalid JSON")

    try:
        payload = parse_selection(document)
    except SelectionValidationError as e:
        # the previous selection stays in place
        log_event("selection_rejected", logging.WARNING, reason=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    _accept(_store(request), payload, source="json")
    return {"ok": True}


@router.post("/text")
async def post_selection_text(request: Request):
    raw_body = await _read_body(request, json_body=False)
    text = raw_body.decode("utf-8", errors="replace")

    payload = parse_selection_text(text)
    if payload is None:
        log_event("selection_rejected", logging.WARNING, reason="no_frames")
        raise HTTPException(status_code=400, detail="No frames found in selection text")

    try:
        payload = parse_selection(payload.to_wire())
    except SelectionValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    _accept(_store(request), payload, source="text")
    return {"ok": True, "frameCount": len(payload.frames)}


@router.get("")
def get_selection(request: Request):
    payload, received_at = _store(request).snapshot()
    if payload is None:
        raise HTTPException(status_code=404, detail=NO_SELECTION)

    frames = normalize_frames(payload.frames)
    result = classify(frames)
    return {
        "domLabel": payload.dom_label,
        "receivedAt": received_at,
        "summary": describe_selection(payload, result),
        **result.to_dict(),
        "frames": [dict(f.to_dict(), label=frame_label(f)) for f in frames],
    }


def _target(request: Request, which: str) -> dict:
    payload = _store(request).latest()
    if payload is None:
        raise HTTPException(status_code=404, detail=NO_SELECTION)

    result = classify(normalize_frames(payload.frames))
    if result.rendered_by is None:
        raise HTTPException(status_code=404, detail="Could not determine rendered-by target")

    frame = result.rendered_by if which == "rendered-by" else result.used_in
    try:
        target = build_target(frame, _settings(request).workspace_roots)
    except ResourceNotFoundError as e:
        log_event("target_not_found", logging.WARNING, target=which, file=e.normalized_file)
        raise HTTPException(status_code=404, detail=str(e))
    return target.to_dict()


@router.get("/rendered-by")
def get_rendered_by(request: Request):
    return _target(request, "rendered-by")


@router.get("/used-in")
def get_used_in(request: Request):
    return _target(request, "used-in")
