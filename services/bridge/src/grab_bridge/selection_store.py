"""Most-recent-wins holder for the last accepted selection."""
from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Optional

from contracts.selection_v1 import SelectionPayloadV1


class SelectionStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._payload: Optional[SelectionPayloadV1] = None
        self._received_at: Optional[str] = None

    def publish(self, payload: SelectionPayloadV1) -> None:
        """Replace the slot. Callers publish only fully validated payloads."""
        received_at = datetime.now(timezone.utc).isoformat()
        with self._lock:
            self._payload = payload
            self._received_at = received_at

    def latest(self) -> Optional[SelectionPayloadV1]:
        with self._lock:
            return self._payload

    def snapshot(self) -> tuple[Optional[SelectionPayloadV1], Optional[str]]:
        """Payload and its receive time, read together."""
        with self._lock:
            return self._payload, self._received_at

    @property
    def received_at(self) -> Optional[str]:
        with self._lock:
            return self._received_at

    def clear(self) -> None:
        with self._lock:
            self._payload = None
            self._received_at = None
