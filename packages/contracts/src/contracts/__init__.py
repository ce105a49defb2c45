from .selection_v1 import FrameV1, SelectionPayloadV1

__all__ = [
    "FrameV1",
    "SelectionPayloadV1",
]
