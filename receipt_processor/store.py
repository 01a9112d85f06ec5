"""Process-lifetime storage of receipt id → points."""

import threading
from typing import Protocol


class PointsStore(Protocol):
    def put(self, receipt_id: str, points: int) -> None: ...

    def get(self, receipt_id: str) -> int | None: ...


class InMemoryPointsStore:
    """
    Lock-guarded dict. A put is visible to any get issued after it returns.
    Points are written once per id and never updated. Nothing survives a restart.
    """

    def __init__(self):
        self._points: dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        with self._lock:
            if receipt_id in self._points:
                raise ValueError(f"Receipt id already stored: {receipt_id}")
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> int | None:
        with self._lock:
            return self._points.get(receipt_id)

    def __contains__(self, receipt_id: str) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
