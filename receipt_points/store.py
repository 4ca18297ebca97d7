# receipt_points/store.py
import threading
import uuid
from typing import Callable, Dict, Optional

def _new_token() -> str:
    return str(uuid.uuid4())

class ScoreStore:
    """
    In-memory identifier -> points mapping shared by all request threads.
    Records are write-once: there is no update or delete of a single id.
    Every public method holds the lock for its whole body.
    """

    def __init__(self, token_factory: Optional[Callable[[], str]] = None):
        self._token_factory = token_factory or _new_token
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, points: int) -> str:
        with self._lock:
            receipt_id = self._token_factory()
            while receipt_id in self._points:
                receipt_id = self._token_factory()
            self._points[receipt_id] = points
            return receipt_id

    def get(self, receipt_id: str) -> Optional[int]:
        """Stored points, or None if the id was never issued."""
        with self._lock:
            return self._points.get(receipt_id)

    def clear(self) -> None:
        with self._lock:
            self._points.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points
