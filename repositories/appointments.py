from __future__ import annotations

import threading
from typing import List, Protocol, Tuple

from models.appointment import Appointment


class AppointmentStore(Protocol):
    def append(self, appointment: Appointment) -> None: ...

    def list(self) -> Tuple[Appointment, ...]: ...


class InMemoryAppointmentStore:
    """Append-only, insertion-ordered appointment store.

    Sync endpoints run on FastAPI's thread pool, so every access goes
    through a lock. ``list`` hands out an immutable snapshot.
    """

    def __init__(self) -> None:
        self._items: List[Appointment] = []
        self._lock = threading.Lock()

    def append(self, appointment: Appointment) -> None:
        with self._lock:
            self._items.append(appointment)

    def list(self) -> Tuple[Appointment, ...]:
        with self._lock:
            return tuple(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
