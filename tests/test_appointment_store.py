from __future__ import annotations

import threading
from datetime import datetime

import pydantic
import pytest

from models.appointment import Appointment
from repositories.appointments import InMemoryAppointmentStore


def _appointment(i: int) -> Appointment:
    return Appointment.schedule(
        name=f"client-{i}",
        treatment="Facial",
        number=f"3161234{i:04d}",
        appointment_at=datetime(2024, 1, 2, 9, 0),
    )


def test_list_preserves_insertion_order() -> None:
    store = InMemoryAppointmentStore()
    for i in range(3):
        store.append(_appointment(i))

    assert [a.name for a in store.list()] == ["client-0", "client-1", "client-2"]


def test_list_returns_a_snapshot() -> None:
    store = InMemoryAppointmentStore()
    store.append(_appointment(0))

    snapshot = store.list()
    store.append(_appointment(1))

    assert len(snapshot) == 1
    assert len(store) == 2


def test_appointments_are_immutable() -> None:
    appointment = _appointment(0)

    with pytest.raises(pydantic.ValidationError):
        appointment.name = "someone else"


def test_concurrent_appends_are_all_kept() -> None:
    store = InMemoryAppointmentStore()
    per_thread = 200

    def worker(offset: int) -> None:
        for i in range(per_thread):
            store.append(_appointment(offset + i))

    threads = [threading.Thread(target=worker, args=(t * per_thread,)) for t in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    names = [a.name for a in store.list()]
    assert len(names) == 8 * per_thread
    assert len(set(names)) == 8 * per_thread
