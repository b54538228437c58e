from .appointment import Appointment, LineType

__all__ = [
    "Appointment",
    "LineType",
]
