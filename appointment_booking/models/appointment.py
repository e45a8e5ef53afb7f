from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
import threading
import time

from ..core.database import Base

_reference_lock = threading.Lock()
_last_reference = 0

def generate_appointment_reference() -> str:
    """
    Appointment ids are the creation time in nanoseconds.

    Ids are strictly increasing within the process: a booking in the same
    clock tick as the previous one gets the previous id plus one.
    """
    global _last_reference
    with _reference_lock:
        _last_reference = max(time.time_ns(), _last_reference + 1)
        return str(_last_reference)

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    reference = Column(String(32), unique=True, nullable=False, default=generate_appointment_reference)
    username = Column(String(150), index=True, nullable=False)

    # Appointment details
    date = Column(String(64), nullable=False)
    reason = Column(Text, nullable=False)

    # Tracking
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<Appointment(reference='{self.reference}', username='{self.username}', date='{self.date}')>"
