from sqlalchemy.orm import Session
from typing import List
import logging

from ..core.database import commit_or_raise
from ..core.exceptions import BadRequestError
from ..models.activity import ActivityAction
from ..models.appointment import Appointment
from ..schemas.appointments import AppointmentCreate
from .activity_log import ActivityLog

logger = logging.getLogger(__name__)

class AppointmentService:
    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityLog(db)

    def list_appointments(self, username: str) -> List[Appointment]:
        """Return the user's appointments in booking order."""
        return (
            self.db.query(Appointment)
            .filter(Appointment.username == username)
            .order_by(Appointment.id.asc())
            .all()
        )

    def book_appointment(self, username: str, appointment_data: AppointmentCreate) -> Appointment:
        """
        Validate, persist and log a booking.

        The appointment row and its ``Appointment Booked`` log entry are
        committed together; if either write fails neither is kept.
        """
        date = (appointment_data.date or "").strip()
        reason = (appointment_data.reason or "").strip()
        if not date or not reason:
            raise BadRequestError("Date and reason are required for appointment")

        appointment = Appointment(username=username, date=date, reason=reason)
        self.db.add(appointment)
        self.activity.append(
            username,
            ActivityAction.APPOINTMENT_BOOKED,
            f"Booked for {date}. Reason: {reason}",
            commit=False,
        )

        commit_or_raise(self.db)
        self.db.refresh(appointment)

        logger.info(f"Appointment {appointment.reference} booked for '{username}' on {date}")
        return appointment
