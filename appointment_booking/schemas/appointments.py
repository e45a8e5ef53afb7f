from pydantic import BaseModel
from typing import List, Optional

from ..models.appointment import Appointment

class AppointmentCreate(BaseModel):
    date: Optional[str] = None
    reason: Optional[str] = None

class AppointmentResponse(BaseModel):
    id: str
    date: str
    reason: str

    @classmethod
    def from_model(cls, appointment: Appointment) -> "AppointmentResponse":
        return cls(id=appointment.reference, date=appointment.date, reason=appointment.reason)

class AppointmentListResponse(BaseModel):
    appointments: List[AppointmentResponse]

class AppointmentCreatedResponse(BaseModel):
    message: str
    appointment: AppointmentResponse
