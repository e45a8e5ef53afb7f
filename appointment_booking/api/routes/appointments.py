from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_current_username
from ...services.appointment_service import AppointmentService
from ...schemas.appointments import (
    AppointmentCreate, AppointmentCreatedResponse,
    AppointmentListResponse, AppointmentResponse
)

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.get("", response_model=AppointmentListResponse)
def list_appointments(
    username: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    """List the caller's appointments."""
    appointments = AppointmentService(db).list_appointments(username)
    return AppointmentListResponse(
        appointments=[AppointmentResponse.from_model(a) for a in appointments]
    )

@router.post("", response_model=AppointmentCreatedResponse, status_code=status.HTTP_201_CREATED)
def book_appointment(
    appointment_data: AppointmentCreate,
    username: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    """Book an appointment for the caller."""
    appointment = AppointmentService(db).book_appointment(username, appointment_data)
    return AppointmentCreatedResponse(
        message="Appointment booked successfully",
        appointment=AppointmentResponse.from_model(appointment),
    )
