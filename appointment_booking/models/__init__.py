from .user import User
from .appointment import Appointment
from .billing import Bill, BillStatus, MedicalRecord
from .activity import ActivityAction, ActivityLogEntry

__all__ = [
    "User",
    "Appointment",
    "Bill",
    "BillStatus",
    "MedicalRecord",
    "ActivityAction",
    "ActivityLogEntry",
]
