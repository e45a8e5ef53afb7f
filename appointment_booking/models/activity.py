from sqlalchemy import Column, Integer, String, Text
from datetime import datetime, timezone
import enum

from ..core.database import Base

class ActivityAction(str, enum.Enum):
    USER_REGISTERED = "User Registered"
    USER_LOGIN = "User Login"
    LOGIN_FAILED = "Login Failed"
    USER_LOGOUT = "User Logout"
    APPOINTMENT_BOOKED = "Appointment Booked"
    BILL_PAYMENT = "Bill Payment (Simulated)"

def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T09:30:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

class ActivityLogEntry(Base):
    """One immutable activity log row; the autoincrement id fixes chronological order."""
    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(String(32), nullable=False, default=utc_timestamp)
    username = Column(String(150), index=True, nullable=True)
    action = Column(String(64), nullable=False)
    details = Column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<ActivityLogEntry(id={self.id}, username='{self.username}', action='{self.action}')>"
