from sqlalchemy import Column, Integer, String, Float, Text
import enum

from ..core.database import Base

class BillStatus(str, enum.Enum):
    UNPAID = "Unpaid"
    PAID = "Paid"

class MedicalRecord(Base):
    __tablename__ = "medical_records"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(150), index=True, nullable=False)
    date = Column(String(64), nullable=False)
    notes = Column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<MedicalRecord(id={self.id}, username='{self.username}', date='{self.date}')>"

class Bill(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True, index=True)
    reference = Column(String(64), index=True, nullable=False)
    username = Column(String(150), index=True, nullable=False)
    date = Column(String(64), nullable=False)
    amount = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default=BillStatus.UNPAID.value)

    def __repr__(self):
        return f"<Bill(reference='{self.reference}', username='{self.username}', status='{self.status}')>"
