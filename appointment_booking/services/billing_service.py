from sqlalchemy.orm import Session
from typing import Any, Iterable, List, Mapping, Optional
import logging

from ..core.database import commit_or_raise
from ..core.exceptions import BadRequestError
from ..models.activity import ActivityAction
from ..models.billing import Bill, BillStatus, MedicalRecord
from ..schemas.billing import BillPayment
from .activity_log import ActivityLog

logger = logging.getLogger(__name__)

def format_amount(amount: float) -> str:
    """Render 100.0 as '100' and 12.5 as '12.5'."""
    return str(int(amount)) if float(amount).is_integer() else str(amount)

class BillingService:
    """Read access to seeded medical records and bills, plus simulated payment."""

    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityLog(db)

    def list_records(self, username: str) -> List[MedicalRecord]:
        return (
            self.db.query(MedicalRecord)
            .filter(MedicalRecord.username == username)
            .order_by(MedicalRecord.id.asc())
            .all()
        )

    def list_bills(self, username: str) -> List[Bill]:
        return (
            self.db.query(Bill)
            .filter(Bill.username == username)
            .order_by(Bill.id.asc())
            .all()
        )

    def pay_bill(self, username: str, payment: BillPayment) -> Optional[Bill]:
        """
        Simulate paying a bill.

        The payment is always logged. If the caller owns a bill with the
        given id it is marked paid in the same transaction; an unknown id is
        still a successful simulation and returns None.
        """
        bill_id = "" if payment.bill_id is None else str(payment.bill_id).strip()
        if not bill_id or payment.amount is None:
            raise BadRequestError("Bill ID and amount are required")

        bill = (
            self.db.query(Bill)
            .filter(Bill.username == username, Bill.reference == bill_id)
            .first()
        )
        if bill is not None:
            bill.status = BillStatus.PAID.value

        self.activity.append(
            username,
            ActivityAction.BILL_PAYMENT,
            f"Simulated payment of ${format_amount(payment.amount)} for bill ID {bill_id}.",
            commit=False,
        )
        commit_or_raise(self.db)

        logger.info(
            f"Simulated payment of {format_amount(payment.amount)} for bill {bill_id} "
            f"by '{username}' (matched={bill is not None})"
        )
        return bill

    # Seeding

    def seed_records(self, records: Mapping[str, Iterable[Mapping[str, Any]]], *, commit: bool = True) -> int:
        """
        Insert medical records keyed by username; returns the number inserted.

        A record identical to one already stored (same user, date and notes)
        is skipped, so seeding the same file twice changes nothing.
        """
        seen = {
            (r.username, r.date, r.notes)
            for r in self.db.query(MedicalRecord).filter(MedicalRecord.username.in_(list(records)))
        }
        count = 0
        for username, entries in records.items():
            for entry in entries:
                key = (username, str(entry["date"]), str(entry.get("notes", "")))
                if key in seen:
                    continue
                seen.add(key)
                self.db.add(MedicalRecord(username=key[0], date=key[1], notes=key[2]))
                count += 1
        if commit:
            commit_or_raise(self.db)
        return count

    def seed_bills(self, bills: Mapping[str, Iterable[Mapping[str, Any]]], *, commit: bool = True) -> int:
        """
        Insert bills keyed by username; returns the number inserted.

        A bill whose id the user already has is left as stored, including
        its status.
        """
        seen = {
            (b.username, b.reference)
            for b in self.db.query(Bill).filter(Bill.username.in_(list(bills)))
        }
        count = 0
        for username, entries in bills.items():
            for entry in entries:
                reference = str(entry["id"])
                if (username, reference) in seen:
                    continue
                seen.add((username, reference))
                self.db.add(
                    Bill(
                        reference=reference,
                        username=username,
                        date=str(entry["date"]),
                        amount=float(entry["amount"]),
                        status=entry.get("status", BillStatus.UNPAID.value),
                    )
                )
                count += 1
        if commit:
            commit_or_raise(self.db)
        return count
