from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_current_username
from ...services.billing_service import BillingService
from ...schemas.auth import MessageResponse
from ...schemas.billing import (
    BillListResponse, BillPayment, BillResponse,
    RecordListResponse, RecordResponse
)

router = APIRouter(tags=["Records and Bills"])

@router.get("/records", response_model=RecordListResponse)
def list_records(
    username: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    """List the caller's medical records."""
    records = BillingService(db).list_records(username)
    return RecordListResponse(records=[RecordResponse.model_validate(r) for r in records])

@router.get("/bills", response_model=BillListResponse)
def list_bills(
    username: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    """List the caller's bills."""
    bills = BillingService(db).list_bills(username)
    return BillListResponse(bills=[BillResponse.from_model(b) for b in bills])

@router.post("/paybill", response_model=MessageResponse)
def pay_bill(
    payment: BillPayment,
    username: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    """Simulate paying one of the caller's bills."""
    BillingService(db).pay_bill(username, payment)
    return MessageResponse(message="Bill payment simulated successfully")
