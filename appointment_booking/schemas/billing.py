from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union

from ..models.billing import Bill

class RecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: str
    notes: str

class RecordListResponse(BaseModel):
    records: List[RecordResponse]

class BillResponse(BaseModel):
    id: str
    date: str
    amount: float
    status: str

    @classmethod
    def from_model(cls, bill: Bill) -> "BillResponse":
        return cls(id=bill.reference, date=bill.date, amount=bill.amount, status=bill.status)

class BillListResponse(BaseModel):
    bills: List[BillResponse]

class BillPayment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bill_id: Optional[Union[str, int]] = Field(default=None, alias="billId")
    amount: Optional[float] = None
