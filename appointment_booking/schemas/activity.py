from pydantic import BaseModel, ConfigDict
from typing import List, Optional

class ActivityLogEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    timestamp: str
    username: Optional[str] = None
    action: str
    details: str

class ActivityLogResponse(BaseModel):
    log: List[ActivityLogEntryResponse]
