from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_current_username
from ...services.activity_log import ActivityLog
from ...schemas.activity import ActivityLogEntryResponse, ActivityLogResponse

router = APIRouter(tags=["Activity Log"])

@router.get("/blockchain", response_model=ActivityLogResponse)
def my_activity(
    username: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    """Activity log entries recorded for the caller."""
    entries = ActivityLog(db).list_for(username)
    return ActivityLogResponse(log=[ActivityLogEntryResponse.model_validate(e) for e in entries])

# No authentication on the admin view
@router.get("/admin/log", response_model=ActivityLogResponse)
def full_activity_log(db: Session = Depends(get_db)):
    """The full activity log, oldest entry first."""
    entries = ActivityLog(db).list_all()
    return ActivityLogResponse(log=[ActivityLogEntryResponse.model_validate(e) for e in entries])
