# 관리자 검수 API (승인/거절/삭제). 요청자는 admin 역할이어야 함
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventure.crud.errors import CrudError
from eventure.crud.event_crud import delete_event, get_event, list_all_events, set_event_status
from eventure.crud.user_crud import ADMIN_ROLES, require_role
from eventure.database import get_db
from eventure.models.event import EventStatus
from eventure.schemas.event import EventStatusLiteral, EventSummary
from eventure.schemas.user import UserBody

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

ADMIN_ONLY = "Admin access required"


@router.get("/events", response_model=List[EventSummary])
def get_all_events(
    user_id: int = Query(...),
    status: Optional[EventStatusLiteral] = Query(None),
    db: Session = Depends(get_db),
) -> List[EventSummary]:
    """모든 상태의 이벤트 (status로 필터 가능). 최근 생성 순."""
    try:
        require_role(db, user_id, ADMIN_ROLES, ADMIN_ONLY)
    except CrudError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return [EventSummary.from_event(e, n) for e, n in list_all_events(db, status)]


def _moderate(db: Session, event_id: int, body: UserBody, target: EventStatus) -> dict:
    try:
        require_role(db, body.user_id, ADMIN_ROLES, ADMIN_ONLY)
        event = set_event_status(db, event_id, target)
        db.commit()  # ✅ 트랜잭션 소유권: 라우터
        return {"message": f"Event {target.value} successfully", "status": event.status}

    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to set event %s to %s", event_id, target.value)
        raise HTTPException(status_code=500, detail="Failed to update event status")


@router.put("/events/{event_id}/approve")
def approve_event(event_id: int, body: UserBody, db: Session = Depends(get_db)) -> dict:
    """pending/declined → approved. 이미 approved면 그대로 200."""
    return _moderate(db, event_id, body, EventStatus.APPROVED)


@router.put("/events/{event_id}/decline")
def decline_event(event_id: int, body: UserBody, db: Session = Depends(get_db)) -> dict:
    """pending/approved → declined. 이미 declined면 그대로 200."""
    return _moderate(db, event_id, body, EventStatus.DECLINED)


@router.delete("/events/{event_id}")
def admin_delete_event(event_id: int, body: UserBody, db: Session = Depends(get_db)) -> dict:
    """관리자는 소유자와 무관하게 삭제 가능."""
    try:
        require_role(db, body.user_id, ADMIN_ROLES, ADMIN_ONLY)
        delete_event(db, get_event(db, event_id))
        db.commit()
        logger.info("Admin %s deleted event %s", body.user_id, event_id)
        return {"message": "Event deleted successfully"}

    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Admin failed to delete event %s", event_id)
        raise HTTPException(status_code=500, detail="Failed to delete event")
