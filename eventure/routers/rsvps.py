# RSVP 등록/취소/조회 API
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventure.crud.errors import CrudError
from eventure.crud.rsvp_crud import cancel_rsvp, create_rsvp, get_rsvp_status
from eventure.database import get_db
from eventure.models.rsvp import RsvpStatus
from eventure.schemas.rsvp import RsvpResult, RsvpStatusOut
from eventure.schemas.user import UserBody
from eventure.services.attendance import counts_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rsvps", tags=["RSVP"])


@router.post("/{event_id}", response_model=RsvpResult, responses={201: {"model": RsvpResult}})
def post_rsvp(event_id: int, body: UserBody, response: Response, db: Session = Depends(get_db)) -> RsvpResult:
    """참석 등록. 새 RSVP면 201, 기존 RSVP 갱신이면 200. 예외 시 rollback."""
    try:
        created = create_rsvp(db, event_id, body.user_id)
        db.commit()  # ✅ 트랜잭션 소유권: 라우터
        response.status_code = 201 if created else 200
        return RsvpResult(
            message="RSVP successful" if created else "RSVP updated",
            status=RsvpStatus.GOING.value,
            rsvp_count=counts_for(db, [event_id])[event_id],
        )

    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to RSVP to event %s", event_id)
        raise HTTPException(status_code=500, detail="Failed to RSVP to event")


@router.delete("/{event_id}", response_model=RsvpResult)
def delete_rsvp(event_id: int, body: UserBody, db: Session = Depends(get_db)) -> RsvpResult:
    """참석 취소 (행 삭제). 예외 시 rollback."""
    try:
        cancel_rsvp(db, event_id, body.user_id)
        db.commit()
        return RsvpResult(message="RSVP cancelled", rsvp_count=counts_for(db, [event_id])[event_id])

    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to cancel RSVP for event %s", event_id)
        raise HTTPException(status_code=500, detail="Failed to cancel RSVP")


@router.get("/{event_id}", response_model=RsvpStatusOut)
def get_rsvp(event_id: int, user_id: int = Query(...), db: Session = Depends(get_db)) -> RsvpStatusOut:
    status = get_rsvp_status(db, event_id, user_id)
    return RsvpStatusOut(is_rsvped=status is not None, status=status)
