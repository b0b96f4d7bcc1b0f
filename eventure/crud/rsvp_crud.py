# RSVP 생성/취소 CRUD (이벤트 행 잠금으로 정원 초과 방지)

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eventure.crud.errors import RsvpError
from eventure.crud.user_crud import get_user
from eventure.models.event import Event, EventStatus
from eventure.models.rsvp import RSVP, RsvpStatus
from eventure.services.attendance import counts_for

logger = logging.getLogger(__name__)


def _find_rsvp(db: Session, event_id: int, user_id: int) -> Optional[RSVP]:
    return (
        db.query(RSVP)
        .filter(RSVP.event_id == event_id, RSVP.user_id == user_id)
        .first()
    )


def create_rsvp(db: Session, event_id: int, user_id: int) -> bool:
    """
    이벤트 참석(going) 등록.

    - FOR UPDATE로 event 행 잠금 → 동시 RSVP 시에도 정원(capacity) 초과 방지.
    - 승인+공개가 아닌 이벤트는 생성자 본인만 RSVP 가능.
    - 이미 행이 있으면 status를 going으로 덮어씀 (새 행 없음).

    반환: 새 RSVP면 True, 기존 행 갱신이면 False

    ⚠️ 이 함수는 commit/rollback 하지 않음. 호출자(라우터)가 트랜잭션을 제어.
    """
    get_user(db, user_id)

    event = (
        db.query(Event)
        .filter(Event.id == event_id)
        .with_for_update()
        .first()
    )
    if event is None:
        raise RsvpError("Event not found", 404)

    listed = event.status == EventStatus.APPROVED.value and event.is_public
    if not listed and event.created_by != user_id:
        raise RsvpError("Event is not available for RSVP", 403)

    existing = _find_rsvp(db, event_id, user_id)
    if existing is not None:
        existing.status = RsvpStatus.GOING.value
        return False

    if event.capacity is not None and counts_for(db, [event_id])[event_id] >= event.capacity:
        raise RsvpError("Event is full (capacity reached)", 409)

    try:
        db.add(RSVP(event_id=event_id, user_id=user_id, status=RsvpStatus.GOING.value))
        db.flush()
    except IntegrityError:
        # 같은 user가 동시에 RSVP하면 UniqueConstraint 위반 가능. rollback은 호출자(라우터)에서 수행
        raise RsvpError("Already RSVPed", 409)

    logger.info("User %s RSVPed to event %s", user_id, event_id)
    return True


def cancel_rsvp(db: Session, event_id: int, user_id: int) -> None:
    """RSVP 취소 = 행 삭제. 없으면 404."""
    rsvp = _find_rsvp(db, event_id, user_id)
    if rsvp is None:
        raise RsvpError("RSVP not found", 404)
    db.delete(rsvp)
    db.flush()


def get_rsvp_status(db: Session, event_id: int, user_id: int) -> Optional[str]:
    rsvp = _find_rsvp(db, event_id, user_id)
    return rsvp.status if rsvp is not None else None
