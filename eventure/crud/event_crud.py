# 이벤트 CRUD + 목록 조회 (rsvp_count 포함)
#
# ⚠️ 이 모듈의 함수는 commit/rollback 하지 않음. 호출자(라우터)가 트랜잭션을 제어.

import logging
from typing import List, Optional, Tuple

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from eventure.crud.errors import EventError
from eventure.crud.user_crud import ORGANIZER_ROLES, require_role
from eventure.models.event import Event, EventStatus
from eventure.models.rsvp import RSVP
from eventure.models.user import User
from eventure.schemas.event import EventCreate, EventUpdate
from eventure.services.attendance import query_events_with_counts
from eventure.services.event_status import check_status_transition
from eventure.services.geo_distance import Coordinate

logger = logging.getLogger(__name__)


def _is_listed():
    """승인 + 공개 = 일반 사용자에게 보이는 이벤트."""
    return and_(Event.status == EventStatus.APPROVED.value, Event.is_public.is_(True))


def _apply_fields(event: Event, data: EventCreate, coordinate: Optional[Coordinate]) -> None:
    for field, value in data.model_dump(exclude={"user_id"}).items():
        setattr(event, field, value)
    event.lat = coordinate.lat if coordinate else None
    event.lng = coordinate.lng if coordinate else None


def get_organizer(db: Session, user_id: int) -> User:
    """이벤트 생성 권한 확인 (organizer/admin). 없으면 404, 역할 부족이면 403."""
    return require_role(db, user_id, ORGANIZER_ROLES, "Only organizers can create events")


def create_event(db: Session, organizer: User, data: EventCreate, coordinate: Optional[Coordinate]) -> Event:
    """pending 상태로 생성. coordinate가 None이면 lat/lng NULL (반경 검색 제외)."""
    event = Event(created_by=organizer.id, status=EventStatus.PENDING.value)
    _apply_fields(event, data, coordinate)
    db.add(event)
    db.flush()
    logger.info("User %s created event %s (%r)", organizer.id, event.id, event.title)
    return event


def get_event(db: Session, event_id: int) -> Event:
    event = db.query(Event).filter(Event.id == event_id).first()
    if event is None:
        raise EventError("Event not found", 404)
    return event


def get_owned_event(db: Session, event_id: int, user_id: int, action: str = "edit") -> Event:
    """생성자 본인의 이벤트만. 없으면 404, 남의 이벤트면 403."""
    event = get_event(db, event_id)
    if event.created_by != user_id:
        raise EventError(f"You can only {action} your own events", 403)
    return event


def update_event(db: Session, event: Event, data: EventUpdate, coordinate: Optional[Coordinate]) -> Event:
    """전체 필드 갱신. 검수 상태(status)는 유지."""
    _apply_fields(event, data, coordinate)
    db.flush()
    return event


def delete_event(db: Session, event: Event) -> None:
    """삭제 (soft-delete 없음). rsvps/favorites는 FK ON DELETE CASCADE."""
    event_id = event.id
    db.delete(event)
    db.flush()
    logger.info("Deleted event %s", event_id)


def get_visible_event(db: Session, event_id: int, viewer_id: Optional[int] = None) -> Tuple[Event, int, Optional[User]]:
    """
    단건 조회. 승인+공개 이벤트이거나, viewer가 생성자면 상태와 무관하게 조회 가능.

    반환: (event, rsvp_count, organizer)
    """
    visible = _is_listed()
    if viewer_id is not None:
        visible = or_(visible, Event.created_by == viewer_id)
    row = query_events_with_counts(db).filter(Event.id == event_id, visible).first()
    if row is None:
        raise EventError("Event not found", 404)
    event, rsvp_count = row
    organizer = db.query(User).filter(User.id == event.created_by).first()
    return event, rsvp_count, organizer


def list_events_by_creator(db: Session, user_id: int) -> List:
    """내가 만든 이벤트 (상태 무관), starts_at 오름차순."""
    return (
        query_events_with_counts(db)
        .filter(Event.created_by == user_id)
        .order_by(Event.starts_at.asc())
        .all()
    )


def list_attending_events(db: Session, user_id: int) -> List:
    """RSVP한 승인+공개 이벤트. 행: (Event, rsvp_count, rsvp_status, rsvp_created_at)."""
    return (
        query_events_with_counts(db, RSVP.status.label("rsvp_status"), RSVP.created_at.label("rsvp_created_at"))
        .join(RSVP, RSVP.event_id == Event.id)
        .filter(RSVP.user_id == user_id, _is_listed())
        .order_by(Event.starts_at.asc())
        .all()
    )


def list_categories(db: Session) -> List[str]:
    """승인+공개 이벤트의 비어 있지 않은 카테고리 (중복 제거, 오름차순)."""
    rows = (
        db.query(Event.category)
        .filter(Event.category.isnot(None), Event.category != "", _is_listed())
        .distinct()
        .order_by(Event.category.asc())
        .all()
    )
    return [category for (category,) in rows]


def list_all_events(db: Session, status: Optional[str] = None) -> List:
    """관리자용: 모든 상태의 이벤트, 최근 생성 순."""
    q = query_events_with_counts(db)
    if status is not None:
        q = q.filter(Event.status == status)
    return q.order_by(Event.created_at.desc(), Event.id.desc()).all()


def set_event_status(db: Session, event_id: int, target: EventStatus) -> Event:
    """검수 상태 변경. 허용되지 않는 전이는 409."""
    event = get_event(db, event_id)
    error = check_status_transition(event.status, target.value)
    if error is not None:
        raise EventError(error, 409)
    event.status = target.value
    db.flush()
    logger.info("Event %s moderated to %s", event_id, target.value)
    return event
