# 관심 이벤트 CRUD

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eventure.crud.errors import FavoriteError
from eventure.crud.user_crud import get_user
from eventure.models.event import Event, EventStatus
from eventure.models.favorite import Favorite
from eventure.services.attendance import query_events_with_counts


def list_favorites(db: Session, user_id: int) -> List:
    """승인+공개 관심 이벤트, 최근 등록 순. 행: (Event, rsvp_count, favorited_at)."""
    return (
        query_events_with_counts(db, Favorite.created_at.label("favorited_at"))
        .join(Favorite, Favorite.event_id == Event.id)
        .filter(
            Favorite.user_id == user_id,
            Event.status == EventStatus.APPROVED.value,
            Event.is_public.is_(True),
        )
        .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        .all()
    )


def add_favorite(db: Session, event_id: int, user_id: int) -> bool:
    """
    관심 등록. 승인+공개 이벤트만 가능 (아니면 404).

    반환: 새로 추가했으면 True, 이미 있으면 False
    """
    get_user(db, user_id)
    event = (
        db.query(Event.id)
        .filter(
            Event.id == event_id,
            Event.status == EventStatus.APPROVED.value,
            Event.is_public.is_(True),
        )
        .first()
    )
    if event is None:
        raise FavoriteError("Event not found or not available", 404)

    exists = db.query(Favorite.id).filter(Favorite.user_id == user_id, Favorite.event_id == event_id).first()
    if exists is not None:
        return False

    try:
        db.add(Favorite(user_id=user_id, event_id=event_id))
        db.flush()
    except IntegrityError:
        # 동시에 같은 user가 등록하면 UniqueConstraint 위반 가능. rollback은 호출자(라우터)에서 수행
        raise FavoriteError("Event already in favorites", 409)
    return True


def remove_favorite(db: Session, event_id: int, user_id: int) -> None:
    deleted = (
        db.query(Favorite)
        .filter(Favorite.user_id == user_id, Favorite.event_id == event_id)
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        raise FavoriteError("Favorite not found", 404)


def clear_favorites(db: Session, user_id: int) -> int:
    """사용자의 관심 이벤트 전체 삭제. 반환: 삭제된 행 수."""
    return (
        db.query(Favorite)
        .filter(Favorite.user_id == user_id)
        .delete(synchronize_session=False)
    )


def is_favorited(db: Session, event_id: int, user_id: int) -> bool:
    return (
        db.query(Favorite.id)
        .filter(Favorite.user_id == user_id, Favorite.event_id == event_id)
        .first()
        is not None
    )
