# 이벤트 검색/생성/조회/수정/삭제 API
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventure.crud.errors import CrudError
from eventure.crud.event_crud import (
    create_event,
    delete_event,
    get_organizer,
    get_owned_event,
    get_visible_event,
    list_attending_events,
    list_categories,
    list_events_by_creator,
    update_event,
)
from eventure.database import get_db
from eventure.models.event import Event
from eventure.models.user import User
from eventure.schemas.event import (
    AttendingEventOut,
    EventCreate,
    EventDetail,
    EventSearchResult,
    EventSummary,
    EventUpdate,
    OrganizerOut,
)
from eventure.schemas.search import SearchRequest
from eventure.schemas.user import UserBody
from eventure.services.attendance import counts_for
from eventure.services.event_search import InvalidSearchInput, search_events
from eventure.services.geocoding import resolve_event_coordinate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["Events"])


def _organizer_out(user: Optional[User]) -> Optional[OrganizerOut]:
    """생성자 정보. 이메일은 show_contact_info=True 일 때만."""
    if user is None:
        return None
    return OrganizerOut(
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email if user.show_contact_info else None,
        show_contact_info=bool(user.show_contact_info),
    )


async def _coordinate_for(db: Session, body: EventCreate):
    return await resolve_event_coordinate(
        db,
        address_line1=body.address_line1,
        city=body.city,
        state=body.state,
        zip_code=body.zip_code,
    )


def _summary(db: Session, event: Event) -> EventSummary:
    return EventSummary.from_event(event, counts_for(db, [event.id])[event.id])


@router.get("", response_model=List[EventSearchResult])
def get_events(
    zip_code: Optional[str] = Query(None, alias="zip", description="5자리 우편번호. radius와 함께 사용"),
    radius: Optional[str] = Query(None, description="반경(마일): 5, 10, 15, 20, 25, 30, 40, 50"),
    category: Optional[str] = Query(None, description='"All" 또는 빈 값이면 전체'),
    order_by: Optional[str] = Query(None, alias="orderBy", description="starts_at | created_at"),
    order: Optional[str] = Query(None, description="ASC | DESC"),
    limit: Optional[str] = Query(None, description="최대 200"),
    db: Session = Depends(get_db),
) -> List[EventSearchResult]:
    """
    승인+공개 이벤트 검색. rsvp_count 포함, 기본 starts_at 오름차순.
    zip/radius가 잘못됐거나 등록되지 않은 zip이면 오류 대신 빈 배열.
    """
    request = SearchRequest.from_query(
        zip=zip_code,
        radius=radius,
        category=category,
        order_by=order_by,
        order=order,
        limit=limit,
    )
    try:
        return search_events(db, request)
    except InvalidSearchInput as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Failed to fetch events")
        raise HTTPException(status_code=500, detail="Failed to fetch events")


@router.get("/categories", response_model=List[str])
def get_categories(db: Session = Depends(get_db)) -> List[str]:
    """승인+공개 이벤트의 카테고리 목록."""
    return list_categories(db)


@router.get("/mine", response_model=List[EventSummary])
def get_my_events(user_id: int = Query(...), db: Session = Depends(get_db)) -> List[EventSummary]:
    """내가 만든 이벤트 (상태 무관)."""
    return [EventSummary.from_event(e, n) for e, n in list_events_by_creator(db, user_id)]


@router.get("/attending", response_model=List[AttendingEventOut])
def get_attending_events(user_id: int = Query(...), db: Session = Depends(get_db)) -> List[AttendingEventOut]:
    """내가 RSVP한 승인+공개 이벤트."""
    return [
        AttendingEventOut.from_event(e, n, rsvp_status=status, rsvp_created_at=created_at)
        for e, n, status, created_at in list_attending_events(db, user_id)
    ]


@router.get("/{event_id}", response_model=EventDetail)
def get_event_detail(
    event_id: int,
    user_id: Optional[int] = Query(None, description="생성자면 승인 전 이벤트도 조회 가능"),
    db: Session = Depends(get_db),
) -> EventDetail:
    try:
        event, rsvp_count, organizer = get_visible_event(db, event_id, user_id)
    except CrudError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return EventDetail.from_event(event, rsvp_count, organizer=_organizer_out(organizer))


@router.post("", response_model=EventSummary, status_code=201)
async def post_event(body: EventCreate, db: Session = Depends(get_db)) -> EventSummary:
    """이벤트 생성 (pending). 주소 → 좌표 지오코딩 후 저장. 예외 시 rollback."""
    try:
        organizer = get_organizer(db, body.user_id)
        coordinate = await _coordinate_for(db, body)
        event = create_event(db, organizer, body, coordinate)
        db.commit()  # ✅ 트랜잭션 소유권: 라우터
        db.refresh(event)
        return EventSummary.from_event(event, 0)

    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create event")
        raise HTTPException(status_code=500, detail="Failed to create event")


@router.put("/{event_id}", response_model=EventSummary)
async def put_event(event_id: int, body: EventUpdate, db: Session = Depends(get_db)) -> EventSummary:
    """생성자만 수정 가능. 주소가 바뀌었을 수 있으므로 좌표도 다시 결정."""
    try:
        event = get_owned_event(db, event_id, body.user_id, action="edit")
        coordinate = await _coordinate_for(db, body)
        update_event(db, event, body, coordinate)
        db.commit()
        db.refresh(event)
        return _summary(db, event)

    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update event %s", event_id)
        raise HTTPException(status_code=500, detail="Failed to update event")


@router.delete("/{event_id}")
def remove_event(event_id: int, body: UserBody, db: Session = Depends(get_db)) -> dict:
    """생성자만 삭제 가능. RSVP/관심 등록은 CASCADE로 함께 삭제."""
    try:
        event = get_owned_event(db, event_id, body.user_id, action="delete")
        delete_event(db, event)
        db.commit()
        return {"message": "Event deleted successfully"}

    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete event %s", event_id)
        raise HTTPException(status_code=500, detail="Failed to delete event")
