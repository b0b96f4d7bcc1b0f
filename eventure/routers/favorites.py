# 관심 이벤트 API
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventure.crud.errors import CrudError
from eventure.crud.favorite_crud import (
    add_favorite,
    clear_favorites,
    is_favorited,
    list_favorites,
    remove_favorite,
)
from eventure.database import get_db
from eventure.schemas.event import FavoriteEventOut
from eventure.schemas.favorite import FavoriteCheckOut, FavoriteResult
from eventure.schemas.user import UserBody

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=List[FavoriteEventOut])
def get_favorites(user_id: int = Query(...), db: Session = Depends(get_db)) -> List[FavoriteEventOut]:
    return [
        FavoriteEventOut.from_event(e, n, favorited_at=favorited_at)
        for e, n, favorited_at in list_favorites(db, user_id)
    ]


@router.get("/check/{event_id}", response_model=FavoriteCheckOut)
def check_favorite(event_id: int, user_id: int = Query(...), db: Session = Depends(get_db)) -> FavoriteCheckOut:
    return FavoriteCheckOut(is_favorited=is_favorited(db, event_id, user_id))


@router.post("/{event_id}", response_model=FavoriteResult, responses={201: {"model": FavoriteResult}})
def post_favorite(event_id: int, body: UserBody, response: Response, db: Session = Depends(get_db)) -> FavoriteResult:
    """관심 등록. 새로 추가면 201, 이미 있으면 200."""
    try:
        added = add_favorite(db, event_id, body.user_id)
        db.commit()
    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to add favorite for event %s", event_id)
        raise HTTPException(status_code=500, detail="Failed to add favorite")

    if added:
        response.status_code = 201
        return FavoriteResult(message="Event added to favorites")
    return FavoriteResult(message="Event already in favorites")


@router.delete("/{event_id}", response_model=FavoriteResult)
def delete_favorite(event_id: int, body: UserBody, db: Session = Depends(get_db)) -> FavoriteResult:
    try:
        remove_favorite(db, event_id, body.user_id)
        db.commit()
        return FavoriteResult(message="Event removed from favorites")
    except CrudError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("", response_model=FavoriteResult)
def delete_all_favorites(body: UserBody, db: Session = Depends(get_db)) -> FavoriteResult:
    """사용자의 관심 이벤트 전체 삭제."""
    count = clear_favorites(db, body.user_id)
    db.commit()
    return FavoriteResult(message="All favorites cleared", count=count)
