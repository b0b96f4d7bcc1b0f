# 참석 인원 집계: 이벤트별 status='going' RSVP 수 (매 조회마다 재계산, 캐시 없음)

from typing import Dict, Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Query, Session
from sqlalchemy.sql.selectable import Subquery

from eventure.models.event import Event
from eventure.models.rsvp import RSVP, RsvpStatus


def going_counts_subquery() -> Subquery:
    """SELECT event_id, COUNT(*) AS rsvp_count FROM rsvps WHERE status='going' GROUP BY event_id"""
    return (
        select(RSVP.event_id.label("event_id"), func.count(RSVP.id).label("rsvp_count"))
        .where(RSVP.status == RsvpStatus.GOING.value)
        .group_by(RSVP.event_id)
        .subquery("rsvp_counts")
    )


def query_events_with_counts(db: Session, *extra_columns) -> Query:
    """
    (Event, rsvp_count, *extra_columns) 조회 쿼리.

    LEFT JOIN이므로 RSVP가 없는 이벤트도 포함되고, COALESCE로 0을 채움 (NULL 아님).
    """
    counts = going_counts_subquery()
    rsvp_count = func.coalesce(counts.c.rsvp_count, 0).label("rsvp_count")
    return db.query(Event, rsvp_count, *extra_columns).outerjoin(counts, counts.c.event_id == Event.id)


def counts_for(db: Session, event_ids: Iterable[int]) -> Dict[int, int]:
    """event_id → going 수. 요청한 id는 RSVP가 없어도 0으로 포함."""
    ids = list(dict.fromkeys(event_ids))
    if not ids:
        return {}
    rows = (
        db.query(RSVP.event_id, func.count(RSVP.id))
        .filter(RSVP.event_id.in_(ids), RSVP.status == RsvpStatus.GOING.value)
        .group_by(RSVP.event_id)
        .all()
    )
    counts = {event_id: 0 for event_id in ids}
    counts.update({event_id: int(n) for event_id, n in rows})
    return counts
