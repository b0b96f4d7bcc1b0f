# RSVP 모델: 이벤트 참석 의사

from enum import Enum as PyEnum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from eventure.models.base import Base


class RsvpStatus(str, PyEnum):
    """취소는 상태값이 아니라 행 삭제로 표현."""

    GOING = "going"


class RSVP(Base):
    """RSVP 테이블. user-event 당 최대 1행. 참석 인원 = status='going' 행 수."""

    __tablename__ = "rsvps"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=RsvpStatus.GOING.value, server_default=RsvpStatus.GOING.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (UniqueConstraint("user_id", "event_id", name="uq_rsvp_user_event"),)
