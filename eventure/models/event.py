# Event 모델: 공개 이벤트 엔티티

from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, Numeric, String, Text, true
from sqlalchemy.sql import func

from eventure.models.base import Base


class EventStatus(str, PyEnum):
    """검수 상태. PENDING으로 생성 → 관리자가 APPROVED/DECLINED로 변경."""

    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"


# DB에는 String(20)으로 저장. 앱에서는 EventStatus로 비교.
STATUS_DEFAULT = EventStatus.PENDING.value


class Event(Base):
    """이벤트 테이블. lat/lng는 지오코딩 성공 시에만 채워짐 (NULL이면 반경 검색에서 제외)."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=STATUS_DEFAULT, server_default=STATUS_DEFAULT, index=True)
    is_public = Column(Boolean, nullable=False, default=True, server_default=true())
    starts_at = Column(DateTime(timezone=True), nullable=False, index=True)
    ends_at = Column(DateTime(timezone=True), nullable=True)
    capacity = Column(Integer, nullable=True)  # NULL이면 정원 제한 없음
    ticket_price = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0, server_default="0")
    tags = Column(String(500), nullable=True)
    main_image = Column(String(500), nullable=True)
    # 주소
    venue = Column(String(255), nullable=True)
    address_line1 = Column(String(255), nullable=True)
    address_line2 = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip_code = Column(String(10), nullable=True)
    location = Column(Text, nullable=True)  # 자유 형식 위치 설명
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
