# 이벤트 API 요청/응답 스키마

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

EventStatusLiteral = Literal["pending", "approved", "declined"]


class EventCreate(BaseModel):
    """이벤트 생성 요청. user_id = 생성자 (organizer/admin 만 허용)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    starts_at: datetime
    ends_at: Optional[datetime] = None
    venue: Optional[str] = Field(default=None, max_length=255)
    address_line1: Optional[str] = Field(default=None, max_length=255)
    address_line2: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=50)
    zip_code: Optional[str] = Field(default=None, max_length=10)
    location: Optional[str] = None
    tags: Optional[str] = Field(default=None, max_length=500)
    ticket_price: float = Field(default=0, ge=0)
    capacity: Optional[int] = Field(default=None, ge=1)
    main_image: Optional[str] = Field(default=None, max_length=500)
    is_public: bool = True

    @model_validator(mode="after")
    def _check_time_range(self) -> "EventCreate":
        if self.ends_at is not None and self.ends_at < self.starts_at:
            raise ValueError("End date/time must be after start date/time")
        return self


class EventUpdate(EventCreate):
    """PUT 전체 갱신 요청 (생성과 동일 필드). user_id = 수정 요청자 (생성자만 허용)."""


class OrganizerOut(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None  # show_contact_info=True 인 경우에만 노출
    show_contact_info: bool = False


class EventSummary(BaseModel):
    """목록/검색 응답 한 행. rsvp_count = status='going' RSVP 수 (없으면 0)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    category: str
    status: EventStatusLiteral
    is_public: bool
    starts_at: datetime
    ends_at: Optional[datetime] = None
    venue: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    location: Optional[str] = None
    tags: Optional[str] = None
    ticket_price: float = 0
    capacity: Optional[int] = None
    main_image: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    created_by: int
    created_at: Optional[datetime] = None
    rsvp_count: int = 0

    @classmethod
    def from_event(cls, event: Any, rsvp_count: Optional[int] = 0, **extra: Any):
        """ORM Event + 집계값 → 응답 모델. extra는 하위 클래스 전용 필드 (distance_miles 등)."""
        data = {name: getattr(event, name) for name in EventSummary.model_fields if hasattr(event, name)}
        data["rsvp_count"] = int(rsvp_count or 0)
        data.update(extra)
        return cls(**data)


class EventSearchResult(EventSummary):
    # 반경 검색일 때만 값이 있음 (zip 중심 좌표 기준)
    distance_miles: Optional[float] = None


class EventDetail(EventSummary):
    organizer: Optional[OrganizerOut] = None


class AttendingEventOut(EventSummary):
    rsvp_status: str
    rsvp_created_at: Optional[datetime] = None


class FavoriteEventOut(EventSummary):
    favorited_at: Optional[datetime] = None
