# User 모델

from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, DateTime, Integer, String, false
from sqlalchemy.sql import func

from eventure.models.base import Base


class UserRole(str, PyEnum):
    """사용자 역할. 이벤트 생성은 ORGANIZER/ADMIN만 가능."""

    USER = "user"
    ORGANIZER = "organizer"
    ADMIN = "admin"


class User(Base):
    """사용자 테이블. 인증/세션은 이 서비스 밖에서 처리하고 여기서는 역할·연락처 공개 여부만 사용."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=False, unique=True)
    role = Column(String(20), nullable=False, default=UserRole.USER.value, server_default=UserRole.USER.value)
    show_contact_info = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
