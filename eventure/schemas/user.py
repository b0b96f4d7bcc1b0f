# 요청자 식별 스키마 (인증은 이 서비스 밖에서 처리)

from pydantic import BaseModel


class UserBody(BaseModel):
    """RSVP/관심 등록·취소 시 사용자 식별만 필요."""

    user_id: int
