# 관심 이벤트 응답 스키마

from typing import Optional

from pydantic import BaseModel


class FavoriteResult(BaseModel):
    message: str
    count: Optional[int] = None  # 전체 삭제 시 삭제된 행 수


class FavoriteCheckOut(BaseModel):
    is_favorited: bool
