# 이벤트 검색 요청 파라미터 (쿼리스트링 → 타입이 정해진 요청 객체, 경계에서 한 번만 해석)

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from eventure.config import SEARCH_MAX_LIMIT

CATEGORY_ALL = "All"


class OrderField(str, Enum):
    STARTS_AT = "starts_at"
    CREATED_AT = "created_at"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


# 앞쪽 정수 부분만 사용: "5.0" → 5, "10abc" → 10, "abc" → None
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


class SearchRequest(BaseModel):
    """
    GET /events 검색 조건.

    - 잘못된 값은 에러가 아니라 "없음"으로 정리됨 (limit/order 등).
    - zip_code는 들어온 그대로(공백만 제거) 보관. 5자리 여부와 반경 유효성은
      검색 단계에서 GeoFilterPolicy 기준으로 판단 → 잘못되면 빈 결과.
    """

    model_config = ConfigDict(frozen=True)

    zip_code: Optional[str] = None
    radius_miles: Optional[int] = None
    category: Optional[str] = None
    order_by: OrderField = OrderField.STARTS_AT
    order: SortOrder = SortOrder.ASC
    limit: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def _default_order_pair(cls, data: Any) -> Any:
        # 인식할 수 없는 order_by면 order도 무시 → 기본 starts_at ASC
        if isinstance(data, dict) and data.get("order_by") not in {f.value for f in OrderField}:
            data = {**data, "order": None}
        return data

    @field_validator("zip_code", mode="before")
    @classmethod
    def _strip_zip(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("radius_miles", mode="before")
    @classmethod
    def _parse_radius(cls, v: Any) -> Optional[int]:
        n = _parse_int(v)
        return n if n is not None and n > 0 else None

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        v = str(v).strip()
        if v == "" or v == CATEGORY_ALL:
            return None
        return v

    @field_validator("order_by", mode="before")
    @classmethod
    def _parse_order_by(cls, v: Any) -> OrderField:
        try:
            return OrderField(v)
        except ValueError:
            return OrderField.STARTS_AT

    @field_validator("order", mode="before")
    @classmethod
    def _parse_order(cls, v: Any) -> SortOrder:
        return SortOrder.DESC if v == SortOrder.DESC.value else SortOrder.ASC

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, v: Any) -> Optional[int]:
        n = _parse_int(v)
        if n is None or n <= 0:
            return None
        return min(n, SEARCH_MAX_LIMIT)

    @classmethod
    def from_query(
        cls,
        zip: Optional[str] = None,
        radius: Optional[str] = None,
        category: Optional[str] = None,
        order_by: Optional[str] = None,
        order: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> "SearchRequest":
        """쿼리스트링 원본 값으로 생성."""
        return cls(
            zip_code=zip,
            radius_miles=radius,
            category=category,
            order_by=order_by,
            order=order,
            limit=limit,
        )

    @property
    def geo_requested(self) -> bool:
        return self.zip_code is not None
