# 이벤트 반경 검색: 필터 조건 조합 → 단일 쿼리 (정렬/limit 포함) → rsvp_count 부착
#
# 흐름: SearchRequest → (zip 있으면) 반경/zip 검증 → resolve_zip → 좌표 NOT NULL + 거리 조건
#      → 승인·공개 + 카테고리 조건과 AND → ORDER BY / LIMIT → EventSearchResult 목록
#
# 알려진 한계: 거리 조건은 행마다 계산 (O(n)). bounding-box 선필터/공간 인덱스 없음.
# starts_at 동률일 때의 순서는 정하지 않음 (저장 순서에 따름).

import logging
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from sqlalchemy.orm import Query, Session
from sqlalchemy.sql.elements import ColumnElement

from eventure.models.event import Event, EventStatus
from eventure.schemas.event import EventSearchResult
from eventure.schemas.search import OrderField, SearchRequest, SortOrder
from eventure.services.attendance import query_events_with_counts
from eventure.services.geo_distance import (
    METERS_PER_MILE,
    Coordinate,
    distance_meters_sql,
    has_coordinates,
    within_radius_sql,
)
from eventure.services.zip_index import resolve_zip

logger = logging.getLogger(__name__)

VALID_RADII_MILES: Tuple[int, ...] = (5, 10, 15, 20, 25, 30, 40, 50)
ZIP_PATTERN = re.compile(r"^\d{5}$")


@dataclass(frozen=True)
class GeoFilterPolicy:
    """
    잘못된 위치 검색 입력 처리 정책.

    soft_fail_to_empty=True (기본): 잘못된 zip, 허용되지 않은 반경, 등록되지 않은 zip → 빈 목록.
    사용자에게는 오류 대신 "결과 없음"으로 보임 (제품 결정).
    False면 같은 경우에 InvalidSearchInput 예외.
    """

    soft_fail_to_empty: bool = True
    valid_radii_miles: Tuple[int, ...] = VALID_RADII_MILES


DEFAULT_GEO_POLICY = GeoFilterPolicy()


class InvalidSearchInput(Exception):
    """위치 검색 입력 오류 (soft_fail_to_empty=False 일 때만 발생)."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code


class Predicate(NamedTuple):
    """WHERE 절 조건 하나. kind는 조건 종류 태그, clause는 바인드 파라미터가 포함된 SQL 표현식."""

    kind: str
    clause: ColumnElement


class EventSearchQuery:
    """
    검색 쿼리 빌더.

    승인(approved) + 공개(is_public) 조건은 생성자에서 항상 추가됨 → 호출자가 빠뜨릴 수 없음.
    나머지 조건은 메서드로 누적하고 모두 AND로 결합.
    """

    def __init__(self, db: Session):
        self.db = db
        self._predicates: List[Predicate] = [
            Predicate("status", Event.status == EventStatus.APPROVED.value),
            Predicate("visibility", Event.is_public.is_(True)),
        ]
        self._distance_m: Optional[ColumnElement] = None
        self._order_by = Event.starts_at.asc()
        self._limit: Optional[int] = None

    @property
    def predicates(self) -> Tuple[Predicate, ...]:
        return tuple(self._predicates)

    def with_category(self, category: str) -> "EventSearchQuery":
        """카테고리 정확히 일치 (대소문자 구분)."""
        self._predicates.append(Predicate("category", Event.category == category))
        return self

    def within_radius(self, center: Coordinate, radius_miles: int) -> "EventSearchQuery":
        """좌표가 있는 이벤트 중 center 기준 radius_miles 이내만."""
        self._predicates.append(Predicate("has_coordinates", has_coordinates()))
        self._predicates.append(Predicate("within_radius", within_radius_sql(center, radius_miles)))
        self._distance_m = distance_meters_sql(center).label("distance_m")
        return self

    def order(self, field: OrderField, direction: SortOrder) -> "EventSearchQuery":
        column = Event.created_at if field == OrderField.CREATED_AT else Event.starts_at
        self._order_by = column.desc() if direction == SortOrder.DESC else column.asc()
        return self

    def limit(self, n: Optional[int]) -> "EventSearchQuery":
        self._limit = n
        return self

    def build(self) -> Query:
        extra = [self._distance_m] if self._distance_m is not None else []
        q = (
            query_events_with_counts(self.db, *extra)
            .filter(*[p.clause for p in self._predicates])
            .order_by(self._order_by)
        )
        if self._limit is not None:
            q = q.limit(self._limit)
        return q

    def all(self) -> List[EventSearchResult]:
        results = []
        for row in self.build().all():
            distance_miles = None
            if self._distance_m is not None:
                distance_miles = round(row.distance_m / METERS_PER_MILE, 3)
            results.append(EventSearchResult.from_event(row[0], row.rsvp_count, distance_miles=distance_miles))
        return results


def _reject(policy: GeoFilterPolicy, reason: str) -> List[EventSearchResult]:
    if policy.soft_fail_to_empty:
        logger.debug("Location search yields no results: %s", reason)
        return []
    raise InvalidSearchInput(reason)


def search_events(
    db: Session,
    request: SearchRequest,
    policy: GeoFilterPolicy = DEFAULT_GEO_POLICY,
) -> List[EventSearchResult]:
    """
    공개 이벤트 검색 (GET /events).

    - 항상: status='approved' AND is_public
    - category: 지정 시 정확히 일치 ("All"/빈 값은 SearchRequest에서 None으로 정리됨)
    - zip: 5자리 + 허용 반경 필수, zip_locations에 있어야 함. 하나라도 어긋나면 정책에 따라 빈 목록
    - zip 없음: 위치 조건 없이 전체
    DB 오류(SQLAlchemyError)는 그대로 전파 (부분 결과 없음).
    """
    q = EventSearchQuery(db)

    if request.category is not None:
        q.with_category(request.category)

    if request.geo_requested:
        if not ZIP_PATTERN.match(request.zip_code):
            return _reject(policy, f"Malformed zip code {request.zip_code!r}")
        if request.radius_miles not in policy.valid_radii_miles:
            return _reject(policy, f"Missing or unsupported radius {request.radius_miles!r}")
        center = resolve_zip(db, request.zip_code)
        if center is None:
            return _reject(policy, f"Unknown zip code {request.zip_code}")
        q.within_radius(center, request.radius_miles)

    return q.order(request.order_by, request.order).limit(request.limit).all()
