# 대권(great-circle) 거리 계산: 구면 코사인 법칙
#
# distance_m = 6371000 * acos(min(1.0, cos(lat1)cos(lat2)cos(lng2 - lng1) + sin(lat1)sin(lat2)))
#
# 지구를 구로 근사 (타원체 아님). 50마일 이하 반경 필터에는 충분한 정밀도.
# SQL 표현식도 같은 식을 사용해 DB에서 필터링 (반경 검색 쿼리 pushdown).

import math
from typing import NamedTuple

from sqlalchemy import Float, and_, func
from sqlalchemy.sql.elements import ColumnElement

from eventure.models.event import Event

EARTH_RADIUS_M = 6371000  # 평균 반경 (m)
METERS_PER_MILE = 1609.34


class Coordinate(NamedTuple):
    """위경도 (decimal degrees)."""

    lat: float
    lng: float


def miles_to_meters(miles: float) -> float:
    return miles * METERS_PER_MILE


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """두 좌표 사이 거리(m). 부동소수점 오차로 1을 넘는 acos 인자는 1.0으로 자름 (상한만)."""
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlng = math.radians(b.lng) - math.radians(a.lng)
    cos_angle = math.cos(lat1) * math.cos(lat2) * math.cos(dlng) + math.sin(lat1) * math.sin(lat2)
    return EARTH_RADIUS_M * math.acos(min(1.0, cos_angle))


def is_within_radius(center: Coordinate, point: Coordinate, radius_miles: float) -> bool:
    return distance_meters(center, point) <= miles_to_meters(radius_miles)


def has_coordinates() -> ColumnElement:
    """반경 검색 전제 조건: lat/lng 둘 다 NOT NULL (지오코딩 실패 이벤트 제외)."""
    return and_(Event.lat.isnot(None), Event.lng.isnot(None))


def distance_meters_sql(center: Coordinate) -> ColumnElement:
    """Event.lat/lng 와 center 사이 거리(m) SQL 표현식. center 좌표는 바인드 파라미터로 전달."""
    event_lat = func.radians(Event.lat)
    center_lat = func.radians(center.lat)
    cos_angle = (
        func.cos(event_lat) * func.cos(center_lat) * func.cos(func.radians(center.lng) - func.radians(Event.lng))
        + func.sin(event_lat) * func.sin(center_lat)
    )
    return EARTH_RADIUS_M * func.acos(func.least(1.0, cos_angle, type_=Float), type_=Float)


def within_radius_sql(center: Coordinate, radius_miles: float) -> ColumnElement:
    return distance_meters_sql(center) <= miles_to_meters(radius_miles)
