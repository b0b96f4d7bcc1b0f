# 우편번호 → 대표 좌표 조회 (zip_locations 테이블 단일 키 조회)

import logging
from typing import Iterable, Optional, Tuple

from sqlalchemy.orm import Session

from eventure.models.zip_location import ZipLocation
from eventure.services.geo_distance import Coordinate

logger = logging.getLogger(__name__)


def resolve_zip(db: Session, zip_code: str) -> Optional[Coordinate]:
    """
    zip_code 와 정확히 일치하는 첫 행의 좌표 반환. 없으면 None.

    - 정규화/검증 없음: 호출자가 5자리 숫자인지 먼저 확인해야 함.
    - 지오코딩·유사 검색 없음.
    """
    row = (
        db.query(ZipLocation.lat, ZipLocation.lng)
        .filter(ZipLocation.zip_code == zip_code)
        .first()
    )
    if row is None:
        return None
    return Coordinate(lat=row.lat, lng=row.lng)


def upsert_zip_locations(db: Session, rows: Iterable[Tuple[str, float, float]]) -> int:
    """
    (zip_code, lat, lng) 행들을 zip_locations에 적재. 이미 있는 zip은 좌표 갱신.

    반환: 처리한 행 수. commit은 호출자가.
    """
    count = 0
    for zip_code, lat, lng in rows:
        db.merge(ZipLocation(zip_code=zip_code, lat=lat, lng=lng))
        count += 1
    logger.info("Loaded %d zip locations", count)
    return count
