# 이벤트 좌표 결정: Nominatim(설정 시) → zip 중심 좌표 → 없음(NULL)

import logging
from typing import Optional

import httpx
from sqlalchemy.orm import Session

from eventure.config import GEOCODING_ENABLED
from eventure.integrations.nominatim import geocode_address
from eventure.services.event_search import ZIP_PATTERN
from eventure.services.geo_distance import Coordinate
from eventure.services.zip_index import resolve_zip

logger = logging.getLogger(__name__)


def format_address(
    address_line1: Optional[str],
    city: Optional[str],
    state: Optional[str],
    zip_code: Optional[str],
) -> str:
    """비어 있지 않은 주소 구성요소를 ", "로 연결."""
    parts = [p.strip() for p in (address_line1, city, state, zip_code) if p and p.strip()]
    return ", ".join(parts)


async def resolve_event_coordinate(
    db: Session,
    *,
    address_line1: Optional[str] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
    zip_code: Optional[str] = None,
    enabled: bool = GEOCODING_ENABLED,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[Coordinate]:
    """
    이벤트 저장 전 좌표 결정.

    1. enabled면 Nominatim 주소 검색 (실패해도 이벤트 저장은 막지 않음 → 다음 단계로)
    2. zip 앞 5자리가 zip_locations에 있으면 그 중심 좌표
    3. 둘 다 실패 → None (반경 검색에서 보이지 않음)
    """
    if enabled:
        query = format_address(address_line1, city, state, zip_code)
        if query:
            try:
                found = await geocode_address(query, client=client)
            except (httpx.HTTPError, RuntimeError) as e:
                logger.warning("Geocoding failed for %r: %s", query, e)
            else:
                if found is not None:
                    return Coordinate(*found)

    zip5 = (zip_code or "").strip()[:5]
    if ZIP_PATTERN.match(zip5):
        return resolve_zip(db, zip5)
    return None
