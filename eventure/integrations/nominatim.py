# Nominatim (OpenStreetMap) 지오코딩 연동: 주소 문자열 → 좌표

from typing import Any, Dict, List, Optional, Tuple

import httpx

from eventure.config import GEOCODING_TIMEOUT_SEC, GEOCODING_USER_AGENT, NOMINATIM_BASE_URL

SEARCH_PATH = "/search"


def _first_coordinate(docs: List[Dict[str, Any]]) -> Optional[Tuple[float, float]]:
    """Nominatim 결과 첫 항목의 (lat, lng). lat/lon은 문자열로 옴."""
    if not docs:
        return None
    doc = docs[0]
    try:
        return float(doc["lat"]), float(doc["lon"])
    except (KeyError, TypeError, ValueError):
        return None


async def _search(client: httpx.AsyncClient, query: str) -> Optional[Tuple[float, float]]:
    url = f"{NOMINATIM_BASE_URL.rstrip('/')}{SEARCH_PATH}"
    params = {"q": query, "format": "jsonv2", "limit": 1, "countrycodes": "us"}
    # Nominatim 이용 정책상 식별 가능한 User-Agent 필수
    headers = {"User-Agent": GEOCODING_USER_AGENT}
    resp = await client.get(url, params=params, headers=headers)
    if resp.status_code != 200:
        raise RuntimeError(f"Nominatim 오류: HTTP {resp.status_code}")
    try:
        data = resp.json()
    except ValueError as e:
        # 점검/차단 페이지 등 HTML 응답이 200으로 오는 경우
        raise RuntimeError(f"Nominatim 응답 파싱 실패: {e}") from e
    if not isinstance(data, list):
        return None
    return _first_coordinate(data)


async def geocode_address(query: str, client: Optional[httpx.AsyncClient] = None) -> Optional[Tuple[float, float]]:
    """
    주소 문자열 → (lat, lng). 결과 없으면 None, HTTP 오류는 RuntimeError / httpx.HTTPError.
    client를 넘기면 재사용 (테스트에서는 MockTransport 클라이언트 주입).
    """
    if client is not None:
        return await _search(client, query)
    async with httpx.AsyncClient(timeout=GEOCODING_TIMEOUT_SEC) as own_client:
        return await _search(own_client, query)
