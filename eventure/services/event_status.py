# 이벤트 검수(moderation) 상태 전이 규칙
#
#   pending  → approved | declined
#   approved → declined         (승인 취소)
#   declined → approved         (재검토 후 승인)
#
# 같은 상태로의 변경(예: 이미 승인된 이벤트 재승인)은 no-op으로 허용.
# 수정(PUT)은 상태를 바꾸지 않음. 상태 변경은 관리자 API에서만.

from typing import Dict, FrozenSet, Optional

from eventure.models.event import EventStatus

ALLOWED_TRANSITIONS: Dict[EventStatus, FrozenSet[EventStatus]] = {
    EventStatus.PENDING: frozenset({EventStatus.APPROVED, EventStatus.DECLINED}),
    EventStatus.APPROVED: frozenset({EventStatus.DECLINED}),
    EventStatus.DECLINED: frozenset({EventStatus.APPROVED}),
}


def allowed_targets(current: str) -> FrozenSet[EventStatus]:
    """DB에 저장된 상태 문자열 기준. 알 수 없는 값이면 어디로도 못 감."""
    try:
        return ALLOWED_TRANSITIONS[EventStatus(current)]
    except ValueError:
        return frozenset()


def check_status_transition(current: str, target: str) -> Optional[str]:
    """허용되면 None, 아니면 409 응답에 쓸 메시지. 같은 상태 유지는 항상 허용."""
    if current == target and current in {s.value for s in EventStatus}:
        return None
    allowed = sorted(s.value for s in allowed_targets(current))
    if target in allowed:
        return None
    return f"Cannot change event status from {current} to {target} (allowed: {', '.join(allowed) or 'none'})"
