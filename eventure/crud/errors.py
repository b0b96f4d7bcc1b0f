# CRUD 계층 예외: 라우터가 status_code로 HTTPException 변환


class CrudError(Exception):
    """요청을 처리할 수 없음 (없는 대상, 권한 없음, 정원 초과 등)."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UserError(CrudError):
    """사용자 없음 / 역할 부족."""


class EventError(CrudError):
    """이벤트 없음 / 소유자 아님 / 허용되지 않는 상태 변경."""


class RsvpError(CrudError):
    """RSVP 불가 (비공개 이벤트, 정원 초과) 또는 취소할 RSVP 없음."""


class FavoriteError(CrudError):
    """관심 등록 불가 또는 삭제할 항목 없음."""
