# 사용자 조회/역할 확인

from typing import Iterable

from sqlalchemy.orm import Session

from eventure.crud.errors import UserError
from eventure.models.user import User, UserRole

ORGANIZER_ROLES = {UserRole.ORGANIZER.value, UserRole.ADMIN.value}
ADMIN_ROLES = {UserRole.ADMIN.value}


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise UserError("User not found", 404)
    return user


def require_role(db: Session, user_id: int, roles: Iterable[str], message: str) -> User:
    """user_id의 역할이 roles 중 하나가 아니면 403."""
    user = get_user(db, user_id)
    if user.role not in set(roles):
        raise UserError(message, 403)
    return user
