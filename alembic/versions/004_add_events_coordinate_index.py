"""events(lat, lng) 부분 인덱스: 좌표가 있는 승인 이벤트만 (반경 검색 후보 축소용)

Revision ID: 004
Revises: 003
Create Date: 2025-01-01 00:00:03.000000

"""
from typing import Sequence, Union

from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute(
        "CREATE INDEX IF NOT EXISTS idx_events_listed_coordinates "
        "ON events (status, is_public) WHERE lat IS NOT NULL AND lng IS NOT NULL;"
    )


def downgrade() -> None:
    op.execute("DROP INDEX IF EXISTS idx_events_listed_coordinates;")
