from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# 이름 없는 인덱스/FK의 이름 규칙 (마이그레이션의 op.f("ix_...")와 맞춤)
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
}


class Base(DeclarativeBase):
    """users, events, zip_locations, rsvps, favorites 모델 공통 Base."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
