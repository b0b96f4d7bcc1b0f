# ZipLocation 모델: 우편번호 → 대표 좌표 (정적 참조 데이터)

from sqlalchemy import Column, Float, String

from eventure.models.base import Base


class ZipLocation(Base):
    """zip_locations 테이블. 요청 처리 중에는 읽기 전용 (load_zip_locations로 적재)."""

    __tablename__ = "zip_locations"

    zip_code = Column(String(5), primary_key=True)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
