import math
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from eventure.config import DATABASE_URL


def _nullable(fn):
    """SQL NULL 전파: 인자 중 하나라도 None이면 None 반환."""

    def wrapper(*args: Optional[float]) -> Optional[float]:
        if any(a is None for a in args):
            return None
        return fn(*args)

    return wrapper


# SQLite에는 radians/cos/sin/acos/LEAST가 (빌드에 따라) 없음 → 연결마다 등록
_SQLITE_FUNCTIONS = {
    "radians": (1, _nullable(math.radians)),
    "cos": (1, _nullable(math.cos)),
    "sin": (1, _nullable(math.sin)),
    "acos": (1, _nullable(math.acos)),
    "least": (2, _nullable(min)),
}


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {}


# SQLAlchemy 엔진 생성
# - future=True: 최신 SQLAlchemy 스타일 사용
engine: Engine = create_engine(DATABASE_URL, echo=False, future=True, **_engine_kwargs(DATABASE_URL))


@event.listens_for(Engine, "connect")
def configure_sqlite(dbapi_connection, connection_record) -> None:
    """
    SQLite 연결 시 PostgreSQL과 같은 동작을 맞추는 리스너

    - 반경 검색 SQL(6371000 * acos(LEAST(1.0, ...)))용 수학 함수 등록
    - PRAGMA foreign_keys=ON: ON DELETE CASCADE 적용 (rsvps, favorites)
    - PostgreSQL 등 다른 드라이버 연결은 건드리지 않음
    """
    if not hasattr(dbapi_connection, "create_function"):
        return
    for name, (n_args, fn) in _SQLITE_FUNCTIONS.items():
        dbapi_connection.create_function(name, n_args, fn, deterministic=True)
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# 세션 팩토리 생성
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI 의존성 주입(Dependency Injection)에서 사용할 DB 세션 제공 함수

    Usage 예시:

    @router.get("/events")
    def list_events(db: Session = Depends(get_db)):
        ...
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
