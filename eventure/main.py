import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventure.config import CORS_ORIGINS, LOG_FILE, LOG_LEVEL, RUN_MIGRATIONS_ON_STARTUP
from eventure.logging_config import setup_logging
from eventure.models.event import Event  # noqa: F401  테이블 메타데이터 등록용
from eventure.models.favorite import Favorite  # noqa: F401
from eventure.models.rsvp import RSVP  # noqa: F401
from eventure.models.user import User  # noqa: F401
from eventure.models.zip_location import ZipLocation  # noqa: F401
from eventure.routers.admin import router as admin_router
from eventure.routers.events import router as events_router
from eventure.routers.favorites import router as favorites_router
from eventure.routers.rsvps import router as rsvps_router

setup_logging(LOG_LEVEL, LOG_FILE)
logger = logging.getLogger(__name__)


def _run_alembic_upgrade() -> None:
    """앱 기동 시 DB 마이그레이션 자동 적용 (events, rsvps 등)."""
    from alembic import command
    from alembic.config import Config

    root = Path(__file__).resolve().parent.parent
    cfg = Config(str(root / "alembic.ini"))
    cfg.set_main_option("script_location", str(root / "alembic"))
    command.upgrade(cfg, "head")


app = FastAPI(
    title="Eventure API",
    description="이벤트 탐색·RSVP 서비스 Eventure의 백엔드 API",
    version="0.1.0",
)


@app.on_event("startup")
def _startup_migrate() -> None:
    """기동 시 Alembic upgrade head 실행 (RUN_MIGRATIONS_ON_STARTUP=false면 생략)."""
    if not RUN_MIGRATIONS_ON_STARTUP:
        return
    try:
        _run_alembic_upgrade()
    except Exception:
        # DB 미기동 등 실패 시에도 앱은 기동 (예: 로컬에서 DB 없이 실행 시)
        logger.warning("Alembic upgrade failed at startup", exc_info=True)


# 라우터 등록
app.include_router(events_router)
app.include_router(rsvps_router)
app.include_router(favorites_router)
app.include_router(admin_router)

# CORS 설정 (허용 origin은 CORS_ORIGINS 환경 변수)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    return {"status": "ok"}


@app.get("/", tags=["Root"])
async def root() -> dict:
    return {
        "message": "Eventure API에 오신 것을 환영합니다.",
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("eventure.main:app", host="0.0.0.0", port=8000, reload=True)
