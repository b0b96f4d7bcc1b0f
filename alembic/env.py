import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from eventure.config import DATABASE_URL
from eventure.models.base import Base
from eventure.models.event import Event  # noqa: F401  테이블 메타데이터 등록용
from eventure.models.favorite import Favorite  # noqa: F401
from eventure.models.rsvp import RSVP  # noqa: F401
from eventure.models.user import User  # noqa: F401
from eventure.models.zip_location import ZipLocation  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", DATABASE_URL.replace("%", "%%"))  # configparser 보간 회피

# 앱 기동 시(main.py)에는 이미 로깅이 설정되어 있으므로 root 핸들러가 없을 때만 적용
if config.config_file_name is not None and not logging.getLogger().handlers:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
