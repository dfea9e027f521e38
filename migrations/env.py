# migrations/env.py
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from farmstand.core.config import get_settings
from farmstand.models import Base  # registers every table on the metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Alembic runs on sync drivers; the app runs on async ones
_SYNC_DRIVERS = (
    ("postgres://", "postgresql+psycopg://"),
    ("postgresql+asyncpg://", "postgresql+psycopg://"),
    ("postgresql+psycopg2://", "postgresql+psycopg://"),
    ("postgresql://", "postgresql+psycopg://"),
    ("sqlite+aiosqlite://", "sqlite://"),
)


def _to_sync_url(url: str) -> str:
    for prefix, replacement in _SYNC_DRIVERS:
        if url.startswith(prefix):
            return replacement + url[len(prefix) :]
    return url


def _get_sqlalchemy_url() -> str:
    # ALEMBIC_DATABASE_URL wins, then the app settings (DATABASE_URL / .env)
    url = os.getenv("ALEMBIC_DATABASE_URL") or get_settings().database_url
    return _to_sync_url(url)


target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=_get_sqlalchemy_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section) or {}
    section["sqlalchemy.url"] = _get_sqlalchemy_url()
    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
