import os, sys
from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool

# project root (database/migrations/ -> two levels up)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from database.base import Base, DATABASE_URL
import models  # noqa: F401  customers 테이블 등록

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# `alembic -x url=...` wins, otherwise the app's DATABASE_URL
url = context.get_x_argument(as_dictionary=True).get("url") or DATABASE_URL
config.set_main_option("sqlalchemy.url", url)

target_metadata = Base.metadata


def _options(dialect_name: str) -> dict:
    # sqlite (local fallback) can't ALTER most things in place
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": dialect_name == "sqlite",
    }


def run_migrations_offline():
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_options(url.split(":", 1)[0].split("+", 1)[0]),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **_options(connection.dialect.name))
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
