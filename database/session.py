from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import database.base as base
import core.config as config


def _connect_args(url: str) -> dict:
    # sqlite connections are handed across the threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    base.DATABASE_URL,
    echo=config.DB_ECHO,
    pool_pre_ping=True,
    connect_args=_connect_args(base.DATABASE_URL),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)