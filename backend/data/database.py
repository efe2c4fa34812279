"""Engine, session factory and declarative base for the store database."""
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from ..app.config import Config
from ..utils.logger import get_logger

logger = get_logger("db")

# FastAPI serves sync routes from a threadpool, so SQLite must allow cross-thread use
_connect_args = {"check_same_thread": False} if Config.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(Config.DATABASE_URL, connect_args=_connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Request-scoped session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def session_scope():
    """Session for scripts: rolled back on error, always closed."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def create_tables(bind=None):
    # models must be imported so their tables are registered on Base.metadata
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
    logger.info(f"Tables ready on {(bind or engine).url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    create_tables()
