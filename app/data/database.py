# app/data/database.py
from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker

from app.utils.settings import DATABASE_URL
from app.utils.retry import db_retry
from app.utils.logging import get_logger

logger = get_logger(__name__)

engine = create_engine(DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@db_retry()
def init_db(bind=None):
    """
    Sprawdza polaczenie i tworzy brakujace tabele.
    Postgres w docker-compose startuje wolniej niz API, stad retry.
    """
    bind = bind or engine
    # rejestracja modeli w Base.metadata
    import app.data.models  # noqa: F401

    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))

    Base.metadata.create_all(bind=bind)
    logger.info(f"Database ready, tables: {sorted(Base.metadata.tables.keys())}")
