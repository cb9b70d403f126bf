from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings


def _engine_options(url: str) -> dict:
    """
    Connection pool settings for the configured database.

    PostgreSQL gets a sized, pre-pinged pool; SQLite (local development via
    SQLALCHEMY_DATABASE_URI) only needs cross-thread access for FastAPI's
    threadpool.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }


engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, **_engine_options(settings.DATABASE_URL))

# One session per request; reorder batches commit or roll back on it as a unit
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Request-scoped session dependency (Depends(get_db)).
    Closed after the response is sent.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Register every model on Base.metadata.

    The schema itself is owned by Alembic: run "alembic upgrade head".
    """
    from app.models import master, subscription_plan  # noqa: F401
