from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import settings
from logging_config import get_logger
from models.url import Base


logger = get_logger("database")


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Build an engine for DATABASE_URL

    SQLite doesn't support pool_size and max_overflow, and an in-memory
    SQLite database only lives as long as its connection, so it gets a
    single shared connection.
    """
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            options["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **options)

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10
    )


engine = make_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database session
    Usage: db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create the urls table if it does not exist yet
    """
    bind = bind or engine
    logger.info(f"Ensuring tables exist on {bind.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=bind)
