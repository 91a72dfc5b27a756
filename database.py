import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from config import get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    # sqlite connections are shared across the request threadpool
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # one connection, otherwise every checkout gets an empty database
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(get_settings().database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Create the users and articles tables if they are missing."""
    import models  # noqa: F401  registers the mappers on Base

    logger.info("Initialising schema on %s", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)


# One session per request, always returned to the pool
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
