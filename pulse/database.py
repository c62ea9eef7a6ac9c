# Feedback Pulse Database
# SQLAlchemy engine, session factory and table setup

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import DATABASE_URL

# SQLite connections may be used from Flask's worker threads
_connect_args = {'check_same_thread': False} if DATABASE_URL.startswith('sqlite') else {}

engine = create_engine(
    DATABASE_URL,
    connect_args=_connect_args,
    pool_pre_ping=True
)

SessionLocal = sessionmaker(
    bind=engine,
    expire_on_commit=False
)

Base = declarative_base()


def init_db():
    """Create the feedback and digests tables if they don't exist.
    
    Safe to call repeatedly - existing tables and rows are left alone.
    """
    # Register models on Base.metadata before creating
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
