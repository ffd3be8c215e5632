# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration (MS SQL Server, PostgreSQL or SQLite)
- Session factory for dependency injection
- Schema bootstrap for local runs

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @router.get("/imoveis")
     def list_properties(db: Session = Depends(get_session)):
          return db.query(Property).all()
     """
import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import get_settings

logger = logging.getLogger(__name__)


def enable_sqlite_savepoints(sqlite_engine: Engine) -> None:
     """
     Let SQLAlchemy emit BEGIN itself so SAVEPOINT works on pysqlite.

     The driver otherwise opens transactions lazily and a released savepoint
     would commit the whole transaction.
     """

     @event.listens_for(sqlite_engine, "connect")
     def _on_connect(dbapi_connection, connection_record):
          dbapi_connection.isolation_level = None

     @event.listens_for(sqlite_engine, "begin")
     def _on_begin(conn):
          conn.exec_driver_sql("BEGIN")


def build_engine(url: str, echo: bool = False) -> Engine:
     """Create an engine with pool settings suited to the backend."""
     if url.startswith("sqlite"):
          sqlite_engine = create_engine(
               url,
               echo=echo,
               connect_args={"check_same_thread": False},
               poolclass=StaticPool if ":memory:" in url else None,
          )
          enable_sqlite_savepoints(sqlite_engine)
          return sqlite_engine
     return create_engine(
          url,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          pool_pre_ping=True,
          echo=echo,
     )


_settings = get_settings()

# Create SQLAlchemy engine
engine = build_engine(_settings.database_url, echo=_settings.SQL_ECHO)

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     The whole request runs as one transaction: committed when the handler
     returns, rolled back when it raises.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               admins = db.query(Admin).all()
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db(bind: Engine = None) -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     target = bind or engine
     Base.metadata.create_all(bind=target)
     logger.info("Tables ensured on %s", target.url.render_as_string(hide_password=True))
