"""PostgreSQL row store."""

from .session import Base, close_db_session, get_db_session, init_db_session

__all__ = ["Base", "close_db_session", "get_db_session", "init_db_session"]
