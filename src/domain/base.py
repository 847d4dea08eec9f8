"""Base classes shared by persisted domain entities"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, DateTime, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer(), "sqlite")

TimestampType = DateTime(timezone=True)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base for all table entities"""
