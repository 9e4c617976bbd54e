"""SQLAlchemy model for the demo user record."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, Integer, String, event
from sqlalchemy.dialects.mysql import DATETIME

from unisandbox.core.db import Base


class User(Base):
    __tablename__ = "user"

    # SQLite only autoincrements an INTEGER PRIMARY KEY.
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    username = Column(String(255), nullable=True)
    gender = Column(String(255), nullable=True)
    name = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)
    update_time = Column(DateTime().with_variant(DATETIME(fsp=6), "mysql"), nullable=True)
    status = Column(Integer, nullable=True)


@event.listens_for(User, "before_insert")
@event.listens_for(User, "before_update")
def touch_update_time(mapper, connection, target: User) -> None:
    target.update_time = datetime.now()
