"""Repository for user persistence and retrieval."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from unisandbox.models.user import User

LOGGER = logging.getLogger(__name__)

MUTABLE_FIELDS = ("username", "gender", "name", "age", "status")


class UserRepository:
    def create(self, db: Session, values: Mapping[str, Any]) -> User:
        user = User(**{field: values.get(field) for field in MUTABLE_FIELDS})
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
            return user
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB insert failed for user payload=%s: %s", dict(values), exc)
            raise

    def get_by_id(self, db: Session, user_id: int) -> User | None:
        return db.get(User, user_id)

    def list_all(self, db: Session) -> list[User]:
        return db.query(User).order_by(User.id).all()

    def update(self, db: Session, user_id: int, values: Mapping[str, Any]) -> User | None:
        """Overwrite the given fields of an existing user.

        Only keys present in ``values`` are touched, so a full replacement
        passes every mutable field and a partial one passes a subset. The row
        is flagged dirty even when nothing changed, which makes the
        ``before_update`` hook re-stamp ``update_time`` on every call.
        """
        user = self.get_by_id(db, user_id)
        if user is None:
            return None
        try:
            for field in MUTABLE_FIELDS:
                if field in values:
                    setattr(user, field, values[field])
            flag_modified(user, "update_time")
            db.commit()
            db.refresh(user)
            return user
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB update failed for user id=%s: %s", user_id, exc)
            raise

    def delete(self, db: Session, user_id: int) -> bool:
        user = self.get_by_id(db, user_id)
        if user is None:
            return False
        try:
            db.delete(user)
            db.commit()
            return True
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB delete failed for user id=%s: %s", user_id, exc)
            raise
