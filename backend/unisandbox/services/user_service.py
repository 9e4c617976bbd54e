"""User service translating repository results into API responses."""
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from unisandbox.repositories.user_repository import UserRepository
from unisandbox.schemas.user import UserIn, UserOut

LOGGER = logging.getLogger(__name__)

# ids live in a signed 64-bit column
MAX_USER_ID = 2**63 - 1


class UserService:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def create_user(self, db: Session, payload: UserIn) -> UserOut:
        user = self.user_repository.create(db, payload.model_dump())
        LOGGER.info("Created user id=%s", user.id)
        return UserOut.model_validate(user)

    def get_user(self, db: Session, user_id: int) -> UserOut:
        user = self.user_repository.get_by_id(db, user_id) if _in_range(user_id) else None
        if user is None:
            raise _not_found()
        return UserOut.model_validate(user)

    def list_users(self, db: Session) -> list[UserOut]:
        return [UserOut.model_validate(user) for user in self.user_repository.list_all(db)]

    def replace_user(self, db: Session, user_id: int, payload: UserIn) -> UserOut:
        return self._update(db, user_id, payload.model_dump())

    def patch_user(self, db: Session, user_id: int, payload: UserIn) -> UserOut:
        return self._update(db, user_id, payload.model_dump(exclude_unset=True))

    def delete_user(self, db: Session, user_id: int) -> None:
        if not _in_range(user_id) or not self.user_repository.delete(db, user_id):
            raise _not_found()
        LOGGER.info("Deleted user id=%s", user_id)

    def _update(self, db: Session, user_id: int, values: dict) -> UserOut:
        user = self.user_repository.update(db, user_id, values) if _in_range(user_id) else None
        if user is None:
            raise _not_found()
        LOGGER.info("Updated user id=%s fields=%s", user_id, sorted(values))
        return UserOut.model_validate(user)


def _in_range(user_id: int) -> bool:
    return 1 <= user_id <= MAX_USER_ID


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
