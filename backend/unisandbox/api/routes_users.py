"""User collection routes."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from unisandbox.core.db import get_db
from unisandbox.schemas.common import ErrorDetail
from unisandbox.schemas.user import UserIn, UserOut
from unisandbox.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorDetail}}


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


@router.get("", response_model=List[UserOut])
def list_users(
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> List[UserOut]:
    return user_service.list_users(db)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserIn,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> UserOut:
    user = user_service.create_user(db, payload)
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@router.get("/{user_id}", response_model=UserOut, responses=NOT_FOUND)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> UserOut:
    return user_service.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserOut, responses=NOT_FOUND)
def replace_user(
    user_id: int,
    payload: UserIn,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> UserOut:
    return user_service.replace_user(db, user_id, payload)


@router.patch("/{user_id}", response_model=UserOut, responses=NOT_FOUND)
def patch_user(
    user_id: int,
    payload: UserIn,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> UserOut:
    return user_service.patch_user(db, user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> Response:
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
