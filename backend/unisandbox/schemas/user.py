"""Pydantic schemas for the user resource."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class UserBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: Optional[str] = None
    gender: Optional[str] = None
    name: Optional[str] = None
    age: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX)
    status: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX)


class UserIn(UserBase):
    """Body of POST, PUT and PATCH.

    ``id`` and ``updateTime`` are server-assigned; values a caller sends for
    them are dropped during parsing.
    """


class UserOut(UserBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    update_time: Optional[datetime] = None
