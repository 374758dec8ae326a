"""
Pydantic models for user data.

Defines schemas for creating and updating users, reading a single user
and reading a page of users.  Payload fields are deliberately not
validated beyond their types: absent ``email`` or ``name`` values are
stored as ``null``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    email: Optional[str] = Field(None, examples=["cartman@gmail.com"])
    name: Optional[str] = Field(None, examples=["Eric Cartman"])


class UserCreate(UserBase):
    """Schema for creating a user from a JSON or form-encoded body."""


class UserUpdate(UserBase):
    """Schema for replacing a user's email and name.

    Both fields are written as given; an omitted field clears the
    stored value.
    """


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int


class UserPage(BaseModel):
    """A single page of users.

    Serialized with camelCase keys (``perPage``, ``totalPages``) to keep
    the wire format of existing clients.
    """

    page: int
    per_page: int = Field(..., alias="perPage")
    total: int
    total_pages: int = Field(..., alias="totalPages")
    data: List[UserRead] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
    }
