"""
User endpoints for API v1.

Provide paginated and full listing, lookup, creation, replacement and
deletion of users.  Creation accepts either a JSON body or an
``application/x-www-form-urlencoded`` form with the same fields.

These handlers are plain coroutines; they are bound to paths in
``api/v1/router.py``.
"""

import logging
from typing import Any, Dict, List

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from user_registry_api.app.api.deps import get_user_registry
from user_registry_api.app.schemas.user import UserCreate, UserPage, UserRead, UserUpdate
from user_registry_api.app.services.user_registry import UserRegistry


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Documents the two accepted request bodies of ``create_user`` since the
# handler reads the raw request instead of declaring a body parameter.
CREATE_USER_OPENAPI: Dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            JSON_CONTENT_TYPE: {"schema": UserCreate.model_json_schema()},
            FORM_CONTENT_TYPE: {"schema": UserCreate.model_json_schema()},
        },
    }
}


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";", 1)[0].strip().lower()


async def list_users(
    page: int = Query(1, ge=1),
    registry: UserRegistry = Depends(get_user_registry),
) -> UserPage:
    """Return one page of users (``page`` is 1-indexed).

    Pages beyond the last one are returned with an empty ``data`` list.
    """
    return await registry.list_users_page(page)


async def list_all_users(registry: UserRegistry = Depends(get_user_registry)) -> List[UserRead]:
    """Return every user without pagination."""
    return await registry.list_users()


async def get_user(user_id: int, registry: UserRegistry = Depends(get_user_registry)) -> UserRead:
    user = await registry.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
    return user


async def create_user(request: Request, registry: UserRegistry = Depends(get_user_registry)) -> UserRead:
    """Create a user from a JSON or form-encoded body.

    Missing ``email`` or ``name`` fields are stored as ``null``.  Any
    other content type is rejected with 415.
    """
    media_type = _media_type(request)
    if media_type == FORM_CONTENT_TYPE:
        form = await request.form()
        payload: Any = {"email": form.get("email"), "name": form.get("name")}
    elif media_type == JSON_CONTENT_TYPE or media_type.endswith("+json"):
        try:
            payload = await request.json()
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Malformed JSON body: {exc}")
    else:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Unsupported content type: {media_type or 'none'}",
        )
    try:
        user_in = UserCreate.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False))
    return await registry.create_user(user_in)


async def update_user(
    user_id: int,
    user_in: UserUpdate,
    registry: UserRegistry = Depends(get_user_registry),
) -> UserRead:
    """Replace a user's email and name.

    Both fields are overwritten; omitting one clears it.
    """
    user = await registry.update_user(user_id, user_in)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
    return user


async def delete_user(user_id: int, registry: UserRegistry = Depends(get_user_registry)) -> None:
    deleted = await registry.delete_user(user_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
    return None
