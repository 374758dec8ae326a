"""
Top-level router for version 1 of the API.

Routes are declared in ``ROUTES``, an explicit table of
``(method, path, handler, options)`` entries, and bound to an
``APIRouter`` by ``build_router``.  ``options`` are passed straight to
``APIRouter.add_api_route``.  When adding endpoints, append them to the
table; entries are matched in order, so literal paths such as
``/users/list`` must come before parameterised ones.
"""

from typing import Any, Callable, Dict, Iterable, List, Tuple

from fastapi import APIRouter, Response, status

from user_registry_api.app.schemas.user import UserPage, UserRead
from .endpoints import photos, users


Route = Tuple[str, str, Callable[..., Any], Dict[str, Any]]


ROUTES: List[Route] = [
    ("GET", "/users", users.list_users, {"response_model": UserPage, "tags": ["users"]}),
    ("GET", "/users/list", users.list_all_users, {"response_model": List[UserRead], "tags": ["users"]}),
    ("GET", "/users/{user_id}", users.get_user, {"response_model": UserRead, "tags": ["users"]}),
    (
        "POST",
        "/users",
        users.create_user,
        {
            "response_model": UserRead,
            "status_code": status.HTTP_201_CREATED,
            "openapi_extra": users.CREATE_USER_OPENAPI,
            "tags": ["users"],
        },
    ),
    ("PUT", "/users/{user_id}", users.update_user, {"response_model": UserRead, "tags": ["users"]}),
    (
        "DELETE",
        "/users/{user_id}",
        users.delete_user,
        {"status_code": status.HTTP_204_NO_CONTENT, "response_class": Response, "tags": ["users"]},
    ),
    (
        "POST",
        "/photos",
        photos.upload_photo,
        {"status_code": status.HTTP_204_NO_CONTENT, "response_class": Response, "tags": ["photos"]},
    ),
    ("GET", "/photos/{title}", photos.get_photo, {"response_class": Response, "tags": ["photos"]}),
]


def build_router(routes: Iterable[Route] = ROUTES) -> APIRouter:
    """Create an ``APIRouter`` with one route per table entry."""
    router = APIRouter()
    for method, path, endpoint, options in routes:
        router.add_api_route(path, endpoint, methods=[method], **options)
    return router


router = build_router()
