"""
Request dependencies.

The stores are created by ``create_app`` and attached to
``app.state``.  Handlers receive them through these dependencies
instead of importing module-level singletons, which lets every
application instance (and every test) own its data.
"""

from fastapi import Request

from user_registry_api.app.services.photo_store import PhotoStore
from user_registry_api.app.services.user_registry import UserRegistry


def get_user_registry(request: Request) -> UserRegistry:
    return request.app.state.user_registry


def get_photo_store(request: Request) -> PhotoStore:
    return request.app.state.photo_store
