"""
Top-level package for the User Registry API.

All functionality lives in submodules under ``app``; import
``user_registry_api.app.main`` for the ASGI application.
"""

__all__ = []
