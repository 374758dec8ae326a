"""
Application package initializer.

The service is split into ``core`` (settings and logging), ``schemas``
(Pydantic models), ``services`` (the in-memory stores) and ``api``
(versioned routes).  ``main`` wires them together.
"""

from .main import app, create_app  # noqa: F401
