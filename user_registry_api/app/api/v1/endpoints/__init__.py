"""
Endpoint handlers for API v1.

Each module holds the handlers for one resource (users, photos).  The
handlers are bound to paths by the route table in ``router.py``.
"""
