"""
API package containing versioned routes.

A version subpackage (e.g. ``v1``) exposes a top-level ``router``
built from its route table.  ``deps`` holds the dependencies that hand
the application's stores to request handlers.
"""
