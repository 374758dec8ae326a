"""
Service layer abstraction.

Each service encapsulates the storage logic for one resource.  Handlers
only talk to services, so the in-memory dictionaries used here could be
swapped for a database without changing the API layer.
"""
