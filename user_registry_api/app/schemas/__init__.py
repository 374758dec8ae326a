"""
Pydantic schema definitions for API payloads.

Each resource (users, photos) defines its own Pydantic models for
request and response bodies.  Schemas double as the stored records
since the stores keep everything in memory.
"""
