"""
Photo model.

Photos are stored as raw bytes together with the content type reported
by the uploading client.  They are never serialized to JSON; the
endpoint returns ``content`` as the response body.
"""

from pydantic import BaseModel


class Photo(BaseModel):
    content_type: str
    content: bytes
