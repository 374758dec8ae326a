"""
Photo endpoints for API v1.

Photos are uploaded as ``multipart/form-data`` with a ``title`` text
field and a ``photo`` file field, and read back as the raw bytes with
the content type sent at upload time.
"""

from fastapi import Depends, File, Form, HTTPException, Response, UploadFile, status

from user_registry_api.app.api.deps import get_photo_store
from user_registry_api.app.services.photo_store import PhotoStore


DEFAULT_CONTENT_TYPE = "application/octet-stream"


async def upload_photo(
    title: str = Form(...),
    photo: UploadFile = File(...),
    store: PhotoStore = Depends(get_photo_store),
) -> Response:
    """Store an uploaded photo under ``title``.

    An existing photo with the same title is replaced.  Files uploaded
    without a content type are stored as ``application/octet-stream``.
    """
    content = await photo.read()
    await store.put_photo(title, photo.content_type or DEFAULT_CONTENT_TYPE, content)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def get_photo(title: str, store: PhotoStore = Depends(get_photo_store)) -> Response:
    photo = await store.get_photo(title)
    if photo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Photo {title!r} not found")
    # Sent verbatim; ``media_type`` would append a charset to text types.
    return Response(content=photo.content, headers={"content-type": photo.content_type})
