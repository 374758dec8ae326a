"""
In-memory photo storage keyed by title.

Uploading a photo under a title that already exists replaces the
previous one.  There is no update or delete operation.
"""

import logging
import threading
from typing import Dict, Optional

from ..schemas.photo import Photo


logger = logging.getLogger(__name__)


class PhotoStore:
    """Service class holding uploaded photos."""

    def __init__(self) -> None:
        self._photos: Dict[str, Photo] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._photos)

    def __contains__(self, title: object) -> bool:
        return title in self._photos

    async def put_photo(self, title: str, content_type: str, content: bytes) -> None:
        """Store ``content`` under ``title``, replacing any previous photo."""
        photo = Photo(content_type=content_type, content=content)
        with self._lock:
            replaced = title in self._photos
            self._photos[title] = photo
        logger.info(
            "%s photo %r (%s, %d bytes)",
            "Replaced" if replaced else "Stored",
            title,
            content_type,
            len(content),
        )

    async def get_photo(self, title: str) -> Optional[Photo]:
        """Retrieve a photo by title."""
        with self._lock:
            return self._photos.get(title)
