"""
Business logic for users.

The ``UserRegistry`` keeps users in an insertion-ordered dictionary
keyed by a server-assigned integer id.  Ids come from a single counter
and are never reused, even after the user holding one is deleted.  The
registry is owned by the application (see ``create_app``) and handed to
request handlers through a dependency, so tests can build isolated
instances freely.

All state lives in memory and disappears with the process.
"""

import logging
import math
import threading
from typing import Dict, Iterable, List, Optional

from ..schemas.user import UserCreate, UserPage, UserRead, UserUpdate


logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 3

# Users loaded into a fresh registry when seeding is enabled.
SEED_USERS: List[UserRead] = [
    UserRead(id=1, email="cartman@gmail.com", name="Eric Cartman"),
    UserRead(id=2, email="marsh@gmail.com", name="Stan Marsh"),
    UserRead(id=3, email="broflo@gmail.com", name="Kyle Broflofski"),
    UserRead(id=4, email="mccormick@gmail.com", name="Kenny McCormick"),
    UserRead(id=5, email="butters@gmail.com", name="Butters Scotch"),
    UserRead(id=6, email="chickenlover@gmail.com", name="Chicken Lover"),
    UserRead(id=7, email="officer@gmail.com", name="Officer Barbrady"),
]


def total_pages(total: int, page_size: int, legacy: bool = False) -> int:
    """Return the number of pages needed to show ``total`` users.

    With ``legacy`` set the historic ``total // page_size + 1`` formula
    is used, which reports one page too many when ``total`` is an exact
    multiple of ``page_size``.
    """
    if legacy:
        return total // page_size + 1
    return math.ceil(total / page_size)


class UserRegistry:
    """In-memory CRUD store for users.

    Every public method returns copies of the stored records so that
    callers cannot mutate registry state behind its back.  A lock guards
    the id counter and the map.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE, legacy_total_pages: bool = False) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.legacy_total_pages = legacy_total_pages
        self._users: Dict[int, UserRead] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def count(self) -> int:
        """Return the number of stored users."""
        return len(self)

    def seed(self, users: Iterable[UserRead] = SEED_USERS) -> None:
        """Insert records with fixed ids.

        The counter is advanced past the highest seeded id so that the
        next created user gets a fresh one.
        """
        with self._lock:
            for user in users:
                self._users[user.id] = user.model_copy()
                self._last_id = max(self._last_id, user.id)
        logger.info("Seeded registry with %d users", len(self._users))

    async def list_users_page(self, page: int = 1, page_size: Optional[int] = None) -> UserPage:
        """Return the ``page``-th slice (1-indexed) of all users.

        Pages past the end come back with an empty ``data`` list.
        """
        size = self.page_size if page_size is None else page_size
        if page < 1:
            raise ValueError(f"page must be at least 1, got {page}")
        if size < 1:
            raise ValueError(f"page_size must be at least 1, got {size}")
        with self._lock:
            users = list(self._users.values())
        start = (page - 1) * size
        data = [user.model_copy() for user in users[start:start + size]]
        return UserPage(
            page=page,
            per_page=size,
            total=len(users),
            total_pages=total_pages(len(users), size, self.legacy_total_pages),
            data=data,
        )

    async def list_users(self) -> List[UserRead]:
        """Return all users in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    async def get_user(self, user_id: int) -> Optional[UserRead]:
        """Retrieve a user by ID."""
        with self._lock:
            user = self._users.get(user_id)
        logger.debug("Lookup of user %s: %s", user_id, "hit" if user else "miss")
        return user.model_copy() if user else None

    async def create_user(self, data: UserCreate) -> UserRead:
        """Store a new user under the next id and return it."""
        with self._lock:
            self._last_id += 1
            user = UserRead(id=self._last_id, email=data.email, name=data.name)
            self._users[user.id] = user
        logger.info("Created user %s", user.id)
        return user.model_copy()

    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[UserRead]:
        """Replace the email and name of an existing user.

        Returns ``None`` without touching the registry if the user does
        not exist.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.email = data.email
            user.name = data.name
            updated = user.model_copy()
        logger.info("Updated user %s", user_id)
        return updated

    async def delete_user(self, user_id: int) -> bool:
        """Remove a user.  Returns ``False`` if it did not exist."""
        with self._lock:
            removed = self._users.pop(user_id, None)
        if removed is None:
            return False
        logger.info("Deleted user %s", user_id)
        return True
