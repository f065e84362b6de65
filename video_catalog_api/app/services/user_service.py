"""
Business logic for users.

The ``UserService`` keeps users in an append‑only in‑memory list.
Records are never updated or removed, and e‑mail uniqueness is not
checked.
"""

import logging
import uuid
from typing import Callable, List, Optional

from ..schemas.user import UserCreate, UserRead


class UserService:
    """Owns the user collection for one application instance."""

    def __init__(self, id_factory: Optional[Callable[[], uuid.UUID]] = None) -> None:
        self._users: List[UserRead] = []
        self._new_id = id_factory or uuid.uuid4

    def list_users(self) -> List[UserRead]:
        """Return all users in the order they were created."""
        return list(self._users)

    def create_user(self, data: UserCreate) -> UserRead:
        logger = logging.getLogger(__name__)
        user = UserRead(id=self._new_id(), name=data.name, email=data.email)
        self._users.append(user)
        logger.info("Registered user %s <%s>", user.id, user.email)
        return user
