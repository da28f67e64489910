"""
Business logic for users.

``UserStore`` keeps users in memory, in insertion order, together with
an index from email to id used for the uniqueness check.  All access
goes through one re‑entrant lock so that concurrent requests cannot
both pass the email check before either commits.  Records are frozen
pydantic models; a mutation replaces the stored record with an updated
copy.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from ..schemas.user import User, UserCreate, UserRole, UserUpdate
from .records import new_id, next_timestamp
from .results import StoreErrorKind, StoreResult

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
DUPLICATE_EMAIL = "User with this email already exists"


class UserStore:
    """In‑memory store of user records keyed by id, unique by email."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: Dict[str, User] = {}
        self._ids_by_email: Dict[str, str] = {}
        self._lock = threading.RLock()
        for user in users:
            if user.email in self._ids_by_email:
                raise ValueError(f"Duplicate email in initial users: {user.email}")
            self._users[user.id] = user
            self._ids_by_email[user.email] = user.id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_all(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user_id = self._ids_by_email.get(email)
            return self._users.get(user_id) if user_id is not None else None

    def find_by_role(self, role: UserRole) -> List[User]:
        with self._lock:
            return [user for user in self._users.values() if user.role == role]

    def find_active(self) -> List[User]:
        with self._lock:
            return [user for user in self._users.values() if user.is_active]

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, data: UserCreate) -> StoreResult[User]:
        """Add a new active user.  Fails with ``DUPLICATE_KEY`` if the email is taken."""
        with self._lock:
            if data.email in self._ids_by_email:
                logger.warning("Rejected user creation: email %s already registered", data.email)
                return StoreResult.failure(StoreErrorKind.DUPLICATE_KEY, DUPLICATE_EMAIL)
            now = next_timestamp()
            user = User(
                id=new_id(),
                email=data.email,
                name=data.name,
                role=data.role,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            self._users[user.id] = user
            self._ids_by_email[user.email] = user.id
        logger.info("Created user %s (%s)", user.id, user.email)
        return StoreResult.success(user)

    def update(self, user_id: str, data: UserUpdate) -> StoreResult[User]:
        """Merge the fields present in ``data`` into an existing user.

        A user keeping its own email is not a conflict; moving to an
        email held by another user is.
        """
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return StoreResult.failure(StoreErrorKind.NOT_FOUND, USER_NOT_FOUND)
            new_email = changes.get("email", current.email)
            if new_email != current.email and new_email in self._ids_by_email:
                logger.warning("Rejected update of user %s: email %s already registered", user_id, new_email)
                return StoreResult.failure(StoreErrorKind.DUPLICATE_KEY, DUPLICATE_EMAIL)
            changes["updated_at"] = next_timestamp(current.updated_at)
            updated = current.model_copy(update=changes)
            self._users[user_id] = updated
            if updated.email != current.email:
                del self._ids_by_email[current.email]
                self._ids_by_email[updated.email] = user_id
        logger.info("Updated user %s: %s", user_id, sorted(k for k in changes if k != "updated_at"))
        return StoreResult.success(updated)

    def delete(self, user_id: str) -> StoreResult[None]:
        with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                return StoreResult.failure(StoreErrorKind.NOT_FOUND, USER_NOT_FOUND)
            del self._ids_by_email[user.email]
        logger.info("Deleted user %s", user_id)
        return StoreResult.success()
