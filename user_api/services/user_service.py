"""User lifecycle use cases: listing, creation, partial updates, soft delete and restore."""
from __future__ import annotations

from typing import Iterable, Optional

from loguru import logger

from user_api.core.config import get_settings
from user_api.domain.errors import (
    InvalidPaginationError,
    UserAlreadyDeletedError,
    UserNotDeletedError,
    UserNotFoundError,
)
from user_api.domain.projection import Projection
from user_api.domain.updates import UserUpdate, merge
from user_api.repositories.sql_repository import SQLRepository

_STATE_ONLY = Projection(("deleted",))


class UserService:
    """Owns every state transition of a user record.

    Holds no mutable state of its own; storage errors propagate unchanged.
    """

    def __init__(self, repository: SQLRepository | None = None) -> None:
        self.settings = get_settings()
        self.repository = repository or SQLRepository()

    # -------------------------------------- reads --------------------------------------
    def list_users(
        self,
        page: int = 1,
        limit: int | None = None,
        projection: Optional[Projection] = None,
    ) -> list[dict]:
        if limit is None:
            limit = self.settings.default_page_size
        if page < 1:
            raise InvalidPaginationError("page must be >= 1")
        if limit < 1:
            raise InvalidPaginationError("limit must be >= 1")
        max_limit = self.settings.max_page_size
        if max_limit and limit > max_limit:
            raise InvalidPaginationError(f"limit must be <= {max_limit}")
        skip = (page - 1) * limit
        return self.repository.find_users(deleted=False, skip=skip, take=limit, projection=projection)

    def get_user(self, user_id: int, projection: Optional[Projection] = None) -> Optional[dict]:
        return self.repository.find_user(user_id, projection=projection)

    # -------------------------------------- writes --------------------------------------
    def create_user(self, name: str, email: str, projection: Optional[Projection] = None) -> dict:
        user = self.repository.create_user(name, email, projection=projection)
        logger.info("User created: {}", user.get("id", "?"))
        return user

    def update_user(
        self,
        user_id: int,
        update: UserUpdate,
        projection: Optional[Projection] = None,
    ) -> dict:
        write_set = merge(user_id, update)
        if write_set.is_empty:
            logger.debug("Empty update for user {}; only updated_at is refreshed", user_id)
        user = self.repository.update_user(write_set.user_id, write_set.values, projection=projection)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def delete_user(self, user_id: int, projection: Optional[Projection] = None) -> dict:
        self._require_state(user_id, deleted=False)
        user = self.repository.update_user(
            user_id, {"deleted": True}, projection=projection, when_deleted=False
        )
        if user is None:
            # Lost the race against a concurrent transition on the same id. If the
            # record was deleted and restored again before the re-read, this is
            # still reported as AlreadyDeleted.
            self._require_state(user_id, deleted=False)
            raise UserAlreadyDeletedError(user_id)
        logger.info("User {} soft-deleted", user_id)
        return user

    def restore_user(self, user_id: int, projection: Optional[Projection] = None) -> dict:
        self._require_state(user_id, deleted=True)
        user = self.repository.update_user(
            user_id, {"deleted": False}, projection=projection, when_deleted=True
        )
        if user is None:
            # Same race as delete_user; a restore-then-delete before the re-read
            # is reported as NotDeleted.
            self._require_state(user_id, deleted=True)
            raise UserNotDeletedError(user_id)
        logger.info("User {} restored", user_id)
        return user

    def delete_users(self, user_ids: Iterable[int]) -> bool:
        """Soft-delete every active user among ``user_ids``.

        Best effort: True when at least one user transitioned. Missing and
        already deleted ids are not reported individually.
        """
        count = self.repository.update_users(user_ids, {"deleted": True}, when_deleted=False)
        logger.info("Bulk soft-deleted {} user(s)", count)
        return count > 0

    # -------------------------------------- helpers --------------------------------------
    def _require_state(self, user_id: int, *, deleted: bool) -> None:
        current = self.repository.find_user(user_id, projection=_STATE_ONLY, include_deleted=True)
        if current is None:
            raise UserNotFoundError(user_id)
        if bool(current["deleted"]) != deleted:
            logger.info("Rejected transition for user {} (deleted={})", user_id, current["deleted"])
            if deleted:
                raise UserNotDeletedError(user_id)
            raise UserAlreadyDeletedError(user_id)
