"""Failures surfaced by the user lifecycle operations."""
from __future__ import annotations


class UserError(Exception):
    """Base class for rejected user operations; carries an API code and HTTP status."""

    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class UserNotFoundError(UserError):
    def __init__(self, user_id: int):
        super().__init__(f"User with ID {user_id} not found", "not_found", 404)
        self.user_id = user_id


class UserAlreadyDeletedError(UserError):
    def __init__(self, user_id: int):
        super().__init__(f"User with ID {user_id} is already deleted", "already_deleted", 409)
        self.user_id = user_id


class UserNotDeletedError(UserError):
    def __init__(self, user_id: int):
        super().__init__(f"User with ID {user_id} is not soft-deleted", "not_deleted", 409)
        self.user_id = user_id


class InvalidPaginationError(UserError):
    def __init__(self, message: str):
        super().__init__(message, "invalid_pagination", 400)


class InvalidProjectionError(UserError):
    def __init__(self, message: str):
        super().__init__(message, "invalid_projection", 400)
