"""
Projection values: which user fields a caller asked for.

A Projection is produced at the transport edge and threaded, untouched, through
the lifecycle service down to the repository, which is the only place that
looks inside it. ``None`` means "all fields".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from user_api.domain.errors import InvalidProjectionError

USER_FIELDS = ("id", "name", "email", "deleted", "created_at", "updated_at")

ALL_FIELDS = None


@dataclass(frozen=True)
class Projection:
    fields: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.fields:
            raise InvalidProjectionError("A projection needs at least one field; use ALL_FIELDS for every field")
        unknown = [name for name in self.fields if name not in USER_FIELDS]
        if unknown:
            raise InvalidProjectionError(f"Unknown field '{unknown[0]}'. Allowed: {', '.join(USER_FIELDS)}")


def projection_from_fields(raw: str | None) -> Optional[Projection]:
    """Translate a ``fields=name,email`` query value into a Projection."""
    if raw is None or not raw.strip():
        return ALL_FIELDS
    fields = tuple(dict.fromkeys(name.strip() for name in raw.split(",") if name.strip()))
    if not fields:
        return ALL_FIELDS
    return Projection(fields)
