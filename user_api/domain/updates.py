"""Sparse partial updates: turn optional user fields into an exact write-set."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

UPDATABLE_FIELDS = ("name", "email")


class _Unset:
    """Marker for a field the caller did not supply."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class UserUpdate:
    name: Union[str, None, _Unset] = UNSET
    email: Union[str, None, _Unset] = UNSET

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "UserUpdate":
        """Build from a dict holding only the keys the caller actually sent."""
        return cls(**{key: data[key] for key in UPDATABLE_FIELDS if key in data})


@dataclass(frozen=True)
class WriteSet:
    user_id: int
    values: dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.values


def merge(user_id: int, update: UserUpdate) -> WriteSet:
    # Empty strings are real values; only unset (or null) fields are skipped.
    values = {}
    for name in UPDATABLE_FIELDS:
        value = getattr(update, name)
        if value is UNSET or value is None:
            continue
        values[name] = value
    return WriteSet(user_id=user_id, values=values)
