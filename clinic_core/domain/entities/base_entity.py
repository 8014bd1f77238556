"""
Shared behaviour of the domain entities.

Entities are dataclasses that re-check their invariants in ``__post_init__``.
Every mutation builds a complete candidate with :func:`dataclasses.replace`
(which runs the same checks) and only then copies it onto the live
instance, so a failed mutation leaves the entity untouched.
"""

from dataclasses import replace
from typing import Any, ClassVar

from clinic_core.domain.utils import datetime_utils


class BaseEntity:
    """Mixin for identity-bearing dataclass entities."""

    # Fields that may be assigned once, at construction
    IMMUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "created_at"})

    id: str

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} cannot be changed")
        super().__setattr__(name, value)

    def validate_invariants(self) -> None:
        """Raise if the current state breaks an invariant."""

    def _candidate(self, **changes: Any) -> Any:
        """Return a validated copy of the entity with *changes* applied."""
        changes.setdefault("updated_at", datetime_utils.now())
        return replace(self, **changes)

    def _adopt(self, candidate: Any) -> None:
        self.__dict__.update(candidate.__dict__)

    def _commit(self, **changes: Any) -> None:
        """Validate a candidate state with *changes* applied, then adopt it."""
        self._adopt(self._candidate(**changes))

    def touch(self) -> None:
        """Bump ``updated_at`` to now."""
        self.__dict__["updated_at"] = datetime_utils.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.id == other.id

    # Hash by immutable primary key so entities can live in sets
    def __hash__(self) -> int:
        return hash(self.id)
