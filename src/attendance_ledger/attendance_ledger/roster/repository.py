from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Person


class RosterRepository(Protocol):
    """Repository interface for Person.

    Services depend on this interface, never on a concrete database.
    """

    def create_person(self, *, external_id: str, name: str, contact: str, created_at: datetime) -> Person:
        """Insert a person.

        Raises ConflictError when external_id or contact is already taken.
        """

        raise NotImplementedError

    def get_by_external_id(self, external_id: str) -> Optional[Person]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Person]:
        """All persons ordered by name, then person_id."""

        raise NotImplementedError
