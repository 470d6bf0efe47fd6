from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Person:
    """Domain entity: a tracked individual on the roster.

    Pure data object; persistence lives in the repository.
    """

    person_id: int
    external_id: str
    name: str
    contact: str
    created_at: datetime
