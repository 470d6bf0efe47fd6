from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_max_length, require_non_empty
from ..core.constants import MAX_CONTACT_LENGTH, MAX_EXTERNAL_ID_LENGTH, MAX_NAME_LENGTH
from ..core.exceptions import PersonNotFoundError
from .model import Person
from .repository import RosterRepository

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: register and look up people on the roster."""

    def __init__(self, persons: RosterRepository, *, clock: Callable[[], datetime] = now_local):
        self._persons = persons
        self._clock = clock

    def add(self, *, name: str, contact: str, external_id: str) -> Person:
        name = require_max_length(require_non_empty(name, "name"), "name", MAX_NAME_LENGTH)
        contact = require_max_length(require_non_empty(contact, "contact"), "contact", MAX_CONTACT_LENGTH)
        external_id = require_max_length(
            require_non_empty(external_id, "external_id"), "external_id", MAX_EXTERNAL_ID_LENGTH
        )

        # Uniqueness is enforced by the store; a duplicate surfaces as ConflictError.
        person = self._persons.create_person(
            external_id=external_id,
            name=name,
            contact=contact,
            created_at=self._clock(),
        )
        logger.info("person added: external_id=%s person_id=%s", person.external_id, person.person_id)
        return person

    def find_by_external_id(self, external_id: str) -> Person:
        external_id = require_non_empty(external_id, "external_id")
        person = self._persons.get_by_external_id(external_id)
        if not person:
            raise PersonNotFoundError(external_id)
        return person

    def list(self) -> Sequence[Person]:
        return self._persons.list_all()
