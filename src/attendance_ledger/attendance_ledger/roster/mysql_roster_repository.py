from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from mysql.connector import errors

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Person
from .repository import RosterRepository

logger = logging.getLogger(__name__)

_UNIQUE_KEYS = {
    "uq_persons_external_id": "external_id",
    "uq_persons_contact": "contact",
}


def _conflicting_field(err: errors.Error) -> Optional[str]:
    msg = str(getattr(err, "msg", "") or err)
    for key, field in _UNIQUE_KEYS.items():
        if key in msg:
            return field
    return None


def _to_person(r: dict) -> Person:
    return Person(
        person_id=int(r["person_id"]),
        external_id=r["external_id"],
        name=r["name"],
        contact=r["contact"],
        created_at=r["created_at"],
    )


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_person(self, *, external_id: str, name: str, contact: str, created_at: datetime) -> Person:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO persons(external_id, name, contact, created_at)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (external_id, name, contact, created_at),
                )
                person_id = int(cur.lastrowid)
        except errors.IntegrityError as err:
            if not is_duplicate_key(err):
                raise
            field = _conflicting_field(err)
            logger.info("roster conflict on %s for external_id=%s", field or "unique key", external_id)
            if field:
                raise ConflictError(f"A person with this {field} already exists", field=field) from err
            raise ConflictError("A person with this external id or contact already exists") from err

        return Person(
            person_id=person_id,
            external_id=external_id,
            name=name,
            contact=contact,
            created_at=created_at,
        )

    def get_by_external_id(self, external_id: str) -> Optional[Person]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT person_id, external_id, name, contact, created_at
                FROM persons
                WHERE external_id=%s
                """,
                (external_id,),
            )
            row = fetchone(cur)
            return _to_person(row) if row else None

    def list_all(self) -> Sequence[Person]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT person_id, external_id, name, contact, created_at
                FROM persons
                ORDER BY name ASC, person_id ASC
                """
            )
            return [_to_person(r) for r in fetchall(cur)]
