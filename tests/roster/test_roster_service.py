from __future__ import annotations

import pytest

from src.attendance_ledger.attendance_ledger.core.exceptions import (
    ConflictError,
    NotFoundError,
    PersonNotFoundError,
    ValidationError,
)


def test_add_returns_persisted_person(roster_service, fixed_now):
    person = roster_service.add(name="  Ann ", contact="ann@x.com", external_id="S1")

    assert person.person_id == 1
    assert person.name == "Ann"
    assert person.external_id == "S1"
    assert person.created_at == fixed_now


@pytest.mark.parametrize("field", ["name", "contact", "external_id"])
def test_add_rejects_empty_fields(roster_service, field):
    values = {"name": "Ann", "contact": "ann@x.com", "external_id": "S1"}
    values[field] = "   "

    with pytest.raises(ValidationError):
        roster_service.add(**values)

    assert roster_service.list() == []


def test_add_rejects_overlong_name(roster_service):
    with pytest.raises(ValidationError):
        roster_service.add(name="x" * 101, contact="ann@x.com", external_id="S1")


def test_duplicate_external_id_is_conflict(roster_service):
    roster_service.add(name="Ann", contact="ann@x.com", external_id="S1")

    with pytest.raises(ConflictError) as exc:
        roster_service.add(name="Bob", contact="bob@x.com", external_id="S1")

    assert exc.value.field == "external_id"
    assert exc.value.kind == "conflict"
    assert len(roster_service.list()) == 1


def test_duplicate_contact_is_conflict(roster_service):
    roster_service.add(name="Ann", contact="ann@x.com", external_id="S1")

    with pytest.raises(ConflictError):
        roster_service.add(name="Bob", contact="ann@x.com", external_id="S2")

    assert [p.external_id for p in roster_service.list()] == ["S1"]


def test_external_id_and_contact_are_case_sensitive(roster_service):
    upper = roster_service.add(name="Ann", contact="Ann@x.com", external_id="AB12")
    lower = roster_service.add(name="Bob", contact="ann@x.com", external_id="ab12")

    assert upper.person_id != lower.person_id
    assert roster_service.find_by_external_id("ab12").name == "Bob"
    assert roster_service.find_by_external_id("AB12").name == "Ann"
    with pytest.raises(PersonNotFoundError):
        roster_service.find_by_external_id("Ab12")


def test_find_by_external_id(roster_service):
    roster_service.add(name="Ann", contact="ann@x.com", external_id="S1")

    assert roster_service.find_by_external_id("S1").name == "Ann"


def test_find_unknown_external_id_raises_not_found(roster_service):
    with pytest.raises(PersonNotFoundError) as exc:
        roster_service.find_by_external_id("nope")

    assert isinstance(exc.value, NotFoundError)
    assert exc.value.external_id == "nope"


def test_list_sorted_by_name(roster_service):
    roster_service.add(name="Zed", contact="z@x.com", external_id="S3")
    roster_service.add(name="Ann", contact="a@x.com", external_id="S1")
    roster_service.add(name="Mia", contact="m@x.com", external_id="S2")

    assert [p.name for p in roster_service.list()] == ["Ann", "Mia", "Zed"]
