"""Composable predicates for attendance queries.

Each set option of a filter becomes one parameterized clause; clause text is
fixed per option and values only ever travel as query parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Predicate:
    clause: str
    params: tuple = ()


def person_predicates(*, external_id: Optional[str], person_alias: str = "p") -> list[Predicate]:
    preds: list[Predicate] = []
    if external_id is not None:
        preds.append(Predicate(f"{person_alias}.external_id=%s", (external_id,)))
    return preds


def record_predicates(
    *,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    status: Optional[AttendanceStatus] = None,
    record_alias: str = "ar",
) -> list[Predicate]:
    preds: list[Predicate] = []
    if date_from is not None:
        preds.append(Predicate(f"{record_alias}.attendance_date>=%s", (date_from,)))
    if date_to is not None:
        preds.append(Predicate(f"{record_alias}.attendance_date<=%s", (date_to,)))
    if status is not None:
        preds.append(Predicate(f"{record_alias}.status=%s", (status.value,)))
    return preds


def combine(preds: Sequence[Predicate], *, empty: str = "1=1") -> tuple[str, tuple]:
    """AND the predicates together; no predicates means no restriction."""

    if not preds:
        return empty, ()
    clause = " AND ".join(p.clause for p in preds)
    params: list[object] = []
    for p in preds:
        params.extend(p.params)
    return clause, tuple(params)
