"""Search and dropdown filtering for the list screens.

A record is shown when the search term is a case-insensitive substring of
at least one of the screen's search fields AND every active dropdown filter
matches exactly. Filtering always runs over the full collection.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, TypeVar

from .constants import ALL
from .models import Grade, Parent, Payment, Staff, Student, Subject, Teacher, Transport
from .storage import EntityStore

T = TypeVar("T")


def matches_search(term: str, values: Iterable[Optional[str]]) -> bool:
    q = (term or "").strip().lower()
    if not q:
        return True
    return any(q in (v or "").lower() for v in values)


def filter_active(value: Optional[str]) -> bool:
    return value is not None and value != "" and value != ALL


def filter_records(
    records: Iterable[T],
    term: str,
    search_fields: Callable[[T], Iterable[Optional[str]]],
    exact: Optional[dict[str, tuple[Optional[str], Callable[[T], Any]]]] = None,
) -> list[T]:
    """Generic search + exact-match filter.

    ``exact`` maps a filter name to ``(selected value, getter)``; inactive
    selections are skipped.
    """
    active = [(value, getter) for value, getter in (exact or {}).values() if filter_active(value)]
    out: list[T] = []
    for rec in records:
        if not matches_search(term, search_fields(rec)):
            continue
        if all(getter(rec) == value for value, getter in active):
            out.append(rec)
    return out


def filter_teachers(store: EntityStore, term: str = "", status: Optional[str] = None) -> list[Teacher]:
    return filter_records(
        store.teachers,
        term,
        lambda t: [t.name, t.email, *t.subjects],
        {"status": (status, lambda t: t.status)},
    )


def filter_students(
    store: EntityStore, term: str = "", class_name: Optional[str] = None, status: Optional[str] = None
) -> list[Student]:
    return filter_records(
        store.students,
        term,
        lambda s: [s.name, s.email, s.class_name],
        {
            "class": (class_name, lambda s: s.class_name),
            "status": (status, lambda s: s.status),
        },
    )


def filter_parents(store: EntityStore, term: str = "") -> list[Parent]:
    return filter_records(store.parents, term, lambda p: [p.name, p.email, p.phone])


def filter_staff(
    store: EntityStore, term: str = "", department: Optional[str] = None, status: Optional[str] = None
) -> list[Staff]:
    return filter_records(
        store.staff,
        term,
        lambda m: [m.name, m.email, m.position, m.department],
        {
            "department": (department, lambda m: m.department),
            "status": (status, lambda m: m.status),
        },
    )


def filter_subjects(store: EntityStore, term: str = "") -> list[Subject]:
    return filter_records(store.subjects, term, lambda s: [s.name, s.code, s.description])


def filter_payments(
    store: EntityStore, term: str = "", status: Optional[str] = None, payment_type: Optional[str] = None
) -> list[Payment]:
    # Payments with a dangling student can still be found by description or period.
    return filter_records(
        store.payments,
        term,
        lambda p: [store.student_name(p.student_id, fallback=""), p.description, p.period],
        {
            "status": (status, lambda p: p.status),
            "type": (payment_type, lambda p: p.type),
        },
    )


def filter_grades(
    store: EntityStore, term: str = "", class_name: Optional[str] = None, subject_id: Optional[str] = None
) -> list[Grade]:
    def student_class(g: Grade) -> Optional[str]:
        student = store.get("student", g.student_id)
        return student.class_name if student is not None else None

    return filter_records(
        store.grades,
        term,
        lambda g: [store.student_name(g.student_id, fallback=""), store.subject_name(g.subject_id, fallback="")],
        {
            "class": (class_name, student_class),
            "subject": (subject_id, lambda g: g.subject_id),
        },
    )


def filter_transports(store: EntityStore, term: str = "") -> list[Transport]:
    return filter_records(store.transports, term, lambda t: [t.route_name, t.driver_name, t.vehicle_number])


def available_classes(store: EntityStore) -> list[str]:
    """Distinct classes of enrolled students, in first-seen order."""
    seen: list[str] = []
    for s in store.students:
        if s.class_name and s.class_name not in seen:
            seen.append(s.class_name)
    return seen
