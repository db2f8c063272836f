"""Form submission: validate, shape the record, then write it to the store.

Invalid input never reaches the store and never raises; the caller gets a
``FormResult`` whose ``errors`` map a field path (``"stops.0.name"``) to the
messages to show beside that field.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from pydantic import ValidationError

from .logger import today
from .models import Coordinates, Grade, Parent, Payment, Staff, Student, Subject, Teacher, Transport, TransportStop
from .schemas import (
    FormSchema,
    GradeForm,
    ParentForm,
    PaymentForm,
    StaffForm,
    StudentForm,
    SubjectForm,
    TeacherForm,
    TransportForm,
)
from .stats import weighted_average
from .storage import EntityStore

log = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=FormSchema)

FORM_ERROR = "__form__"


@dataclass
class FormResult(Generic[T]):
    record: Optional[T] = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def first_error(self, path: str) -> str:
        msgs = self.errors.get(path) or []
        return msgs[0] if msgs else ""


def _message(schema: type[FormSchema], loc: tuple, err: dict[str, Any]) -> str:
    key = ".".join("*" if isinstance(p, int) else str(p) for p in loc)
    return schema.messages.get(f"{key}:{err['type']}") or schema.messages.get(key) or str(err["msg"])


def validate(schema: type[S], data: dict[str, Any]) -> tuple[Optional[S], dict[str, list[str]]]:
    try:
        return schema.model_validate(data), {}
    except ValidationError as exc:
        errors: dict[str, list[str]] = {}
        for err in exc.errors():
            loc = tuple(err["loc"])
            path = ".".join(str(p) for p in loc) or FORM_ERROR
            msg = _message(schema, loc, err)
            if msg not in errors.setdefault(path, []):
                errors[path].append(msg)
        log.debug("%s rejected: %s", schema.__name__, errors)
        return None, errors


def _missing(kind: str, entity_id: str) -> FormResult:
    return FormResult(errors={FORM_ERROR: [f"{kind} {entity_id} no longer exists"]})


def _save(store: EntityStore, kind: str, values: dict[str, Any], entity_id: Optional[str], created: dict[str, Any]):
    if entity_id:
        rec = getattr(store, f"update_{kind}")(entity_id, values)
        if rec is None:
            return _missing(kind.capitalize(), entity_id)
        return FormResult(record=rec)
    return FormResult(record=getattr(store, f"add_{kind}")({**values, **created}))


def submit_teacher(store: EntityStore, data: dict[str, Any], teacher_id: Optional[str] = None) -> FormResult[Teacher]:
    form, errors = validate(TeacherForm, data)
    if form is None:
        return FormResult(errors=errors)
    return _save(store, "teacher", form.model_dump(), teacher_id, {"join_date": today()})


def submit_student(store: EntityStore, data: dict[str, Any], student_id: Optional[str] = None) -> FormResult[Student]:
    form, errors = validate(StudentForm, data)
    if form is None:
        return FormResult(errors=errors)
    return _save(store, "student", form.model_dump(), student_id, {"enrollment_date": today()})


def submit_parent(store: EntityStore, data: dict[str, Any], parent_id: Optional[str] = None) -> FormResult[Parent]:
    form, errors = validate(ParentForm, data)
    if form is None:
        return FormResult(errors=errors)
    return _save(store, "parent", form.model_dump(), parent_id, {"join_date": today()})


def submit_staff(store: EntityStore, data: dict[str, Any], staff_id: Optional[str] = None) -> FormResult[Staff]:
    form, errors = validate(StaffForm, data)
    if form is None:
        return FormResult(errors=errors)
    return _save(store, "staff", form.model_dump(), staff_id, {"join_date": today()})


def submit_subject(store: EntityStore, data: dict[str, Any], subject_id: Optional[str] = None) -> FormResult[Subject]:
    form, errors = validate(SubjectForm, data)
    if form is None:
        return FormResult(errors=errors)
    return _save(store, "subject", form.model_dump(), subject_id, {})


def submit_payment(store: EntityStore, data: dict[str, Any], payment_id: Optional[str] = None) -> FormResult[Payment]:
    form, errors = validate(PaymentForm, data)
    if form is None:
        return FormResult(errors=errors)
    return _save(store, "payment", form.model_dump(), payment_id, {})


def submit_grade(store: EntityStore, data: dict[str, Any], grade_id: Optional[str] = None) -> FormResult[Grade]:
    form, errors = validate(GradeForm, data)
    if form is None:
        return FormResult(errors=errors)
    values = form.model_dump()
    values["average"] = weighted_average(form.assignments, form.exams, form.participation)
    return _save(store, "grade", values, grade_id, {})


def submit_transport(
    store: EntityStore, data: dict[str, Any], transport_id: Optional[str] = None
) -> FormResult[Transport]:
    form, errors = validate(TransportForm, data)
    if form is None:
        return FormResult(errors=errors)
    values = form.model_dump(exclude={"stops"})
    # Stops are renumbered on every save; coordinates await geocoding.
    values["stops"] = [
        TransportStop(id=f"stop-{i}", name=s.name, address=s.address, time=s.time, coordinates=Coordinates())
        for i, s in enumerate(form.stops)
    ]
    return _save(store, "transport", values, transport_id, {})


SUBMITTERS = {
    "teacher": submit_teacher,
    "student": submit_student,
    "parent": submit_parent,
    "staff": submit_staff,
    "subject": submit_subject,
    "payment": submit_payment,
    "grade": submit_grade,
    "transport": submit_transport,
}


def submit(store: EntityStore, kind: str, data: dict[str, Any], entity_id: Optional[str] = None) -> FormResult:
    return SUBMITTERS[kind](store, data, entity_id)
