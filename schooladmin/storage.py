from __future__ import annotations

import copy
import dataclasses
import logging
from typing import Any, Generic, Iterable, Optional, TypeVar

from .constants import PAID, UNASSIGNED, UNKNOWN, UNKNOWN_SUBJECT
from .logger import ActivityLog, AppEvent, now_ts, today
from .models import Grade, Notification, Parent, Payment, Staff, Student, Subject, Teacher, Transport

log = logging.getLogger(__name__)

T = TypeVar("T")

ID_PREFIXES = {
    "teacher": "TCH-",
    "subject": "SUB-",
    "parent": "PAR-",
    "student": "STU-",
    "staff": "STF-",
    "payment": "PAY-",
    "grade": "GRD-",
    "transport": "TRN-",
    "notification": "NTF-",
}


def _id_number(prefix: str, entity_id: str) -> int:
    if not entity_id.startswith(prefix):
        return 0
    digits = "".join(ch for ch in entity_id[len(prefix) :] if ch.isdigit())
    return int(digits) if digits else 0


class Collection(Generic[T]):
    """Ordered records of one entity type keyed by a generated id.

    Records handed out are copies, so state only changes through add,
    update and delete. Ids come from a counter that only moves forward, so
    an id freed by a delete is never given to a later record.
    """

    def __init__(self, record_type: type, prefix: str):
        self.record_type = record_type
        self.prefix = prefix
        self._records: list[T] = []
        self._counter = 0
        self._field_names = {f.name for f in dataclasses.fields(record_type)} - {"id"}

    def _check_fields(self, data: dict[str, Any]) -> None:
        unknown = sorted(set(data) - self._field_names - {"id"})
        if unknown:
            raise ValueError(f"{self.record_type.__name__} has no field(s): {', '.join(unknown)}")

    def _next_id(self) -> str:
        self._counter += 1
        return f"{self.prefix}{self._counter:04d}"

    def _index(self, entity_id: str) -> Optional[int]:
        for i, rec in enumerate(self._records):
            if getattr(rec, "id") == entity_id:
                return i
        return None

    def load(self, records: Iterable[T]) -> None:
        """Insert records that already carry ids (demo data)."""
        for rec in records:
            rec = copy.deepcopy(rec)
            if not getattr(rec, "id"):
                rec = dataclasses.replace(rec, id=self._next_id())
            self._counter = max(self._counter, _id_number(self.prefix, rec.id))
            self._records.append(rec)

    def all(self) -> list[T]:
        return copy.deepcopy(self._records)

    def get(self, entity_id: str) -> Optional[T]:
        idx = self._index(entity_id)
        return None if idx is None else copy.deepcopy(self._records[idx])

    def add(self, data: dict[str, Any]) -> T:
        self._check_fields(data)
        values = {k: copy.deepcopy(v) for k, v in data.items() if k != "id"}
        rec = self.record_type(id=self._next_id(), **values)
        self._records.append(rec)
        return copy.deepcopy(rec)

    def update(self, entity_id: str, partial: dict[str, Any]) -> Optional[T]:
        self._check_fields(partial)
        idx = self._index(entity_id)
        if idx is None:
            return None
        values = {k: copy.deepcopy(v) for k, v in partial.items() if k != "id"}
        rec = dataclasses.replace(self._records[idx], **values)
        self._records[idx] = rec
        return copy.deepcopy(rec)

    def delete(self, entity_id: str) -> bool:
        idx = self._index(entity_id)
        if idx is None:
            return False
        del self._records[idx]
        return True

    def __len__(self) -> int:
        return len(self._records)


class EntityStore:
    """All records of one dashboard session plus their CRUD operations.

    The store is created once by the application and handed to whatever
    needs it; nothing here is module-global. Mutations are appended to the
    activity log.
    """

    def __init__(self, activity: Optional[ActivityLog] = None):
        self.activity = activity if activity is not None else ActivityLog()
        self._collections: dict[str, Collection] = {
            "teacher": Collection(Teacher, ID_PREFIXES["teacher"]),
            "subject": Collection(Subject, ID_PREFIXES["subject"]),
            "parent": Collection(Parent, ID_PREFIXES["parent"]),
            "student": Collection(Student, ID_PREFIXES["student"]),
            "staff": Collection(Staff, ID_PREFIXES["staff"]),
            "payment": Collection(Payment, ID_PREFIXES["payment"]),
            "grade": Collection(Grade, ID_PREFIXES["grade"]),
            "transport": Collection(Transport, ID_PREFIXES["transport"]),
            "notification": Collection(Notification, ID_PREFIXES["notification"]),
        }

    # ---------- Generic ----------
    def collection(self, kind: str) -> Collection:
        try:
            return self._collections[kind]
        except KeyError:
            raise ValueError(f"Unknown entity kind: {kind}") from None

    def get(self, kind: str, entity_id: str) -> Any:
        return self.collection(kind).get(entity_id)

    def _emit(self, action: str, entity_type: str, entity_id: str, details: str = "") -> None:
        self.activity.add_event(
            AppEvent(timestamp=now_ts(), action=action, entity_type=entity_type, entity_id=entity_id, details=details)
        )

    @staticmethod
    def _label(rec: Any) -> str:
        for attr in ("name", "route_name", "title", "description"):
            value = getattr(rec, attr, "")
            if value:
                return str(value)
        return ""

    def _add(self, kind: str, data: dict[str, Any]) -> Any:
        rec = self.collection(kind).add(data)
        log.debug("add %s %s", kind, rec.id)
        self._emit(f"add_{kind}", kind, rec.id, self._label(rec))
        return rec

    def _update(self, kind: str, entity_id: str, partial: dict[str, Any]) -> Any:
        rec = self.collection(kind).update(entity_id, partial)
        if rec is None:
            log.debug("update %s %s: no such record", kind, entity_id)
            return None
        log.debug("update %s %s fields=%s", kind, entity_id, sorted(partial))
        self._emit(f"edit_{kind}", kind, entity_id, ", ".join(sorted(k for k in partial if k != "id")))
        return rec

    def _delete(self, kind: str, entity_id: str) -> bool:
        ok = self.collection(kind).delete(entity_id)
        if ok:
            log.debug("delete %s %s", kind, entity_id)
            self._emit(f"delete_{kind}", kind, entity_id, "deleted")
        return ok

    # ---------- Read access ----------
    @property
    def teachers(self) -> list[Teacher]:
        return self.collection("teacher").all()

    @property
    def subjects(self) -> list[Subject]:
        return self.collection("subject").all()

    @property
    def parents(self) -> list[Parent]:
        return self.collection("parent").all()

    @property
    def students(self) -> list[Student]:
        return self.collection("student").all()

    @property
    def staff(self) -> list[Staff]:
        return self.collection("staff").all()

    @property
    def payments(self) -> list[Payment]:
        return self.collection("payment").all()

    @property
    def grades(self) -> list[Grade]:
        return self.collection("grade").all()

    @property
    def transports(self) -> list[Transport]:
        return self.collection("transport").all()

    @property
    def notifications(self) -> list[Notification]:
        return self.collection("notification").all()

    # ---------- Teachers ----------
    def add_teacher(self, data: dict[str, Any]) -> Teacher:
        return self._add("teacher", data)

    def update_teacher(self, teacher_id: str, partial: dict[str, Any]) -> Optional[Teacher]:
        return self._update("teacher", teacher_id, partial)

    def delete_teacher(self, teacher_id: str) -> bool:
        return self._delete("teacher", teacher_id)

    # ---------- Subjects ----------
    def add_subject(self, data: dict[str, Any]) -> Subject:
        return self._add("subject", data)

    def update_subject(self, subject_id: str, partial: dict[str, Any]) -> Optional[Subject]:
        return self._update("subject", subject_id, partial)

    def delete_subject(self, subject_id: str) -> bool:
        return self._delete("subject", subject_id)

    # ---------- Parents ----------
    def add_parent(self, data: dict[str, Any]) -> Parent:
        return self._add("parent", data)

    def update_parent(self, parent_id: str, partial: dict[str, Any]) -> Optional[Parent]:
        return self._update("parent", parent_id, partial)

    def delete_parent(self, parent_id: str) -> bool:
        return self._delete("parent", parent_id)

    # ---------- Students ----------
    def add_student(self, data: dict[str, Any]) -> Student:
        return self._add("student", data)

    def update_student(self, student_id: str, partial: dict[str, Any]) -> Optional[Student]:
        return self._update("student", student_id, partial)

    def delete_student(self, student_id: str) -> bool:
        return self._delete("student", student_id)

    # ---------- Staff ----------
    def add_staff(self, data: dict[str, Any]) -> Staff:
        return self._add("staff", data)

    def update_staff(self, staff_id: str, partial: dict[str, Any]) -> Optional[Staff]:
        return self._update("staff", staff_id, partial)

    def delete_staff(self, staff_id: str) -> bool:
        return self._delete("staff", staff_id)

    # ---------- Payments ----------
    def add_payment(self, data: dict[str, Any]) -> Payment:
        return self._add("payment", data)

    def update_payment(self, payment_id: str, partial: dict[str, Any]) -> Optional[Payment]:
        return self._update("payment", payment_id, partial)

    def delete_payment(self, payment_id: str) -> bool:
        return self._delete("payment", payment_id)

    def mark_payment_paid(self, payment_id: str, paid_on: Optional[str] = None) -> Optional[Payment]:
        """The only built-in status transition: anything -> paid, stamped with a date."""
        return self.update_payment(payment_id, {"status": PAID, "paid_date": paid_on or today()})

    # ---------- Grades ----------
    def add_grade(self, data: dict[str, Any]) -> Grade:
        return self._add("grade", data)

    def update_grade(self, grade_id: str, partial: dict[str, Any]) -> Optional[Grade]:
        return self._update("grade", grade_id, partial)

    def delete_grade(self, grade_id: str) -> bool:
        return self._delete("grade", grade_id)

    # ---------- Transport ----------
    def add_transport(self, data: dict[str, Any]) -> Transport:
        return self._add("transport", data)

    def update_transport(self, transport_id: str, partial: dict[str, Any]) -> Optional[Transport]:
        return self._update("transport", transport_id, partial)

    def delete_transport(self, transport_id: str) -> bool:
        return self._delete("transport", transport_id)

    # ---------- Notifications ----------
    def add_notification(self, data: dict[str, Any]) -> Notification:
        data = dict(data)
        if not data.get("timestamp"):
            data["timestamp"] = now_ts()
        return self._add("notification", data)

    def mark_notification_read(self, notification_id: str) -> Optional[Notification]:
        return self._update("notification", notification_id, {"read": True})

    def unread_notifications(self) -> list[Notification]:
        return [n for n in self.notifications if not n.read]

    # ---------- Lookups ----------
    # A reference that points nowhere resolves to a placeholder, never an error.
    def student_name(self, student_id: str, fallback: str = UNKNOWN) -> str:
        student = self.get("student", student_id)
        return student.name if student is not None else fallback

    def parent_name(self, parent_id: str, fallback: str = UNKNOWN) -> str:
        parent = self.get("parent", parent_id)
        return parent.name if parent is not None else fallback

    def teacher_name(self, teacher_id: str, fallback: str = UNASSIGNED) -> str:
        teacher = self.get("teacher", teacher_id)
        return teacher.name if teacher is not None else fallback

    def subject_name(self, subject_id: str, fallback: str = UNKNOWN_SUBJECT) -> str:
        subject = self.get("subject", subject_id)
        return subject.name if subject is not None else fallback

    def student_names(self, student_ids: Iterable[str]) -> list[str]:
        return [self.student_name(sid) for sid in student_ids]
