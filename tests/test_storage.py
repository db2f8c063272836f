import pytest

from schooladmin.logger import ActivityLog
from schooladmin.storage import EntityStore

TEACHER = {
    "name": "Ms. Laura Green",
    "email": "laura.green@school.edu",
    "phone": "+1234567899",
    "subjects": ["Biology"],
    "classes": ["9A"],
    "join_date": "2024-01-10",
    "status": "active",
}


def test_add_assigns_fresh_id_and_round_trips(empty_store):
    t = empty_store.add_teacher(TEACHER)
    assert t.id
    assert t.id.startswith("TCH-")
    got = empty_store.get("teacher", t.id)
    assert got == t
    assert got is not t
    assert got.name == TEACHER["name"]
    assert got.subjects == ["Biology"]


def test_add_ignores_incoming_id(empty_store):
    t = empty_store.add_teacher({**TEACHER, "id": "hand-picked"})
    assert t.id != "hand-picked"


def test_add_copies_list_values(empty_store):
    data = dict(TEACHER, subjects=["Biology"])
    t = empty_store.add_teacher(data)
    data["subjects"].append("Art")
    assert t.subjects == ["Biology"]


def test_unknown_field_is_rejected(empty_store):
    with pytest.raises(ValueError):
        empty_store.add_teacher({**TEACHER, "nickname": "LG"})
    assert len(empty_store.teachers) == 0


def test_unknown_kind_is_rejected(empty_store):
    with pytest.raises(ValueError):
        empty_store.collection("janitor")


def test_ids_continue_after_demo_data(store):
    t = store.add_teacher(TEACHER)
    assert t.id == "TCH-0003"


def test_deleted_ids_are_not_reused(empty_store):
    first = empty_store.add_teacher(TEACHER)
    assert empty_store.delete_teacher(first.id)
    second = empty_store.add_teacher(TEACHER)
    assert second.id != first.id


def test_update_merges_partial_and_keeps_id(store):
    updated = store.update_teacher("TCH-0001", {"phone": "+1999999999"})
    assert updated.id == "TCH-0001"
    assert updated.phone == "+1999999999"
    assert updated.name == "Dr. Sarah Johnson"


def test_update_is_idempotent(store):
    once = store.update_student("STU-0001", {"class_name": "11A"})
    twice = store.update_student("STU-0001", {"class_name": "11A"})
    assert once == twice
    assert len(store.students) == 2


def test_update_cannot_change_id(store):
    updated = store.update_student("STU-0001", {"id": "STU-9999", "name": "Johnny Doe"})
    assert updated.id == "STU-0001"
    assert store.get("student", "STU-9999") is None


def test_update_and_delete_of_missing_id(store):
    assert store.update_parent("PAR-9999", {"name": "Nobody"}) is None
    assert store.delete_parent("PAR-9999") is False
    assert len(store.parents) == 2


def test_deleting_parent_leaves_student_with_unknown_parent(store):
    assert store.delete_parent("PAR-0001")
    student = store.get("student", "STU-0001")
    assert student is not None
    assert student.parent_id == "PAR-0001"
    assert store.parent_name(student.parent_id) == "Unknown"


def test_lookup_fallbacks(store):
    store.delete_teacher("TCH-0001")
    store.delete_student("STU-0002")
    assert store.teacher_name("TCH-0001") == "Unassigned"
    assert store.student_name("STU-0002", fallback="Unknown Student") == "Unknown Student"
    assert store.subject_name("SUB-4040") == "Unknown Subject"
    assert store.student_names(["STU-0001", "STU-0002"]) == ["John Doe", "Unknown"]


def test_mark_payment_paid(store):
    paid = store.mark_payment_paid("PAY-0002", paid_on="2024-03-12")
    assert paid.status == "paid"
    assert paid.paid_date == "2024-03-12"
    assert store.mark_payment_paid("PAY-4040") is None


def test_mark_payment_paid_defaults_to_today(store):
    from schooladmin.logger import today

    assert store.mark_payment_paid("PAY-0002").paid_date == today()


def test_notifications(empty_store):
    n = empty_store.add_notification({"title": "Fee due", "message": "Q2 tuition due soon", "type": "warning"})
    assert n.timestamp
    assert not n.read
    assert empty_store.unread_notifications() == [n]
    empty_store.mark_notification_read(n.id)
    assert empty_store.unread_notifications() == []


def test_mutations_are_recorded_in_activity_log(empty_store):
    t = empty_store.add_teacher(TEACHER)
    empty_store.update_teacher(t.id, {"phone": "+1000000000"})
    empty_store.delete_teacher(t.id)
    empty_store.delete_teacher(t.id)
    actions = [e.action for e in empty_store.activity.list_events()]
    assert actions == ["add_teacher", "edit_teacher", "delete_teacher"]
    assert all(e.entity_id == t.id for e in empty_store.activity.list_events())


def test_stores_do_not_share_state():
    a = EntityStore(activity=ActivityLog())
    b = EntityStore()
    a.add_teacher(TEACHER)
    assert len(a.teachers) == 1
    assert len(b.teachers) == 0
    assert len(b.activity) == 0


def test_records_handed_out_are_copies(store):
    teacher = store.teachers[0]
    teacher.subjects.append("Chemistry")
    store.get("teacher", "TCH-0001").name = "Someone Else"
    added = store.add_teacher(TEACHER)
    added.classes.append("12C")
    fresh = store.get("teacher", "TCH-0001")
    assert fresh.subjects == ["Mathematics", "Physics"]
    assert fresh.name == "Dr. Sarah Johnson"
    assert store.get("teacher", added.id).classes == ["9A"]
    assert [e.action for e in store.activity.list_events()] == ["add_teacher"]
