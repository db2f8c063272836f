import pytest

from schooladmin import filters


def test_blank_search_matches_everything(store):
    assert filters.filter_students(store, "") == store.students
    assert filters.filter_students(store, "   ") == store.students


def test_search_is_case_insensitive_substring(store):
    assert [s.name for s in filters.filter_students(store, "JOHN")] == ["John Doe"]
    assert [s.name for s in filters.filter_students(store, "11b")] == ["Jane Smith"]


def test_search_and_filters_combine(store):
    assert filters.filter_students(store, "doe", class_name="11B") == []
    assert [s.id for s in filters.filter_students(store, "doe", class_name="10A")] == ["STU-0001"]


@pytest.mark.parametrize("inactive", [None, "", "all"])
def test_inactive_filter_values(store, inactive):
    assert len(filters.filter_students(store, "", class_name=inactive, status=inactive)) == 2


def test_status_filter_is_exact(store):
    store.update_student("STU-0002", {"status": "inactive"})
    assert [s.id for s in filters.filter_students(store, status="inactive")] == ["STU-0002"]
    assert [s.id for s in filters.filter_students(store, status="active")] == ["STU-0001"]


def test_teacher_search_covers_subjects(store):
    assert [t.id for t in filters.filter_teachers(store, "physics")] == ["TCH-0001"]


def test_staff_department_filter(store):
    assert len(filters.filter_staff(store, department="Administration")) == 1
    assert filters.filter_staff(store, department="Library") == []


def test_payment_filters(store):
    assert [p.id for p in filters.filter_payments(store, status="pending")] == ["PAY-0002"]
    assert len(filters.filter_payments(store, payment_type="tuition")) == 2
    assert filters.filter_payments(store, payment_type="transport") == []
    assert [p.id for p in filters.filter_payments(store, "jane")] == ["PAY-0002"]


def test_payment_with_missing_student_is_still_searchable(store):
    store.delete_student("STU-0002")
    assert [p.id for p in filters.filter_payments(store, "first quarter", status="pending")] == ["PAY-0002"]
    assert filters.filter_payments(store, "unknown") == []


def test_grade_filters_by_student_class_and_subject(store):
    base = {"semester": "Fall 2024", "assignments": [90], "exams": [90], "participation": 90, "average": 90.0}
    store.add_grade({**base, "student_id": "STU-0001", "subject_id": "SUB-0001"})
    store.add_grade({**base, "student_id": "STU-0002", "subject_id": "SUB-0002"})
    assert [g.student_id for g in filters.filter_grades(store, class_name="10A")] == ["STU-0001"]
    assert [g.subject_id for g in filters.filter_grades(store, subject_id="SUB-0002")] == ["SUB-0002"]
    assert [g.student_id for g in filters.filter_grades(store, "english")] == ["STU-0002"]


def test_subject_parent_and_transport_search(store):
    assert [s.code for s in filters.filter_subjects(store, "math")] == ["MATH101"]
    assert [p.id for p in filters.filter_parents(store, "emily")] == ["PAR-0002"]
    store.add_transport(
        {"route_name": "North Loop", "driver_name": "Tom Driver", "vehicle_number": "BUS-001", "capacity": 30}
    )
    assert len(filters.filter_transports(store, "bus-001")) == 1
    assert filters.filter_transports(store, "south") == []


def test_filtering_does_not_mutate_store(store):
    before = list(store.students)
    filters.filter_students(store, "zzz")
    assert store.students == before


def test_available_classes(store):
    assert filters.available_classes(store) == ["10A", "11B"]
