import pytest

from schooladmin import stats
from schooladmin.models import Grade, Payment


def test_weighted_average_matches_worked_example():
    # 85*0.4 + 80*0.5 + 88*0.1 = 82.8
    assert stats.weighted_average([80, 90], [75, 85], 88) == 82.8
    assert stats.letter_grade(82.8) == "B"
    assert stats.is_passing(82.8)


def test_weighted_average_half_way_case():
    # 85*0.4 + 77.5*0.5 + 100*0.1 = 82.75
    assert stats.weighted_average([80, 90], [70, 85], 100) == 82.8
    assert stats.letter_grade(82.8) == "B"


def test_weighted_average_rounds_half_up():
    # 82.75 exactly: assignments 80, exams 85, participation 82.5
    assert stats.weighted_average([80], [85], 82.5) == pytest.approx(82.8)
    assert stats.round_half_up(0.25, 1) == 0.3
    assert stats.round_half_up(2.5, 0) == 3.0


@pytest.mark.parametrize(
    "assignments, exams, participation, expected",
    [
        ([0], [0], 0, 0.0),
        ([100], [100], 100, 100.0),
        ([100, 100, 100], [100], 100, 100.0),
    ],
)
def test_weighted_average_bounds(assignments, exams, participation, expected):
    assert stats.weighted_average(assignments, exams, participation) == expected


@pytest.mark.parametrize("assignments, exams", [([], [80]), ([80], [])])
def test_weighted_average_rejects_empty_components(assignments, exams):
    with pytest.raises(ValueError):
        stats.weighted_average(assignments, exams, 50)


@pytest.mark.parametrize(
    "average, letter",
    [(100, "A"), (90, "A"), (89.9, "B"), (80, "B"), (79.9, "C"), (70, "C"), (69.9, "D"), (60, "D"), (59.9, "F"), (0, "F")],
)
def test_letter_grade_thresholds(average, letter):
    assert stats.letter_grade(average) == letter


def test_passing_threshold_is_seventy():
    assert stats.is_passing(70)
    assert not stats.is_passing(69.9)


def test_component_average_for_display():
    assert stats.component_average([]) is None
    assert stats.component_average([80, 85]) == 82.5


def test_grade_summary():
    grades = [
        Grade(student_id="STU-0001", subject_id="SUB-0001", semester="Fall", average=95.0),
        Grade(student_id="STU-0002", subject_id="SUB-0001", semester="Fall", average=65.0),
        Grade(student_id="STU-0002", subject_id="SUB-0002", semester="Fall", average=80.0),
    ]
    summary = stats.grade_summary(grades)
    assert summary.count == 3
    assert summary.class_average == 80.0
    assert summary.excellent == 1
    assert summary.needs_attention == 1
    assert stats.grade_summary([]).class_average == 0.0


def test_payment_totals_for_demo_data(store):
    totals = stats.payment_totals(store.payments)
    assert totals.total == 3000
    assert totals.paid == 1500
    assert totals.pending == 1500
    assert totals.overdue == 0


def test_payment_totals_split_by_status():
    payments = [
        Payment(student_id="s", amount=100, status="paid"),
        Payment(student_id="s", amount=250, status="pending"),
        Payment(student_id="s", amount=50, status="overdue"),
    ]
    totals = stats.payment_totals(payments)
    assert totals.total == totals.paid + totals.pending + totals.overdue == 400
    assert stats.payment_status_counts(payments) == {"pending": 1, "paid": 1, "overdue": 1}


def test_payment_totals_empty():
    totals = stats.payment_totals([])
    assert (totals.total, totals.paid, totals.pending, totals.overdue) == (0, 0, 0, 0)


def test_route_utilization(make_route):
    route = make_route(capacity=30, students=[f"STU-{i:04d}" for i in range(10)])
    assert stats.route_utilization(route) == 33


def test_route_utilization_zero_capacity_is_zero(make_route):
    assert stats.route_utilization(make_route(capacity=0)) == 0


def test_route_utilization_can_exceed_hundred(make_route):
    route = make_route(capacity=2, students=["a", "b", "c"])
    assert stats.route_utilization(route) == 150


def test_fleet_summary(make_route):
    routes = [
        make_route("A", capacity=30, students=["a"] * 10),
        make_route("B", capacity=20, students=["b"] * 15),
    ]
    fleet = stats.fleet_summary(routes)
    assert fleet.routes == 2
    assert fleet.students == 25
    assert fleet.capacity == 50
    assert fleet.utilization == 50
    assert stats.fleet_utilization([]) == 0


def test_dashboard_summary(store):
    summary = stats.dashboard_summary(store)
    assert (summary.students, summary.teachers, summary.parents, summary.staff) == (2, 2, 2, 1)
    assert summary.total_payments == 3000
    assert summary.payment_counts == {"pending": 1, "paid": 1, "overdue": 0}
    assert summary.class_counts == {"10A": 1, "11B": 1}


def test_dashboard_recent_payments(store):
    recent = stats.dashboard_summary(store).recent_payments
    assert [(r.student, r.description, r.amount, r.status) for r in recent] == [
        ("John Doe", "First Quarter Tuition Fee", 1500, "paid"),
        ("Jane Smith", "First Quarter Tuition Fee", 1500, "pending"),
    ]


def test_recent_payments_keeps_first_five_and_resolves_missing_students(store):
    for i in range(5):
        store.add_payment({"student_id": "STU-0404", "amount": 100 + i, "description": f"Bus pass {i}"})
    recent = stats.recent_payments(store)
    assert len(recent) == 5
    assert [r.amount for r in recent[2:]] == [100, 101, 102]
    assert recent[2].student == "Unknown Student"
    assert stats.recent_payments(store, limit=1)[0].student == "John Doe"
