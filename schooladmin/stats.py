"""Derived figures shown on the dashboard and list screens."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from .constants import (
    ASSIGNMENT_WEIGHT,
    EXAM_WEIGHT,
    EXCELLENT_THRESHOLD,
    FAILING_LETTER,
    LETTER_GRADES,
    OVERDUE,
    PAID,
    PARTICIPATION_WEIGHT,
    PASS_THRESHOLD,
    PAYMENT_STATUSES,
    PENDING,
    RECENT_PAYMENTS_LIMIT,
    UNKNOWN_STUDENT,
)
from .models import Grade, Payment, Student, Transport


def round_half_up(value: float, digits: int = 1) -> float:
    # repr() keeps 82.75 as 82.75 instead of its binary expansion.
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _mean(values: Sequence[float], what: str) -> float:
    if not values:
        raise ValueError(f"{what} must contain at least one grade")
    return sum(values) / len(values)


def weighted_average(assignments: Sequence[float], exams: Sequence[float], participation: float) -> float:
    """Weighted grade: assignments 40%, exams 50%, participation 10%, one decimal."""
    average = (
        _mean(assignments, "assignments") * ASSIGNMENT_WEIGHT
        + _mean(exams, "exams") * EXAM_WEIGHT
        + participation * PARTICIPATION_WEIGHT
    )
    return round_half_up(average, 1)


def letter_grade(average: float) -> str:
    for threshold, letter in LETTER_GRADES:
        if average >= threshold:
            return letter
    return FAILING_LETTER


def is_passing(average: float) -> bool:
    return average >= PASS_THRESHOLD


def component_average(values: Sequence[float]) -> float | None:
    """Mean of one grade component for display, or None when there is nothing to show."""
    if not values:
        return None
    return round_half_up(sum(values) / len(values), 1)


@dataclass
class GradeSummary:
    count: int
    class_average: float
    excellent: int
    needs_attention: int


def grade_summary(grades: Iterable[Grade]) -> GradeSummary:
    grades = list(grades)
    if not grades:
        return GradeSummary(count=0, class_average=0.0, excellent=0, needs_attention=0)
    return GradeSummary(
        count=len(grades),
        class_average=round_half_up(sum(g.average for g in grades) / len(grades), 1),
        excellent=sum(1 for g in grades if g.average >= EXCELLENT_THRESHOLD),
        needs_attention=sum(1 for g in grades if not is_passing(g.average)),
    )


@dataclass
class PaymentTotals:
    total: float
    paid: float
    pending: float
    overdue: float


def payment_totals(payments: Iterable[Payment]) -> PaymentTotals:
    total = paid = pending = overdue = 0.0
    for p in payments:
        total += p.amount
        if p.status == PAID:
            paid += p.amount
        elif p.status == PENDING:
            pending += p.amount
        elif p.status == OVERDUE:
            overdue += p.amount
    return PaymentTotals(total=total, paid=paid, pending=pending, overdue=overdue)


def payment_status_counts(payments: Iterable[Payment]) -> dict[str, int]:
    counts = Counter(p.status for p in payments)
    return {status: counts.get(status, 0) for status in PAYMENT_STATUSES}


def _percent(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        return 0
    return int(round_half_up(numerator / denominator * 100, 0))


def route_utilization(route: Transport) -> int:
    return _percent(len(route.students), route.capacity)


def fleet_utilization(routes: Iterable[Transport]) -> int:
    """Seats taken over seats available across every route, as one percentage."""
    routes = list(routes)
    return _percent(sum(len(r.students) for r in routes), sum(r.capacity for r in routes))


@dataclass
class FleetSummary:
    routes: int
    students: int
    capacity: int
    utilization: int


def fleet_summary(routes: Iterable[Transport]) -> FleetSummary:
    routes = list(routes)
    return FleetSummary(
        routes=len(routes),
        students=sum(len(r.students) for r in routes),
        capacity=sum(r.capacity for r in routes),
        utilization=fleet_utilization(routes),
    )


def students_by_class(students: Iterable[Student]) -> dict[str, int]:
    cc: dict[str, int] = {}
    for s in students:
        c = (s.class_name or "").strip() or "(None)"
        cc[c] = cc.get(c, 0) + 1
    return cc


@dataclass
class RecentPayment:
    student: str
    description: str
    amount: float
    status: str


def recent_payments(store, limit: int = RECENT_PAYMENTS_LIMIT) -> list[RecentPayment]:
    """The first ``limit`` payments in store order, student resolved for display."""
    return [
        RecentPayment(
            student=store.student_name(p.student_id, fallback=UNKNOWN_STUDENT),
            description=p.description,
            amount=p.amount,
            status=p.status,
        )
        for p in store.payments[:limit]
    ]


@dataclass
class DashboardSummary:
    students: int
    teachers: int
    parents: int
    staff: int
    total_payments: float
    payment_counts: dict[str, int]
    class_counts: dict[str, int]
    recent_payments: list[RecentPayment]


def dashboard_summary(store) -> DashboardSummary:
    payments = store.payments
    return DashboardSummary(
        students=len(store.students),
        teachers=len(store.teachers),
        parents=len(store.parents),
        staff=len(store.staff),
        total_payments=payment_totals(payments).total,
        payment_counts=payment_status_counts(payments),
        class_counts=students_by_class(store.students),
        recent_payments=recent_payments(store),
    )
