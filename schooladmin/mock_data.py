"""Demo records the dashboard starts with. Nothing here is persisted."""
from __future__ import annotations

from .models import Parent, Payment, Staff, Student, Subject, Teacher
from .storage import EntityStore

TEACHERS = [
    Teacher(
        id="TCH-0001",
        name="Dr. Sarah Johnson",
        email="sarah.johnson@school.edu",
        phone="+1234567890",
        subjects=["Mathematics", "Physics"],
        classes=["10A", "11B"],
        join_date="2020-09-01",
        status="active",
    ),
    Teacher(
        id="TCH-0002",
        name="Prof. Michael Chen",
        email="michael.chen@school.edu",
        phone="+1234567891",
        subjects=["English Literature"],
        classes=["9A", "10B"],
        join_date="2019-08-15",
        status="active",
    ),
]

SUBJECTS = [
    Subject(
        id="SUB-0001",
        name="Mathematics",
        code="MATH101",
        description="Advanced Mathematics for High School",
        teacher_id="TCH-0001",
        classes=["10A", "11B"],
        credits=4,
    ),
    Subject(
        id="SUB-0002",
        name="English Literature",
        code="ENG201",
        description="Classical and Modern Literature",
        teacher_id="TCH-0002",
        classes=["9A", "10B"],
        credits=3,
    ),
]

STUDENTS = [
    Student(
        id="STU-0001",
        name="John Doe",
        email="john.doe@student.edu",
        class_name="10A",
        parent_id="PAR-0001",
        enrollment_date="2023-09-01",
        status="active",
    ),
    Student(
        id="STU-0002",
        name="Jane Smith",
        email="jane.smith@student.edu",
        class_name="11B",
        parent_id="PAR-0002",
        enrollment_date="2023-09-01",
        status="active",
    ),
]

PARENTS = [
    Parent(
        id="PAR-0001",
        name="Robert Doe",
        email="robert.doe@email.com",
        phone="+1234567892",
        address="123 Main St, City, State 12345",
        children=["STU-0001"],
        join_date="2023-08-15",
    ),
    Parent(
        id="PAR-0002",
        name="Emily Smith",
        email="emily.smith@email.com",
        phone="+1234567893",
        address="456 Oak Ave, City, State 12345",
        children=["STU-0002"],
        join_date="2023-08-20",
    ),
]

STAFF = [
    Staff(
        id="STF-0001",
        name="Alice Williams",
        email="alice.williams@school.edu",
        phone="+1234567894",
        position="Principal",
        department="Administration",
        join_date="2018-07-01",
        status="active",
        salary=75000,
    ),
]

PAYMENTS = [
    Payment(
        id="PAY-0001",
        student_id="STU-0001",
        amount=1500,
        type="tuition",
        period="Q1 2024",
        due_date="2024-03-15",
        paid_date="2024-03-10",
        status="paid",
        description="First Quarter Tuition Fee",
    ),
    Payment(
        id="PAY-0002",
        student_id="STU-0002",
        amount=1500,
        type="tuition",
        period="Q1 2024",
        due_date="2024-03-15",
        status="pending",
        description="First Quarter Tuition Fee",
    ),
]


def seed_demo_data(store: EntityStore) -> EntityStore:
    """Load the demo records; grades, routes and notifications start empty."""
    store.collection("teacher").load(TEACHERS)
    store.collection("subject").load(SUBJECTS)
    store.collection("parent").load(PARENTS)
    store.collection("student").load(STUDENTS)
    store.collection("staff").load(STAFF)
    store.collection("payment").load(PAYMENTS)
    return store


def demo_store() -> EntityStore:
    return seed_demo_data(EntityStore())
