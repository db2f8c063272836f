from __future__ import annotations

from pathlib import Path

APP_NAME = "SchoolAdmin Dashboard"

WORKSPACE_ROOT = Path(__file__).resolve().parents[1]
SETTINGS_JSON_PATH = WORKSPACE_ROOT / "settings.json"
ERROR_LOG_PATH = WORKSPACE_ROOT / "error_log.txt"

# Mock credentials accepted by the login dialog.
ADMIN_EMAIL = "admin@school.edu"
ADMIN_PASSWORD = "admin123"

ACTIVE = "active"
INACTIVE = "inactive"
PERSON_STATUSES = (ACTIVE, INACTIVE)

PENDING = "pending"
PAID = "paid"
OVERDUE = "overdue"
PAYMENT_STATUSES = (PENDING, PAID, OVERDUE)
PAYMENT_TYPES = ("tuition", "transport", "other")

NOTIFICATION_TYPES = ("info", "warning", "success", "error")
USER_ROLES = ("admin", "teacher", "parent")

# Dropdown filter value meaning "no filter".
ALL = "all"

ASSIGNMENT_WEIGHT = 0.4
EXAM_WEIGHT = 0.5
PARTICIPATION_WEIGHT = 0.1

LETTER_GRADES = [(90, "A"), (80, "B"), (70, "C"), (60, "D")]
FAILING_LETTER = "F"
PASS_THRESHOLD = 70
EXCELLENT_THRESHOLD = 90

UNKNOWN = "Unknown"
UNKNOWN_STUDENT = "Unknown Student"
UNKNOWN_SUBJECT = "Unknown Subject"
UNASSIGNED = "Unassigned"

ACTIVITY_LIMIT = 500
RECENT_PAYMENTS_LIMIT = 5

CLASSES = [
    "9A", "9B", "9C",
    "10A", "10B", "10C",
    "11A", "11B", "11C",
    "12A", "12B", "12C",
]

SUBJECTS = [
    "Mathematics",
    "Physics",
    "Chemistry",
    "Biology",
    "English Literature",
    "History",
    "Geography",
    "Computer Science",
    "Art",
    "Music",
    "Physical Education",
]

DEPARTMENTS = [
    "Administration",
    "Finance",
    "Human Resources",
    "IT Support",
    "Maintenance",
    "Security",
    "Library",
    "Cafeteria",
    "Transportation",
    "Health Services",
]

POSITIONS = [
    "Principal",
    "Vice Principal",
    "Administrator",
    "Secretary",
    "Accountant",
    "IT Specialist",
    "Librarian",
    "Nurse",
    "Security Guard",
    "Janitor",
    "Bus Driver",
    "Cook",
]
