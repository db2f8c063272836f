"""Form schemas for every editable entity.

Each schema carries ``messages``: the user-facing text shown next to a field
when it fails. Keys are dotted field paths with ``*`` for list positions,
optionally suffixed with ``:<pydantic error type>`` for a more specific
message.
"""
from __future__ import annotations

from typing import Annotated, ClassVar, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

Score = Annotated[float, Field(ge=0, le=100)]
PersonStatus = Literal["active", "inactive"]


class FormSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    messages: ClassVar[dict[str, str]] = {}


class TeacherForm(FormSchema):
    name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(min_length=10)
    subjects: List[str] = Field(min_length=1)
    classes: List[str] = Field(min_length=1)
    status: PersonStatus = "active"

    messages: ClassVar[dict[str, str]] = {
        "name": "Name must be at least 2 characters",
        "email": "Invalid email address",
        "phone": "Phone number must be at least 10 characters",
        "subjects": "Select at least one subject",
        "classes": "Select at least one class",
        "status": "Status must be active or inactive",
    }


class StudentForm(FormSchema):
    name: str = Field(min_length=2)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    class_name: str = Field(min_length=1)
    parent_id: str = Field(min_length=1)
    status: PersonStatus = "active"

    messages: ClassVar[dict[str, str]] = {
        "name": "Name must be at least 2 characters",
        "email": "Invalid email address",
        "class_name": "Please select a class",
        "parent_id": "Please select a parent/guardian",
        "status": "Status must be active or inactive",
    }

    @field_validator("email", "phone", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ParentForm(FormSchema):
    name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(min_length=10)
    address: str = Field(min_length=10)
    children: List[str] = Field(min_length=1)

    messages: ClassVar[dict[str, str]] = {
        "name": "Name must be at least 2 characters",
        "email": "Invalid email address",
        "phone": "Phone number must be at least 10 characters",
        "address": "Address must be at least 10 characters",
        "children": "Select at least one child",
    }


class StaffForm(FormSchema):
    name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(min_length=10)
    position: str = Field(min_length=2)
    department: str = Field(min_length=2)
    salary: float = Field(ge=1000)
    status: PersonStatus = "active"

    messages: ClassVar[dict[str, str]] = {
        "name": "Name must be at least 2 characters",
        "email": "Invalid email address",
        "phone": "Phone number must be at least 10 characters",
        "position": "Position must be at least 2 characters",
        "department": "Department must be at least 2 characters",
        "salary": "Salary must be at least $1,000",
        "status": "Status must be active or inactive",
    }


class SubjectForm(FormSchema):
    name: str = Field(min_length=2)
    code: str = Field(min_length=2)
    description: str = Field(min_length=10)
    teacher_id: str = Field(min_length=1)
    classes: List[str] = Field(min_length=1)
    credits: int = Field(default=3, ge=1, le=10)

    messages: ClassVar[dict[str, str]] = {
        "name": "Subject name must be at least 2 characters",
        "code": "Subject code must be at least 2 characters",
        "description": "Description must be at least 10 characters",
        "teacher_id": "Please select a teacher",
        "classes": "Select at least one class",
        "credits": "Credits must be between 1 and 10",
        "credits:greater_than_equal": "Credits must be at least 1",
        "credits:less_than_equal": "Credits cannot exceed 10",
    }


class PaymentForm(FormSchema):
    student_id: str = Field(min_length=1)
    amount: float = Field(ge=1)
    type: Literal["tuition", "transport", "other"] = "tuition"
    period: str = Field(min_length=1)
    due_date: str = Field(min_length=1)
    description: str = Field(min_length=5)
    status: Literal["pending", "paid", "overdue"] = "pending"

    messages: ClassVar[dict[str, str]] = {
        "student_id": "Please select a student",
        "amount": "Amount must be greater than 0",
        "type": "Payment type must be tuition, transport or other",
        "period": "Period is required",
        "due_date": "Due date is required",
        "description": "Description must be at least 5 characters",
        "status": "Status must be pending, paid or overdue",
    }


class GradeForm(FormSchema):
    student_id: str = Field(min_length=1)
    subject_id: str = Field(min_length=1)
    semester: str = Field(min_length=1)
    assignments: List[Score] = Field(min_length=1)
    exams: List[Score] = Field(min_length=1)
    participation: Score = 0

    messages: ClassVar[dict[str, str]] = {
        "student_id": "Please select a student",
        "subject_id": "Please select a subject",
        "semester": "Semester is required",
        "assignments": "At least one assignment grade is required",
        "assignments.*": "Grades must be between 0 and 100",
        "exams": "At least one exam grade is required",
        "exams.*": "Grades must be between 0 and 100",
        "participation": "Grades must be between 0 and 100",
    }


class TransportStopForm(FormSchema):
    name: str = Field(min_length=2)
    address: str = Field(min_length=5)
    time: str = Field(min_length=1)


class TransportForm(FormSchema):
    route_name: str = Field(min_length=2)
    driver_name: str = Field(min_length=2)
    vehicle_number: str = Field(min_length=2)
    capacity: int = Field(ge=1)
    students: List[str] = Field(default_factory=list)
    stops: List[TransportStopForm] = Field(min_length=1)
    schedule: str = Field(min_length=1)

    messages: ClassVar[dict[str, str]] = {
        "route_name": "Route name must be at least 2 characters",
        "driver_name": "Driver name must be at least 2 characters",
        "vehicle_number": "Vehicle number must be at least 2 characters",
        "capacity": "Capacity must be at least 1",
        "stops": "At least one stop is required",
        "stops.*.name": "Stop name must be at least 2 characters",
        "stops.*.address": "Address must be at least 5 characters",
        "stops.*.time": "Time is required",
        "schedule": "Schedule is required",
    }


class LoginForm(FormSchema):
    email: EmailStr
    password: str = Field(min_length=1)

    messages: ClassVar[dict[str, str]] = {
        "email": "Invalid email address",
        "password": "Password is required",
    }
