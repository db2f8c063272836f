from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .constants import ACTIVE, PENDING


@dataclass
class User:
    id: str
    name: str
    email: str
    role: str = "admin"
    avatar: Optional[str] = None


@dataclass
class Teacher:
    name: str
    email: str
    phone: str
    subjects: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)
    join_date: str = ""
    status: str = ACTIVE
    avatar: Optional[str] = None
    id: str = ""


@dataclass
class Subject:
    name: str
    code: str
    description: str
    teacher_id: str = ""
    classes: list[str] = field(default_factory=list)
    credits: int = 3
    id: str = ""


@dataclass
class Parent:
    name: str
    email: str
    phone: str
    address: str = ""
    children: list[str] = field(default_factory=list)
    join_date: str = ""
    id: str = ""


@dataclass
class Student:
    name: str
    class_name: str
    parent_id: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    enrollment_date: str = ""
    status: str = ACTIVE
    avatar: Optional[str] = None
    id: str = ""


@dataclass
class Staff:
    name: str
    email: str
    phone: str
    position: str
    department: str
    salary: float = 0.0
    join_date: str = ""
    status: str = ACTIVE
    id: str = ""


@dataclass
class Payment:
    student_id: str
    amount: float
    type: str = "tuition"
    period: str = ""
    due_date: str = ""
    status: str = PENDING
    description: str = ""
    paid_date: Optional[str] = None
    id: str = ""


@dataclass
class Grade:
    student_id: str
    subject_id: str
    semester: str
    assignments: list[float] = field(default_factory=list)
    exams: list[float] = field(default_factory=list)
    participation: float = 0.0
    average: float = 0.0
    id: str = ""


@dataclass
class Coordinates:
    lat: float = 0.0
    lng: float = 0.0


@dataclass
class TransportStop:
    id: str
    name: str
    address: str
    time: str
    coordinates: Coordinates = field(default_factory=Coordinates)


@dataclass
class Transport:
    route_name: str
    driver_name: str
    vehicle_number: str
    capacity: int
    schedule: str = ""
    students: list[str] = field(default_factory=list)
    stops: list[TransportStop] = field(default_factory=list)
    id: str = ""


@dataclass
class Notification:
    title: str
    message: str
    type: str = "info"
    timestamp: str = ""
    read: bool = False
    user_id: str = ""
    id: str = ""
