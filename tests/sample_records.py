"""Record classes shared by the test suite."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, List, NamedTuple, Optional, Tuple


@dataclass
class Person:
    first_name: Optional[str]
    last_name: Optional[str]
    age: Optional[int]


@dataclass
class Address:
    street: str
    city: str


@dataclass
class Employee:
    person: Optional[Person]
    department: str


@dataclass
class Company:
    name: str
    departments: List[str]


class Level(enum.Enum):
    JUNIOR = 1
    SENIOR = 2


class Perm(enum.Flag):
    R = 4
    W = 2
    X = 1


@dataclass
class File:
    path: str
    mode: Perm


@dataclass
class Blob:
    name: str
    payload: bytes


@dataclass
class Badge:
    code: str
    level: Level


@dataclass
class Staff:
    employee: Optional[Employee]
    badge: Optional[Badge]
    tags: Tuple[str, ...]
    score: float


@dataclass
class Node:
    label: str
    child: Optional[Node] = None


@dataclass
class Account:
    owner: str
    _pin: int


@dataclass
class Base:
    id: int


@dataclass
class Derived(Base):
    name: str
    _note: str = ""


class Point(NamedTuple):
    x: int
    y: int


@dataclass
class Segment:
    start: Point
    end: Optional[Point]


@dataclass
class Tagged:
    LABEL: ClassVar[str] = "tagged"
    value: int = 0


class Sparse:
    present: str
    missing: str

    def __init__(self, present: str) -> None:
        self.present = present


class Empty:
    pass


PERSONS = [Person("John", "Doe", 30), Person("Jane", "Smith", 25)]

EMPLOYEES = [
    Employee(Person("John", "Doe", 30), "Engineering"),
    Employee(Person("Jane", "Smith", 25), "Marketing"),
]

MIXED = [Person("John", "Doe", 30), Address("Main Street", "New York")]


def make_companies() -> List[Company]:
    return [Company("TechCorp", ["Engineering", "Marketing", "Sales"])]
