from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional

STUDENT_BORROW_LIMIT = 5


class UserKind(str, Enum):
    STUDENT = "student"
    LIBRARIAN = "librarian"


class User:
    """A library member.

    ``borrowed`` counts items currently held. Neither ``borrow_book`` nor
    ``return_book`` checks ``can_borrow``; callers decide whether to enforce it.
    """

    def __init__(self, kind: UserKind, name: str, *, faculty: Optional[str] = None,
                 year_of_study: Optional[int] = None, employee_id: Optional[str] = None) -> None:
        self.kind = UserKind(kind)
        self.name = name
        self.faculty = faculty
        self.year_of_study = int(year_of_study) if year_of_study is not None else None
        self.employee_id = employee_id
        self.borrowed = 0

    @property
    def role(self) -> str:
        return _ROLES[self.kind]

    @property
    def detail_text(self) -> str:
        return _DETAILS[self.kind](self)

    def describe(self) -> str:
        return f"{self.name} - {self.role}, {self.detail_text}"

    def can_borrow(self) -> bool:
        return _CAN_BORROW[self.kind](self)

    def borrow_book(self) -> None:
        self.borrowed += 1

    def return_book(self) -> None:
        if self.borrowed > 0:
            self.borrowed -= 1

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"User(kind={self.kind.value!r}, name={self.name!r}, borrowed={self.borrowed})"

    def to_dict(self) -> dict:
        data = {"role": self.kind.value, "name": self.name, "borrowed": self.borrowed}
        if self.kind is UserKind.STUDENT:
            data.update(faculty=self.faculty, year_of_study=self.year_of_study)
        else:
            data["employee_id"] = self.employee_id
        return data


_ROLES: Dict[UserKind, str] = {
    UserKind.STUDENT: "Student",
    UserKind.LIBRARIAN: "Librarian",
}

_DETAILS: Dict[UserKind, Callable[[User], str]] = {
    UserKind.STUDENT: lambda u: f"{u.faculty}, year {u.year_of_study}",
    UserKind.LIBRARIAN: lambda u: f"ID: {u.employee_id}",
}

_CAN_BORROW: Dict[UserKind, Callable[[User], bool]] = {
    UserKind.STUDENT: lambda u: u.borrowed < STUDENT_BORROW_LIMIT,
    UserKind.LIBRARIAN: lambda u: True,
}


def Student(name: str, faculty: str, year_of_study: int) -> User:
    return User(UserKind.STUDENT, name, faculty=faculty, year_of_study=year_of_study)


def Librarian(name: str, employee_id: str) -> User:
    return User(UserKind.LIBRARIAN, name, employee_id=employee_id)
