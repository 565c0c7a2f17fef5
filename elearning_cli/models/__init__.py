from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar, Optional, Tuple


def _text(value: object) -> str:
    return "null" if value is None else str(value)


class Record:
    """Base for registry records whose key fields are fixed once assigned."""

    _key_fields: ClassVar[Tuple[str, ...]] = ("id",)

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._key_fields and name in self.__dict__:
            raise AttributeError(
                f"{type(self).__name__}.{name} cannot be changed once set"
            )
        super().__setattr__(name, value)

    def _require_id(self) -> None:
        if self.__dict__.get("id") is None:
            raise TypeError(f"{type(self).__name__} requires an id")


@dataclass
class Instructor(Record):
    id: str
    name: Optional[str] = None
    dept: Optional[str] = None
    doj: Optional[date] = None
    subjects: Tuple[str, ...] = ()
    email: Optional[str] = None
    phone: Optional[str] = None
    experience_years: int = 0

    def __post_init__(self) -> None:
        self._require_id()

    def __setattr__(self, name: str, value: object) -> None:
        # Subjects are only ever replaced wholesale, never mutated in place
        if name == "subjects":
            if isinstance(value, str):
                value = (value,)
            value = tuple(value or ())  # type: ignore[arg-type]
        super().__setattr__(name, value)

    def __str__(self) -> str:
        subjects = "[" + ", ".join(self.subjects) + "]"
        return (
            f"Instructor[id={self.id},name={_text(self.name)},dept={_text(self.dept)},"
            f"doj={_text(self.doj)},subjects={subjects},email={_text(self.email)},"
            f"phone={_text(self.phone)},exp={int(self.experience_years)}yr]"
        )


@dataclass
class Student(Record):
    id: str
    name: Optional[str] = None
    course: Optional[str] = None
    dept: Optional[str] = None
    institution: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    degree: Optional[str] = None
    year: Optional[str] = None
    address: Optional[str] = None

    def __post_init__(self) -> None:
        self._require_id()

    def __str__(self) -> str:
        return (
            f"Student[id={self.id},name={_text(self.name)},course={_text(self.course)},"
            f"dept={_text(self.dept)},inst={_text(self.institution)},"
            f"email={_text(self.email)},phone={_text(self.phone)},year={_text(self.year)}]"
        )


@dataclass
class Course(Record):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    instructor_id: Optional[str] = None

    def __post_init__(self) -> None:
        self._require_id()

    def __str__(self) -> str:
        return (
            f"Course[id={self.id},name={_text(self.name)},"
            f"instructor={_text(self.instructor_id)}]"
        )


@dataclass
class Enrollment(Record):
    """Join record between a student and a course. Only the grade may change."""

    _key_fields: ClassVar[Tuple[str, ...]] = (
        "id",
        "student_id",
        "course_id",
        "enrolled_on",
    )

    id: str
    student_id: str
    course_id: str
    enrolled_on: date
    grade: Optional[str] = None

    def __str__(self) -> str:
        return (
            f"Enrollment[id={self.id},student={_text(self.student_id)},"
            f"course={_text(self.course_id)},on={_text(self.enrolled_on)},"
            f"grade={_text(self.grade)}]"
        )


__all__ = ["Record", "Student", "Instructor", "Course", "Enrollment"]
