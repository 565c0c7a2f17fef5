from datetime import date
from typing import Callable, Iterable

import click

from elearning_cli.models import Course, Instructor, Student
from elearning_cli.registry import Registry


def seed_demo_data(registry: Registry) -> None:
    """Load the sample instructor, courses, student and enrollment."""
    registry.add_instructor(
        Instructor(
            id="I100",
            name="Asha Sharma",
            dept="Computer Science",
            doj=date(2020, 7, 1),
            subjects=("Data Structures", "Algorithms"),
            email="asha@example.com",
            phone="+91-9876543210",
            experience_years=6,
        )
    )

    registry.add_course(
        Course(
            id="C101",
            name="Introduction to Java",
            description="Basics of Java programming",
        )
    )
    registry.add_course(
        Course(id="C102", name="Web Development", description="HTML, CSS, JS basics")
    )
    registry.assign_instructor_to_course("I100", "C101")

    registry.add_student(
        Student(
            id="S500",
            name="Rohit Kumar",
            course="B.Tech",
            dept="CSE",
            institution="SRM Ramapuram",
            phone="+91-9123456789",
            email="rohit@example.com",
            password="secret123",
            degree="B.Tech",
            year="2nd",
            address="Chennai",
        )
    )
    registry.enroll_student("S500", "C101")


def echo_entries(
    entries: Iterable[object], echo: Callable[[str], None] = click.echo
) -> None:
    for entry in entries:
        echo(f"  {entry}")


def print_listings(
    registry: Registry, echo: Callable[[str], None] = click.echo
) -> None:
    echo("=== E-Learning Platform Demo ===")
    echo("Instructors:")
    echo_entries(registry.list_instructors(), echo)
    echo("Courses:")
    echo_entries(registry.list_courses(), echo)
    echo("Students:")
    echo_entries(registry.list_students(), echo)
    echo("Enrollments:")
    echo_entries(registry.list_enrollments(), echo)
