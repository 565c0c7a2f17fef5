from datetime import date
from typing import Dict, List, Optional
from uuid import uuid4

from elearning_cli.models import Course, Enrollment, Instructor, Student
from elearning_cli.utils.logging_config import get_logger

logger = get_logger(__name__)


class Registry:
    """In-memory store for students, instructors, courses and enrollments.

    Each entity type lives in its own dict keyed by id. Cross references
    (``Course.instructor_id``, ``Enrollment.student_id``/``course_id``) are
    plain ids: they are checked when an association is made but never
    afterwards, and removals do not cascade.
    """

    def __init__(self) -> None:
        self.students: Dict[str, Student] = {}
        self.instructors: Dict[str, Instructor] = {}
        self.courses: Dict[str, Course] = {}
        self.enrollments: Dict[str, Enrollment] = {}

    # Students

    def add_student(self, student: Student) -> None:
        if student.id in self.students:
            logger.debug(f"Replacing student {student.id}")
        self.students[student.id] = student
        logger.info(f"Added student {student.id}")

    def get_student(self, student_id: str) -> Optional[Student]:
        return self.students.get(student_id)

    def remove_student(self, student_id: str) -> Optional[Student]:
        student = self.students.pop(student_id, None)
        if student:
            logger.info(f"Removed student {student_id}")
        return student

    def list_students(self) -> List[Student]:
        return list(self.students.values())

    # Instructors

    def add_instructor(self, instructor: Instructor) -> None:
        if instructor.id in self.instructors:
            logger.debug(f"Replacing instructor {instructor.id}")
        self.instructors[instructor.id] = instructor
        logger.info(f"Added instructor {instructor.id}")

    def get_instructor(self, instructor_id: str) -> Optional[Instructor]:
        return self.instructors.get(instructor_id)

    def remove_instructor(self, instructor_id: str) -> Optional[Instructor]:
        instructor = self.instructors.pop(instructor_id, None)
        if instructor:
            logger.info(f"Removed instructor {instructor_id}")
        return instructor

    def list_instructors(self) -> List[Instructor]:
        return list(self.instructors.values())

    # Courses

    def add_course(self, course: Course) -> None:
        if course.id in self.courses:
            logger.debug(f"Replacing course {course.id}")
        self.courses[course.id] = course
        logger.info(f"Added course {course.id}")

    def get_course(self, course_id: str) -> Optional[Course]:
        return self.courses.get(course_id)

    def remove_course(self, course_id: str) -> Optional[Course]:
        course = self.courses.pop(course_id, None)
        if course:
            logger.info(f"Removed course {course_id}")
        return course

    def list_courses(self) -> List[Course]:
        return list(self.courses.values())

    # Associations

    def assign_instructor_to_course(self, instructor_id: str, course_id: str) -> bool:
        instructor = self.instructors.get(instructor_id)
        course = self.courses.get(course_id)
        if not instructor or not course:
            logger.info(
                f"Cannot assign instructor {instructor_id} to course {course_id}: not found"
            )
            return False

        course.instructor_id = instructor_id
        logger.info(f"Assigned instructor {instructor_id} to course {course_id}")
        return True

    def enroll_student(self, student_id: str, course_id: str) -> Optional[Enrollment]:
        """
        Enroll a student in a course.

        Both ids must exist. The same student may be enrolled in the same
        course more than once; every call creates a separate enrollment.

        Returns:
            The new enrollment, or None if either id is unknown
        """
        student = self.students.get(student_id)
        course = self.courses.get(course_id)
        if not student or not course:
            logger.info(
                f"Cannot enroll student {student_id} in course {course_id}: not found"
            )
            return None

        enrollment = Enrollment(
            id=str(uuid4()),
            student_id=student_id,
            course_id=course_id,
            enrolled_on=date.today(),
        )
        self.enrollments[enrollment.id] = enrollment
        logger.info(
            f"Enrolled student {student_id} in course {course_id} ({enrollment.id})"
        )
        return enrollment

    def unenroll(self, enrollment_id: str) -> bool:
        removed = self.enrollments.pop(enrollment_id, None) is not None
        if removed:
            logger.info(f"Removed enrollment {enrollment_id}")
        return removed

    def get_enrollment(self, enrollment_id: str) -> Optional[Enrollment]:
        return self.enrollments.get(enrollment_id)

    def list_enrollments(self) -> List[Enrollment]:
        return list(self.enrollments.values())

    # Lookups

    def courses_by_instructor(self, instructor_id: str) -> List[Course]:
        return [c for c in self.courses.values() if c.instructor_id == instructor_id]

    def enrollments_for_student(self, student_id: str) -> List[Enrollment]:
        return [e for e in self.enrollments.values() if e.student_id == student_id]
