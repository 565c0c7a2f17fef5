import sys
from typing import Callable, Dict, List, Optional, TextIO

import click

from elearning_cli.registry import Registry
from elearning_cli.seed import echo_entries
from elearning_cli.utils.logging_config import get_logger

logger = get_logger(__name__)

BANNER = "You can try a small interactive demo. Type 'help' to see commands, 'exit' to quit."
PROMPT = "cmd> "
HELP_TEXT = (
    "Commands: list students | list courses | list instructors | list enrollments"
    " | enroll <studentId> <courseId> | assign <instructorId> <courseId> | exit"
)
UNKNOWN_COMMAND = "Unknown command. Type 'help'."
GOODBYE = "Goodbye."


class Shell:
    """Line-oriented command loop over a Registry.

    One command per line; each line is stripped and dispatched, and the
    result is written back as text. ``help``, ``exit`` and the ``list``
    phrases are matched case-insensitively, ``enroll`` and ``assign`` by
    their first token.
    """

    def __init__(
        self,
        registry: Registry,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.registry = registry
        self.stdin = stdin
        self.stdout = stdout
        self.listings: Dict[str, Callable[[], List[object]]] = {
            "list students": registry.list_students,
            "list courses": registry.list_courses,
            "list instructors": registry.list_instructors,
            "list enrollments": registry.list_enrollments,
        }

    def echo(self, message: str = "", nl: bool = True) -> None:
        click.echo(message, file=self.stdout, nl=nl)

    def run(self) -> None:
        stream = self.stdin if self.stdin is not None else sys.stdin
        self.echo()
        self.echo(BANNER)
        while True:
            self.echo(PROMPT, nl=False)
            try:
                line = stream.readline()
            except KeyboardInterrupt:
                self.echo()
                break
            if not line:
                self.echo()
                break
            if not self.handle(line):
                break
        self.echo(GOODBYE)

    def handle(self, line: str) -> bool:
        """Dispatch one command line. Returns False when the loop should stop."""
        command = line.strip()
        logger.debug(f"Command: {command!r}")
        keyword = command.lower()

        if keyword == "exit":
            return False
        if keyword == "help":
            self.echo(HELP_TEXT)
            return True
        if keyword in self.listings:
            echo_entries(self.listings[keyword](), self.echo)
            return True

        parts = command.split()
        if parts and parts[0] == "enroll":
            self.enroll(parts[1:])
        elif parts and parts[0] == "assign":
            self.assign(parts[1:])
        else:
            self.echo(UNKNOWN_COMMAND)
        return True

    def enroll(self, args: List[str]) -> None:
        if len(args) < 2:
            self.echo("Usage: enroll <studentId> <courseId>")
            return

        enrollment = self.registry.enroll_student(args[0], args[1])
        if enrollment:
            self.echo(f"Enrolled: {enrollment}")
        else:
            self.echo("Failed to enroll. Check IDs.")

    def assign(self, args: List[str]) -> None:
        if len(args) < 2:
            self.echo("Usage: assign <instructorId> <courseId>")
            return

        if self.registry.assign_instructor_to_course(args[0], args[1]):
            self.echo("Assigned")
        else:
            self.echo("Failed to assign (check IDs)")
