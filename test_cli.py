from click.testing import CliRunner

from elearning_cli import config
from elearning_cli.main import cli

LISTING_HEADERS = [
    "=== E-Learning Platform Demo ===",
    "Instructors:",
    "Courses:",
    "Students:",
    "Enrollments:",
]


def test_help_lists_commands():
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "shell" in result.output
    assert "demo" in result.output


def test_demo_prints_seeded_listings():
    result = CliRunner().invoke(cli, ["demo"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert [line for line in lines if not line.startswith("  ")] == LISTING_HEADERS
    assert "  Course[id=C101,name=Introduction to Java,instructor=I100]" in lines
    assert "  Course[id=C102,name=Web Development,instructor=null]" in lines
    assert any(
        line.startswith("  Enrollment[id=") and ",student=S500,course=C101," in line
        for line in lines
    )


def test_shell_runs_commands_from_stdin():
    result = CliRunner().invoke(
        cli, ["shell"], input="enroll S500 C102\nassign I100 C102\nlist courses\nexit\n"
    )

    assert result.exit_code == 0
    assert "Enrolled: Enrollment[id=" in result.output
    assert "cmd> Assigned" in result.output
    assert "  Course[id=C102,name=Web Development,instructor=I100]" in result.output
    assert result.output.rstrip().endswith("Goodbye.")


def test_no_subcommand_starts_shell():
    result = CliRunner().invoke(cli, [], input="exit\n")

    assert result.exit_code == 0
    assert "=== E-Learning Platform Demo ===" in result.output
    assert "Goodbye." in result.output


def test_no_seed_starts_empty():
    result = CliRunner().invoke(cli, ["shell", "--no-seed"], input="list students\n")

    assert result.exit_code == 0
    assert "Student[" not in result.output
    assert result.output.rstrip().endswith("Goodbye.")


def test_seed_default_follows_config(monkeypatch):
    monkeypatch.setattr(config, "SEED_DEMO_DATA", False)
    result = CliRunner().invoke(cli, ["shell"], input="exit\n")

    assert result.exit_code == 0
    assert "Instructor[" not in result.output


def test_logging_writes_to_log_dir(tmp_path):
    CliRunner().invoke(cli, ["shell"], input="enroll S999 C101\nexit\n")

    log_file = tmp_path / "logs" / "elearning-cli.log"
    assert log_file.exists()
    assert "Cannot enroll student S999" in log_file.read_text(encoding="utf-8")


def test_unknown_ids_print_only_the_failure_messages():
    result = CliRunner().invoke(
        cli, ["shell"], input="enroll S999 C101\nassign I999 C101\nexit\n"
    )

    assert result.exit_code == 0
    assert "cmd> Failed to enroll. Check IDs." in result.output
    assert "cmd> Failed to assign (check IDs)" in result.output
    assert "not found" not in result.output
    assert "WARNING" not in result.output
