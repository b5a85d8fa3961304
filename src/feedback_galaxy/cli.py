"""Command line entry point.

Students log in and leave feedback per course; the admin manages the
student roster and reads feedback. Each command runs once and exits.
"""

import functools
import logging
from pathlib import Path
from typing import Callable

import click

from feedback_galaxy import config
from feedback_galaxy.core.dependencies import AppContext, build_context
from feedback_galaxy.core.exceptions import FeedbackGalaxyError
from feedback_galaxy.core.logging_config import setup_logging
from feedback_galaxy.utils.feedback_formatter import format_feedback
from feedback_galaxy.utils.validators import (
    validate_course_code,
    validate_input,
    validate_password_strength,
    validate_username_format,
)

logger = logging.getLogger(__name__)


def handle_errors(func: Callable) -> Callable:
    """Render FeedbackGalaxyError for the terminal and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FeedbackGalaxyError as e:
            logger.debug("Command %s failed: %r", func.__name__, e)
            click.secho(f"\nError {e.status_code}: {e.message}", fg="red", err=True)
            click.secho(f"Hint: {e.hint}", fg="yellow", err=True)
            raise SystemExit(1)

    return wrapper


def print_students(app: AppContext) -> int:
    students = [u for u in app.credential_store.list_all() if u.role == config.STUDENT_ROLE]
    for index, student in enumerate(students, start=1):
        click.echo(f"{index}. {student.username}")
    return len(students)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="FEEDBACK_GALAXY_DATA_DIR",
    default=None,
    help="Directory holding users, session and feedback files.",
)
@click.option("--log-level", default=None, help="Log level (default: LOG_LEVEL or WARNING).")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """Feedback Galaxy: collect course feedback from students."""
    setup_logging(log_level)
    ctx.obj = build_context(data_dir)


@cli.command()
@click.pass_obj
@handle_errors
def login(app: AppContext) -> None:
    """Log in with username and password."""
    username = validate_input(click.prompt("Enter username", default="", show_default=False), "Username")
    password = validate_input(
        click.prompt("Enter password", hide_input=True, default="", show_default=False),
        "Password",
    )
    user = app.auth.authenticate(username, password)
    click.secho(f"Welcome, {user.username} ({user.role})", fg="green")


@cli.command()
@click.pass_obj
@handle_errors
def logout(app: AppContext) -> None:
    """Log out the current user."""
    app.auth.logout()
    click.echo("Logged out.")


@cli.command()
@click.pass_obj
@handle_errors
def whoami(app: AppContext) -> None:
    """Show who is logged in."""
    session = app.access.current_user()
    if session is None:
        click.echo("Not logged in.")
        return
    click.echo(f"{session.username} ({session.role}), logged in at {session.login_time}")


@cli.command("init-admin")
@click.option("--password", default=None, help="Password of the admin account.")
@click.pass_obj
@handle_errors
def init_admin(app: AppContext, password: str) -> None:
    """Create the admin account if it does not exist yet."""
    if app.credential_store.get(config.ADMIN_USERNAME) is not None:
        click.echo("Admin account already exists.")
        return
    password = password or config.DEFAULT_ADMIN_PASSWORD
    if not password:
        password = click.prompt(
            "Choose admin password", hide_input=True, confirmation_prompt=True
        )
    validate_password_strength(password)
    app.credential_store.add(config.ADMIN_USERNAME, password)
    click.secho("Admin account created.", fg="green")


@cli.command("add-student")
@click.pass_obj
@handle_errors
def add_student(app: AppContext) -> None:
    """Add a student account (admin only)."""
    app.access.require_login()
    app.access.require_admin()

    click.echo("\nAdd New Student")
    click.echo("=" * 30)
    username = validate_input(
        click.prompt("Enter student username", default="", show_default=False), "Username"
    )
    password = validate_input(
        click.prompt("Enter student password", default="", show_default=False), "Password"
    )
    validate_username_format(username)
    validate_password_strength(password)

    user = app.credential_store.add(username, password)
    click.secho(f"Student '{user.username}' added successfully!", fg="green")


@cli.command("list-students")
@click.pass_obj
@handle_errors
def list_students(app: AppContext) -> None:
    """List all student accounts (admin only)."""
    app.access.require_login()
    app.access.require_admin()

    click.echo("\nAll Students")
    click.echo("=" * 30)
    total = print_students(app)
    if total == 0:
        click.echo("No students found.")
        return
    click.echo(f"\nTotal students: {total}")


@cli.command("remove-student")
@click.pass_obj
@handle_errors
def remove_student(app: AppContext) -> None:
    """Remove a student account (admin only)."""
    app.access.require_login()
    app.access.require_admin()

    click.echo("\nRemove Student")
    click.echo("=" * 30)
    click.echo("Current students:")
    if print_students(app) == 0:
        click.echo("No students found to remove.")
        return

    username = validate_input(
        click.prompt("\nEnter username of student to remove", default="", show_default=False),
        "Username",
    )
    if not click.confirm(
        f"Are you sure you want to remove student '{username}'? This action cannot be undone.",
        default=False,
    ):
        click.echo("Student removal cancelled.")
        return

    validate_username_format(username)
    removed = app.credential_store.remove(username)
    click.secho(f"Student '{removed.username}' removed successfully!", fg="green")
    remaining = [u for u in app.credential_store.list_all() if u.role == config.STUDENT_ROLE]
    click.echo(f"Remaining students: {len(remaining)}")


@cli.command("add-feedback")
@click.pass_obj
@handle_errors
def add_feedback(app: AppContext) -> None:
    """Submit feedback for a course (students only)."""
    app.feedback.check_can_submit()

    course = validate_input(
        click.prompt("Enter course code", default="", show_default=False), "Course code"
    )
    text = click.prompt("Enter feedback", default="", show_default=False)
    entry = app.feedback.submit(course, text)
    click.secho(f"Feedback saved successfully! ({entry.course_code}/{entry.feedback_id})", fg="green")


@cli.command("view-feedback")
@click.pass_obj
@handle_errors
def view_feedback(app: AppContext) -> None:
    """Show all feedback of a course."""
    app.access.require_login()

    course = validate_input(
        click.prompt("Enter course code to view feedback", default="", show_default=False),
        "Course code",
    )
    course = validate_course_code(course)
    entries = app.feedback.list_feedback(course)
    if not entries:
        click.echo(f"No feedback submitted yet for course {course}.")
        return

    click.echo(f"\nFeedback for Course: {course}")
    click.echo("=" * 50)
    for entry in entries:
        click.echo(f"\nFeedback ID: {entry.feedback_id}")
        click.echo(f"Student: {entry.student}")
        click.echo(f"Time: {entry.timestamp}")
        click.echo(f"Feedback: {format_feedback(entry.feedback)}")
        click.echo("-" * 30)
    click.echo(f"\nTotal feedback count: {len(entries)}")


@cli.command("list-courses")
@click.pass_obj
@handle_errors
def list_courses(app: AppContext) -> None:
    """List courses that have received feedback."""
    courses = app.feedback.list_courses()
    if not courses:
        click.echo("No courses have feedback yet.")
        return
    for course in courses:
        click.echo(course)


def main() -> None:
    """Main entry point."""
    cli(prog_name="feedback-galaxy")


if __name__ == "__main__":
    main()
