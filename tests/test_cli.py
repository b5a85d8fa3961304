"""End-to-end tests of the command line; every invoke is a fresh process state."""

import pytest
from click.testing import CliRunner

from feedback_galaxy.cli import cli


@pytest.fixture
def run(seeded_data_dir):
    runner = CliRunner()

    def _run(*args, input=None):
        return runner.invoke(cli, ["--data-dir", str(seeded_data_dir), *args], input=input)

    return _run


def login(run, username, password):
    result = run("login", input=f"{username}\n{password}\n")
    assert result.exit_code == 0, result.output
    return result


class TestLogin:
    def test_student_login(self, run):
        result = login(run, "bob", "pw1234")

        assert "Welcome, bob (student)" in result.output
        assert "bob (student)" in run("whoami").output

    def test_bad_credentials(self, run):
        result = run("login", input="bob\nwrong\n")

        assert result.exit_code == 1
        assert "Error 401: Invalid username or password" in result.output
        assert "Not logged in." in run("whoami").output

    def test_empty_username(self, run):
        result = run("login", input="\npw1234\n")

        assert result.exit_code == 1
        assert "Error 400" in result.output

    def test_logout_twice(self, run):
        login(run, "bob", "pw1234")

        assert run("logout").exit_code == 0
        assert run("logout").exit_code == 0
        assert "Not logged in." in run("whoami").output


class TestRosterCommands:
    def test_requires_login_before_prompting(self, run):
        result = run("add-student", input="carol\nsecret1\n")

        assert result.exit_code == 1
        assert "Error 401: Please login first" in result.output
        assert "Enter student username" not in result.output

    def test_student_forbidden(self, run):
        login(run, "bob", "pw1234")

        for command in ("add-student", "list-students", "remove-student"):
            result = run(command, input="carol\nsecret1\n")
            assert result.exit_code == 1
            assert "Error 403: Admin privileges required" in result.output

    def test_admin_adds_and_lists_students(self, run, seeded_data_dir):
        login(run, "admin", "admin123")

        result = run("add-student", input="carol\nsecret1\n")
        assert result.exit_code == 0, result.output
        assert "Student 'carol' added successfully!" in result.output
        assert "carol:secret1" in (seeded_data_dir / "users.txt").read_text()

        result = run("list-students")
        assert "1. bob" in result.output
        assert "2. carol" in result.output
        assert "Total students: 2" in result.output
        assert "admin" not in result.output.replace("All Students", "")

    def test_duplicate_student(self, run):
        login(run, "admin", "admin123")

        result = run("add-student", input="bob\nanother\n")

        assert result.exit_code == 1
        assert "Error 409: User 'bob' already exists" in result.output

    @pytest.mark.parametrize("entry", ["bad name\nsecret1\n", "carol\nabc\n"])
    def test_add_student_validation(self, run, entry):
        login(run, "admin", "admin123")

        result = run("add-student", input=entry)

        assert result.exit_code == 1
        assert "Error 400" in result.output

    def test_remove_student(self, run, seeded_data_dir):
        login(run, "admin", "admin123")

        result = run("remove-student", input="bob\ny\n")

        assert result.exit_code == 0, result.output
        assert "Student 'bob' removed successfully!" in result.output
        assert "Remaining students: 0" in result.output
        assert (seeded_data_dir / "users.txt").read_text() == "admin:admin123\n"

    def test_remove_student_cancelled(self, run, seeded_data_dir):
        login(run, "admin", "admin123")

        result = run("remove-student", input="bob\nn\n")

        assert result.exit_code == 0
        assert "Student removal cancelled." in result.output
        assert "bob:pw1234" in (seeded_data_dir / "users.txt").read_text()

    def test_remove_unknown_student(self, run):
        login(run, "admin", "admin123")

        result = run("remove-student", input="carol\nyes\n")

        assert result.exit_code == 1
        assert "Error 404: User 'carol' not found" in result.output

    def test_remove_admin_forbidden(self, run):
        login(run, "admin", "admin123")

        result = run("remove-student", input="admin\ny\n")

        assert result.exit_code == 1
        assert "Error 403: Cannot remove admin user" in result.output

    def test_remove_with_no_students(self, run):
        login(run, "admin", "admin123")
        run("remove-student", input="bob\ny\n")

        result = run("remove-student")

        assert result.exit_code == 0
        assert "No students found to remove." in result.output


class TestFeedbackCommands:
    def test_student_submits_and_admin_views(self, run):
        login(run, "bob", "pw1234")
        result = run("add-feedback", input="cs01\nGreat course\n")
        assert result.exit_code == 0, result.output
        assert "Feedback saved successfully!" in result.output

        login(run, "admin", "admin123")
        result = run("view-feedback", input="CS01\n")
        assert result.exit_code == 0, result.output
        assert "Feedback for Course: CS01" in result.output
        assert "Student: bob" in result.output
        assert "Feedback: Great course" in result.output
        assert "Total feedback count: 1" in result.output

        assert run("list-courses").output.strip() == "CS01"

    def test_admin_cannot_submit(self, run):
        login(run, "admin", "admin123")

        result = run("add-feedback", input="CS01\nhello\n")

        assert result.exit_code == 1
        assert "Error 403: Admin users cannot submit feedback" in result.output
        assert "Enter course code" not in result.output

    def test_feedback_requires_login(self, run):
        result = run("view-feedback", input="CS01\n")

        assert result.exit_code == 1
        assert "Error 401" in result.output

    def test_view_unknown_course(self, run):
        login(run, "bob", "pw1234")

        result = run("view-feedback", input="bio1\n")

        assert result.exit_code == 1
        assert "Error 404: No feedback found for course BIO1" in result.output

    def test_invalid_course_code(self, run):
        login(run, "bob", "pw1234")

        result = run("add-feedback", input="computing\nhello\n")

        assert result.exit_code == 1
        assert "Course code must be in format like CS01" in result.output


class TestInitAdmin:
    def test_creates_admin_in_empty_dir(self, tmp_path):
        runner = CliRunner()
        data_dir = tmp_path / "fresh"

        result = runner.invoke(cli, ["--data-dir", str(data_dir), "init-admin", "--password", "admin123"])

        assert result.exit_code == 0, result.output
        assert (data_dir / "users.txt").read_text() == "admin:admin123\n"

    def test_prompts_for_password(self, tmp_path):
        runner = CliRunner()
        data_dir = tmp_path / "fresh"

        result = runner.invoke(cli, ["--data-dir", str(data_dir), "init-admin"], input="topsecret\ntopsecret\n")

        assert result.exit_code == 0, result.output
        assert "admin:topsecret" in (data_dir / "users.txt").read_text()

    def test_existing_admin_untouched(self, run, seeded_data_dir):
        result = run("init-admin", "--password", "changed")

        assert result.exit_code == 0
        assert "Admin account already exists." in result.output
        assert "admin:admin123" in (seeded_data_dir / "users.txt").read_text()
