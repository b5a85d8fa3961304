"""Course feedback storage.

This module stores student feedback as one text file per submission under a
directory per course, and reads it back for listing.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from feedback_galaxy import config
from feedback_galaxy.core.exceptions import ForbiddenError, NotFoundError, StorageError
from feedback_galaxy.schemas.feedback import FeedbackEntry
from feedback_galaxy.schemas.session import utc_now_iso
from feedback_galaxy.utils.access_control import AccessControl
from feedback_galaxy.utils.validators import validate_course_code, validate_input

logger = logging.getLogger(__name__)

_FIELD_PREFIXES = {
    "student": "Student: ",
    "timestamp": "Time: ",
    "feedback": "Feedback: ",
}


def parse_feedback_text(feedback_id: str, course_code: str, text: str) -> FeedbackEntry:
    """Parse the content of a feedback file.

    Raises:
        ValueError: If a field line is missing.
    """
    lines = text.split("\n", 2)
    if len(lines) < 3:
        raise ValueError(f"Feedback file {feedback_id} is incomplete")

    values = {}
    for (field, prefix), line in zip(_FIELD_PREFIXES.items(), lines):
        if not line.startswith(prefix):
            raise ValueError(f"Feedback file {feedback_id} is missing '{prefix.strip()}'")
        values[field] = line[len(prefix):]

    return FeedbackEntry(feedback_id=feedback_id, course_code=course_code, **values)


class FeedbackManager:
    """Manages per-course feedback files."""

    def __init__(self, access: AccessControl, feedback_dir: Optional[Path] = None):
        """Initialize FeedbackManager.

        Args:
            access: Guards applied before reading or writing feedback.
            feedback_dir: Root of the per-course directories.
        """
        self.access = access
        self.feedback_dir = (
            Path(feedback_dir) if feedback_dir else config.get_feedback_dir()
        )

    def check_can_submit(self) -> None:
        """Raise unless the current user is allowed to submit feedback.

        Raises:
            UnauthorizedError: If nobody is logged in.
            ForbiddenError: If the admin is logged in.
        """
        self.access.require_login()
        if self.access.is_admin():
            raise ForbiddenError(
                "Admin users cannot submit feedback. "
                "Only students can provide course feedback."
            )

    def _ensure_course_dir(self, course_code: str) -> Path:
        course_dir = self.feedback_dir / course_code
        try:
            course_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create %s: %s", course_dir, e)
            raise StorageError("Failed to create course directory") from e
        return course_dir

    def submit(self, course_code: str, text: str) -> FeedbackEntry:
        """Save one feedback entry for a course.

        Args:
            course_code: Course code, e.g. "cs01" or "MATH101".
            text: Feedback text.

        Returns:
            The saved FeedbackEntry.

        Raises:
            UnauthorizedError: If nobody is logged in.
            ForbiddenError: If the admin is logged in.
            ValidationError: If the course code or text is invalid.
            StorageError: If the entry cannot be written.
        """
        self.check_can_submit()
        session = self.access.current_user()

        course = validate_course_code(course_code)
        feedback = validate_input(text, "Feedback")

        course_dir = self._ensure_course_dir(course)
        stem = str(int(time.time() * 1000))
        path = course_dir / f"{stem}.txt"
        suffix = 1
        while path.exists():
            path = course_dir / f"{stem}-{suffix}.txt"
            suffix += 1

        entry = FeedbackEntry(
            feedback_id=path.name,
            course_code=course,
            student=session.username,
            timestamp=utc_now_iso(),
            feedback=feedback,
        )
        try:
            path.write_text(entry.to_text(), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            raise StorageError("Failed to save feedback") from e

        logger.info("Saved feedback %s for %s by %s", entry.feedback_id, course, entry.student)
        return entry

    def list_feedback(self, course_code: str) -> List[FeedbackEntry]:
        """List the feedback of a course, oldest first.

        Raises:
            UnauthorizedError: If nobody is logged in.
            ValidationError: If the course code is invalid.
            NotFoundError: If the course has never received feedback.
            StorageError: If the course directory cannot be listed.
        """
        self.access.require_login()
        course = validate_course_code(course_code)

        course_dir = self.feedback_dir / course
        if not course_dir.is_dir():
            raise NotFoundError(f"No feedback found for course {course}")

        try:
            paths = sorted(p for p in course_dir.iterdir() if p.is_file())
        except OSError as e:
            raise StorageError(f"Failed to list feedback for course {course}") from e

        entries = []
        for path in paths:
            try:
                text = path.read_text(encoding="utf-8")
                entries.append(parse_feedback_text(path.name, course, text))
            except (OSError, ValueError) as e:
                logger.warning("Could not read feedback file %s: %s", path, e)
        return entries

    def list_courses(self) -> List[str]:
        """List course codes that have a feedback directory."""
        self.access.require_login()
        if not self.feedback_dir.is_dir():
            return []
        return sorted(p.name for p in self.feedback_dir.iterdir() if p.is_dir())
