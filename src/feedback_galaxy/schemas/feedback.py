"""Feedback schema definitions.

This module defines a single submitted course feedback entry.
"""

from pydantic import BaseModel, Field, computed_field

from feedback_galaxy.utils.validators import count_words


class FeedbackEntry(BaseModel):
    """A feedback file of one course."""

    feedback_id: str = Field(description="File name of the entry, e.g. '1718000000000.txt'.")
    course_code: str = Field(description="Course the feedback belongs to.")
    student: str = Field(description="Username of the submitting student.")
    timestamp: str = Field(description="ISO-8601 submission time.")
    feedback: str = Field(description="Free-text feedback.")

    @computed_field
    @property
    def word_count(self) -> int:
        """Number of whitespace-separated words in the feedback."""
        return count_words(self.feedback)

    def to_text(self) -> str:
        """Render the entry as the content of its feedback file."""
        return f"Student: {self.student}\nTime: {self.timestamp}\nFeedback: {self.feedback}"
