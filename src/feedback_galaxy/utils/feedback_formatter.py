"""Terminal colouring of feedback text."""

import click

NEGATIVE_WORDS = ("bad", "boring")
POSITIVE_WORDS = ("good", "great")


def format_feedback(text: str) -> str:
    """Colour feedback by tone: red if negative, green if positive, else yellow."""
    lowered = text.lower()
    if any(word in lowered for word in NEGATIVE_WORDS):
        return click.style(text, fg="red")
    if any(word in lowered for word in POSITIVE_WORDS):
        return click.style(text, fg="green")
    return click.style(text, fg="yellow")
