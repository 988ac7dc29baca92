"""
Functions for printing resolved answers and errors.
"""

import sys
from typing import Optional, TextIO

from .models import Resolution

def format_answer(resolution: Resolution, show_question: bool = False) -> str:
    """
    Format a resolution as a single output line.

    Args:
        resolution: Resolved question
        show_question: Whether to prefix the answer with the question and a tab

    Returns:
        Output line without a trailing newline
    """
    answer = " ".join(resolution.answer.splitlines())
    if show_question:
        return f"{resolution.question}\t{answer}"
    return answer

def report_error(resolution: Resolution, stream: Optional[TextIO] = None) -> None:
    """Write the error attached to a resolution to the diagnostic stream."""
    if resolution.error is None:
        return
    if stream is None:
        stream = sys.stderr
    print(f"Error resolving '{resolution.question}': {resolution.error}", file=stream)
