"""
Reading the questions to answer from arguments, a file or standard input.
"""

import os
import re
from typing import Iterator, List, Optional, TextIO

# Leading question numbers such as "12." or "3)"
NUMBERING_RE = re.compile(r"^\s*\d+[.)](?:\s+|$)")

def clean_question(line: str) -> str:
    """
    Trim a question and strip any leading question number.

    A question that is nothing but a number is kept as is.
    """
    text = line.strip()
    return NUMBERING_RE.sub("", text, count=1).strip() or text

class QuestionSource:
    """
    Iterator over the questions submitted by the user.

    next_question() returns an empty string once the questions are exhausted.
    """

    def __init__(self, questions: List[str]):
        self._questions = questions
        self._index = 0

    @classmethod
    def from_lines(cls, lines) -> "QuestionSource":
        """Questions from text lines; blank lines are skipped."""
        questions = [clean_question(line) for line in lines]
        return cls([q for q in questions if q])

    @classmethod
    def from_args(cls, args: List[str], stdin: Optional[TextIO] = None) -> "QuestionSource":
        """
        Build a question source from command-line arguments.

        If the first argument names an existing file, its lines are the
        questions. Otherwise the arguments are, up to the first empty one.
        Without arguments, questions are read from stdin when given.

        Args:
            args: Positional command-line arguments
            stdin: Stream to read questions from when there are no arguments

        Returns:
            QuestionSource over the selected input
        """
        if args and os.path.isfile(args[0]):
            with open(args[0], "r", encoding="utf-8") as f:
                return cls.from_lines(f)

        if not args and stdin is not None:
            return cls.from_lines(stdin)

        questions = []
        for arg in args:
            question = clean_question(arg)
            if not question:
                break
            questions.append(question)
        return cls(questions)

    def next_question(self) -> str:
        if self._index >= len(self._questions):
            return ""
        question = self._questions[self._index]
        self._index += 1
        return question

    def __iter__(self) -> Iterator[str]:
        question = self.next_question()
        while question:
            yield question
            question = self.next_question()

    def __len__(self) -> int:
        return len(self._questions)
