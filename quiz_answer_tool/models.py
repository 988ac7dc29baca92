"""
Data models for the Quiz Answer Tool.
"""

from typing import List, Optional
from dataclasses import dataclass, field

@dataclass(frozen=True)
class SearchQuery:
    """
    Represents a search request derived from a single question.
    """
    text: str     # The question the query was built from
    encoded: str  # The question after plus/percent encoding
    url: str      # Full search request URL

@dataclass(frozen=True)
class CandidateSource:
    """
    A page address suspected to contain the answer.
    """
    url: str

@dataclass(frozen=True)
class AnswerCandidate:
    """
    A (prompt, answer) pair extracted from one term block of a page.
    """
    prompt: str  # Term / prompt text shown on the flashcard
    answer: str  # Definition text on the back of the flashcard

    def matches(self, question: str) -> bool:
        """
        Check whether the prompt case-insensitively contains the question.
        """
        return question.lower() in self.prompt.lower()

@dataclass
class Resolution:
    """
    The outcome of resolving one question.

    An empty answer with no error means no candidate matched the question.
    """
    question: str
    answer: str = ""
    error: Optional[Exception] = None
    sources: List[CandidateSource] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None
