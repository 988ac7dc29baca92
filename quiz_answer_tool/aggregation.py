"""
Tallying answer occurrences across candidate pages.
"""

import threading
from typing import Dict, Iterable

from .models import AnswerCandidate

class AnswerTally:
    """
    Counts answers whose prompt contains the question and tracks the running leader.

    The leader only changes when an answer's count becomes strictly greater
    than the leader's count, so on a tie the answer that reached the shared
    count first wins, not the alphabetically first or the most recently
    counted one. The winner of a tie therefore depends on the order pages
    arrive in.
    """

    def __init__(self, question: str):
        self.question = " ".join(question.split())
        self._counts: Dict[str, int] = {}
        self._leader = ""
        self._leader_count = 0
        self._matched = 0
        self._lock = threading.Lock()

    def add(self, candidates: Iterable[AnswerCandidate]) -> int:
        """
        Apply a batch of candidates in order.

        Args:
            candidates: Candidates extracted from one page

        Returns:
            Number of candidates in the batch that matched the question
        """
        matched = 0
        with self._lock:
            for candidate in candidates:
                if not candidate.matches(self.question):
                    continue
                matched += 1
                count = self._counts.get(candidate.answer, 0) + 1
                self._counts[candidate.answer] = count
                if count > self._leader_count:
                    self._leader = candidate.answer
                    self._leader_count = count
            self._matched += matched
        return matched

    @property
    def leader(self) -> str:
        with self._lock:
            return self._leader

    @property
    def counts(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    @property
    def matched(self) -> int:
        with self._lock:
            return self._matched
