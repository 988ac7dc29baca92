"""
Quiz Answer Tool - finds answers to quiz questions by polling flashcard pages found through web search.
"""

from .models import AnswerCandidate, CandidateSource, Resolution, SearchQuery
from .errors import DiscoveryError, FetchError, ResolutionError
from .answer_resolver import AnswerResolver

__all__ = [
    'AnswerResolver',
    'AnswerCandidate',
    'CandidateSource',
    'Resolution',
    'SearchQuery',
    'ResolutionError',
    'DiscoveryError',
    'FetchError',
]
