"""
Functions for turning a question into a search request.
"""

from urllib.parse import quote_plus

from .config import DEFAULT_SEARCH_URL
from .models import SearchQuery

def build_query(question: str, search_url: str = DEFAULT_SEARCH_URL) -> SearchQuery:
    """
    Build the search request for a question.

    Spaces become '+' and other reserved characters are percent-encoded before
    the result is embedded into the provider's query parameter. An empty
    question still produces a valid request with an empty query.

    Args:
        question: Question text
        search_url: URL template with a {query} placeholder

    Returns:
        SearchQuery for the question
    """
    text = question.strip()
    encoded = quote_plus(text)
    return SearchQuery(text=text, encoded=encoded, url=search_url.format(query=encoded))
