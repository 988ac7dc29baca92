"""
Exceptions raised while resolving answers.
"""

class ResolutionError(Exception):
    """Base class for network failures during answer resolution."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"{url}: {cause}")

class DiscoveryError(ResolutionError):
    """The search results page could not be fetched."""

class FetchError(ResolutionError):
    """A candidate page could not be fetched."""
