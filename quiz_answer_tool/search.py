"""
Functions for discovering candidate flashcard pages for a question.
"""

import sys
import time
from typing import Dict, Iterable, Iterator, List, Optional, Sequence
from urllib.parse import urlparse, parse_qs, urldefrag

from bs4 import BeautifulSoup
from googleapiclient.discovery import build

from .content_extraction import fetch_page
from .errors import DiscoveryError, FetchError
from .models import CandidateSource, SearchQuery

def unwrap_result_link(link: str) -> str:
    """
    Strip the redirect wrapper a search engine puts around outbound links.

    Google renders results as '/url?q=<destination>&sa=U&ved=...'; the
    destination parameter is returned decoded. Links without a wrapper are
    returned unchanged.
    """
    parsed = urlparse(link)
    if parsed.path == "/url" and parsed.query:
        params = parse_qs(parsed.query)
        for key in ("q", "url"):
            if params.get(key):
                return params[key][0]
    return link

def is_candidate_url(url: str, target_domain: str, excluded_paths: Sequence[str] = ()) -> bool:
    """
    Check whether a URL points at a content page on the target domain.

    Args:
        url: Absolute URL to check
        target_domain: Domain hosting the flashcard content (subdomains match too)
        excluded_paths: Path segments of pages that never hold answers

    Returns:
        True if the URL is an acceptable candidate source
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        return False

    host = parsed.hostname.lower()
    domain = target_domain.lower()
    if host != domain and not host.endswith("." + domain):
        return False

    segments = [s for s in parsed.path.split("/") if s]
    for excluded in excluded_paths:
        if excluded.strip("/") in segments:
            return False

    return True

def extract_links(html: str) -> List[str]:
    """Return the href of every hyperlink on a page, in markup order."""
    soup = BeautifulSoup(html, "html.parser")
    return [a["href"] for a in soup.select("a[href]")]

def iter_candidate_sources(links: Iterable[str], target_domain: str,
                           excluded_paths: Sequence[str] = (),
                           max_sources: int = 5) -> Iterator[CandidateSource]:
    """
    Lazily filter result links down to at most max_sources distinct candidates.

    Links are unwrapped and stripped of fragments before filtering. The first
    occurrence of a URL wins; nothing is read past the cap.

    Args:
        links: Raw result links in discovery order
        target_domain: Domain hosting the flashcard content
        excluded_paths: Path segments of pages that never hold answers
        max_sources: Maximum number of candidates to yield

    Yields:
        CandidateSource objects
    """
    if max_sources < 1:
        return

    seen = set()
    for link in links:
        try:
            url, _ = urldefrag(unwrap_result_link(link))
            if url in seen or not is_candidate_url(url, target_domain, excluded_paths):
                continue
        except ValueError:
            # Malformed href, e.g. an unterminated IPv6 host
            continue
        seen.add(url)
        yield CandidateSource(url=url)
        if len(seen) >= max_sources:
            return

def discover_sources(query: SearchQuery, config: Dict, headers: Dict[str, str],
                     verbose: bool = False) -> List[CandidateSource]:
    """
    Fetch the search results page once and collect candidate sources from it.

    Result pages are never crawled further.

    Args:
        query: Search query to issue
        config: Configuration dictionary
        headers: Request headers applied to the search request
        verbose: Whether to print each discovered source

    Returns:
        List of at most config['max_sources'] candidate sources

    Raises:
        DiscoveryError: If the search request fails
    """
    if config.get("search_backend") == "cse":
        links = _search_cse(query, config)
    else:
        try:
            html = fetch_page(query.url, headers, config.get("request_timeout"))
        except FetchError as e:
            raise DiscoveryError(query.url, e.cause) from e
        links = extract_links(html)

    sources = list(iter_candidate_sources(
        links,
        config["target_domain"],
        config.get("excluded_paths", ()),
        config["max_sources"],
    ))

    if verbose:
        print(f"Found {len(sources)} candidate sources for: {query.text}", file=sys.stderr)
        for source in sources:
            print(f"  {source.url}", file=sys.stderr)

    return sources

def _search_cse(query: SearchQuery, config: Dict) -> List[str]:
    service = build("customsearch", "v1", developerKey=config["google_api_key"])
    items = google_search(
        service,
        config["google_cse_id"],
        query.text,
        site_restrict=f"site:{config['target_domain']}",
        delay=config.get("retry_delay", 1.0),
        max_retries=config.get("max_retries", 3),
    )
    return [item["link"] for item in items if item.get("link")]

def google_search(google_service, google_cse_id: str, query: str,
                  site_restrict: Optional[str] = None, start_index: int = 1,
                  delay: float = 1.0, max_retries: int = 3) -> List[Dict]:
    """
    Perform a Google search using the Custom Search API with retries on quota errors.

    Args:
        google_service: Google API service instance
        google_cse_id: Custom Search Engine ID
        query: Search query string
        site_restrict: Optional site restriction (e.g., "site:quizlet.com")
        start_index: Starting index of the results
        delay: Base delay for exponential backoff between retries, in seconds
        max_retries: Maximum number of attempts

    Returns:
        List of search result items

    Raises:
        DiscoveryError: If the search fails for any reason other than a
            retryable quota or rate limit error, or retries run out
    """
    full_query = query
    if site_restrict:
        full_query = f"{query} {site_restrict}"

    for attempt in range(max_retries):
        if attempt > 0:
            sleep_time = delay * (2 ** attempt)  # Exponential backoff
            print(f"Retrying in {sleep_time:.2f} seconds (attempt {attempt+1}/{max_retries})...",
                  file=sys.stderr)
            time.sleep(sleep_time)

        try:
            result = google_service.cse().list(
                q=full_query,
                cx=google_cse_id,
                start=start_index
            ).execute()
        except Exception as e:
            message = str(e).lower()
            retryable = "quota" in message or "rate limit" in message
            if retryable and attempt < max_retries - 1:
                print(f"Rate limit error: {e}", file=sys.stderr)
                continue
            raise DiscoveryError(f"customsearch:{full_query}", e) from e

        return result.get("items", [])

    return []
