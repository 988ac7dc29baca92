"""
Functions for fetching flashcard pages and extracting (prompt, answer) pairs.
"""

import sys
from typing import Dict, List, Optional

import requests
from bs4 import BeautifulSoup

from .config import DEFAULT_CONFIG
from .errors import FetchError
from .models import AnswerCandidate, CandidateSource

SELECTOR_KEYS = ("term_selector", "prompt_selector", "answer_selector")

DEFAULT_SELECTORS = {key: DEFAULT_CONFIG[key] for key in SELECTOR_KEYS}

def build_headers(config: Dict) -> Dict[str, str]:
    """
    Build the browser-like headers sent with every request.
    """
    return {
        "User-Agent": config["user_agent"],
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
    }

def fetch_page(url: str, headers: Dict[str, str], timeout: Optional[float] = None) -> str:
    """
    Fetch a page in a single attempt.

    Args:
        url: URL to fetch
        headers: Request headers
        timeout: Seconds to wait for the server, or None to wait indefinitely

    Returns:
        Response body as text

    Raises:
        FetchError: On connection failures and HTTP error statuses
    """
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(url, e) from e
    return response.text

def _clean_text(element) -> str:
    return " ".join(element.get_text(separator=" ").split())

def parse_terms(html: str, selectors: Optional[Dict[str, str]] = None,
                verbose: bool = False) -> List[AnswerCandidate]:
    """
    Extract one AnswerCandidate per term block of a flashcard page.

    Blocks missing a prompt or definition are skipped. A page without term
    blocks yields an empty list.

    Args:
        html: Page markup
        selectors: CSS selectors for term blocks and their prompt/answer parts
        verbose: Whether to report skipped blocks

    Returns:
        List of AnswerCandidate objects in page order
    """
    selectors = {**DEFAULT_SELECTORS, **(selectors or {})}
    soup = BeautifulSoup(html, "html.parser")

    candidates = []
    for block in soup.select(selectors["term_selector"]):
        prompt = block.select_one(selectors["prompt_selector"])
        answer = block.select_one(selectors["answer_selector"])
        if prompt is None or answer is None:
            if verbose:
                print("Skipping malformed term block", file=sys.stderr)
            continue
        candidates.append(AnswerCandidate(prompt=_clean_text(prompt), answer=_clean_text(answer)))

    return candidates

def extract_answers(source: CandidateSource, headers: Dict[str, str],
                    timeout: Optional[float] = None,
                    selectors: Optional[Dict[str, str]] = None,
                    verbose: bool = False) -> List[AnswerCandidate]:
    """
    Fetch a candidate page and extract its answer candidates.

    Links on the page are not followed.

    Raises:
        FetchError: If the page cannot be fetched
    """
    html = fetch_page(source.url, headers, timeout)
    candidates = parse_terms(html, selectors, verbose)
    if verbose:
        print(f"Extracted {len(candidates)} terms from {source.url}", file=sys.stderr)
    return candidates
