"""
AnswerResolver class that orchestrates resolving one question into an answer.
"""

import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, Optional

from .aggregation import AnswerTally
from .config import DEFAULT_CONFIG
from .content_extraction import SELECTOR_KEYS, build_headers, extract_answers
from .errors import DiscoveryError, FetchError
from .models import Resolution
from .query_generation import build_query
from .search import discover_sources

class AnswerResolver:
    def __init__(self, config: Optional[Dict[str, Any]] = None, verbose: bool = False):
        """
        Initialize the resolver with its configuration.

        Args:
            config: Configuration dictionary, see config.DEFAULT_CONFIG
            verbose: Whether to print detailed progress information to stderr
        """
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self.verbose = verbose

        # One static request configuration shared by every fetch
        self.headers = build_headers(self.config)
        self.selectors = {key: self.config[key] for key in SELECTOR_KEYS}

        if self.verbose:
            print("Quiz Answer Tool Configuration:", file=sys.stderr)
            print(f"- Search backend: {self.config['search_backend']}", file=sys.stderr)
            print(f"- Max sources: {self.config['max_sources']}", file=sys.stderr)
            print(f"- Parallelism: {self.config['parallelism']}", file=sys.stderr)
            print(f"- Request timeout: {self.config['request_timeout']}", file=sys.stderr)
            print(f"- Fail fast: {self.config['fail_fast']}", file=sys.stderr)

    def resolve(self, question: str) -> Resolution:
        """
        Resolve a question into the answer seen most often across candidate pages.

        Every candidate page is fetched even if some fail, unless fail_fast is
        set; the last fetch error is returned alongside whatever answer the
        successful pages produced. A discovery failure returns an empty answer.

        Args:
            question: Question text

        Returns:
            Resolution with the winning answer and the last error, if any
        """
        question = question.strip()
        query = build_query(question, self.config["search_url"])

        try:
            sources = discover_sources(query, self.config, self.headers, self.verbose)
        except DiscoveryError as e:
            if self.verbose:
                print(f"Search failed for '{question}': {e}", file=sys.stderr)
            return Resolution(question=question, error=e)

        tally = AnswerTally(question)
        last_error: Optional[FetchError] = None

        with ThreadPoolExecutor(max_workers=self.config["parallelism"]) as executor:
            futures = {
                executor.submit(
                    extract_answers,
                    source,
                    self.headers,
                    self.config["request_timeout"],
                    self.selectors,
                    self.verbose,
                ): source
                for source in sources
            }

            # Batches are applied here, one at a time, in completion order
            for future in as_completed(futures):
                if future.cancelled():
                    continue
                try:
                    candidates = future.result()
                except FetchError as e:
                    last_error = e
                    if self.verbose:
                        print(f"Error fetching {futures[future].url}: {e.cause}", file=sys.stderr)
                    if self.config["fail_fast"]:
                        for pending in futures:
                            pending.cancel()
                    continue
                tally.add(candidates)

        resolution = Resolution(
            question=question,
            answer=tally.leader,
            error=last_error,
            sources=sources,
        )

        if self.verbose:
            print(f"Resolved '{question}' from {tally.matched} matching terms: {tally.counts}",
                  file=sys.stderr)

        return resolution
