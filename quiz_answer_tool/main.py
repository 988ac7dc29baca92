"""
Command-line interface for the Quiz Answer Tool.
"""

import sys
import argparse
from typing import List, Optional

from .config import SEARCH_BACKENDS, load_config, validate_config
from .answer_resolver import AnswerResolver
from .output import format_answer, report_error
from .questions import QuestionSource

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-answer-tool",
        description="Answer a dump of (optionally numbered) questions by polling flashcard pages found on the web",
    )
    parser.add_argument("questions", nargs="*",
                        help="Questions to answer, or a file with one question per line (default: read stdin)")
    parser.add_argument("--config", "-c", type=str, help="Path to config.json file")
    parser.add_argument("--max-sources", "-s", type=int, help="Maximum number of candidate pages per question")
    parser.add_argument("--parallelism", "-p", type=int, help="Maximum number of concurrent page fetches")
    parser.add_argument("--timeout", "-t", type=float, help="Per-request timeout in seconds (default: none)")
    parser.add_argument("--backend", "-b", choices=SEARCH_BACKENDS, help="Search backend to discover pages with")
    parser.add_argument("--fail-fast", action="store_true",
                        help="Cancel pending page fetches after the first fetch error")
    parser.add_argument("--continue-on-error", "-k", action="store_true",
                        help="Report errors and continue with the next question instead of stopping")
    parser.add_argument("--show-question", "-Q", action="store_true",
                        help="Print each question before its answer, tab separated")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output on stderr")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    args = build_parser().parse_args(argv)

    # Load configuration, command-line flags take precedence
    config = load_config(args.config)
    overrides = {
        "max_sources": args.max_sources,
        "parallelism": args.parallelism,
        "request_timeout": args.timeout,
        "search_backend": args.backend,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    if args.fail_fast:
        config["fail_fast"] = True
    if args.continue_on_error:
        config["continue_on_error"] = True

    if not validate_config(config):
        return 2

    try:
        questions = QuestionSource.from_args(args.questions, stdin=None if args.questions else sys.stdin)
    except OSError as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        return 1

    resolver = AnswerResolver(config, verbose=args.verbose)

    exit_code = 0
    for question in questions:
        resolution = resolver.resolve(question)
        print(format_answer(resolution, args.show_question), flush=True)

        if not resolution.ok:
            report_error(resolution)
            exit_code = 1
            if not config["continue_on_error"]:
                break

    return exit_code

if __name__ == "__main__":
    sys.exit(main())
