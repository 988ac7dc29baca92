"""
Configuration handling for the Quiz Answer Tool.
"""

import os
import sys
import json
from typing import Dict, Any, Optional

DEFAULT_SEARCH_URL = "https://www.google.com/search?client=firefox-b-1-d&q={query}"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:109.0) Gecko/20100101 Firefox/115.0"
)

SEARCH_BACKENDS = ("html", "cse")

DEFAULT_CONFIG: Dict[str, Any] = {
    "max_sources": 5,
    "parallelism": 5,
    "request_timeout": None,     # None waits for every fetch to finish
    "fail_fast": False,
    "continue_on_error": False,
    "search_backend": "html",
    "search_url": DEFAULT_SEARCH_URL,
    "target_domain": "quizlet.com",
    "excluded_paths": ["/create-set"],
    "user_agent": DEFAULT_USER_AGENT,
    "term_selector": ".SetPageTerm-content",
    "prompt_selector": ".SetPageTerm-wordText",
    "answer_selector": ".SetPageTerm-definitionText",
    "google_api_key": None,
    "google_cse_id": None,
    "max_retries": 3,
    "retry_delay": 1.0,
}

# Environment variable -> (config key, converter)
ENV_KEYS = {
    "GOOGLE_API_KEY": ("google_api_key", str),
    "GOOGLE_CSE_ID": ("google_cse_id", str),
    "QUIZ_SEARCH_BACKEND": ("search_backend", str),
    "QUIZ_MAX_SOURCES": ("max_sources", int),
    "QUIZ_PARALLELISM": ("parallelism", int),
    "QUIZ_REQUEST_TIMEOUT": ("request_timeout", float),
}

def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from defaults, an optional JSON file and environment variables.

    Later sources override earlier ones.

    Args:
        config_file: Optional path to JSON config file

    Returns:
        Dictionary with configuration
    """
    config = dict(DEFAULT_CONFIG)
    config["excluded_paths"] = list(DEFAULT_CONFIG["excluded_paths"])

    if config_file:
        if not os.path.exists(config_file):
            print(f"Warning: config file {config_file} not found, using defaults", file=sys.stderr)
        else:
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    file_config = json.load(f)
            except (OSError, ValueError) as e:
                print(f"Error loading config file: {e}", file=sys.stderr)
            else:
                for key, value in file_config.items():
                    if key not in DEFAULT_CONFIG:
                        print(f"Warning: ignoring unknown configuration key: {key}", file=sys.stderr)
                        continue
                    config[key] = value

    for env_key, (config_key, convert) in ENV_KEYS.items():
        value = os.environ.get(env_key)
        if not value:
            continue
        try:
            config[config_key] = convert(value)
        except ValueError:
            print(f"Warning: invalid value for {env_key}: {value!r}", file=sys.stderr)

    return config

def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate the configuration, printing every problem found.

    Args:
        config: Configuration dictionary

    Returns:
        True if configuration is valid, False otherwise
    """
    valid = True

    for key in ("max_sources", "parallelism", "max_retries"):
        value = config.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            print(f"Error: {key} must be a positive integer, got {value!r}", file=sys.stderr)
            valid = False

    timeout = config.get("request_timeout")
    if timeout is not None and (not isinstance(timeout, (int, float)) or timeout <= 0):
        print(f"Error: request_timeout must be a positive number, got {timeout!r}", file=sys.stderr)
        valid = False

    if "{query}" not in str(config.get("search_url", "")):
        print("Error: search_url must contain a {query} placeholder", file=sys.stderr)
        valid = False

    if not config.get("target_domain"):
        print("Error: Missing required configuration key: target_domain", file=sys.stderr)
        valid = False

    backend = config.get("search_backend")
    if backend not in SEARCH_BACKENDS:
        print(f"Error: search_backend must be one of {', '.join(SEARCH_BACKENDS)}, got {backend!r}",
              file=sys.stderr)
        valid = False
    elif backend == "cse":
        for key in ("google_api_key", "google_cse_id"):
            if not config.get(key):
                print(f"Error: Missing required configuration key for cse backend: {key}",
                      file=sys.stderr)
                valid = False

    return valid
