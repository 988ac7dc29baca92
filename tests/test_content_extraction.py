from unittest.mock import MagicMock, patch

import pytest
import requests

from quiz_answer_tool.config import DEFAULT_CONFIG
from quiz_answer_tool.content_extraction import (
    build_headers,
    extract_answers,
    fetch_page,
    parse_terms,
)
from quiz_answer_tool.errors import FetchError
from quiz_answer_tool.models import AnswerCandidate, CandidateSource

SET_PAGE = """
<html><body>
  <div class="SetPageTerm-content">
    <span class="SetPageTerm-wordText">Capital of
      France</span>
    <span class="SetPageTerm-definitionText">Paris</span>
  </div>
  <div class="SetPageTerm-content">
    <span class="SetPageTerm-wordText">Capital of Italy</span>
  </div>
  <div class="SetPageTerm-content">
    <span class="SetPageTerm-wordText">Capital of Spain</span>
    <span class="SetPageTerm-definitionText"><b>Madrid</b> (since 1561)</span>
  </div>
</body></html>
"""

HEADERS = {"User-Agent": "test"}


def make_response(text="", status_error=None):
    response = MagicMock()
    response.text = text
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


def test_build_headers_are_browser_like():
    headers = build_headers(DEFAULT_CONFIG)

    assert headers["User-Agent"].startswith("Mozilla/5.0")
    assert "text/html" in headers["Accept"]


def test_parse_terms_emits_one_candidate_per_complete_block():
    candidates = parse_terms(SET_PAGE)

    assert candidates == [
        AnswerCandidate(prompt="Capital of France", answer="Paris"),
        AnswerCandidate(prompt="Capital of Spain", answer="Madrid (since 1561)"),
    ]


def test_parse_terms_without_term_blocks_returns_empty_list():
    assert parse_terms("<html><body><p>Sign up</p></body></html>") == []


def test_parse_terms_with_custom_selectors():
    html = '<dl><div class="t"><dt>Q1</dt><dd>A1</dd></div></dl>'
    selectors = {"term_selector": ".t", "prompt_selector": "dt", "answer_selector": "dd"}

    assert parse_terms(html, selectors) == [AnswerCandidate(prompt="Q1", answer="A1")]


def test_fetch_page_returns_body():
    with patch("quiz_answer_tool.content_extraction.requests.get",
               return_value=make_response("<html></html>")) as mock_get:
        body = fetch_page("https://quizlet.com/1/", HEADERS, timeout=3)

    assert body == "<html></html>"
    mock_get.assert_called_once_with("https://quizlet.com/1/", headers=HEADERS, timeout=3)


def test_fetch_page_wraps_connection_errors():
    with patch("quiz_answer_tool.content_extraction.requests.get",
               side_effect=requests.ConnectionError("refused")):
        with pytest.raises(FetchError) as excinfo:
            fetch_page("https://quizlet.com/1/", HEADERS)

    assert excinfo.value.url == "https://quizlet.com/1/"
    assert isinstance(excinfo.value.cause, requests.ConnectionError)


def test_fetch_page_wraps_http_errors():
    response = make_response(status_error=requests.HTTPError("403 Forbidden"))

    with patch("quiz_answer_tool.content_extraction.requests.get", return_value=response):
        with pytest.raises(FetchError):
            fetch_page("https://quizlet.com/1/", HEADERS)


def test_extract_answers_fetches_and_parses_page():
    source = CandidateSource("https://quizlet.com/1/")

    with patch("quiz_answer_tool.content_extraction.requests.get",
               return_value=make_response(SET_PAGE)):
        candidates = extract_answers(source, HEADERS)

    assert [c.answer for c in candidates] == ["Paris", "Madrid (since 1561)"]
