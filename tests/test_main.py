from unittest.mock import patch

import pytest

from quiz_answer_tool.errors import FetchError
from quiz_answer_tool.main import main
from quiz_answer_tool.models import Resolution


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in ("GOOGLE_API_KEY", "GOOGLE_CSE_ID", "QUIZ_SEARCH_BACKEND",
                "QUIZ_MAX_SOURCES", "QUIZ_PARALLELISM", "QUIZ_REQUEST_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)


def fake_resolutions(answers):
    """Resolve each question to answers[question], which may be an exception."""
    def resolve(question):
        result = answers[question]
        if isinstance(result, Exception):
            return Resolution(question, error=result)
        return Resolution(question, result)
    return resolve


def test_prints_one_answer_per_question_in_order(capsys):
    answers = {"capital of france": "paris", "largest planet": "", "red planet": "mars"}

    with patch("quiz_answer_tool.main.AnswerResolver") as mock_resolver:
        mock_resolver.return_value.resolve.side_effect = fake_resolutions(answers)
        exit_code = main(["capital of france", "largest planet", "red planet"])

    assert exit_code == 0
    assert capsys.readouterr().out == "paris\n\nmars\n"


def test_error_stops_run_by_default(capsys):
    error = FetchError("https://quizlet.com/1/", OSError("blocked"))
    answers = {"first": "one", "second": error, "third": "three"}

    with patch("quiz_answer_tool.main.AnswerResolver") as mock_resolver:
        mock_resolver.return_value.resolve.side_effect = fake_resolutions(answers)
        exit_code = main(["first", "second", "third"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == "one\n\n"
    assert "Error resolving 'second'" in captured.err
    assert mock_resolver.return_value.resolve.call_count == 2


def test_continue_on_error_answers_remaining_questions(capsys):
    error = FetchError("https://quizlet.com/1/", OSError("blocked"))
    answers = {"first": error, "second": "two"}

    with patch("quiz_answer_tool.main.AnswerResolver") as mock_resolver:
        mock_resolver.return_value.resolve.side_effect = fake_resolutions(answers)
        exit_code = main(["--continue-on-error", "--show-question", "first", "second"])

    assert exit_code == 1
    assert capsys.readouterr().out == "first\t\nsecond\ttwo\n"


def test_flags_override_config(tmp_path):
    with patch("quiz_answer_tool.main.AnswerResolver") as mock_resolver:
        mock_resolver.return_value.resolve.side_effect = fake_resolutions({"q": "a"})
        main(["-s", "3", "-p", "2", "-t", "5", "--fail-fast", "-v", "q"])

    config = mock_resolver.call_args[0][0]
    assert config["max_sources"] == 3
    assert config["parallelism"] == 2
    assert config["request_timeout"] == 5.0
    assert config["fail_fast"] is True
    assert mock_resolver.call_args[1] == {"verbose": True}


def test_invalid_configuration_exits_with_status_2(capsys):
    with patch("quiz_answer_tool.main.AnswerResolver") as mock_resolver:
        exit_code = main(["--max-sources", "0", "q"])

    assert exit_code == 2
    mock_resolver.assert_not_called()
    assert "max_sources" in capsys.readouterr().err


def test_reads_questions_from_file(tmp_path, capsys):
    path = tmp_path / "questions.txt"
    path.write_text("1. capital of france\n2. red planet\n", encoding="utf-8")

    with patch("quiz_answer_tool.main.AnswerResolver") as mock_resolver:
        mock_resolver.return_value.resolve.side_effect = fake_resolutions(
            {"capital of france": "paris", "red planet": "mars"}
        )
        exit_code = main([str(path)])

    assert exit_code == 0
    assert capsys.readouterr().out == "paris\nmars\n"
