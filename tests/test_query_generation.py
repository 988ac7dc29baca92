from quiz_answer_tool.query_generation import build_query


def test_build_query_joins_words_with_plus():
    query = build_query("capital of france")

    assert query.text == "capital of france"
    assert query.encoded == "capital+of+france"
    assert query.url == "https://www.google.com/search?client=firefox-b-1-d&q=capital+of+france"


def test_build_query_percent_encodes_reserved_characters():
    query = build_query("what is 2+2 & why?")

    assert query.encoded == "what+is+2%2B2+%26+why%3F"


def test_build_query_trims_question():
    assert build_query("  mitochondria  ").encoded == "mitochondria"


def test_build_query_with_empty_question_is_still_valid():
    query = build_query("")

    assert query.encoded == ""
    assert query.url.endswith("&q=")


def test_build_query_uses_custom_template():
    query = build_query("a b", search_url="https://duckduckgo.com/html/?q={query}")

    assert query.url == "https://duckduckgo.com/html/?q=a+b"
