from app.services.tokenization import STOP_WORDS, clean_text, tokenize


def test_tokenize_splits_on_punctuation_and_whitespace():
    assert tokenize("Hello, world! It's 2024.") == ["Hello", "world", "It", "s", "2024"]


def test_tokenize_preserves_case_and_order():
    assert tokenize("The Quick fox") == ["The", "Quick", "fox"]


def test_tokenize_empty_input():
    assert tokenize("") == []
    assert tokenize("  ...  ") == []


def test_clean_text_collapses_whitespace():
    assert clean_text("  a\n\n b\t c  ") == "a b c"
    assert clean_text("") == ""


def test_stop_words_are_lower_case_function_words():
    assert "the" in STOP_WORDS
    assert "theirs" in STOP_WORDS
    assert "python" not in STOP_WORDS
    assert all(w == w.lower() for w in STOP_WORDS)
