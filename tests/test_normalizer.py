"""Item name normalization."""

from voice_shopping.normalizer import normalize_name, number_word_tokens
from voice_shopping.tables import ADD_KEYWORDS, FIND_KEYWORDS, NUMBER_WORDS, REMOVE_KEYWORDS


def test_strips_keyword_and_digits() -> None:
    assert normalize_name("add 2 bananas", ADD_KEYWORDS) == "bananas"


def test_keywords_removed_case_insensitively() -> None:
    assert normalize_name("Remove MILK", REMOVE_KEYWORDS) == "MILK"


def test_only_active_keywords_are_removed() -> None:
    assert normalize_name("find and add milk", ADD_KEYWORDS) == "find and  milk"


def test_number_words_are_kept() -> None:
    assert normalize_name("add five apples", ADD_KEYWORDS) == "five apples"


def test_number_words_stripped_when_asked() -> None:
    assert normalize_name("add five apples", ADD_KEYWORDS, strip_number_words=NUMBER_WORDS) == "apples"


def test_keyword_removed_inside_words() -> None:
    assert normalize_name("add paddle", ADD_KEYWORDS) == "ple"


def test_empty_after_stripping() -> None:
    assert normalize_name("search 42", FIND_KEYWORDS) == ""


def test_number_word_tokens() -> None:
    assert number_word_tokens("five apples", NUMBER_WORDS) == ["five"]
    assert number_word_tokens("someone's cake", NUMBER_WORDS) == []
