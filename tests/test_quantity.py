"""Quantity extraction from digits and number words."""

from voice_shopping.matching import WordMatch
from voice_shopping.quantity import extract_quantity


def test_default_is_one() -> None:
    assert extract_quantity("add milk") == 1


def test_digits() -> None:
    assert extract_quantity("add 2 bananas") == 2
    assert extract_quantity("add 12 eggs") == 12


def test_only_first_digit_run_counts() -> None:
    assert extract_quantity("add 3 packs of 20 napkins") == 3


def test_number_word() -> None:
    assert extract_quantity("add five apples") == 5
    assert extract_quantity("buy twelve eggs") == 12


def test_number_word_overrides_digits_wherever_it_appears() -> None:
    assert extract_quantity("add 4 bananas and two apples") == 2
    assert extract_quantity("add two 4 bananas") == 2


def test_first_word_in_table_order_wins() -> None:
    # "one" is checked before "three" even though "three" comes first in the text
    assert extract_quantity("add three and one") == 1


def test_number_word_substring_false_positive() -> None:
    assert extract_quantity("add 3 cookies for someone") == 1
    assert extract_quantity("add 6 tension rods") == 10


def test_word_policy_ignores_embedded_number_words() -> None:
    assert extract_quantity("add 3 cookies for someone", policy=WordMatch()) == 3


def test_zero_is_clamped_to_one() -> None:
    assert extract_quantity("add 0 eggs") == 1


def test_custom_number_words() -> None:
    assert extract_quantity("add a dozen eggs", number_words={"dozen": 12}) == 12
