"""Shopping list store: merge, removal and lookup."""

import pytest

from voice_shopping.matching import WordMatch
from voice_shopping.store import ShoppingListStore


def test_add_then_merge(store: ShoppingListStore) -> None:
    assert store.add_or_merge("milk", 2) == 2
    assert store.add_or_merge("milk", 3) == 5
    assert len(store) == 1
    assert store.get("milk").quantity == 5


def test_insertion_order_preserved(store: ShoppingListStore) -> None:
    for name in ["bread", "milk", "eggs"]:
        store.add_or_merge(name, 1)
    store.add_or_merge("bread", 1)
    assert [it.name for it in store] == ["bread", "milk", "eggs"]


def test_merge_needs_exact_name(store: ShoppingListStore) -> None:
    store.add_or_merge("apples", 1)
    store.add_or_merge("green apples", 1)
    assert len(store) == 2


def test_rejects_empty_name_and_bad_quantity(store: ShoppingListStore) -> None:
    with pytest.raises(ValueError):
        store.add_or_merge("", 1)
    with pytest.raises(ValueError):
        store.add_or_merge("milk", 0)
    assert len(store) == 0


def test_remove_matching_removes_every_substring_match(store: ShoppingListStore) -> None:
    for name in ["banana", "orange", "milk"]:
        store.add_or_merge(name, 1)
    assert store.remove_matching("an") == 2
    assert [it.name for it in store] == ["milk"]


def test_remove_matching_nothing(store: ShoppingListStore) -> None:
    store.add_or_merge("milk", 1)
    assert store.remove_matching("eggs") == 0
    assert len(store) == 1


def test_remove_matching_is_case_sensitive(store: ShoppingListStore) -> None:
    store.add_or_merge("milk", 1)
    assert store.remove_matching("MILK") == 0


def test_find_matching_returns_first_in_list_order(store: ShoppingListStore) -> None:
    store.add_or_merge("almond milk", 1)
    store.add_or_merge("milk", 4)
    assert store.find_matching("milk").name == "almond milk"


def test_find_matching_empty_list(store: ShoppingListStore) -> None:
    assert store.find_matching("milk") is None


def test_find_returns_stored_quantity(store: ShoppingListStore) -> None:
    store.add_or_merge("rice", 7)
    found = store.find_matching("rice")
    assert (found.name, found.quantity) == ("rice", 7)


def test_returned_items_are_copies(store: ShoppingListStore) -> None:
    store.add_or_merge("rice", 1)
    store.find_matching("rice").quantity = 99
    store.items()[0].quantity = 99
    assert store.get("rice").quantity == 1


def test_word_policy_store() -> None:
    store = ShoppingListStore(policy=WordMatch())
    store.add_or_merge("banana", 1)
    store.add_or_merge("almond milk", 1)
    assert store.remove_matching("an") == 0
    assert store.find_matching("milk").name == "almond milk"


def test_remove_exact_and_clear(store: ShoppingListStore) -> None:
    store.add_or_merge("milk", 1)
    store.add_or_merge("almond milk", 1)
    assert store.remove("milk") is True
    assert store.remove("milk") is False
    assert [it.name for it in store] == ["almond milk"]
    store.clear()
    assert len(store) == 0


def test_to_dict_labels(store: ShoppingListStore) -> None:
    store.add_or_merge("bananas", 2)
    assert store.to_dict() == [{"item": "bananas", "quantity": 2, "label": "2 × bananas"}]
