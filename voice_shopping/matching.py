"""Containment tests used for number words and for remove/find lookups.

The default is plain substring containment, so "someone" contains "one"
and "an" matches both "banana" and "orange". ``WordMatch`` only accepts
whole-word occurrences and can be switched on through settings.
"""
from __future__ import annotations
import re
from typing import Dict, Type


class MatchPolicy:
    name = "base"

    def contains(self, haystack: str, needle: str) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SubstringMatch(MatchPolicy):
    name = "substring"

    def contains(self, haystack: str, needle: str) -> bool:
        return needle in haystack


class WordMatch(MatchPolicy):
    name = "word"

    def contains(self, haystack: str, needle: str) -> bool:
        if not needle:
            return False
        pat = r"(?<!\w)" + re.escape(needle) + r"(?!\w)"
        return re.search(pat, haystack) is not None


POLICIES: Dict[str, Type[MatchPolicy]] = {
    SubstringMatch.name: SubstringMatch,
    WordMatch.name: WordMatch,
}


def get_policy(name: str) -> MatchPolicy:
    key = (name or "").strip().lower()
    if key not in POLICIES:
        raise ValueError(f"Unknown match policy {name!r}; expected one of {sorted(POLICIES)}")
    return POLICIES[key]()
