from __future__ import annotations
import re
from typing import Dict, Optional

from voice_shopping.matching import MatchPolicy, SubstringMatch
from voice_shopping.tables import NUMBER_WORDS

QTY_PAT = re.compile(r"\d+")


def extract_quantity(text: str, number_words: Optional[Dict[str, int]] = None,
                     policy: Optional[MatchPolicy] = None) -> int:
    words = NUMBER_WORDS if number_words is None else number_words
    policy = policy or SubstringMatch()
    qty = 1
    m = QTY_PAT.search(text)
    if m:
        qty = int(m.group(0))
    # a number word anywhere beats the digits, even when it comes later
    for word, value in words.items():
        if policy.contains(text, word):
            qty = value
            break
    return max(qty, 1)
