from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from voice_shopping.tables import ADD_KEYWORDS, FIND_KEYWORDS, REMOVE_KEYWORDS


class Intent(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    FIND = "find"
    UNRECOGNIZED = "unrecognized"


DEFAULT_KEYWORDS: Dict[Intent, List[str]] = {
    Intent.ADD: ADD_KEYWORDS,
    Intent.REMOVE: REMOVE_KEYWORDS,
    Intent.FIND: FIND_KEYWORDS,
}

# checked in this order, first hit wins
PRIORITY: Tuple[Intent, ...] = (Intent.ADD, Intent.REMOVE, Intent.FIND)


def classify(text: str, keywords: Optional[Dict[Intent, Sequence[str]]] = None) -> Intent:
    kw = keywords or DEFAULT_KEYWORDS
    t = text.lower()
    for intent in PRIORITY:
        if any(k in t for k in kw.get(intent, ())):
            return intent
    return Intent.UNRECOGNIZED
