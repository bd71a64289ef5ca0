"""Results of interpreting one utterance.

Every outcome knows the lines of text a renderer should show
(``messages``) and its JSON shape (``to_dict``). ``NoOp`` shows nothing.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from voice_shopping.store import ShoppingItem


@dataclass
class Added:
    name: str
    quantity: int
    total: int
    tips: List[str] = field(default_factory=list)
    # number words left in the name, e.g. ["five"] for "five apples"
    quirks: List[str] = field(default_factory=list)
    kind = "added"

    def messages(self) -> List[str]:
        return [f"Added {self.quantity} {self.name}"]

    def to_dict(self) -> Dict:
        return {"kind": self.kind, "name": self.name, "quantity": self.quantity,
                "total": self.total, "tips": list(self.tips), "quirks": list(self.quirks)}


@dataclass
class Removed:
    name: str
    count: int = 0
    kind = "removed"

    def messages(self) -> List[str]:
        # acknowledged even when nothing matched
        return [f"🗑️ Removed {self.name}"]

    def to_dict(self) -> Dict:
        return {"kind": self.kind, "name": self.name, "count": self.count}


@dataclass
class SearchResult:
    term: str
    found: Optional[ShoppingItem] = None
    kind = "search"

    def messages(self) -> List[str]:
        if self.found:
            return [f"🔍 You already have {self.found.quantity} × {self.found.name} in your list."]
        return [f'🔍 "{self.term}" not in your list. Would you like to add it?']

    def to_dict(self) -> Dict:
        return {"kind": self.kind, "term": self.term,
                "found": self.found.to_dict() if self.found else None}


@dataclass
class Unrecognized:
    text: str
    kind = "unrecognized"

    def messages(self) -> List[str]:
        return [f'🤔 Didn\'t understand: "{self.text}"']

    def to_dict(self) -> Dict:
        return {"kind": self.kind, "text": self.text}


@dataclass
class NoOp:
    intent: str
    kind = "noop"

    def messages(self) -> List[str]:
        return []

    def to_dict(self) -> Dict:
        return {"kind": self.kind, "intent": self.intent}
