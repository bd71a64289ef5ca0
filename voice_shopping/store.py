from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional

from voice_shopping.matching import MatchPolicy, SubstringMatch

logger = logging.getLogger(__name__)


@dataclass
class ShoppingItem:
    name: str
    quantity: int = 1

    def label(self) -> str:
        return f"{self.quantity} × {self.name}"

    def to_dict(self) -> Dict:
        return {"item": self.name, "quantity": self.quantity}


class ShoppingListStore:
    """Owns the shopping list entries, in insertion order.

    Callers only ever see copies of the stored items; all changes go
    through ``add_or_merge``, ``remove_matching`` and ``clear``.
    """

    def __init__(self, policy: Optional[MatchPolicy] = None):
        self.policy = policy or SubstringMatch()
        self._items: List[ShoppingItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ShoppingItem]:
        return iter(self.items())

    def _lookup(self, name: str) -> Optional[ShoppingItem]:
        for it in self._items:
            if it.name == name:
                return it
        return None

    def add_or_merge(self, name: str, qty: int = 1) -> int:
        if not name:
            raise ValueError("item name must not be empty")
        if qty < 1:
            raise ValueError(f"quantity must be positive, got {qty}")
        existing = self._lookup(name)
        if existing:
            existing.quantity += qty
            logger.info("Merged %d into %r, now %d", qty, name, existing.quantity)
            return existing.quantity
        self._items.append(ShoppingItem(name=name, quantity=qty))
        logger.info("Added %r with quantity %d", name, qty)
        return qty

    def remove_matching(self, term: str) -> int:
        keep = [it for it in self._items if not self.policy.contains(it.name, term)]
        removed = len(self._items) - len(keep)
        self._items = keep
        logger.info("Removed %d item(s) matching %r", removed, term)
        return removed

    def find_matching(self, term: str) -> Optional[ShoppingItem]:
        for it in self._items:
            if self.policy.contains(it.name, term):
                return replace(it)
        return None

    def get(self, name: str) -> Optional[ShoppingItem]:
        it = self._lookup(name)
        return replace(it) if it else None

    def items(self) -> List[ShoppingItem]:
        return [replace(it) for it in self._items]

    def remove(self, name: str) -> bool:
        before = len(self._items)
        self._items = [it for it in self._items if it.name != name]
        return len(self._items) < before

    def clear(self) -> None:
        self._items = []

    def to_dict(self) -> List[Dict]:
        return [dict(it.to_dict(), label=it.label()) for it in self._items]
