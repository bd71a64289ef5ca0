from voice_shopping.engine import CommandEngine
from voice_shopping.intents import Intent, classify
from voice_shopping.outcomes import Added, NoOp, Removed, SearchResult, Unrecognized
from voice_shopping.store import ShoppingItem, ShoppingListStore
from voice_shopping.suggestions import SuggestionEngine

__all__ = [
    "CommandEngine",
    "Intent",
    "classify",
    "Added",
    "NoOp",
    "Removed",
    "SearchResult",
    "Unrecognized",
    "ShoppingItem",
    "ShoppingListStore",
    "SuggestionEngine",
]
