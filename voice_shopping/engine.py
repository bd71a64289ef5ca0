"""Turn one transcript into a list change and an outcome.

A ``CommandEngine`` holds no lock. Call ``interpret`` for one utterance at
a time; overlapping calls against the same store are not supported.
"""
from __future__ import annotations
import logging
from typing import Dict, Optional, Sequence, Union

from voice_shopping.config import Settings
from voice_shopping.intents import DEFAULT_KEYWORDS, Intent, classify
from voice_shopping.matching import MatchPolicy, SubstringMatch, get_policy
from voice_shopping.normalizer import normalize_name, number_word_tokens
from voice_shopping.outcomes import Added, NoOp, Removed, SearchResult, Unrecognized
from voice_shopping.quantity import extract_quantity
from voice_shopping.store import ShoppingListStore
from voice_shopping.suggestions import SuggestionEngine
from voice_shopping.tables import NUMBER_WORDS

logger = logging.getLogger(__name__)

Outcome = Union[Added, Removed, SearchResult, Unrecognized, NoOp]


class CommandEngine:
    def __init__(self, store: Optional[ShoppingListStore] = None,
                 suggestions: Optional[SuggestionEngine] = None,
                 keywords: Optional[Dict[Intent, Sequence[str]]] = None,
                 number_words: Optional[Dict[str, int]] = None,
                 number_policy: Optional[MatchPolicy] = None,
                 strip_number_words: bool = False):
        self.store = store if store is not None else ShoppingListStore()
        self.suggestions = suggestions or SuggestionEngine()
        self.keywords = keywords or DEFAULT_KEYWORDS
        self.number_words = NUMBER_WORDS if number_words is None else number_words
        self.number_policy = number_policy or SubstringMatch()
        self.strip_number_words = strip_number_words

    @classmethod
    def from_settings(cls, settings: Settings) -> "CommandEngine":
        return cls(
            store=ShoppingListStore(policy=get_policy(settings.store_match)),
            number_policy=get_policy(settings.number_word_match),
            strip_number_words=settings.strip_number_words,
        )

    def _name(self, text: str, intent: Intent) -> str:
        extra = self.number_words if self.strip_number_words else None
        return normalize_name(text, self.keywords[intent], strip_number_words=extra)

    def interpret(self, transcript: str) -> Outcome:
        intent = classify(transcript, self.keywords)
        logger.debug("Classified %r as %s", transcript, intent.value)

        if intent is Intent.ADD:
            qty = extract_quantity(transcript, self.number_words, self.number_policy)
            name = self._name(transcript, intent)
            if not name:
                return NoOp(intent=intent.value)
            total = self.store.add_or_merge(name, qty)
            quirks = number_word_tokens(name, self.number_words)
            if quirks:
                logger.info("Number word(s) %s kept in item name %r", quirks, name)
            return Added(name=name, quantity=qty, total=total,
                         tips=self.suggestions.suggest(name), quirks=quirks)

        if intent is Intent.REMOVE:
            name = self._name(transcript, intent)
            if not name:
                return NoOp(intent=intent.value)
            count = self.store.remove_matching(name)
            return Removed(name=name, count=count)

        if intent is Intent.FIND:
            term = self._name(transcript, intent)
            if not term:
                return NoOp(intent=intent.value)
            return SearchResult(term=term, found=self.store.find_matching(term))

        logger.info("Didn't understand %r", transcript)
        return Unrecognized(text=transcript)
