from __future__ import annotations
from typing import Dict, List, Optional

from voice_shopping.tables import (
    CONTEXTUAL_MARKER,
    CONTEXTUAL_TIPS,
    SEASONAL_TIPS,
    SUBSTITUTE_MARKER,
    SUBSTITUTE_TIPS,
)


class SuggestionEngine:
    def __init__(self, contextual: Optional[Dict[str, str]] = None,
                 substitutes: Optional[Dict[str, str]] = None,
                 seasonal: Optional[List[str]] = None):
        self.contextual = CONTEXTUAL_TIPS if contextual is None else contextual
        self.substitutes = SUBSTITUTE_TIPS if substitutes is None else substitutes
        self.seasonal = SEASONAL_TIPS if seasonal is None else seasonal

    def suggest(self, name: str) -> List[str]:
        tips = []
        if name in self.contextual:
            tips.append(f"{CONTEXTUAL_MARKER} {self.contextual[name]}")
        if name in self.substitutes:
            tips.append(f"{SUBSTITUTE_MARKER} {self.substitutes[name]}")
        tips.extend(self.seasonal)
        return tips
