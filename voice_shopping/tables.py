from __future__ import annotations
from typing import Dict, List

ADD_KEYWORDS = ["add", "buy", "need"]
REMOVE_KEYWORDS = ["remove", "delete"]
FIND_KEYWORDS = ["find", "search"]

# declaration order matters: the first word found wins
NUMBER_WORDS: Dict[str, int] = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11, "twelve": 12,
}

CONTEXTUAL_TIPS: Dict[str, str] = {
    "bread": "It looks like you're running low on bread 🥖",
    "milk": "You usually buy milk. Do you need some today? 🥛",
    "apples": "Fresh apples are in season 🍎",
    "rice": "Basmati rice is on sale at ₹90/kg 🍚",
}

SUBSTITUTE_TIPS: Dict[str, str] = {
    "milk": "How about trying almond milk instead? 🌱",
    "sugar": "Consider jaggery as a healthier alternative 🍯",
}

SEASONAL_TIPS: List[str] = [
    "🍌 Bananas are fresh this week",
    "🥬 Spinach is healthy and on sale",
]

CONTEXTUAL_MARKER = "💡"
SUBSTITUTE_MARKER = "🔄"
