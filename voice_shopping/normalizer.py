from __future__ import annotations
import re
from typing import Iterable, Optional

DIGITS_PAT = re.compile(r"\d+")
SPACES_PAT = re.compile(r"\s+")


def keyword_pattern(keywords: Iterable[str]) -> re.Pattern:
    return re.compile("|".join(re.escape(k) for k in keywords), re.I)


def normalize_name(text: str, keywords: Iterable[str],
                   strip_number_words: Optional[Iterable[str]] = None) -> str:
    """Strip intent keywords and digit runs from ``text``.

    Keywords are removed wherever they occur, including inside other words
    ("paddle" loses its "add"). Number words such as "five" are kept unless
    ``strip_number_words`` names them.
    """
    name = keyword_pattern(keywords).sub("", text)
    name = DIGITS_PAT.sub("", name)
    if strip_number_words:
        words = set(strip_number_words)
        name = " ".join(tok for tok in name.split() if tok.lower() not in words)
    else:
        name = name.strip()
    return name


def number_word_tokens(name: str, number_words: Iterable[str]) -> list:
    words = set(number_words)
    return [tok for tok in SPACES_PAT.split(name) if tok in words]
