"""
Tokenization of free-text descriptions for keyword search.
"""

import unicodedata
from typing import Callable, Iterable


def is_word_separator(char: str) -> bool:
    """Whitespace and any Unicode punctuation (categories Pc, Pd, Ps, Pe, Pi, Pf, Po)."""
    return char.isspace() or unicodedata.category(char).startswith("P")


def tokenize(text: str, is_separator: Callable[[str], bool] = is_word_separator) -> list[str]:
    tokens = []
    current = []
    for char in text:
        if is_separator(char):
            if current:
                tokens.append("".join(current).lower())
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current).lower())
    return tokens


def normalize_keywords(keywords: Iterable[str]) -> frozenset[str]:
    if isinstance(keywords, str):
        keywords = (keywords,)
    normalized = (keyword.lower().strip() for keyword in keywords)
    return frozenset(keyword for keyword in normalized if keyword)
