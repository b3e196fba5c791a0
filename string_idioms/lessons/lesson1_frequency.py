"""
Lesson 1 - FREQUENCY: Character Counting
========================================
Build a table mapping every distinct character of a text to the number
of times it occurs. The same table answers a family of interview
questions: "which character appears most?", "are these two words
anagrams?", "does any character repeat?".

Python iterates a ``str`` by code point, so a symbol outside the Basic
Multilingual Plane (an emoji, say) is one key with one count, never two
half-characters. The counts therefore always sum to ``len(text)``.
"""

from collections import Counter
from typing import Dict


def count_characters(text: str) -> Dict[str, int]:
    """Map each character of `text` to its occurrence count. Empty text gives {}."""
    return dict(Counter(text))


def most_common_character(text: str) -> str:
    """
    Return the character with the highest count.
    Ties go to the character that appears first in `text`.
    """
    if not text:
        raise ValueError("Cannot pick the most common character of empty text.")
    table = count_characters(text)
    # dicts keep insertion order, so max() returns the earliest of equal counts
    return max(table, key=table.get)


def is_anagram(first: str, second: str,
               ignore_case: bool = True, letters_only: bool = True) -> bool:
    """
    True when both texts use exactly the same characters the same number
    of times. By default case is folded and anything that is not a letter
    or digit is ignored, so "rail safety" and "Fairy tales!" match.
    """
    return _anagram_key(first, ignore_case, letters_only) == \
        _anagram_key(second, ignore_case, letters_only)


def _anagram_key(text: str, ignore_case: bool, letters_only: bool) -> Dict[str, int]:
    if ignore_case:
        text = text.casefold()
    if letters_only:
        text = "".join(ch for ch in text if ch.isalnum())
    return count_characters(text)
