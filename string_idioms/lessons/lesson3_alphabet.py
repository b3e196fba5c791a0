"""
Lesson 3 - ALPHABET: Generated, Not Typed
=========================================
Produce the 26 lowercase Latin letters from their code points instead
of writing them out. A hand-typed alphabet with one letter missing or
swapped still looks fine and raises nothing; every cipher built on it
is then silently wrong.
"""

from typing import Tuple

ALPHABET_SIZE = 26
FIRST_LETTER  = ord("a")


def generate_alphabet() -> Tuple[str, ...]:
    """Return ('a', 'b', ..., 'z'), computed from ord('a') upward."""
    return tuple(chr(FIRST_LETTER + i) for i in range(ALPHABET_SIZE))


def letter_position(letter: str) -> int:
    """Zero-based alphabet position of a single Latin letter, either case."""
    if not isinstance(letter, str):
        raise TypeError(f"Expected a str, got {type(letter).__name__}.")
    if len(letter) != 1:
        raise ValueError(f"Expected a single character, got {letter!r}.")
    # range check before lower(): some non-ASCII letters fold to ASCII
    if not ("a" <= letter <= "z" or "A" <= letter <= "Z"):
        raise ValueError(f"{letter!r} is not a Latin letter a-z.")
    return ord(letter.lower()) - FIRST_LETTER
