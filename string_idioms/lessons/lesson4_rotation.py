"""
Lesson 4 - ROTATION: Modulus Wrap-Around
========================================
Shift a letter's alphabet position by a signed offset and wrap at the
26-letter boundary. This is the single step behind Caesar, ROT13 and
Vigenère.

    result = ((position + offset) mod 26 + 26) mod 26

Python's ``%`` already returns a value in ``[0, 26)`` for a positive
divisor, so a single reduction covers negative offsets too.
Offsets of any size and sign are accepted.
"""

from .lesson3_alphabet import ALPHABET_SIZE, generate_alphabet, letter_position


def rotate_position(position: int, offset: int) -> str:
    """
    Letter found `offset` places after alphabet `position`.
    rotate_position(20, 13) -> 'h', rotate_position(0, -1) -> 'z'.
    """
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (position, offset)):
        raise TypeError("position and offset must be integers.")
    if not 0 <= position < ALPHABET_SIZE:
        raise ValueError(f"position must be in 0..{ALPHABET_SIZE - 1}, got {position}.")
    return generate_alphabet()[(position + offset) % ALPHABET_SIZE]


def rotate_letter(letter: str, offset: int) -> str:
    """Rotate a single Latin letter by `offset`, keeping its case."""
    rotated = rotate_position(letter_position(letter), offset)
    return rotated.upper() if letter.isupper() else rotated
