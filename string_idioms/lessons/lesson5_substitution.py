"""
Lesson 5 - SUBSTITUTION: Ciphers from Rotation
==============================================
Whole-text ciphers assembled from the rotation step of Lesson 4.

    caesar_shift   every letter moves by the same offset
    rot13          Caesar with offset 13, its own inverse
    VigenereCipher each letter moves by the matching letter of a key

Only Latin letters are rotated. Digits, punctuation, whitespace and
any other symbol pass through unchanged, and in Vigenère they do not
consume a key letter.
"""

import logging
from typing import List

from .lesson3_alphabet import letter_position
from .lesson4_rotation import rotate_letter

logger = logging.getLogger(__name__)


def _is_latin(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def caesar_shift(text: str, shift: int) -> str:
    """Shift every Latin letter of `text` by `shift` places, keeping case."""
    return "".join(rotate_letter(ch, shift) if _is_latin(ch) else ch for ch in text)


def rot13(text: str) -> str:
    """ROT13 convenience wrapper around the Caesar shift."""
    return caesar_shift(text, 13)


class VigenereCipher:
    """
    Classic Vigenère polyalphabetic cipher.

    The key repeats over the letters of the message; key letter 'a'
    shifts by 0, 'b' by 1, and so on. Case of the message is kept.
    """

    def __init__(self, key: str):
        if not key or not all(_is_latin(c) for c in key):
            raise ValueError("Vigenère key must be non-empty and contain only letters a-z.")
        self._shifts = [letter_position(c) for c in key]
        logger.debug(f"Vigenère key period={len(self._shifts)}")

    @property
    def period(self) -> int:
        return len(self._shifts)

    def _apply(self, text: str, direction: int) -> str:
        result: List[str] = []
        k_idx = 0
        for ch in text:
            if _is_latin(ch):
                shift = self._shifts[k_idx % self.period]
                result.append(rotate_letter(ch, direction * shift))
                k_idx += 1
            else:
                result.append(ch)
        return "".join(result)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-letters pass through."""
        return self._apply(plaintext, 1)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        return self._apply(ciphertext, -1)

    def __repr__(self):
        return f"VigenereCipher(period={self.period})"
