"""
string_idioms
=============
String-manipulation idioms for interview preparation.
From counting characters to rotating them through a substitution cipher.

Lessons:
    1  FREQUENCY    - Character counting (max char, anagrams)
    2  SPLITTING    - Text to characters, surrogate-safe
    3  ALPHABET     - a-z generated from code points
    4  ROTATION     - Modulus wrap-around over the alphabet
    5  SUBSTITUTION - Caesar, ROT13 and Vigenère built on rotation

License: Apache 2.0
"""

__version__  = "1.0.0"

from .lessons.lesson1_frequency    import count_characters, most_common_character, is_anagram
from .lessons.lesson2_splitter     import iter_characters, split_characters, join_surrogate_pairs
from .lessons.lesson3_alphabet     import ALPHABET_SIZE, generate_alphabet, letter_position
from .lessons.lesson4_rotation     import rotate_position, rotate_letter
from .lessons.lesson5_substitution import caesar_shift, rot13, VigenereCipher

__all__ = [
    "count_characters",
    "most_common_character",
    "is_anagram",
    "iter_characters",
    "split_characters",
    "join_surrogate_pairs",
    "ALPHABET_SIZE",
    "generate_alphabet",
    "letter_position",
    "rotate_position",
    "rotate_letter",
    "caesar_shift",
    "rot13",
    "VigenereCipher",
]
