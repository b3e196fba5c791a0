"""
string_idioms - Live Demo: All Five Lessons
===========================================
Run:  python examples/demo_all_lessons.py

Walks through every lesson on a real message, printing each result.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from string_idioms.lessons.lesson1_frequency    import count_characters, most_common_character, is_anagram
from string_idioms.lessons.lesson2_splitter     import split_characters, join_surrogate_pairs
from string_idioms.lessons.lesson3_alphabet     import generate_alphabet, letter_position
from string_idioms.lessons.lesson4_rotation     import rotate_position
from string_idioms.lessons.lesson5_substitution import caesar_shift, rot13, VigenereCipher

LINE = "═" * 70
MSG  = "Meet me at the usual place \U0001F680"

def header(lesson, name):
    print(f"\n{LINE}")
    print(f"  Lesson {lesson} - {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value != '' else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  string_idioms - Five-Lesson Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    header(1, "FREQUENCY")
    table = count_characters(MSG)
    ok("Table", table)
    ok("Sum of counts == len(message)", sum(table.values()) == len(MSG))
    ok("Most common", repr(most_common_character(MSG)))
    ok("'rail safety' vs 'fairy tales' anagram", is_anagram("rail safety", "fairy tales"))

    header(2, "SPLITTING")
    parts = split_characters(MSG)
    ok("Characters", len(parts))
    ok("Last character", parts[-1])
    ok("Rejoins exactly", "".join(parts) == MSG)
    ok("Surrogate pair joined", join_surrogate_pairs("\ud83d\ude80") == "\U0001F680")

    header(3, "ALPHABET")
    alphabet = generate_alphabet()
    ok("Letters", "".join(alphabet))
    ok("Position of 'u'", letter_position("u"))

    header(4, "ROTATION")
    ok("rotate_position(20, 13)", rotate_position(20, 13))
    ok("rotate_position(0, -1)", rotate_position(0, -1))
    ok("rotate_position(0, 53)", rotate_position(0, 53))

    header(5, "SUBSTITUTION")
    ok("Caesar +3", caesar_shift(MSG, 3))
    ok("ROT13", rot13(MSG))
    ok("ROT13 twice", rot13(rot13(MSG)) == MSG)
    v  = VigenereCipher("LEMON")
    ct = v.encrypt(MSG)
    ok("Vigenère encrypted", ct)
    ok("Vigenère decrypted", v.decrypt(ct))

    print(f"\n{LINE}")
    print("  All lessons: done")
    print(LINE + "\n")
