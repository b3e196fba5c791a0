"""
Lesson 2 - SPLITTING: Text to Characters
========================================
Turn a string into the ordered sequence of its characters.

Splitting by raw UTF-16 storage unit (what ``str.split("")`` does in
some languages) cuts astral-plane symbols into unpaired surrogate
fragments. A Python ``str`` is a sequence of code points already, so
iterating it is scalar-safe and ``"".join`` of the pieces always gives
back the original text.

Text that was decoded from UTF-16 units without pairing them can still
carry surrogate halves as separate code points; ``join_surrogate_pairs``
repairs that before splitting.
"""

import logging
from typing import Iterator, List

logger = logging.getLogger(__name__)


def iter_characters(text: str) -> Iterator[str]:
    """Lazily yield the code points of `text` in order. Each call starts over."""
    yield from text


def split_characters(text: str) -> List[str]:
    """Materialized `iter_characters`: "".join(result) == text."""
    return list(iter_characters(text))


def join_surrogate_pairs(text: str) -> str:
    """
    Combine each high/low surrogate pair in `text` into the scalar
    character it encodes. Lone surrogates are left as they are.
    """
    # utf-16 decoding pairs surrogates; surrogatepass lets lone halves survive
    raw = text.encode("utf-16-le", "surrogatepass")
    joined = raw.decode("utf-16-le", "surrogatepass")
    if len(joined) != len(text):
        logger.debug(f"Joined {len(text) - len(joined)} surrogate pair(s)")
    return joined
