"""Alphabet, bitmask and word list constants."""

from __future__ import annotations

import os
import string

# Alphabet

# Only lowercase ASCII letters have a bit in a node's reachability mask.
ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)  # 26
FULL_MASK = (1 << ALPHABET_SIZE) - 1

# Word list loading

MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 64

DEFAULT_WORD_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

# Used when no word list file can be found.
# fmt: off
MINIMAL_WORDS: frozenset[str] = frozenset({
    "act", "air", "and", "ant", "arc", "art", "bat", "bar", "bear", "bird",
    "car", "card", "cart", "cat", "coat", "cot", "dart", "dog", "dot", "ear",
    "eat", "fact", "fat", "god", "hat", "heart", "lamp", "map", "mat", "nap",
    "oat", "pan", "pat", "rat", "scar", "star", "tab", "tar", "taco", "tea",
    "tree", "trie", "zebra",
})
# fmt: on

# Logging

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
