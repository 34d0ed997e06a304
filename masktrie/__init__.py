"""masktrie -- prefix trie with bitmask-pruned fuzzy search."""

from masktrie.bitmask import char_mask, key_mask, mask_letters, validate_key
from masktrie.constants import ALPHABET, FULL_MASK
from masktrie.dictionary import WordList
from masktrie.errors import InvalidKey, NotFound, TrieError
from masktrie.search import collect, fuzzy_collect
from masktrie.trie import Trie, TrieNode

__all__ = [
    "ALPHABET",
    "FULL_MASK",
    "InvalidKey",
    "NotFound",
    "Trie",
    "TrieError",
    "TrieNode",
    "WordList",
    "char_mask",
    "collect",
    "fuzzy_collect",
    "key_mask",
    "mask_letters",
    "validate_key",
]
