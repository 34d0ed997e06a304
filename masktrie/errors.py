"""Exceptions raised by the trie."""

from __future__ import annotations


class TrieError(Exception):
    """Base class for all trie errors."""


class NotFound(TrieError, KeyError):
    """The key is not stored in the trie."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"could not find key {self.key!r} in trie"


class InvalidKey(TrieError, ValueError):
    """The key contains something other than lowercase ASCII letters."""

    def __init__(self, key: object, reason: str = "only lowercase letters a-z are supported"):
        super().__init__(key, reason)
        self.key = key
        self.reason = reason

    def __str__(self) -> str:
        return f"invalid key {self.key!r}: {self.reason}"
