"""Prefix trie with per-node letter masks for fast fuzzy lookups."""

from __future__ import annotations

import logging
import weakref
from typing import Any, Iterator

from masktrie.bitmask import char_mask, key_mask, mask_letters, validate_key
from masktrie.errors import InvalidKey, NotFound
from masktrie.search import collect, fuzzy_collect

log = logging.getLogger("masktrie")


class TrieNode:
    """Single node in the trie.

    ``mask`` holds a bit for this node's own letter and for every letter
    anywhere below it. ``parent`` is a weak back-reference; the
    ``children`` dicts are the only owning links.
    """

    __slots__ = ("char", "children", "is_terminal", "meta", "mask", "_parent", "__weakref__")

    def __init__(self, char: str = "", mask: int = 0, parent: TrieNode | None = None):
        self.char = char
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False
        self.meta: Any = None
        self.mask = mask
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> TrieNode | None:
        return self._parent() if self._parent is not None else None

    def new_child(self, char: str, mask: int = 0) -> TrieNode:
        """Create a child under *char* and return it.

        Ancestor masks are left alone; keeping them current is the
        caller's job.
        """
        child = TrieNode(char, mask, self)
        self.children[char] = child
        return child

    def remove_child(self, char: str) -> None:
        """Detach the child under *char* and repair masks up to the root."""
        child = self.children.pop(char, None)
        if child is None:
            raise NotFound(char)
        child._parent = None

        node: TrieNode | None = self
        while node is not None:
            node.recalculate_mask()
            node = node.parent

    def recalculate_mask(self) -> int:
        m = char_mask(self.char)
        for child in self.children.values():
            m |= child.mask
        self.mask = m
        return m

    def __repr__(self) -> str:
        term = "*" if self.is_terminal else ""
        return f"<TrieNode {self.char!r}{term} letters={mask_letters(self.mask)!r} children={sorted(self.children)}>"


class Trie:
    """Prefix trie mapping lowercase keys to metadata.

    Supports exact lookup, removal with pruning, prefix enumeration and
    fuzzy search by letter set.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    # mutation

    def add(self, key: str, meta: Any = None) -> TrieNode:
        """Store *key* with *meta* and return its terminal node.

        Adding a key that is already stored replaces its metadata.
        """
        validate_key(key)

        # suffix[i] covers every letter of key[i:]
        suffix = [0] * (len(key) + 1)
        for i in range(len(key) - 1, -1, -1):
            suffix[i] = suffix[i + 1] | char_mask(key[i])

        node = self.root
        for i, ch in enumerate(key):
            node.mask |= suffix[i]
            child = node.children.get(ch)
            if child is None:
                child = node.new_child(ch, suffix[i])
            node = child

        if node.is_terminal:
            log.debug("Updated metadata for %r", key)
        else:
            node.is_terminal = True
            self._size += 1
            log.debug("Added %r (size=%d)", key, self._size)
        node.meta = meta
        return node

    def remove(self, key: str) -> None:
        """Remove *key*, pruning nodes that no longer lead to any key."""
        node = self.find(key)
        node.is_terminal = False
        node.meta = None
        self._size -= 1

        if node.children:
            # still a prefix of other keys; terminal state has no mask bit
            log.debug("Removed %r (size=%d, nothing pruned)", key, self._size)
            return

        # climb to the highest node that only existed for this key
        top = node
        pruned = 1
        while True:
            parent = top.parent
            if parent is self.root or parent.is_terminal or len(parent.children) > 1:
                break
            top = parent
            pruned += 1
        parent.remove_child(top.char)
        log.debug("Removed %r (size=%d, pruned %d nodes)", key, self._size, pruned)

    # lookup

    def find(self, key: str) -> TrieNode:
        """Terminal node for *key*; raises NotFound for absent keys and bare prefixes."""
        node = self._walk(key)
        if node is None or not node.is_terminal:
            raise NotFound(key)
        return node

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self.find(key).meta
        except NotFound:
            return default

    def has_keys_with_prefix(self, prefix: str) -> bool:
        node = self._walk(prefix)
        # only the root can exist without a key below it
        return node is not None and (node is not self.root or self._size > 0)

    def keys(self) -> list[str]:
        return self.prefix_search("")

    def prefix_search(self, prefix: str) -> list[str]:
        """All stored keys starting with *prefix*, in lexicographic order."""
        node = self._walk(prefix)
        if node is None:
            return []
        return collect(node, prefix)

    def fuzzy_search(self, query: str) -> list[str]:
        """Stored keys containing every letter of *query*, in any order.

        Repeated letters in *query* count once. Results are ordered
        shortest first, then alphabetically.
        """
        validate_key(query, allow_empty=True)
        keys = fuzzy_collect(self.root, "", key_mask(query))
        keys.sort(key=lambda k: (len(k), k))
        log.debug("Fuzzy search %r matched %d keys", query, len(keys))
        return keys

    def _walk(self, s: str) -> TrieNode | None:
        if not isinstance(s, str):
            raise InvalidKey(s, "keys must be str")
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # container protocol

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        node = self._walk(key)
        return node is not None and node.is_terminal

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"<Trie size={self._size}>"
