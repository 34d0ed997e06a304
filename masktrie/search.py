"""Trie traversals: plain enumeration and mask-pruned fuzzy matching.

Both walks use an explicit stack, so key length is never limited by
the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from masktrie.bitmask import char_mask

if TYPE_CHECKING:
    from masktrie.trie import TrieNode

logger = logging.getLogger("masktrie.search")


def collect(node: "TrieNode", prefix: str) -> list[str]:
    """Every key at or below *node*, each spelled as *prefix* + path.

    Children are visited in sorted order, so the result is
    lexicographic.
    """
    keys: list[str] = []
    stack: list[tuple[TrieNode, str]] = [(node, prefix)]
    while stack:
        current, word = stack.pop()
        if current.is_terminal:
            keys.append(word)
        for ch in sorted(current.children, reverse=True):
            stack.append((current.children[ch], word + ch))
    return keys


def fuzzy_collect(node: "TrieNode", prefix: str, query_mask: int) -> list[str]:
    """Keys below *node* whose letters include every bit of *query_mask*.

    ``pending`` tracks the query letters not yet seen on the path. A
    child whose mask misses any pending letter cannot lead to a match
    and is skipped along with its whole subtree. Once nothing is
    pending, the rest of the subtree matches as is.
    """
    keys: list[str] = []
    pruned = 0
    stack: list[tuple[TrieNode, str, int]] = [(node, prefix, query_mask)]
    while stack:
        current, word, pending = stack.pop()
        if not pending:
            keys.extend(collect(current, word))
            continue
        for ch, child in current.children.items():
            if (child.mask ^ pending) & pending:
                pruned += 1
                continue
            stack.append((child, word + ch, pending & ~char_mask(ch)))
    logger.debug("fuzzy_collect: %d keys, %d branches pruned", len(keys), pruned)
    return keys
