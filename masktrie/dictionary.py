"""Word list loading into a trie."""

from __future__ import annotations

import logging
import os
from typing import Any

from masktrie.constants import DEFAULT_WORD_PATHS, MAX_WORD_LENGTH, MIN_WORD_LENGTH, MINIMAL_WORDS
from masktrie.errors import InvalidKey
from masktrie.trie import Trie, TrieNode

log = logging.getLogger("masktrie.words")


def parse_line(line: str) -> tuple[str, str | None]:
    """Split a ``word`` or ``word<TAB>metadata`` line."""
    word, sep, meta = line.rstrip("\r\n").partition("\t")
    return word.strip().lower(), (meta.strip() if sep else None)


class WordList:
    """Trie filled from a word list file, falling back to a small built-in list."""

    def __init__(self, dict_path: str | None = None, search_defaults: bool = True):
        self.trie = Trie()
        self.source: str | None = None
        self.skipped = 0
        self._load(dict_path, search_defaults)

    def _load(self, dict_path: str | None, search_defaults: bool) -> None:
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        if search_defaults:
            search_paths.extend(DEFAULT_WORD_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                self.skipped = 0
                # undecodable bytes become U+FFFD and fail key validation
                with open(path, "r", encoding="utf-8", errors="replace") as f:
                    for line in f:
                        self.add_line(line)
                if len(self.trie):
                    self.source = path
                    log.info("Loaded %s words from %s (%d skipped)",
                             f"{len(self.trie):,}", path, self.skipped)
                    return
                log.debug("No usable words in %s", path)

        log.warning("No word list found -- using built-in minimal word list.")
        self._load_minimal()

    def _load_minimal(self) -> None:
        for w in sorted(MINIMAL_WORDS):
            self.trie.add(w)

    def add_line(self, line: str) -> bool:
        """Add one word list line; returns False if it was skipped."""
        word, meta = parse_line(line)
        if not word:
            return False
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            self.skipped += 1
            log.debug("Skipping %r: length %d out of range", word, len(word))
            return False
        try:
            self.trie.add(word, meta)
        except InvalidKey as exc:
            self.skipped += 1
            log.debug("Skipping %r: %s", word, exc.reason)
            return False
        return True

    def find(self, word: str) -> TrieNode:
        return self.trie.find(word)

    def prefix_search(self, prefix: str) -> list[str]:
        return self.trie.prefix_search(prefix)

    def fuzzy_search(self, query: str) -> list[str]:
        return self.trie.fuzzy_search(query)

    def meta(self, word: str) -> Any:
        return self.trie.get(word)

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word: str) -> bool:
        return word in self.trie
