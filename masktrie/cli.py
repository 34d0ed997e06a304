"""Command line front end for masktrie."""

from __future__ import annotations

import argparse
import logging
import time

from masktrie.constants import LOG_FORMAT
from masktrie.dictionary import WordList
from masktrie.errors import TrieError
from masktrie.trie import Trie

log = logging.getLogger("masktrie")

SHELL_HELP = """\
Commands:
  add WORD [META]      -- store a word with optional metadata
  remove WORD          -- delete a word
  find WORD            -- show a word's metadata
  prefix PREFIX        -- words starting with PREFIX
  fuzzy LETTERS        -- words containing all LETTERS, any order
  keys                 -- every stored word
  size                 -- number of stored words
  help                 -- this text
  done                 -- leave the shell
"""


def print_keys(keys: list[str], limit: int | None = None) -> None:
    shown = keys if limit is None else keys[:limit]
    for k in shown:
        print(k)
    if len(shown) < len(keys):
        print(f"... {len(keys) - len(shown)} more")


def run_command(trie: Trie, cmd: str, arg: str | None, limit: int | None = None) -> int:
    """Run one lookup command; returns the process exit status."""
    t0 = time.time()
    try:
        if cmd == "find":
            node = trie.find(arg)
            print(f"{arg}: {node.meta!r}")
            return 0
        if cmd == "prefix":
            keys = trie.prefix_search(arg)
        elif cmd == "fuzzy":
            keys = trie.fuzzy_search(arg)
        elif cmd == "keys":
            keys = trie.keys()
        else:
            raise ValueError(f"unknown command {cmd!r}")
    except TrieError as exc:
        print(f"error: {exc}")
        return 1

    log.debug("%s %r: %d results in %.4fs", cmd, arg, len(keys), time.time() - t0)
    print_keys(keys, limit)
    return 0


def run_shell(trie: Trie, limit: int | None = None) -> None:
    """Interactive session over *trie*."""
    print("\n" + "=" * 60)
    print("  MASKTRIE -- Interactive Shell")
    print("=" * 60)
    print()
    print(SHELL_HELP)

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        parts = inp.split(maxsplit=2)
        cmd = parts[0].lower()

        if cmd == "done":
            break
        if cmd == "help":
            print(SHELL_HELP)
            continue
        if cmd == "size":
            print(f"  {len(trie)} words")
            continue
        if cmd == "keys":
            run_command(trie, "keys", None, limit)
            continue

        if len(parts) < 2:
            print("  Format: COMMAND ARG  (type 'help' for the list)")
            continue
        arg = parts[1]

        try:
            if cmd == "add":
                meta = parts[2] if len(parts) > 2 else None
                trie.add(arg, meta)
                print(f"  Added '{arg}'")
            elif cmd == "remove":
                trie.remove(arg)
                print(f"  Removed '{arg}'")
            elif cmd in ("find", "prefix", "fuzzy"):
                run_command(trie, cmd, arg, limit)
            else:
                print(f"  Unknown command '{cmd}'  (type 'help' for the list)")
        except TrieError as exc:
            print(f"  error: {exc}")


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="masktrie",
        description="masktrie -- prefix and fuzzy word search over a word list",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line, optional TAB metadata)")
    parser.add_argument("--limit", type=positive_int, default=None,
                        help="Print at most this many results")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("find", help="Show a word's metadata").add_argument("key")
    sub.add_parser("prefix", help="Words starting with PREFIX").add_argument("prefix")
    sub.add_parser("fuzzy", help="Words containing every letter of QUERY").add_argument("query")
    sub.add_parser("keys", help="Every stored word")
    sub.add_parser("shell", help="Interactive session")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    words = WordList(args.dict)

    if args.command == "shell":
        run_shell(words.trie, args.limit)
        return 0

    dest = {"find": "key", "prefix": "prefix", "fuzzy": "query"}.get(args.command)
    arg = getattr(args, dest) if dest else None
    return run_command(words.trie, args.command, arg, args.limit)
