"""Letter bitmasks used to prune fuzzy searches.

Bit ``i`` of a mask is set when letter ``ALPHABET[i]`` is present.
"""

from __future__ import annotations

from masktrie.constants import ALPHABET, ALPHABET_SIZE
from masktrie.errors import InvalidKey

_BITS: dict[str, int] = {ch: 1 << i for i, ch in enumerate(ALPHABET)}


def char_mask(ch: str) -> int:
    """Bit for a single letter. The root's empty char has no bit."""
    if ch == "":
        return 0
    try:
        return _BITS[ch]
    except KeyError:
        raise InvalidKey(ch) from None


def key_mask(key: str) -> int:
    """OR of the bits of every letter in *key*."""
    m = 0
    for ch in key:
        m |= char_mask(ch)
    return m


def validate_key(key: object, allow_empty: bool = False) -> str:
    """Return *key* unchanged, or raise InvalidKey if it can't be stored."""
    if not isinstance(key, str):
        raise InvalidKey(key, "keys must be str")
    if not key and not allow_empty:
        raise InvalidKey(key, "empty key")
    for ch in key:
        if ch not in _BITS:
            raise InvalidKey(key, f"unsupported character {ch!r}")
    return key


def mask_letters(mask: int) -> str:
    """Letters whose bits are set, in alphabet order."""
    return "".join(ALPHABET[i] for i in range(ALPHABET_SIZE) if mask >> i & 1)
