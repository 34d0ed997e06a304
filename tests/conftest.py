import pytest

from masktrie import Trie
from masktrie.bitmask import char_mask


def mask_violations(trie: Trie) -> list[str]:
    """Paths whose node mask differs from own bit | children's masks."""
    bad = []
    stack = [(trie.root, "")]
    while stack:
        node, path = stack.pop()
        expected = char_mask(node.char)
        for ch, child in node.children.items():
            expected |= child.mask
            stack.append((child, path + ch))
        if node.mask != expected:
            bad.append(path)
    return bad


def dead_branches(trie: Trie) -> list[str]:
    """Non-root leaves that are not the end of any key."""
    bad = []
    stack = [(trie.root, "")]
    while stack:
        node, path = stack.pop()
        if node is not trie.root and not node.children and not node.is_terminal:
            bad.append(path)
        for ch, child in node.children.items():
            stack.append((child, path + ch))
    return bad


@pytest.fixture(scope="session")
def find_mask_violations():
    return mask_violations


@pytest.fixture(scope="session")
def find_dead_branches():
    return dead_branches


@pytest.fixture
def check_trie():
    def _check(trie: Trie) -> None:
        assert mask_violations(trie) == []
        assert dead_branches(trie) == []

    return _check


@pytest.fixture
def animals() -> Trie:
    trie = Trie()
    trie.add("cat", 1)
    trie.add("car", 2)
    trie.add("dog", 3)
    return trie
