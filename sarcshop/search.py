"""Case-insensitive substring search over item names (Knuth-Morris-Pratt)."""

from __future__ import annotations

from collections.abc import Iterable

from sarcshop.inventory import ItemInfo


def _fold(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def build_lps(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for each prefix of pattern."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> bool:
    """Whether pattern occurs in text, ignoring ASCII case.

    An empty pattern matches any non-empty text.
    """
    if not pattern:
        return bool(text)
    lps = build_lps(pattern)
    folded_text = _fold(text)
    folded_pattern = _fold(pattern)
    n, m = len(text), len(pattern)
    i = j = 0
    while i < n:
        if folded_text[i] == folded_pattern[j]:
            i += 1
            j += 1
        if j == m:
            return True
        if i < n and folded_text[i] != folded_pattern[j]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return False


def search_items(keyword: str, items: Iterable[ItemInfo]) -> list[ItemInfo]:
    """Items whose name contains the keyword, or is contained in it."""
    return [
        item
        for item in items
        if kmp_search(item.name, keyword) or kmp_search(keyword, item.name)
    ]