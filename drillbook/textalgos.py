"""String and array exercises: uniqueness, prefixes, palindromes, search, paths."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from typing import Any, Iterable, Optional, Sequence


def first_unique_char(s: str) -> int:
    """Index of the first character that occurs only once in ``s``, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Longest prefix shared by every string; empty when there is none."""
    words = list(strs)
    if not words:
        return ""
    prefix = []
    for chars in zip(*words):
        if any(char != chars[0] for char in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the earliest one wins a tie."""
    best_start, best_len = 0, 0
    for center in range(len(s)):
        for start, end in ((center, center), (center, center + 1)):
            while start >= 0 and end < len(s) and s[start] == s[end]:
                length = end - start + 1
                if length > best_len:
                    best_start, best_len = start, length
                start -= 1
                end += 1
    return s[best_start:best_start + best_len]


def longest_substring_length(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    window_start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= window_start:
            window_start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - window_start + 1)
    return best


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Index of ``target`` in the ascending sequence ``items``, or None."""
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return None


def simplify_path(path: str) -> str:
    """Canonical form of an absolute Unix-style path.

    Repeated slashes collapse, ``.`` is dropped, ``..`` climbs one directory
    but never above the root, and no trailing slash is kept.
    """
    if not path:
        raise ValueError("path must not be empty")
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)