"""Puzzles over strings of letters and digits."""

from __future__ import annotations

from collections import Counter

MOD = 10**9 + 7


def max_rooms(s: str) -> int:
    """Rooms visited on a two-floor house whose staircases are marked by '1'."""
    n = len(s)
    first = s.find("1")
    if first == -1:
        return n
    best = n - first
    last = s.rfind("1")
    if last > 0:
        best = max(best, last + 1)
    return 2 * best


def cursor_length(x: int, s: str) -> int:
    """Length of the text modulo MOD after ``x`` cut-and-paste steps."""
    digits = [int(char) for char in s]
    length = len(s)
    if len(digits) < x:
        cut = 0
        while len(digits) < x:
            cut += 1
            if cut > len(digits):
                raise ValueError("the text never grows to the cursor position")
            tail = digits[cut:]
            digits.extend(tail * (digits[cut - 1] - 1))
    for position, digit in enumerate(digits[:x], start=1):
        if digit in (2, 3):
            length = (position + digit * (length - position)) % MOD
    return length


def _tile(prefix: str, n: int) -> str:
    return (prefix * (n // len(prefix) + 1))[:n]


def smallest_beautiful(digits: str, k: int) -> str:
    """Smallest number not below ``digits`` whose digits repeat with period ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    n = len(digits)
    candidate = _tile(digits[:k], n)
    if candidate >= digits:
        return candidate
    prefix = str(int(digits[:k]) + 1).zfill(k)
    return _tile(prefix, n)


def group_labs(n: int) -> list[list[int]]:
    """Split labs 1..n*n into n groups of n by filling them in a snake order."""
    groups: list[list[int]] = [[] for _ in range(n)]
    labs = iter(range(1, n * n + 1))
    for row in range(n):
        order = groups if row % 2 == 0 else reversed(groups)
        for group in order:
            group.append(next(labs))
    return groups


def min_replacements(s: str, k: int) -> int:
    """Fewest letters to change so that ``s`` is k-periodic with palindromic blocks."""
    if k <= 0 or len(s) % k:
        raise ValueError("length of s must be a positive multiple of k")
    chunks = [s[start:start + k] for start in range(0, len(s), k)]
    changes = 0
    for i in range(k // 2):
        counts = Counter()
        for chunk in chunks:
            counts[chunk[i]] += 1
            counts[chunk[k - 1 - i]] += 1
        changes += 2 * len(chunks) - max(counts.values())
    if k % 2:
        counts = Counter(chunk[k // 2] for chunk in chunks)
        changes += len(chunks) - max(counts.values())
    return changes


def swap_to_equal(a: str, b: str) -> list[tuple[int, int]] | None:
    """Swaps (1-based position in a, position in b) making the strings equal, or None."""
    if len(a) != len(b):
        raise ValueError("strings must have equal length")
    a_letters = a.count("a") + b.count("a")
    b_letters = 2 * len(a) - a_letters
    if a_letters % 2 or b_letters % 2:
        return None
    ab = [i for i, (x, y) in enumerate(zip(a, b)) if x == "a" and y == "b"]
    ba = [i for i, (x, y) in enumerate(zip(a, b)) if x == "b" and y == "a"]
    swaps: list[tuple[int, int]] = []
    if len(ab) % 2 and len(ba) % 2:
        last = ab.pop()
        swaps.append((last + 1, last + 1))
        ba.append(last)
    for positions in (ab, ba):
        pairs = iter(positions)
        swaps.extend((first + 1, second + 1) for first, second in zip(pairs, pairs))
    return swaps


def pipes_passable(top: str, bottom: str) -> bool:
    """True if water entering the top-left pipe leaves at the bottom-right one."""
    if len(top) != len(bottom):
        raise ValueError("rows must have equal length")
    curved_top = [int(char) > 2 for char in top]
    curved_bottom = [int(char) > 2 for char in bottom]
    row = 0
    for column in zip(curved_top, curved_bottom):
        if column[row]:
            if not column[1 - row]:
                return False
            row = 1 - row
    return row == 1