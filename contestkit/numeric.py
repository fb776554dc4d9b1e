"""Arithmetic and counting puzzles answered with closed forms or greedy loops."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from fractions import Fraction
from math import gcd, isqrt

Point = tuple[int, int]

_PLACE_LIMIT = 305
_WORD = 1 << 32


def king_escapes(n: int, queen: Point, king: Point, target: Point) -> bool:
    """Tell whether the king can reach the target without crossing the queen's lines.

    The board size ``n`` does not change the answer: the king escapes exactly
    when it and the target lie strictly inside the same quadrant around the queen.
    """
    qx, qy = queen

    def quadrant(point: Point) -> tuple[bool, bool] | None:
        x, y = point
        if x == qx or y == qy:
            return None
        return (x > qx, y > qy)

    start = quadrant(king)
    return start is not None and start == quadrant(target)


def presents_place(places: Iterable[int], x: int) -> int:
    """Largest v such that places 1..v can all be collected with ``x`` more contests."""
    taken = set(places)
    place = 1
    missing = int(place not in taken)
    while place < _PLACE_LIMIT and missing <= x:
        place += 1
        missing += int(place not in taken)
    return place - 1


def max_square_sum(sticks: Iterable[int]) -> int:
    """Squared distance reached by a polyline of alternating horizontal and vertical sticks."""
    ordered = sorted(sticks)
    half = len(ordered) // 2
    short = sum(ordered[:half])
    long = sum(ordered[half:])
    return short * short + long * long


def max_earnings(prices: Iterable[int], capacity: int) -> int:
    """Money earned by carrying at most ``capacity`` sets, taking only negative prices."""
    gains = sorted((-price for price in prices), reverse=True)
    total = 0
    for gain in gains[:capacity]:
        if gain < 0:
            break
        total += gain
    return total


def max_colors(n: int) -> int:
    """Number of colours for ``n`` tiles where tiles a divisor apart must match."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 1
    if n & (n - 1) == 0:
        return 2
    for factor in range(2, isqrt(n) + 1):
        if n % factor == 0:
            while n % factor == 0:
                n //= factor
            return 1 if n > 1 else factor
    return n


def match_results(n: int, points: int, win: int, draw: int) -> tuple[int, int, int] | None:
    """Split ``n`` games into wins, draws and losses worth ``points``, or None."""
    for draws in range(win):
        rest = points - draws * draw
        if rest % win == 0:
            wins = rest // win
            if wins + draws > n or wins < 0:
                break
            return wins, draws, n - wins - draws
    return None


def _advance(total: int, step: int, limit: int) -> tuple[int, int]:
    """Repeatedly add ``step`` in 32-bit unsigned arithmetic while staying within ``limit``."""
    if step == 0:
        return total, 0
    count = 0
    while True:
        following = total + step
        if following < _WORD:
            if following > limit:
                return total, count
            times = (limit - total) // step
            total += times * step
            count += times
        else:
            back = _WORD - step
            times = total // back
            total -= times * back
            count += times


def min_summands(n: int, p: int) -> int:
    """Number of p-binary summands a greedy pass uses to build ``n``, or -1."""
    if n < 1:
        raise ValueError("n must be positive")
    limit = n % _WORD
    total = 0
    count = 0
    for power in range(31, 0, -1):
        total, used = _advance(total, ((1 << power) + p) % _WORD, limit)
        count += used
    total, used = _advance(total, (1 + p) % _WORD, limit)
    count += used
    return count if total == limit else -1


def cumulative_penalties(sweets: Iterable[int], per_day: int) -> list[int]:
    """Minimal sugar penalty for eating the k cheapest sweets, for every k."""
    if per_day < 1:
        raise ValueError("per_day must be positive")
    ordered = sorted(sweets)
    slots = [0] * min(per_day, len(ordered))
    total = 0
    answers = []
    for index, sweet in enumerate(ordered):
        slot = index % per_day
        slots[slot] += sweet
        total += slots[slot]
        answers.append(total)
    return answers


def is_rebel(r: int, b: int, k: int) -> bool:
    """True when painting every r-th and b-th plank forces k equal colours in a row."""
    if r <= 0 or b <= 0:
        raise ValueError("plank periods must be positive")
    low, high = sorted((r, b))
    common = gcd(low, high)
    low //= common
    high //= common
    return (k - 1) * low + 1 < high


def rating_increments(n: int) -> list[int]:
    """All distinct values of n // m for positive m, together with 0, in ascending order."""
    values = {0}
    for divisor in range(1, isqrt(n) + 1):
        values.update((divisor, n // divisor))
    return sorted(values)


def split_growth(n: int) -> list[int]:
    """Bacteria to split on each day so that the total mass reaches ``n`` quickest."""
    if n < 1:
        raise ValueError("n must be positive")
    sizes = []
    step = 1
    rest = n
    while step <= rest:
        sizes.append(step)
        rest -= step
        step *= 2
    if rest > 0:
        sizes.append(rest)
        sizes.sort()
    return [after - before for before, after in zip(sizes, sizes[1:])]


def max_zeroes(a: Sequence[int], b: Sequence[int]) -> int:
    """Most zeroes obtainable in d * a_i + b_i by choosing one real d."""
    if len(a) != len(b):
        raise ValueError("sequences must have equal length")
    ratios: Counter[Fraction | int] = Counter()
    always = 0
    for left, right in zip(a, b):
        if right == 0:
            if left == 0:
                always += 1
            else:
                ratios[0] += 1
        elif left != 0:
            ratios[Fraction(left) / right] += 1
    return max(ratios.values(), default=0) + always