"""Puzzles over arrays, permutations and number sequences."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence

Point3 = tuple[int, int, int]
_DIMENSIONS = 3


def min_garland_complexity(bulbs: Sequence[int]) -> int:
    """Fewest neighbouring pairs of different parity after filling the zeros.

    ``bulbs`` is a permutation of 1..n with some entries replaced by 0; the
    missing numbers go back into the zero slots.
    """
    n = len(bulbs)
    odd_left = (n + 1) // 2
    even_left = n // 2
    parities: list[int | None] = []
    for bulb in bulbs:
        if bulb == 0:
            parities.append(None)
        elif bulb % 2:
            odd_left -= 1
            parities.append(1)
        else:
            even_left -= 1
            parities.append(0)

    states: dict[tuple[int, int, int | None], int] = {(even_left, odd_left, None): 0}
    for parity in parities:
        following: dict[tuple[int, int, int | None], int] = {}
        for (evens, odds, last), cost in states.items():
            if parity is not None:
                choices = [(parity, evens, odds)]
            else:
                choices = []
                if odds > 0:
                    choices.append((1, evens, odds - 1))
                if evens > 0:
                    choices.append((0, evens - 1, odds))
            for value, evens_after, odds_after in choices:
                step = 0 if last is None or last == value else 1
                key = (evens_after, odds_after, value)
                best = following.get(key)
                if best is None or cost + step < best:
                    following[key] = cost + step
        states = following
        if not states:
            raise ValueError("the missing bulbs cannot fill the empty places")
    return min(states.values())


def badge_culprits(teachers: Sequence[int]) -> list[int]:
    """For every starting student, the first student visited twice when following blame."""
    n = len(teachers)
    if any(not 1 <= target <= n for target in teachers):
        raise ValueError("every student must point to a student 1..n")
    culprits = []
    for start in range(1, n + 1):
        visited: set[int] = set()
        student = start
        while student not in visited:
            visited.add(student)
            student = teachers[student - 1]
        culprits.append(student)
    return culprits


def can_sort(a: Sequence[int], positions: Iterable[int]) -> bool:
    """True if ``a`` can be sorted by swapping a[p] and a[p+1] (1-based) for allowed p."""
    allowed = set(positions)
    segments: list[list[int]] = [[]]
    for position, value in enumerate(a, start=1):
        segments[-1].append(value)
        if position not in allowed:
            segments.append([])
    merged = [value for segment in segments for value in sorted(segment)]
    return merged == sorted(a)


def pair_points(points: Sequence[Point3]) -> list[tuple[int, int]]:
    """Pair points (1-based indices) so that no box spanned by a pair holds a later point."""
    pairs: list[tuple[int, int]] = []

    def solve(ids: list[int], level: int) -> int | None:
        if level == _DIMENSIONS:
            return ids[0]
        groups: defaultdict[int, list[int]] = defaultdict(list)
        for index in ids:
            groups[points[index][level]].append(index)
        leftovers = [
            rest
            for key in sorted(groups)
            if (rest := solve(groups[key], level + 1)) is not None
        ]
        chained = iter(leftovers)
        pairs.extend((first + 1, second + 1) for first, second in zip(chained, chained))
        return leftovers[-1] if len(leftovers) % 2 else None

    solve(list(range(len(points))), 0)
    return pairs


def restore_permutation(n: int, triples: Iterable[Sequence[int]]) -> list[int]:
    """Rebuild a permutation of 1..n from its shuffled consecutive triples."""
    triples = [tuple(triple) for triple in triples]
    if len(triples) != n - 2:
        raise ValueError("expected n - 2 triples")
    counts: Counter[int] = Counter()
    neighbours: defaultdict[int, list[int]] = defaultdict(list)
    for x, y, z in triples:
        counts.update((x, y, z))
        neighbours[x] += [z, y]
        neighbours[y] += [x, z]
        neighbours[z] += [y, x]

    start = next((value for value in range(1, n + 1) if counts[value] == 1), None)
    if start is None:
        raise ValueError("no end of the permutation found")
    second = next((value for value in neighbours[start] if counts[value] == 2), None)
    if second is None:
        raise ValueError("no second element of the permutation found")

    order = [start, second]
    seen = {start, second}
    previous, current = start, second
    for _ in range(n - 2):
        following = next((value for value in neighbours[previous] if value not in seen), None)
        if following is None:
            break
        order.append(following)
        seen.add(following)
        previous, current = current, following
    return order


def shortest_dominated(a: Iterable[int]) -> int | None:
    """Length of the shortest subarray whose ends are equal, or None if there is none."""
    last_seen: dict[int, int] = {}
    best: int | None = None
    for index, value in enumerate(a):
        if value in last_seen:
            gap = index - last_seen[value]
            best = gap if best is None else min(best, gap)
        last_seen[value] = index
    return None if best is None else best + 1


def distribute_medals(scores: Iterable[int]) -> tuple[int, int, int]:
    """Counts of gold, silver and bronze medals, or (0, 0, 0) if no valid split exists."""
    scores = list(scores)
    if not scores:
        raise ValueError("at least one participant is required")
    half = len(scores) // 2
    counts = [count for _, count in sorted(Counter(scores).items(), reverse=True)]
    gold = counts[0]
    remaining = deque(counts[1:])

    silver = 0
    while silver <= gold and remaining:
        silver += remaining.popleft()
    if gold >= silver:
        return (0, 0, 0)

    bronze = 0
    while bronze <= gold and remaining:
        bronze += remaining.popleft()
    while remaining and gold + silver + bronze + remaining[0] <= half:
        bronze += remaining.popleft()

    if gold < bronze and gold + silver + bronze <= half:
        return (gold, silver, bronze)
    return (0, 0, 0)


def min_button_presses(n: int, m: int) -> int:
    """Presses of 'subtract one' and 'double' a breadth-first search needs to turn n into m."""
    if n < 1 or m < 1:
        raise ValueError("n and m must be positive")
    frontier = deque([(n, 0)])
    seen = {n}
    while frontier:
        value, presses = frontier.popleft()
        if value - 1 == m or value * 2 == m:
            return presses + 1
        candidates = [value - 1]
        if value <= m:
            candidates.append(value * 2)
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                frontier.append((candidate, presses + 1))
    raise ValueError("target cannot be reached")