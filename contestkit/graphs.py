"""Puzzles over general undirected and directed graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate

Edge = tuple[int, int]


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(
    n: int, edges: Iterable[Sequence[int]], *, directed: bool = False
) -> tuple[list[list[int]], list[Edge]]:
    """Adjacency lists (index 0 unused) and the edges as read, for nodes 1..n."""
    if n < 1:
        raise ValueError("a graph needs at least one node")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    listed: list[Edge] = []
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
        listed.append((u, v))
    return adj, listed


def _component(adj: list[list[int]], start: int, seen: set[int]) -> list[int]:
    """Nodes reachable from ``start`` that are not yet in ``seen``; marks them seen."""
    seen.add(start)
    members = [start]
    for node in members:
        for neighbour in adj[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                members.append(neighbour)
    return members


def _distances(adj: list[list[int]], source: int) -> dict[int, int]:
    """Breadth-first distances from ``source`` to every reachable node."""
    distance = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if neighbour not in distance:
                distance[neighbour] = distance[node] + 1
                queue.append(neighbour)
    return distance


def is_cthulhu(n: int, edges: Iterable[Edge]) -> bool:
    """True if the graph is connected and has exactly as many edges as nodes."""
    adj, listed = _adjacency(n, edges)
    if len(listed) != n:
        return False
    return len(_component(adj, 1, set())) == n


def min_rumor_cost(costs: Sequence[int], edges: Iterable[Edge]) -> int:
    """Gold needed to spread a rumour: the cheapest node bribed in every component."""
    n = len(costs)
    adj, _ = _adjacency(n, edges)
    seen: set[int] = set()
    total = 0
    for start in range(1, n + 1):
        if start not in seen:
            members = _component(adj, start, seen)
            total += min(costs[node - 1] for node in members)
    return total


def edge_coloring(n: int, edges: Iterable[Edge]) -> tuple[int, list[int]]:
    """Colour directed edges so that no colour holds a cycle.

    Edges pointing back to an ancestor of a depth-first search get colour 2,
    the rest colour 1. Returns the number of colours used and each edge's colour.
    """
    adj, listed = _adjacency(n, edges, directed=True)
    start: dict[int, int] = {}
    finish: dict[int, int] = {}
    timer = 0
    for root in range(1, n + 1):
        if root in start:
            continue
        start[root] = timer
        timer += 1
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in start:
                    start[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                finish[node] = timer
                timer += 1
                stack.pop()

    colours = [
        2 if start[v] < start[u] and finish[u] < finish[v] else 1
        for u, v in listed
    ]
    return (2 if 2 in colours else 1), colours


def most_diverse_color(colors: Sequence[int], edges: Iterable[Edge]) -> int:
    """Colour whose nodes neighbour the most other colours; ties go to the smaller colour.

    Nodes are scanned in order and the record is only refreshed when the scanned
    node's colour reaches at least the best diversity seen so far.
    """
    n = len(colors)
    adj, _ = _adjacency(n, edges)
    neighbour_colours: defaultdict[int, set[int]] = defaultdict(set)
    best_size = 0
    best_colour: dict[int, int] = {}
    for node in range(1, n + 1):
        colour = colors[node - 1]
        found = neighbour_colours[colour]
        found.update(
            colors[other - 1] for other in adj[node] if colors[other - 1] != colour
        )
        if len(found) >= best_size:
            best_size = len(found)
            best_colour[best_size] = min(best_colour.get(best_size, colour), colour)
    return best_colour[best_size]


def min_trip_price(
    n: int,
    prices: Sequence[int],
    edges: Iterable[Edge],
    a: int,
    b: int,
    c: int,
) -> int:
    """Cheapest trip a -> b -> c after assigning the given prices to the edges."""
    adj, listed = _adjacency(n, edges)
    m = len(listed)
    if len(prices) != m:
        raise ValueError("expected one price for every edge")
    for node in (a, b, c):
        _check_node(node, n)
    prefix = [0, *accumulate(sorted(prices))]
    from_a, from_b, from_c = (_distances(adj, node) for node in (a, b, c))

    best: int | None = None
    for x in range(1, n + 1):
        if x not in from_a or x not in from_b or x not in from_c:
            continue
        shared = from_b[x]
        total = from_a[x] + shared + from_c[x]
        if total > m:
            continue
        price = prefix[shared] + prefix[total]
        if best is None or price < best:
            best = price
    if best is None:
        raise ValueError("a, b and c are not connected")
    return best