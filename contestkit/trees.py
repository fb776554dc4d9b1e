"""Puzzles over rooted and unrooted trees."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from contestkit.strings import MOD

Edge = tuple[int, int]

_COLOUR_ORDERS = (
    (0, 1, 2),
    (0, 2, 1),
    (1, 2, 0),
    (1, 0, 2),
    (2, 1, 0),
    (2, 0, 1),
)


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _tree_adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Adjacency lists (index 0 unused) of a tree on nodes 1..n."""
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    count = 0
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append(v)
        adj[v].append(u)
        count += 1
    if count != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    return adj


def _bfs_tree(
    adj: list[list[int]], root: int = 1
) -> tuple[list[int], dict[int, int], dict[int, int]]:
    """Breadth-first order, parents and depths of a tree; the root's parent is 0."""
    parent = {root: 0}
    depth = {root: 0}
    order = [root]
    for node in order:
        for neighbour in adj[node]:
            if neighbour == parent[node]:
                continue
            if neighbour in parent:
                raise ValueError("edges do not form a tree")
            parent[neighbour] = node
            depth[neighbour] = depth[node] + 1
            order.append(neighbour)
    if len(order) != len(adj) - 1:
        raise ValueError("edges do not form a connected tree")
    return order, parent, depth


def _subtree_sizes(order: list[int], parent: dict[int, int]) -> dict[int, int]:
    sizes = dict.fromkeys(order, 1)
    for node in reversed(order[1:]):
        sizes[parent[node]] += sizes[node]
    return sizes


def min_coloring_steps(parents: Sequence[int], colors: Sequence[int]) -> int:
    """Steps needed to colour a rooted tree when each step paints a whole subtree.

    ``parents`` gives the parent of nodes 2..n; ``colors`` the wanted colour of 1..n.
    """
    n = len(colors)
    if n < 1 or len(parents) != n - 1:
        raise ValueError("expected a parent for each of the nodes 2..n")
    children: defaultdict[int, list[int]] = defaultdict(list)
    for node, parent in enumerate(parents, start=2):
        if not 1 <= parent < node:
            raise ValueError(f"node {node} has invalid parent {parent}")
        children[parent].append(node)
    target = dict(enumerate(colors, start=1))
    current = dict.fromkeys(target, 0)
    steps = 0

    def paint(node: int, colour: int) -> None:
        nonlocal steps
        current[node] = colour
        frontier = [node]
        while frontier:
            following = []
            for u in frontier:
                for v in children[u]:
                    current[v] = colour
                    if target[v] == colour:
                        following.append(v)
            frontier = following
        steps += 1

    if current[1] != target[1]:
        paint(1, target[1])
    frontier = [1]
    while frontier:
        following = []
        for u in frontier:
            for v in children[u]:
                if current[v] != target[v]:
                    paint(v, target[v])
                following.append(v)
        frontier = following
    return steps


def deletion_order(nodes: Sequence[tuple[int, int]]) -> list[int]:
    """Nodes to delete, ascending: those not respecting their parent nor respected by children.

    ``nodes`` holds (parent, c) for nodes 1..n, parent -1 for the root and c == 1
    for a node that does not respect its parent.
    """
    children: defaultdict[int, list[int]] = defaultdict(list)
    respects: dict[int, bool] = {}
    root = None
    for node, (parent, flag) in enumerate(nodes, start=1):
        if parent == -1:
            root = node
        children[parent].append(node)
        respects[node] = flag != 1
    if root is None:
        raise ValueError("the tree has no root")

    removed = []
    seen: set[int] = set()
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node in seen:
            raise ValueError("parents do not form a tree")
        seen.add(node)
        kids = children[node]
        if not respects[node] and not any(respects[kid] for kid in kids):
            removed.append(node)
        queue.extend(kids)
    return sorted(removed)


def max_happiness(n: int, k: int, edges: Iterable[Edge]) -> int:
    """Total happiness of envoys when ``k`` cities are industrial and the rest tourist."""
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and n")
    adj = _tree_adjacency(n, edges)
    order, parent, depth = _bfs_tree(adj)
    sizes = _subtree_sizes(order, parent)
    gains = sorted((sizes[node] - 1 - depth[node] for node in order), reverse=True)
    return sum(gains[: n - k])


def candidates_to_repair(n: int, roads: Iterable[Sequence[int]]) -> list[int]:
    """Candidates whose paths to node 1 together cover every problem road (kind 2)."""
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    problems: set[frozenset[int]] = set()
    count = 0
    for u, v, kind in roads:
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append(v)
        adj[v].append(u)
        if kind == 2:
            problems.add(frozenset((u, v)))
        count += 1
    if count != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    order, parent, depth = _bfs_tree(adj)

    chosen = []
    seen: set[int] = set()
    for node in sorted(order[1:], key=lambda item: -depth[item]):
        if node in seen:
            continue
        if frozenset((node, parent[node])) in problems:
            seen.add(node)
            chosen.append(node)
            up = parent[node]
            while up != 1 and up not in seen:
                seen.add(up)
                up = parent[up]
    return chosen


def tag_game_moves(n: int, x: int, edges: Iterable[Edge]) -> int:
    """Moves the tag game lasts: twice the deepest level the search from node 1 reaches."""
    _check_node(x, n)
    adj = _tree_adjacency(n, edges)
    _bfs_tree(adj)

    parent = dict.fromkeys(range(1, n + 1), 0)
    parent[1] = -1
    deepest = 0
    stack: list[tuple[int, int, Iterable[int]]] = []

    def enter(node: int, level: int) -> None:
        nonlocal deepest
        if len(adj[node]) == 1 and parent[node] > 0:
            deepest = max(deepest, level)
            return
        stack.append((node, level, iter(adj[node])))

    enter(1, 0)
    while stack:
        node, level, neighbours = stack[-1]
        for neighbour in neighbours:
            if parent[neighbour] <= 0:
                parent[neighbour] = node
                deepest = max(deepest, level)
                enter(neighbour, level + 1)
                break
        else:
            stack.pop()
    return 2 * deepest


def max_removable_edges(n: int, edges: Iterable[Edge]) -> int | None:
    """Most edges removable so that every component has even size, or None if impossible."""
    adj = _tree_adjacency(n, edges)
    if n % 2:
        return None
    order, parent, _ = _bfs_tree(adj)
    sizes = _subtree_sizes(order, parent)
    return sum(1 for node in order[1:] if sizes[node] % 2 == 0)


def is_valid_bfs(n: int, edges: Iterable[Edge], order: Sequence[int]) -> bool:
    """True if ``order`` is a breadth-first traversal of the tree starting at node 1."""
    if len(order) != n:
        raise ValueError("order must list n nodes")
    adj = [set(neighbours) for neighbours in _tree_adjacency(n, edges)]
    adj[1].add(0)
    pending = deque(order)
    if pending.popleft() != 1:
        return False
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for _ in range(len(adj[node]) - 1):
            if not pending:
                return False
            visited = pending.popleft()
            if visited in adj[node]:
                adj[node].discard(visited)
                queue.append(visited)
        if len(adj[node]) > 1:
            return False
    return True


def path_queries(
    n: int, edges: Iterable[Edge], queries: Iterable[Iterable[int]]
) -> list[bool]:
    """For each query, whether one root path passes within distance 1 of all its nodes."""
    adj = _tree_adjacency(n, edges)
    parent = {1: 1}
    level = {1: 0}
    enter = {1: 0}
    leave: dict[int, int] = {}
    timer = 1
    stack = [(1, iter(adj[1]))]
    while stack:
        node, neighbours = stack[-1]
        for child in neighbours:
            if child not in parent:
                parent[child] = node
                level[child] = level[node] + 1
                enter[child] = timer
                timer += 1
                stack.append((child, iter(adj[child])))
                break
        else:
            leave[node] = timer
            timer += 1
            stack.pop()
    if len(parent) != n:
        raise ValueError("edges do not form a connected tree")

    answers = []
    for query in queries:
        lifted = []
        for node in query:
            _check_node(node, n)
            lifted.append(parent[node])
        if not lifted:
            answers.append(True)
            continue
        deepest = max(lifted, key=level.__getitem__)
        answers.append(
            all(
                enter[node] <= enter[deepest] and leave[node] >= leave[deepest]
                for node in lifted
            )
        )
    return answers


def paint_tree(
    costs: Sequence[Sequence[int]], edges: Iterable[Edge]
) -> tuple[int, list[int]] | None:
    """Cheapest colouring with colours 1..3 where any path of three nodes uses three colours.

    ``costs[c][i]`` is the price of colour ``c + 1`` on node ``i + 1``. Returns the
    total price and the colour of every node, or None when the tree is not a path.
    """
    if len(costs) != 3:
        raise ValueError("costs must hold three rows")
    n = len(costs[0])
    if any(len(row) != n for row in costs):
        raise ValueError("cost rows must have equal length")
    adj = _tree_adjacency(n, edges)
    if any(len(neighbours) >= 3 for neighbours in adj):
        return None
    start = next((node for node in range(1, n) if len(adj[node]) == 1), None)
    if start is None:
        raise ValueError("the tree has no end to start from")
    path, _, _ = _bfs_tree(adj, start)

    best: tuple[int, list[int]] | None = None
    for colours in _COLOUR_ORDERS:
        colouring = [0] * n
        total = 0
        for position, node in enumerate(path):
            colour = colours[position % 3]
            total += costs[colour][node - 1]
            colouring[node - 1] = colour + 1
        if best is None or total < best[0]:
            best = (total, colouring)
    return best


def good_sequences(n: int, k: int, edges: Iterable[Sequence[int]]) -> int:
    """Number of length-k vertex sequences whose walk uses a black edge (x == 1), mod MOD."""
    if n < 1 or k < 0:
        raise ValueError("n must be positive and k non-negative")
    red: list[list[int]] = [[] for _ in range(n + 1)]
    count = 0
    for u, v, colour in edges:
        _check_node(u, n)
        _check_node(v, n)
        if colour == 0:
            red[u].append(v)
            red[v].append(u)
        count += 1
    if count != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")

    answer = pow(n, k, MOD)
    seen: set[int] = set()
    for start in range(1, n + 1):
        if start in seen:
            continue
        seen.add(start)
        component = [start]
        for node in component:
            for neighbour in red[node]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    component.append(neighbour)
        answer = (answer - pow(len(component), k, MOD)) % MOD
    return answer