import itertools

import pytest

from contestkit.strings import MOD
from contestkit.trees import (
    candidates_to_repair,
    deletion_order,
    good_sequences,
    is_valid_bfs,
    max_happiness,
    max_removable_edges,
    min_coloring_steps,
    paint_tree,
    path_queries,
    tag_game_moves,
)

HAPPY_EDGES = [(1, 2), (1, 3), (1, 4), (3, 5), (3, 6), (4, 7)]
QUERY_EDGES = [(1, 2), (1, 3), (1, 4), (2, 5), (2, 6), (3, 7), (7, 8), (7, 9), (9, 10)]


def test_coloring_example():
    assert min_coloring_steps([1, 2, 2, 1, 5], [2, 1, 1, 1, 1, 1]) == 3


@pytest.mark.parametrize("parents", [[1, 1, 1], [1, 2, 3]])
def test_coloring_all_distinct_needs_step_per_node(parents):
    colors = [1, 2, 3, 4]
    assert min_coloring_steps(parents, colors) == len(colors)


def test_coloring_bounds():
    parents = [1, 1, 2, 2, 3]
    colors = [1, 2, 1, 2, 1, 2]
    steps = min_coloring_steps(parents, colors)
    assert 1 <= steps <= len(colors)


def test_coloring_rejects_bad_parent():
    with pytest.raises(ValueError):
        min_coloring_steps([2, 1], [1, 1, 1])


def test_deletion_chain_removes_all_but_root():
    nodes = [(-1, 0), (1, 1), (2, 1), (3, 1)]
    assert deletion_order(nodes) == list(range(2, 5))


def test_deletion_nothing_when_all_respect():
    assert deletion_order([(-1, 0), (1, 0), (1, 0)]) == []


def test_deletion_invariants():
    nodes = [(3, 1), (1, 1), (-1, 0), (2, 1), (3, 0)]
    removed = deletion_order(nodes)
    assert removed == sorted(removed)
    assert all(nodes[node - 1][1] == 1 for node in removed)
    assert removed == [1, 2, 4]


def test_deletion_without_root_raises():
    with pytest.raises(ValueError):
        deletion_order([(2, 1), (1, 1)])


def test_happiness_example():
    assert max_happiness(7, 4, HAPPY_EDGES) == 7


def test_happiness_single_tourist_city_is_root_value():
    assert max_happiness(7, 6, HAPPY_EDGES) == 7 - 1


def test_happiness_all_industrial():
    assert max_happiness(7, 7, HAPPY_EDGES) == 0


def test_happiness_bad_k():
    with pytest.raises(ValueError):
        max_happiness(7, 8, HAPPY_EDGES)


def test_repair_chain_picks_deepest():
    roads = [(1, 2, 2), (2, 3, 2), (3, 4, 2), (4, 5, 2)]
    assert candidates_to_repair(5, roads) == [5]


def test_repair_branch():
    roads = [(1, 2, 1), (2, 3, 2), (2, 4, 1), (4, 5, 1)]
    assert candidates_to_repair(5, roads) == [3]


def test_repair_star_picks_every_leaf():
    roads = [(1, v, 2) for v in range(2, 6)]
    chosen = candidates_to_repair(5, roads)
    assert sorted(chosen) == [2, 3, 4, 5]


def test_repair_no_problems():
    assert candidates_to_repair(3, [(1, 2, 1), (2, 3, 1)]) == []


def test_repair_wrong_edge_count():
    with pytest.raises(ValueError):
        candidates_to_repair(3, [(1, 2, 2)])


def test_tag_game_examples():
    assert tag_game_moves(4, 3, [(1, 2), (2, 3), (2, 4)]) == 4
    assert tag_game_moves(5, 2, [(1, 2), (2, 3), (3, 4), (2, 5)]) == 6


def test_tag_game_independent_of_start():
    edges = [(1, 2), (2, 3), (2, 4)]
    results = {tag_game_moves(4, x, edges) for x in range(2, 5)}
    assert results == {tag_game_moves(4, 3, edges)}


def test_tag_game_bad_x():
    with pytest.raises(ValueError):
        tag_game_moves(4, 5, [(1, 2), (2, 3), (2, 4)])


def test_removable_example():
    assert max_removable_edges(4, [(2, 4), (4, 1), (3, 1)]) == 1


def test_removable_odd_is_impossible():
    assert max_removable_edges(3, [(1, 2), (1, 3)]) is None


def test_removable_bounds_on_path():
    n = 8
    edges = [(i, i + 1) for i in range(1, n)]
    result = max_removable_edges(n, edges)
    assert 0 <= result <= n // 2 - 1


def test_removable_star_has_no_even_leaf():
    assert max_removable_edges(4, [(1, 2), (1, 3), (1, 4)]) == 0


def test_bfs_examples():
    edges = [(1, 2), (1, 3), (2, 4)]
    assert is_valid_bfs(4, edges, [1, 2, 3, 4]) is True
    assert is_valid_bfs(4, edges, [1, 2, 4, 3]) is False


def test_bfs_any_leaf_order_of_star():
    edges = [(1, v) for v in range(2, 6)]
    assert all(
        is_valid_bfs(5, edges, [1, *perm])
        for perm in itertools.permutations(range(2, 6))
    )


def test_bfs_must_start_at_root():
    assert is_valid_bfs(3, [(1, 2), (2, 3)], [2, 1, 3]) is False


def test_bfs_wrong_level_order():
    assert is_valid_bfs(3, [(1, 2), (2, 3)], [1, 3, 2]) is False


def test_bfs_length_mismatch():
    with pytest.raises(ValueError):
        is_valid_bfs(3, [(1, 2), (2, 3)], [1, 2])


def test_path_queries_example():
    queries = [[3, 8, 9, 10], [2, 4, 6], [2, 1, 5], [4, 8, 2], [6, 10], [5, 4, 7]]
    assert path_queries(10, QUERY_EDGES, queries) == [True, True, True, True, False, False]


def test_path_queries_single_nodes():
    result = path_queries(10, QUERY_EDGES, [[v] for v in range(1, 11)])
    assert result == [True] * 10


def test_path_queries_bad_node():
    with pytest.raises(ValueError):
        path_queries(10, QUERY_EDGES, [[11]])


def test_paint_example():
    costs = [[3, 2, 3], [4, 3, 2], [3, 1, 3]]
    assert paint_tree(costs, [(1, 2), (2, 3)]) == (6, [1, 3, 2])


def test_paint_branching_tree_is_impossible():
    costs = [[3, 4, 2, 1, 2], [4, 2, 1, 5, 4], [5, 3, 2, 1, 1]]
    assert paint_tree(costs, [(1, 2), (3, 2), (4, 3), (5, 3)]) is None


def test_paint_invariants():
    costs = [[5, 1, 7, 2, 9], [3, 8, 2, 6, 1], [4, 4, 4, 4, 4]]
    edges = [(2, 4), (4, 1), (1, 5), (5, 3)]
    total, colouring = paint_tree(costs, edges)
    path = [2, 4, 1, 5, 3]
    colours = [colouring[node - 1] for node in path]
    assert all(len(set(colours[i:i + 3])) == 3 for i in range(len(colours) - 2))
    assert total == sum(costs[c - 1][i] for i, c in enumerate(colouring))


def test_good_sequences_example():
    assert good_sequences(3, 5, [(1, 2, 1), (2, 3, 0)]) == 210


def test_good_sequences_all_red():
    edges = [(1, 2, 0), (2, 3, 0), (3, 4, 0)]
    assert good_sequences(4, 6, edges) == 0


def test_good_sequences_in_range():
    edges = [(1, 2, 1), (2, 3, 1), (3, 4, 0)]
    result = good_sequences(4, 10**9, edges)
    assert 0 <= result < MOD


def test_good_sequences_bad_edge():
    with pytest.raises(ValueError):
        good_sequences(3, 2, [(1, 2, 1), (2, 4, 0)])