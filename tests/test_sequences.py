import random

import pytest

from contestkit.sequences import (
    badge_culprits,
    can_sort,
    distribute_medals,
    min_button_presses,
    min_garland_complexity,
    pair_points,
    restore_permutation,
    shortest_dominated,
)


def test_garland_worked_example():
    assert min_garland_complexity([0, 5, 0, 2, 3]) == 2


@pytest.mark.parametrize(
    "bulbs",
    [[1, 0, 0, 5, 0, 0, 2], [0, 0, 0, 0], [2, 0, 0, 0, 1, 0]],
)
def test_garland_symmetric_under_reversal(bulbs):
    assert min_garland_complexity(bulbs) == min_garland_complexity(bulbs[::-1])


def test_garland_fully_known_is_not_improved_by_filling():
    full = [1, 3, 2, 4, 5]
    partial = [1, 3, 0, 4, 5]
    assert min_garland_complexity(partial) <= min_garland_complexity(full)


def test_badge_permutation_blames_self():
    teachers = [2, 3, 1, 5, 4]
    assert badge_culprits(teachers) == list(range(1, len(teachers) + 1))


def test_badge_self_loop_catches_everyone():
    teachers = [2, 3, 3]
    assert badge_culprits(teachers) == [teachers[2]] * len(teachers)


def test_badge_invalid_target():
    with pytest.raises(ValueError):
        badge_culprits([2, 5])


def test_can_sort_with_all_positions():
    a = [3, 2, 1]
    assert can_sort(a, [1, 2]) is True


def test_can_sort_blocked_swap():
    assert can_sort([4, 1, 2, 3], [3, 2]) is False


def test_can_sort_already_sorted_without_positions():
    assert can_sort([1, 2, 2, 5], []) is True


def _inside(point, a, b):
    return all(min(x, y) <= z <= max(x, y) for x, y, z in zip(a, b, point))


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_pair_points_forms_valid_pairs(seed):
    rng = random.Random(seed)
    points = list({(rng.randint(0, 3), rng.randint(0, 3), rng.randint(0, 3)) for _ in range(40)})
    if len(points) % 2:
        points.pop()
    pairs = pair_points(points)
    used = [index for pair in pairs for index in pair]
    assert sorted(used) == list(range(1, len(points) + 1))
    remaining = set(range(1, len(points) + 1))
    for first, second in pairs:
        a, b = points[first - 1], points[second - 1]
        others = remaining - {first, second}
        assert not any(_inside(points[other - 1], a, b) for other in others)
        remaining -= {first, second}


def test_restore_permutation_worked_example():
    assert restore_permutation(5, [(4, 3, 2), (2, 3, 5), (4, 1, 2)]) == [1, 4, 2, 3, 5]


def test_restore_permutation_shuffled_triples():
    rng = random.Random(7)
    perm = list(range(1, 10))
    rng.shuffle(perm)
    triples = [list(perm[i:i + 3]) for i in range(len(perm) - 2)]
    for triple in triples:
        rng.shuffle(triple)
    rng.shuffle(triples)
    result = restore_permutation(len(perm), triples)
    assert result in (perm, perm[::-1])


def test_restore_permutation_wrong_count():
    with pytest.raises(ValueError):
        restore_permutation(6, [(1, 2, 3)])


def test_shortest_dominated_none_without_repeats():
    assert shortest_dominated([1, 2, 3, 4]) is None


@pytest.mark.parametrize("gap", [1, 3, 6])
def test_shortest_dominated_picks_smallest_gap(gap):
    a = [100] + list(range(gap - 1)) + [100] + list(range(200, 220)) + [200]
    assert shortest_dominated(a) == gap + 1


def test_distribute_medals_worked_example():
    scores = [5, 4, 4, 3, 2, 2, 1, 1, 1, 1, 1, 1]
    assert distribute_medals(scores) == (1, 2, 3)


@pytest.mark.parametrize("seed", range(5))
def test_distribute_medals_invariants(seed):
    rng = random.Random(seed)
    scores = sorted((rng.randint(1, 10) for _ in range(30)), reverse=True)
    gold, silver, bronze = distribute_medals(scores)
    if (gold, silver, bronze) != (0, 0, 0):
        assert gold < silver and gold < bronze
        assert gold + silver + bronze <= len(scores) // 2
        assert gold == scores.count(scores[0])


def test_distribute_medals_empty():
    with pytest.raises(ValueError):
        distribute_medals([])


def test_button_presses_only_subtract():
    n, m = 10, 1
    assert min_button_presses(n, m) == n - m


@pytest.mark.parametrize("k", [1, 2, 3])
def test_button_presses_only_double(k):
    assert min_button_presses(3, 3 * 2**k) == k


def test_button_presses_rejects_zero():
    with pytest.raises(ValueError):
        min_button_presses(4, 0)