import numpy as np
import pytest

from mhopt.engine.algorithm.ga import Chromosome
from mhopt.engine.algorithm.ga.operators import (
    binary_tournament,
    draw_crosspoints,
    mutation_loci,
    tournament_selection,
    two_point_crossover,
)


class ScriptedRNG:
    """Replays a fixed list of integer draws."""

    def __init__(self, ints, uniform=0.0):
        self._ints = list(ints)
        self._uniform = uniform

    def integers(self, high):
        value = self._ints.pop(0)
        assert 0 <= value < high
        return value

    def random(self, size=None):
        if size is None:
            return self._uniform
        return np.full(size, self._uniform)


def _c(genes, fitness=None):
    return Chromosome(np.asarray(genes, dtype=np.int8), fitness)


def test_binary_tournament_prefers_strictly_fitter():
    a, b = _c([1], 5.0), _c([0], 3.0)
    assert binary_tournament(a, b) is a
    assert binary_tournament(b, a) is a


def test_binary_tournament_tie_goes_to_second():
    a, b = _c([1], 2.0), _c([0], 2.0)
    assert binary_tournament(a, b) is b


def test_tournament_selection_covers_every_index_pair():
    weak, strong = _c([0], 5.0), _c([1], 10.0)
    pop = [weak, strong]
    # (0, 0), (0, 1), (1, 0), (1, 1)
    parents = tournament_selection(pop, 4, ScriptedRNG([0, 0, 0, 1, 1, 0, 1, 1]))
    assert parents[0] is weak
    assert parents[1] is strong
    assert parents[2] is strong
    assert parents[3] is strong


def test_tournament_selection_returns_population_members():
    pop = [_c([0], 5.0), _c([1], 10.0), _c([1], 7.0)]
    parents = tournament_selection(pop, 50, np.random.default_rng(3))
    assert len(parents) == 50
    assert all(any(p is q for q in pop) for p in parents)


def test_tournament_selection_rejects_empty_population():
    with pytest.raises(ValueError):
        tournament_selection([], 2, np.random.default_rng(0))


def test_crosspoints_follow_draw_order():
    assert draw_crosspoints(4, ScriptedRNG([1, 2])) == (1, 3)
    assert draw_crosspoints(4, ScriptedRNG([0, 4])) == (0, 4)


def test_crosspoints_stay_in_range():
    rng = np.random.default_rng(0)
    for _ in range(200):
        p1, p2 = draw_crosspoints(7, rng)
        assert 0 <= p1 <= p2 <= 7


def test_two_point_crossover_swaps_middle_segment():
    a, b = _c([1, 1, 1, 1], 4.0), _c([0, 0, 0, 0], 0.0)
    c1, c2 = two_point_crossover(a, b, 1, 3)
    assert c1.genes.tolist() == [1, 0, 0, 1]
    assert c2.genes.tolist() == [0, 1, 1, 0]
    assert not c1.is_evaluated and not c2.is_evaluated
    assert a.genes.tolist() == [1, 1, 1, 1]


def test_two_point_crossover_full_span_swaps_parents():
    a, b = _c([1, 0, 1]), _c([0, 1, 1])
    c1, c2 = two_point_crossover(a, b, 0, 3)
    assert c1.genes.tolist() == [0, 1, 1]
    assert c2.genes.tolist() == [1, 0, 1]


def test_two_point_crossover_validates_inputs():
    with pytest.raises(ValueError, match="length"):
        two_point_crossover(_c([1, 0]), _c([1, 0, 1]), 0, 1)
    with pytest.raises(ValueError, match="range"):
        two_point_crossover(_c([1, 0]), _c([0, 1]), 2, 1)


def test_mutation_loci_extremes():
    rng = np.random.default_rng(1)
    assert mutation_loci(5, 0.0, rng).size == 0
    assert mutation_loci(5, 1.0, rng).tolist() == [0, 1, 2, 3, 4]
    assert mutation_loci(0, 0.5, rng).size == 0
