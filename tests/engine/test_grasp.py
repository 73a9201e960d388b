import logging

import numpy as np
import pytest

from mhopt.engine.algorithm.grasp import GRASP, RandomizedGreedyConstruction
from mhopt.engine.algorithm.localsearch import LocalSearch, SampledLocalSearch
from mhopt.foundation.exceptions import InvalidParameterError
from mhopt.foundation.problem import KQBFInverse, QBFInverse, Solution, is_disjoint


def test_pure_greedy_construction_stops_after_worsening_insertion(small_matrix):
    ev = QBFInverse(small_matrix)
    solution, candidates = RandomizedGreedyConstruction(alpha=0.0).construct(ev, np.random.default_rng(0))
    # 0 is the greedy pick; adding 1 worsens the cost and ends construction with 1 kept
    assert list(solution) == [0, 1]
    assert solution.cost == pytest.approx(0.0)
    assert candidates == [2]


def test_restricted_candidates_threshold(small_matrix):
    ev = QBFInverse(small_matrix)
    sol = Solution()
    ev.evaluate(sol)
    # insertion deltas: 0 -> -2, 1 -> -1, 2 -> +5
    assert RandomizedGreedyConstruction(alpha=0.0).restricted_candidates(ev, sol, [0, 1, 2]) == [0]
    assert RandomizedGreedyConstruction(alpha=0.2).restricted_candidates(ev, sol, [0, 1, 2]) == [0, 1]
    assert RandomizedGreedyConstruction(alpha=1.0).restricted_candidates(ev, sol, [0, 1, 2]) == [0, 1, 2]


def test_restricted_candidates_skip_infeasible_insertions(small_matrix):
    ev = KQBFInverse(small_matrix, weights=[2.0, 2.0, 3.0], capacity=4.0)
    sol = Solution([0])
    ev.evaluate(sol)
    rcl = RandomizedGreedyConstruction(alpha=1.0).restricted_candidates(ev, sol, [1, 2])
    assert rcl == [1]
    sol = Solution([0, 1])
    ev.evaluate(sol)
    assert RandomizedGreedyConstruction(alpha=1.0).restricted_candidates(ev, sol, [2]) == []


@pytest.mark.parametrize("alpha", [-0.1, 1.1])
def test_alpha_must_be_a_fraction(alpha):
    with pytest.raises(InvalidParameterError):
        RandomizedGreedyConstruction(alpha=alpha)


def test_iterations_must_be_positive(small_matrix):
    with pytest.raises(InvalidParameterError):
        GRASP(QBFInverse(small_matrix), 0)


@pytest.mark.parametrize("first_improving", [False, True])
def test_grasp_finds_unique_optimum(small_matrix, first_improving):
    ev = QBFInverse(small_matrix)
    rng = np.random.default_rng(42)
    grasp = GRASP(
        ev,
        5,
        construction=RandomizedGreedyConstruction(alpha=0.5),
        local_search=LocalSearch(ev, first_improving=first_improving, rng=rng),
        rng=rng,
    )
    best = grasp.solve()
    assert sorted(best) == [0]
    assert best.cost == pytest.approx(-2.0)
    assert len(grasp.best_history) == 5


def test_grasp_history_is_non_increasing(matrix_factory):
    ev = QBFInverse(matrix_factory(20, 3))
    grasp = GRASP(ev, 15, seed=7)
    best = grasp.solve()
    history = grasp.best_history
    assert all(b <= a for a, b in zip(history, history[1:]))
    assert best.cost == history[-1]
    assert best.cost == pytest.approx(ev.evaluate(Solution(best)))


def test_grasp_is_reproducible(matrix_factory):
    ev = QBFInverse(matrix_factory(18, 6))

    def once():
        rng = np.random.default_rng(42)
        grasp = GRASP(ev, 10, local_search=SampledLocalSearch(ev, rng=rng), rng=rng)
        best = grasp.solve()
        return sorted(best), best.cost, list(grasp.best_history)

    assert once() == once()


def test_grasp_on_kqbf_respects_capacity(matrix_factory):
    n = 12
    weights = np.arange(1, n + 1, dtype=float)
    ev = KQBFInverse(matrix_factory(n, 2), weights=weights, capacity=15.0)
    rng = np.random.default_rng(0)
    grasp = GRASP(ev, 10, local_search=LocalSearch(ev, rng=rng), rng=rng)
    best = grasp.solve()
    assert ev.is_feasible(best)


def test_iterate_leaves_disjoint_candidate_list(matrix_factory):
    ev = QBFInverse(matrix_factory(10, 1))
    grasp = GRASP(ev, 1, seed=3)
    solution, candidates = grasp.construction.construct(ev, grasp.rng)
    grasp.local_search.run(solution, candidates)
    assert is_disjoint(solution, candidates)
    assert sorted(list(solution) + candidates) == list(range(10))


def test_grasp_logs_incumbent_updates(small_matrix, caplog):
    caplog.set_level(logging.INFO, logger="mhopt")
    GRASP(QBFInverse(small_matrix), 3, seed=0).solve()
    messages = [r.getMessage() for r in caplog.records if r.name.startswith("mhopt")]
    assert any(m.startswith("(Iter. 0) BestSol = ") for m in messages)


def test_grasp_returns_copy_of_incumbent(small_matrix):
    grasp = GRASP(QBFInverse(small_matrix), 2, seed=1)
    best = grasp.solve()
    best.append(2)
    assert list(grasp.best_solution) == [0]
