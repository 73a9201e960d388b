import math

from mhopt.foundation.problem.solution import Solution, is_disjoint, make_candidate_list


def test_new_solution_is_empty_with_infinite_cost():
    sol = Solution()
    assert list(sol) == []
    assert math.isinf(sol.cost)


def test_copy_is_independent_and_keeps_cost():
    sol = Solution([3, 1], cost=-4.5)
    clone = sol.copy()
    clone.append(7)
    clone.cost = 0.0
    assert list(sol) == [3, 1]
    assert sol.cost == -4.5
    assert isinstance(clone, Solution)


def test_repr_lists_cost_and_elements():
    text = repr(Solution([2, 0], cost=3.0))
    assert "cost=[3.0]" in text
    assert "size=[2]" in text


def test_candidate_list_is_complement_of_solution():
    sol = Solution([4, 1])
    cl = make_candidate_list(6, sol)
    assert cl == [0, 2, 3, 5]
    assert is_disjoint(sol, cl)
    assert sorted(cl + list(sol)) == list(range(6))


def test_candidate_list_of_empty_solution_is_full_domain():
    assert make_candidate_list(3) == [0, 1, 2]
    assert not is_disjoint([1], [1, 2])
