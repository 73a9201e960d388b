import numpy as np
import pytest

from mhopt.engine.algorithm.ga import Chromosome


def test_unevaluated_fitness_raises():
    c = Chromosome([0, 1, 1])
    assert not c.is_evaluated
    with pytest.raises(RuntimeError):
        _ = c.fitness


def test_gene_assignment_invalidates_fitness():
    c = Chromosome([0, 1, 1], fitness=3.0)
    assert c.fitness == 3.0
    c[0] = 1
    assert not c.is_evaluated
    assert c[0] == 1


def test_genes_view_is_read_only():
    c = Chromosome(np.array([0, 1], dtype=np.int8))
    with pytest.raises(ValueError):
        c.genes[0] = 1


def test_copy_is_independent():
    c = Chromosome([0, 1, 0], fitness=1.5)
    d = c.copy()
    d[1] = 0
    assert c[1] == 1
    assert c.fitness == 1.5
    assert len(d) == 3


def test_constructor_copies_input():
    genes = np.array([1, 0, 1], dtype=np.int8)
    c = Chromosome(genes)
    genes[0] = 0
    assert c[0] == 1


def test_rejects_multidimensional_genes():
    with pytest.raises(ValueError):
        Chromosome(np.zeros((2, 2)))
