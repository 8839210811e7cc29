"""
Tests for the Individual genome: construction, scoring, mutation and rendering.
"""

import unittest
import numpy as np

from bitstring_ga.individual import Individual


def count_ones(individual):
    return int(np.sum(individual.genes))


class TestIndividual(unittest.TestCase):
    """Test Individual construction and operations."""

    def setUp(self):
        self.rng = np.random.default_rng(42)

    def test_random_genes_length_and_values(self):
        """Random individuals have the requested size and only 0/1 genes."""
        for size in (1, 6, 64, 257):
            ind = Individual.random(size, count_ones, self.rng)
            self.assertEqual(len(ind.genes), size)
            self.assertEqual(len(ind), size)
            self.assertTrue(set(ind.genes.tolist()) <= {0, 1})

    def test_random_genes_are_mixed(self):
        """Large random genomes contain both bit values."""
        ind = Individual.random(500, count_ones, self.rng)
        ones = count_ones(ind)
        self.assertGreater(ones, 150)
        self.assertLess(ones, 350)

    def test_fitness_uses_injected_function(self):
        """fitness() delegates to the injected function."""
        calls = []

        def scorer(individual):
            calls.append(individual)
            return 3

        ind = Individual(np.array([1, 0, 1]), scorer)
        self.assertEqual(ind.fitness(), 3)
        self.assertEqual(calls, [ind])

    def test_mutate_zero_rate_keeps_genes(self):
        """mutate(0.0) never changes a gene."""
        ind = Individual.random(300, count_ones, self.rng)
        before = ind.genes.copy()

        for _ in range(20):
            ind.mutate(0.0, self.rng)

        np.testing.assert_array_equal(ind.genes, before)

    def test_mutate_full_rate_redraws_genes(self):
        """mutate(1.0) redraws every gene, about half ending up as 1."""
        ind = Individual(np.zeros(1000, dtype=np.uint8), count_ones)
        ind.mutate(1.0, self.rng)

        ones = count_ones(ind)
        self.assertGreater(ones, 400)
        self.assertLess(ones, 600)
        self.assertTrue(set(ind.genes.tolist()) <= {0, 1})

    def test_mutate_is_in_place(self):
        """Mutation changes the same gene array and returns None."""
        ind = Individual(np.zeros(100, dtype=np.uint8), count_ones)
        genes = ind.genes

        result = ind.mutate(1.0, self.rng)

        self.assertIsNone(result)
        self.assertIs(ind.genes, genes)

    def test_render(self):
        """render() keeps gene order."""
        ind = Individual(np.array([1, 1, 0, 0, 1, 1]), count_ones)
        self.assertEqual(ind.render(), "110011")
        self.assertEqual(str(ind), "110011")


if __name__ == '__main__':
    unittest.main()
