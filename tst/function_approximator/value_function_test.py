import unittest

import numpy as np

from function_approximator import LinearQ, LinearV, TabularQ, TabularV
from function_approximator.basis_function import ExactBasis, Identity
from function_approximator.gradient import ColumnarGradient, SparseGradient, TileGradient


class TestTabular(unittest.TestCase):

    def test_q_evaluate_and_update(self):
        q = TabularQ(4, 3)
        q.update(2, 1, 0.5)
        self.assertEqual(q.evaluate(2, 1), 0.5)
        np.testing.assert_array_equal(q.evaluate_all(2), [0.0, 0.5, 0.0])
        self.assertEqual(q.weights_dim, (4, 3))
        self.assertEqual(q.n_weights, 12)
        self.assertEqual(q.n_actions, 3)

    def test_q_find_max_last_index_wins(self):
        q = TabularQ(1, 3)
        q.weights[0] = [5.0, 5.0, 1.0]
        self.assertEqual(q.find_max(0), (1, 5.0))

    def test_q_grad_is_tile(self):
        q = TabularQ(4, 3)
        g = q.grad(2, 1)
        self.assertIsInstance(g, TileGradient)
        self.assertEqual(g.index, (2, 1))
        q.update_grad_scaled(g, 0.25)
        self.assertEqual(q.evaluate(2, 1), 0.25)
        self.assertIsInstance(q.zero_gradient(), SparseGradient)

    def test_v(self):
        v = TabularV(3)
        v.update(1, -2.0)
        self.assertEqual(v.evaluate(1), -2.0)
        v.update_grad(v.grad(1))
        self.assertEqual(v.evaluate(1), -1.0)

    def test_out_of_range_state(self):
        q = TabularQ(2, 2)
        with self.assertRaises(IndexError):
            q.evaluate(5, 0)


class TestLinear(unittest.TestCase):

    def test_exact_basis_matches_table(self):
        q = LinearQ(ExactBasis([2, 3]), 2)
        self.assertEqual(q.weights_dim, (6, 2))
        q.update(np.array([1, 2]), 1, 0.7)
        self.assertAlmostEqual(q.evaluate(np.array([1, 2]), 1), 0.7)
        self.assertEqual(q.evaluate(np.array([0, 2]), 1), 0.0)

    def test_identity_basis(self):
        q = LinearQ(Identity(2, bias=True), 2)
        state = np.array([1.0, 2.0])
        q.update(state, 0, 1.0)
        # w[:, 0] = [1, 2, 1]
        np.testing.assert_allclose(q.weights[:, 0], [1.0, 2.0, 1.0])
        self.assertAlmostEqual(q.evaluate(state, 0), 6.0)
        np.testing.assert_allclose(q.evaluate_all(state), [6.0, 0.0])

    def test_grad_is_columnar(self):
        q = LinearQ(Identity(2), 3)
        g = q.grad(np.array([1.0, -1.0]), 2)
        self.assertIsInstance(g, ColumnarGradient)
        np.testing.assert_array_equal(g.to_dense(), [[0, 0, 1], [0, 0, -1]])
        q.update_grad_scaled(g, 0.5)
        self.assertAlmostEqual(q.evaluate(np.array([1.0, -1.0]), 2), 1.0)

    def test_v(self):
        v = LinearV(Identity(3))
        v.update(np.array([1.0, 0.0, 2.0]), 1.0)
        self.assertAlmostEqual(v.evaluate(np.array([1.0, 1.0, 1.0])), 3.0)
        self.assertEqual(v.grad(np.zeros(3)).dim, (3, 1))

    def test_bad_state(self):
        with self.assertRaises(ValueError):
            ExactBasis([2, 2]).project(np.array([0, 2]))
        with self.assertRaises(ValueError):
            Identity(2).project(np.zeros(3))

    def test_gradient_shape_mismatch(self):
        q = LinearQ(Identity(2), 2)
        with self.assertRaises(ValueError):
            q.update_grad_scaled(ColumnarGradient((3, 2)), 1.0)


if __name__ == '__main__':
    unittest.main()
