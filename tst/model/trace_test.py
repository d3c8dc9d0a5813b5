import unittest

import numpy as np

from function_approximator.gradient import SparseGradient, TileGradient
from model import AccumulatingTrace, DutchTrace, ReplacingTrace

DIM = (2, 2)


def tile(index, activation=1.0):
    return TileGradient(DIM, index, activation)


class TestTraces(unittest.TestCase):

    def test_accumulating(self):
        trace = AccumulatingTrace(SparseGradient.zeros(DIM))
        trace.update(tile((0, 0)))
        trace.scale(0.5)
        trace.update(tile((0, 0)))
        trace.update(tile((1, 1)))
        np.testing.assert_allclose(trace.to_dense(), [[1.5, 0], [0, 1]])

    def test_accumulating_scaled_update(self):
        trace = AccumulatingTrace(SparseGradient.zeros(DIM))
        trace.update(tile((0, 1), 2.0))
        trace.scaled_update(0.25, tile((0, 1)))
        np.testing.assert_allclose(trace.to_dense(), [[0, 1.5], [0, 0]])

    def test_replacing_clamps(self):
        trace = ReplacingTrace(SparseGradient.zeros(DIM))
        for _ in range(3):
            trace.update(tile((0, 0)))
            trace.update(tile((1, 0), -1.0))
        np.testing.assert_allclose(trace.to_dense(), [[1, 0], [-1, 0]])

    def test_dutch(self):
        trace = DutchTrace(0.5, SparseGradient.zeros(DIM))
        trace.update(tile((0, 0)))
        trace.update(tile((0, 0)))
        # (1 - 0.5) * 1 + 1
        np.testing.assert_allclose(trace.to_dense()[0, 0], 1.5)
        trace.scaled_update(0.5, tile((0, 0)))
        # 0.5 * (1 - 0.5) * 1.5 + 1
        np.testing.assert_allclose(trace.to_dense()[0, 0], 1.375)

    def test_reset_restores_fresh_trajectory(self):
        def run(trace):
            trace.scale(0.9)
            trace.update(tile((0, 1)))
            trace.scale(0.9)
            trace.update(tile((1, 0), 0.5))
            return trace.to_dense()

        for cls in (AccumulatingTrace, ReplacingTrace):
            fresh = run(cls(SparseGradient.zeros(DIM)))
            used = cls(SparseGradient.zeros(DIM))
            run(used)
            used.reset()
            np.testing.assert_array_equal(used.to_dense(), np.zeros(DIM))
            np.testing.assert_array_equal(run(used), fresh)
            used.reset()
            used.reset()
            np.testing.assert_array_equal(run(used), fresh)

    def test_initial_buffer_not_aliased(self):
        initial = SparseGradient.zeros(DIM)
        trace = AccumulatingTrace(initial)
        trace.update(tile((0, 0)))
        np.testing.assert_array_equal(initial.to_dense(), np.zeros(DIM))


if __name__ == '__main__':
    unittest.main()
