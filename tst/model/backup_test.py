import unittest

import numpy as np

from model import BackupEntry, BackupQueue


def entry(residual, sigma=1.0, pi=1.0, mu=1.0, q=0.0, terminal=False):
    return BackupEntry(state=0, action=0, q=q, residual=residual, sigma=sigma, pi=pi, mu=mu, terminal=terminal)


class TestBackupQueue(unittest.TestCase):

    def test_rejects_zero_steps(self):
        with self.assertRaises(ValueError):
            BackupQueue(0)

    def test_capacity(self):
        queue = BackupQueue(2)
        for i in range(5):
            queue.push(entry(float(i)))
        self.assertEqual(len(queue), 3)
        self.assertEqual(queue[0].residual, 2.0)
        self.assertEqual(queue.pop().residual, 2.0)
        queue.clear()
        self.assertEqual(len(queue), 0)
        self.assertFalse(queue.ready)

    def test_propagate_two_steps(self):
        queue = BackupQueue(2)
        queue.push(entry(1.0, q=0.5))
        queue.push(entry(2.0, sigma=0.5, pi=0.5, mu=0.25))
        isr, g = queue.propagate(0.9)
        # z = 0.9 * ((1 - 1) * 0.5 + 0.5)
        self.assertAlmostEqual(g, 0.5 + 1.0 + 0.45 * 2.0)
        # (1 - 1 + 1 * 1 / 1) * (1 - 0.5 + 0.5 * 0.5 / 0.25)
        self.assertAlmostEqual(isr, 1.5)

    def test_terminal_entry_is_ratio_neutral(self):
        queue = BackupQueue(2)
        queue.push(entry(1.0))
        queue.push(entry(2.0, pi=0.0, mu=1.0, terminal=True))
        isr, g = queue.propagate(0.9)
        self.assertEqual(isr, 1.0)
        self.assertAlmostEqual(g, 2.8)

    def test_zero_behaviour_probability_propagates_non_finite(self):
        queue = BackupQueue(1)
        queue.push(entry(1.0, pi=0.5, mu=0.0))
        isr, _ = queue.propagate(0.9)
        self.assertFalse(np.isfinite(isr))

        queue.clear()
        queue.push(entry(1.0, pi=0.0, mu=0.0))
        isr, _ = queue.propagate(0.9)
        self.assertTrue(np.isnan(isr))


if __name__ == '__main__':
    unittest.main()
