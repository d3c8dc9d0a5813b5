import random
import unittest

import numpy as np
import torch

from common import get_seed_state, set_initial_seed, set_seed_state
from common.utils import default_rng


class TestSeeding(unittest.TestCase):

    def test_initial_seed_repeats(self):
        set_initial_seed(7, use_pytorch=True)
        first = (random.random(), np.random.rand(), torch.rand(1).item())
        set_initial_seed(7, use_pytorch=True)
        self.assertEqual((random.random(), np.random.rand(), torch.rand(1).item()), first)

    def test_state_round_trip(self):
        set_initial_seed(3)
        state = get_seed_state(use_pytorch=True)
        first = (random.random(), np.random.rand(), torch.rand(1).item())
        set_seed_state(state, use_pytorch=True)
        self.assertEqual((random.random(), np.random.rand(), torch.rand(1).item()), first)

    def test_default_rng(self):
        self.assertIs(default_rng(), np.random)
        rng = np.random.default_rng(0)
        self.assertIs(default_rng(rng), rng)


if __name__ == '__main__':
    unittest.main()
