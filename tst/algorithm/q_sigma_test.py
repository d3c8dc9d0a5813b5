import unittest

import numpy as np

from algorithm import ExpectedSARSA, QSigma, SARSA
from common import Full, Terminal, Transition
from config import Config
from function_approximator import TabularQ, UpdateError
from policy import EpsilonGreedy, Greedy

from fixed_policy import FixedPolicy, episode


def q_sigma_config(**overrides):
    info = {'learning_rate': 0.1, 'discount_factor': 0.9, 'sigma': 1.0, 'n_steps': 2}
    info.update(overrides)
    return Config(QSigma, info)


def td_config(cls, **overrides):
    info = {'learning_rate': 0.1, 'discount_factor': 0.9}
    info.update(overrides)
    return Config(cls, info)


STEPS = [(0, 1, 0.5), (2, 0, -1.0), (1, 1, 2.0), (3, 0, 0.0), (2, 1, 1.0), (0, 0, 0.25)]
ACTIONS = {0: 1, 1: 1, 2: 0, 3: 0, 4: 1}


class FlakyQ(TabularQ):
    """
    Refuses its first update.
    """

    def __init__(self, *args):
        super().__init__(*args)
        self.refused = False

    def update(self, state, action, error):
        if not self.refused:
            self.refused = True
            raise UpdateError('refused')
        super().update(state, action, error)


class LyingPolicy(FixedPolicy):
    """
    Samples an action it assigns zero probability to.
    """

    def sample(self, state, rng=None):
        return (self.actions[state] + 1) % self.n_actions


class TestQSigma(unittest.TestCase):

    def test_two_step_episode(self):
        q = TabularQ(3, 2)
        policy = FixedPolicy(q, {0: 0, 1: 1, 2: 0})
        controller = QSigma(q_sigma_config(), q, behaviour_policy=policy, target_policy=policy)

        controller.handle_sequence([
            Transition(Full(0), 0, 1.0, Full(1)),
            Transition(Full(1), 1, 2.0, Terminal(2)),
        ])
        # g = 0 + 1 + 0.9 * 2, isr = 1
        self.assertAlmostEqual(q.evaluate(0, 0), 0.28, delta=1e-9)
        # The final entry is cleared before it is ever consumed
        self.assertEqual(q.evaluate(1, 1), 0.0)
        self.assertEqual(len(controller.backup), 0)

    def test_queue_never_exceeds_n_steps(self):
        q = TabularQ(5, 2)
        policy = FixedPolicy(q, ACTIONS)
        controller = QSigma(q_sigma_config(n_steps=3), q, behaviour_policy=policy, target_policy=policy)
        for t in episode(STEPS, 4)[:-1]:
            controller.handle_transition(t)
            self.assertLessEqual(len(controller.backup), 3)

    def test_full_sampling_one_step_is_sarsa(self):
        q1, q2 = TabularQ(5, 2), TabularQ(5, 2)
        p1, p2 = FixedPolicy(q1, ACTIONS), FixedPolicy(q2, ACTIONS)
        q_sigma = QSigma(q_sigma_config(n_steps=1), q1, behaviour_policy=p1, target_policy=p1)
        sarsa = SARSA(td_config(SARSA), q2, behaviour_policy=p2)

        for _ in range(3):
            transitions = episode(STEPS, 4)
            q_sigma.handle_sequence(transitions)
            sarsa.handle_sequence(transitions)
        np.testing.assert_allclose(q1.weights, q2.weights, atol=1e-12)
        self.assertTrue(np.any(q1.weights != 0))

    def test_pure_expectation_one_step_is_expected_sarsa(self):
        q1, q2 = TabularQ(5, 2), TabularQ(5, 2)
        rng = np.random.default_rng(1)
        q_sigma = QSigma(q_sigma_config(n_steps=1, sigma=0.0), q1, behaviour_policy=Greedy(q1), rng=rng)
        expected = ExpectedSARSA(td_config(ExpectedSARSA), q2, behaviour_policy=Greedy(q2))

        for _ in range(3):
            transitions = episode(STEPS, 4)
            q_sigma.handle_sequence(transitions)
            expected.handle_sequence(transitions)
        np.testing.assert_allclose(q1.weights, q2.weights, atol=1e-12)

    def test_shared_policy_is_ratio_neutral(self):
        q = TabularQ(5, 2)
        q.weights[:] = np.arange(10).reshape(5, 2) % 3
        policy = EpsilonGreedy(q, Config(EpsilonGreedy, {'epsilon': 0.3}))
        controller = QSigma(q_sigma_config(n_steps=3, sigma=0.7), q, behaviour_policy=policy,
                            target_policy=policy, rng=np.random.default_rng(2))

        ratios = []
        propagate = controller.backup.propagate

        def spy(gamma):
            isr, g = propagate(gamma)
            ratios.append(isr)
            return isr, g
        controller.backup.propagate = spy

        controller.handle_sequence(episode(STEPS, 4))
        self.assertTrue(ratios)
        np.testing.assert_allclose(ratios, 1.0)

    def test_failed_update_is_skipped(self):
        q = FlakyQ(3, 2)
        policy = FixedPolicy(q, {0: 0, 1: 0, 2: 0})
        controller = QSigma(q_sigma_config(n_steps=1), q, behaviour_policy=policy, target_policy=policy)
        with self.assertWarns(UserWarning):
            controller.handle_transition(Transition(Full(0), 0, 1.0, Full(1)))
        self.assertEqual(q.evaluate(0, 0), 0.0)

        controller.handle_transition(Transition(Full(1), 0, 1.0, Full(2)))
        self.assertAlmostEqual(q.evaluate(1, 0), 0.1)

    def test_zero_behaviour_probability_is_not_an_error(self):
        q = TabularQ(3, 2)
        target = FixedPolicy(q, {0: 1, 1: 1, 2: 1})
        behaviour = LyingPolicy(q, {0: 0, 1: 0, 2: 0})
        controller = QSigma(q_sigma_config(n_steps=1), q, behaviour_policy=behaviour, target_policy=target)
        controller.handle_transition(Transition(Full(0), 0, 1.0, Full(1)))
        self.assertTrue(np.isinf(q.evaluate(0, 0)))

    def test_nan_values_propagate(self):
        q = TabularQ(3, 2)
        q.weights[1] = np.nan
        controller = QSigma(q_sigma_config(n_steps=1), q, rng=np.random.default_rng(0))
        controller.handle_transition(Transition(Full(0), 0, 1.0, Full(1)))
        self.assertTrue(np.isnan(q.evaluate(0, 0)))
        self.assertEqual(len(controller.backup), 0)

    def test_handle_terminal_steps_parameters(self):
        q = TabularQ(3, 2)
        config = q_sigma_config(sigma={'schedule': 'exponential', 'init': 1.0, 'floor': 0.0, 'decay': 0.5},
                                learning_rate={'schedule': 'polynomial', 'init': 0.5, 'floor': 0.0,
                                               'exponent': 1.0})
        controller = QSigma(config, q)
        controller.handle_terminal()
        self.assertEqual(controller.sigma.value, 0.5)
        self.assertEqual(controller.alpha, 0.25)

    def test_default_policies(self):
        q = TabularQ(3, 2)
        controller = QSigma(q_sigma_config(), q, rng=np.random.default_rng(0))
        self.assertEqual(type(controller.behaviour_policy).__name__, 'Random')
        self.assertIsInstance(controller.target_policy, Greedy)
        q.update(1, 1, 1.0)
        self.assertEqual(controller.sample_target(1), 1)
        self.assertIn(controller.sample_behaviour(1), (0, 1))
        self.assertEqual(controller.predict_v(1), 1.0)
        self.assertEqual(controller.predict_qsa(1, 1), 1.0)


if __name__ == '__main__':
    unittest.main()
