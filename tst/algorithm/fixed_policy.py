import numpy as np

from policy import Policy


class FixedPolicy(Policy):
    """
    Deterministic policy from a state -> action map, for hand-checkable tests.
    """

    def __init__(self, q_func, actions):
        super().__init__(q_func)
        self.actions = actions

    def probabilities(self, state):
        probs = np.zeros(self.n_actions)
        probs[self.actions[state]] = 1.0
        return probs

    def mode(self, state):
        return self.actions[state]


def episode(steps, final_state):
    """
    Build transitions from (state, action, reward) steps, ending in a terminal final_state.
    """
    from common import Full, Terminal, Transition
    transitions = []
    for i, (s, a, r) in enumerate(steps):
        ns = steps[i + 1][0] if i + 1 < len(steps) else final_state
        to = Full(ns) if i + 1 < len(steps) else Terminal(ns)
        transitions.append(Transition(Full(s), a, r, to))
    return transitions
