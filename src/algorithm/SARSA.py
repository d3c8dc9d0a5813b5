from algorithm.TemporalDifference import TemporalDifference


class SARSA(TemporalDifference):
    def _get_action_value(self, next_state):
        next_action = self.sample_behaviour(next_state)
        return self.q_func.evaluate(next_state, next_action)
