from algorithm.TemporalDifference import TemporalDifference


class QLearning(TemporalDifference):
    def _get_action_value(self, next_state):
        return self.q_func.find_max(next_state)[1]
