"""
Episode records that can be replayed into controllers as transitions.
"""
from typing import Iterator, Tuple

import numpy as np

from common.transition import Full, Terminal, Transition


class Trajectory(object):
    """
    A time-ordered data object that efficiently manages access to Observations, Actions and Rewards.

    Row t holds the observation the action was taken in, the action, and the reward received for it.
    """

    @classmethod
    def allocate(cls, max_time: int, obs_shape: Tuple = (), obs_dtype='float64', act_dtype='int64'):
        """
        Allocate the trajectory data for an episode of at most max_time steps.

        Since reward is consistently a single scalar, we do not need shape information for it.
        :param max_time: The maximum length of the episode the trajectory is recorded from.
        :param obs_shape: Shape of a single observation
        :param obs_dtype: Observation dtype
        :param act_dtype: Action dtype
        """
        observations = np.zeros((max_time,) + tuple(obs_shape), obs_dtype)
        actions = np.zeros(max_time, act_dtype)
        rewards = np.zeros(max_time, 'float64')
        return cls(observations, actions, rewards, time=0)

    def __init__(self, obs, act, rew, time, done=False):
        self.__observations = obs
        self.__actions = act
        self.__rewards = rew
        self.time = time
        self.done = done
        self.final_observation = None

    def append(self, obs, act, reward):
        """
        Append data to the trajectory.
        :param obs: Observation data
        :param act: Action data
        :param reward: Reward data
        """
        if self.time >= len(self.__rewards):
            raise IndexError('Trajectory is full ({} steps).'.format(len(self.__rewards)))
        self.__observations[self.time] = obs
        self.__actions[self.time] = act
        self.__rewards[self.time] = reward
        self.time += 1

    def finish(self, final_obs, done: bool):
        """
        Record the observation reached after the last action and whether it ends the episode.
        """
        self.final_observation = final_obs
        self.done = done

    @property
    def observations(self) -> np.ndarray:
        return self.__observations[:self.time]

    @property
    def actions(self) -> np.ndarray:
        return self.__actions[:self.time]

    @property
    def rewards(self) -> np.ndarray:
        return self.__rewards[:self.time]

    def __len__(self):
        return self.time

    def transitions(self) -> Iterator[Transition]:
        """
        Replay the trajectory as transitions. The last transition leads to the final observation, which is
            terminal when the episode is done. Without a final observation the last row is not replayed.
        """
        obs, act, rew = self.observations, self.actions, self.rewards
        for t in range(self.time - 1):
            yield Transition(Full(obs[t]), act[t].item(), float(rew[t]), Full(obs[t + 1]))
        if self.time and self.final_observation is not None:
            to = Terminal(self.final_observation) if self.done else Full(self.final_observation)
            yield Transition(Full(obs[-1]), act[-1].item(), float(rew[-1]), to)
