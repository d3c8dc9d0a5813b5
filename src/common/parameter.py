"""
Step parameters which may decay over episodes (learning rates, exploration rates, discount factors...).

A parameter is read through its value and advanced with step(), which controllers call once per episode.
"""
import abc
import numbers
from typing import Any, Dict, Union


class Parameter(abc.ABC):

    @classmethod
    def from_config(cls, data: Union[float, int, Dict[str, Any], 'Parameter']) -> 'Parameter':
        """
        Build a parameter from a config entry: a plain number, or a schedule dict such as
            {"schedule": "exponential", "init": 0.5, "floor": 0.01, "decay": 0.99}
            {"schedule": "polynomial", "init": 1.0, "floor": 0.05, "exponent": 0.5}
        """
        if isinstance(data, Parameter):
            return data
        if isinstance(data, numbers.Real) and not isinstance(data, bool):
            return Fixed(float(data))
        if isinstance(data, dict):
            schedule = data.get('schedule', 'fixed')
            try:
                if schedule == 'fixed':
                    return Fixed(float(data['value']))
                elif schedule == 'exponential':
                    return Exponential(float(data['init']), float(data.get('floor', 0.0)), float(data['decay']))
                elif schedule == 'polynomial':
                    return Polynomial(float(data['init']), float(data.get('floor', 0.0)), float(data['exponent']))
            except KeyError as e:
                raise ValueError('Parameter schedule [{}] is missing field {}.'.format(schedule, e))
            raise ValueError('Unknown parameter schedule [{}].'.format(schedule))
        raise ValueError('Cannot build a parameter from [{}].'.format(data))

    @property
    @abc.abstractmethod
    def value(self) -> float:
        raise NotImplementedError()

    def step(self):
        """
        Advance the schedule by one episode.
        """
        pass

    def back(self):
        """
        Undo one step of the schedule.
        """
        pass

    @property
    def bounds(self):
        """
        The (lowest, highest) values this parameter can take.
        """
        return self.value, self.value

    def __float__(self):
        return self.value

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, self.value)


class Fixed(Parameter):

    def __init__(self, value: float):
        self.__value = value

    @property
    def value(self) -> float:
        return self.__value


class Exponential(Parameter):
    """
    max(init * decay^count, floor), with count starting at 0.
    """

    def __init__(self, init: float, floor: float, decay: float):
        # Values must only move from init toward floor, so that bounds hold for every step
        if not 0 < decay <= 1:
            raise ValueError('Exponential decay must be in (0, 1], got {}.'.format(decay))
        self.init = init
        self.floor = floor
        self.decay = decay
        self.count = 0

    @property
    def value(self) -> float:
        return max(self.init * self.decay ** self.count, self.floor)

    def step(self):
        self.count += 1

    def back(self):
        self.count = max(0, self.count - 1)

    @property
    def bounds(self):
        return min(self.init, self.floor), max(self.init, self.floor)


class Polynomial(Parameter):
    """
    max(init / count^exponent, floor), with count starting at 1.
    """

    def __init__(self, init: float, floor: float, exponent: float):
        if exponent < 0:
            raise ValueError('Polynomial exponent must be >= 0, got {}.'.format(exponent))
        self.init = init
        self.floor = floor
        self.exponent = exponent
        self.count = 1

    @property
    def value(self) -> float:
        return max(self.init / self.count ** self.exponent, self.floor)

    def step(self):
        self.count += 1

    def back(self):
        self.count = max(1, self.count - 1)

    @property
    def bounds(self):
        return min(self.init, self.floor), max(self.init, self.floor)
