from functools import reduce

import numpy as np

from function_approximator.basis_function.base import BasisFunction


class ExactBasis(BasisFunction):

    """Basis function with no functional approximation.

    This can only be used in domains with finite, discrete state-spaces.
    Every joint state value gets its own feature, so a linear value function
    over this basis behaves like a table.

    Parameters
    ----------
    num_states: list
        A list containing integers representing the number of possible values
        for each state variable.
    """

    def __init__(self, num_states):
        """Initialize ExactBasis."""
        num_states = np.asarray(num_states, dtype=int).reshape(-1)
        if len(np.where(num_states <= 0)[0]) != 0:
            raise ValueError('num_states value\'s must be > 0')
        self._num_states = num_states

        self._offsets = [1]
        for i in range(1, len(num_states)):
            self._offsets.append(self._offsets[-1]*num_states[i-1])

    def size(self):
        r"""Return the vector size of the basis function.

        Returns
        -------
        int
            The product of the number of values of each state variable.
        """
        return int(reduce(lambda x, y: x*y, self._num_states, 1))

    def get_state_index(self, state):
        """Return the non-zero index of the basis.

        Parameters
        ----------
        state: numpy.array
            The state to get the index for.

        Returns
        -------
        int
            The non-zero index of the basis

        Raises
        ------
        ValueError
            If the size of the state does not match the the size of the
            num_states list used during construction, or if any state
            variable is out of its range.
        """
        state = np.atleast_1d(np.asarray(state, dtype=int))
        if len(state) != len(self._num_states):
            raise ValueError('Number of state variables must match '
                             + 'size of num_states.')
        if len(np.where(state < 0)[0]) != 0:
            raise ValueError('state cannot contain negative values.')
        for state_var, num_state_values in zip(state, self._num_states):
            if state_var >= num_state_values:
                raise ValueError('state values must be < corresponding '
                                 + 'num_states value.')
        offset = 0
        for i, value in enumerate(state):
            offset += self._offsets[i] * value
        return int(offset)

    def project(self, state):
        r"""Return a :math:`\phi` vector that has a single non-zero value.

        Parameters
        ----------
        state: numpy.array

        Returns
        -------
        numpy.array
            :math:`\phi` vector
        """
        phi = np.zeros(self.size())
        phi[self.get_state_index(state)] = 1
        return phi
