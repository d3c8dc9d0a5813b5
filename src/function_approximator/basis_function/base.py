import abc


class BasisFunction(abc.ABC):

    r"""ABC for basis functions used by linear value functions.

    A basis function takes in a state and returns a vector of features,
    referred to as :math:`\phi`. The :math:`\phi` vector is dotted with a
    weight column of the value function to calculate V(s) or Q(s, a).

    """

    @abc.abstractmethod
    def size(self):
        r"""Return the vector size of the basis function.

        Returns
        -------
        int
            The size of the :math:`\phi` vector.

        """
        pass  # pragma: no cover

    @abc.abstractmethod
    def project(self, state):
        r"""Calculate the :math:`\phi` vector for the given state.

        Parameters
        ----------
        state : numpy.array
            The state to get the features for.

        Returns
        -------
        numpy.array
            The :math:`\phi` vector, of length ``size()``.

        """
        pass  # pragma: no cover
