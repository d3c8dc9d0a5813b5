import abc


class ElementModel(abc.ABC):
    """
    Per-controller learning state that is not stored by the environment (traces, pending backups...).

    Models vary greatly so this base class serves mostly as a placeholder. Every model can be reset at the end
        of an episode.
    """

    @staticmethod
    @abc.abstractmethod
    def get_name():
        """
        Returns the name this model is referred to by its controller
        :return: name
        """
        raise NotImplementedError

    @abc.abstractmethod
    def reset(self):
        raise NotImplementedError()
