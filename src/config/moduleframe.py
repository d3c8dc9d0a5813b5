import abc
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from config.config import ConfigItemDesc


class AbstractModuleFrame(abc.ABC):
    """
    A interface-like abstract class for configurable classes, which must implement get_class_config()
    """

    @classmethod
    @abc.abstractmethod
    def get_class_config(cls) -> List['ConfigItemDesc']:
        raise NotImplementedError()
