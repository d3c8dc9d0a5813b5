"""
Config class.

The config object holds validated, realized (non-dict) settings for one module: a controller, a policy,
a value function or a parameter schedule.

Loading pipeline:
    DESCRIPTION:        A dict (or JSON file) per module. Nested modules are given as a dict with a "name"
                        field, a dict with a "base" JSON path plus overrides, or a JSON path on its own.
    CLASSLOADING:       Nested module classes are imported by name from the package named in their ConfigDesc.
                        The class must live in a module of the same name (e.g. policy.EpsilonGreedy.EpsilonGreedy).
    CONFIG CONSTRUCTION: Every item is checked eagerly; a failing check raises ValueError.

Notes:
    "None" in config is "null"
    Tuples don't exist in JSON. Use Lists.
"""
import keyword
import os
import json
import importlib
import warnings

from typing import Dict, Any, Callable, List, Type

from common.parameter import Parameter
from config.moduleframe import AbstractModuleFrame


class Config(object):

    def __init__(self,
                 module_class: Type[AbstractModuleFrame],
                 info_dict: Dict[str, Any],
                 relative_path: str = './'):
        """
        A configuration object which contains realized (non-dict) config items or nested Configs.

        ConfigItemDesc entries of the module class correspond to the attributes of a Config.

        :param module_class: The class of the module for which the Config is generated.
        :param info_dict: The dictionary containing the non-loaded info tied to this module class.
        :param relative_path: Relative path used for loading configs from files.
        :raises ValueError: if a required item is missing or an item fails its check.
        """
        if not (isinstance(module_class, type) and issubclass(module_class, AbstractModuleFrame)):
            raise TypeError('[{}] is not a valid configurable module.'.format(module_class))
        self.module_class = module_class
        self.name = module_class.__name__

        # Explicit dictionary that points specifically to subconfigs
        self.subconfigs = {}

        known_fields = {'name', 'module_class', '__relative_path'}
        for item in self.module_class.get_class_config():
            if item.name in info_dict:
                value = item.process(info_dict[item.name], relative_path)
            elif item.optional:
                value = item.process(item.default, relative_path)
            else:
                raise ValueError('Did not find required config [{}] for module [{}]'.format(item.name, self.name))

            if not item.check(value):
                raise ValueError('The item [{}] was invalid for module [{}]: [{}] ({})'
                                 .format(item.name, self.name, value, item.info))

            # Nested module descriptions are realized into Configs
            if isinstance(item, ConfigDesc):
                value = Config(value['module_class'], value, value['__relative_path'])
                self.subconfigs[value.name] = value
            setattr(self, item.name, value)
            known_fields.add(item.name)
        for k in info_dict:
            if k not in known_fields:
                warnings.warn('Unknown field [{}] in config for [{}].'.format(k, self.name))

    def find_config_for_class(self, cls: Type):
        """
        Return the subconfig belonging to a class.
        Traverses nested configurations in pre-order.

        :param cls: Class requested
        :return: Configuration
        :raises ValueError if class not found
        """
        target = cls.__name__
        if self.name == target:
            return self
        stack = list(self.subconfigs.items())
        while stack:
            module_name, subconfig = stack.pop()
            if target == module_name:
                return subconfig
            stack.extend(subconfig.subconfigs.items())
        raise ValueError('The config did not contain the requested class [{}].'.format(target))

    def find_config_for_instance(self, obj: Any):
        """
        Return the subconfig belonging to an instance by calling :func:`~config.Config.find_config_for_class`.
        """
        return self.find_config_for_class(type(obj))

    @classmethod
    def from_json(cls, module_class: Type[AbstractModuleFrame], path: str) -> 'Config':
        """
        Build a Config from a JSON file. Nested JSON paths are resolved relative to the file's directory.
        """
        with open(path, 'r') as f:
            info_dict = json.load(f)
        return cls(module_class, info_dict, os.path.dirname(path))

    def __repr__(self):
        return 'Config<{}>'.format(self.name)


class ConfigItemDesc(object):

    def __init__(self, name: str, check: Callable, info: str, optional: bool = False, default=None):
        """
        Initialize a configuration item's description.
        :param name: Name of the configuration item.
        :param check: Function which checks the validity of the item once loaded; returns a boolean.
        :param info: A helpful description associated with the item.
        :param optional: Whether this item is optional.
        :param default: Default value for item to fall back to if optional.
        """
        self.name = name
        self.info = info
        self.optional = optional
        self.default = default

        self.__check = check
        self.__repr_str = self.name + ': ' + self.info
        if not (name.isidentifier() and not keyword.iskeyword(name)):
            raise ValueError('[{}] is not a valid config item name.\n'
                             'A config name must be a valid attribute name.'.format(name))
        if not callable(check):
            raise TypeError('Check function must be callable.')
        if optional and default is None:
            raise ValueError('Optional ConfigItemDesc [{}] must have a default value set.'.format(name))
        if default is not None and not optional:
            raise ValueError('ConfigItemDesc [{}] cannot have default value with non-optional config item.'
                             .format(name))

    def check(self, value) -> bool:
        """
        Checks the value of the inputted data to make sure it is a valid fit.
        :param value: Value to set the configuration to.
        :return: Boolean of true or false.
        """
        return bool(self.__check(value))

    def process(self, entry, relative_path=None):
        """
        Perform sanitization or additional processing on input data.
        """
        return entry

    def __repr__(self):
        return self.__repr_str


class ParameterDesc(ConfigItemDesc):
    """
    Describes a step parameter: a plain number or a decay schedule dict, realized into a
        :class:`~common.parameter.Parameter`. The check receives the realized parameter.
    """

    def process(self, entry, relative_path=None):
        return Parameter.from_config(entry)


class ConfigDesc(ConfigItemDesc):

    def __init__(self, name: str, info: str, module_package: str = None, optional: bool = False, default=None):
        """
        Create a configuration description for a nested configuration (which corresponds to a sub-module).
        :param name: Name of config
        :param info: Information about the config and usually the contextual purpose of the module.
        :param module_package: The package the sub-module should be imported from. Defaults to the item name.
        :param optional: Whether the nested module may be omitted.
        :param default: Module description (dict or JSON path) used when omitted.
        """
        super().__init__(name, lambda data: True, info, optional, default)
        self.module_package = name if module_package is None else module_package

    def check(self, data) -> bool:
        """
        Check that the data is a valid unloaded config data dict.
        """
        return isinstance(data, dict) and 'module_class' in data

    def process(self, entry, relative_path=None):
        """
        Load data from json / sanitize data dictionary to correct form
        """
        return self._sanitize_and_load(entry, self.module_package, relative_path or './')

    @staticmethod
    def _sanitize_and_load(entry, package, relative_path):
        """
        Resolve a nested module description into a dict carrying its loaded module class.
        :param entry: JSON path, or dict with "name" / "module_class" / "base"
        :param package: Package the module class is imported from
        :param relative_path: Relative config path
        """
        if isinstance(entry, str):
            # Option 1: Just specified the file path to the subconfig
            module_config_dict = ConfigDesc._load_json(os.path.join(relative_path, entry), package)
        elif isinstance(entry, dict):
            entry = dict(entry)
            if 'base' in entry:
                # Option 2: Dictionary overriding a base JSON
                module_config_dict = ConfigDesc._load_json(os.path.join(relative_path, entry.pop('base')), package)
            elif 'name' in entry or 'module_class' in entry:
                # Option 3: Dictionary for quick definition (possibly with the class itself)
                module_config_dict = {}
                if 'name' not in entry:
                    module_config_dict['name'] = entry['module_class'].__name__
            else:
                raise ValueError('The provided config entry [{}] for module [{}] was invalid.'.format(entry, package))
            module_config_dict.update(entry)
        else:
            raise ValueError('Invalid config for [{}]. Expected a filepath or a dictionary, got [{}].'
                             .format(package, entry))
        if 'name' not in module_config_dict:
            raise ValueError('Configuration dictionaries must always contain the "name" field '
                             'which points to the module being loaded.')
        if 'module_class' not in module_config_dict:
            module_name = module_config_dict['name']
            module_class = getattr(importlib.import_module('.' + module_name, package=package), module_name)
            module_config_dict['module_class'] = module_class
        if '__relative_path' not in module_config_dict:
            module_config_dict['__relative_path'] = relative_path
        return module_config_dict

    @staticmethod
    def _load_json(module_json_file, package):
        if not os.path.exists(module_json_file):
            raise ValueError("Couldn't find the module config for [{}] in [{}].\n"
                             "Make sure that the path to the config JSON is specified relative "
                             "to the location of the parent config.".format(package, module_json_file))
        with open(module_json_file, 'r') as f:
            module_config_dict = json.load(f)
        module_config_dict['__relative_path'] = os.path.dirname(module_json_file)
        return module_config_dict
