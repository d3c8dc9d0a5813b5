"""
Base config module.

Guidelines:

Configs are dicts (or JSON files) that describe one module each: a controller, its behaviour policy,
a value function or a decaying step parameter.
    Nested modules are described by a dict with a "name" field, or by a path to a JSON file.
    Scalar step parameters may be given as a number or as a schedule dict, e.g.
        {"schedule": "exponential", "init": 0.5, "floor": 0.01, "decay": 0.99}

One special field may be in each nested module config:
    'base' which contains a file path of a base config.
    Any modifications in the config dict will override the imported base config.
"""
from .moduleframe import AbstractModuleFrame
from .config import Config, ConfigItemDesc, ConfigDesc, ParameterDesc
