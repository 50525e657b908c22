"""Core SIMBYTE components - stable abstractions."""

from .errors import ConfigError
from .generator import BaseDataGenerator, GeneratorConfig
from .random_source import NumpyRandomSource, RandomSource, make_random_source
from .registry import PluginRegistry

__all__ = [
    "BaseDataGenerator", "GeneratorConfig", "ConfigError", "PluginRegistry",
    "RandomSource", "NumpyRandomSource", "make_random_source",
]
