"""SIMBYTE - Synthetic byte payloads with tunable compressibility."""

__version__ = "0.1.0"
__description__ = "Synthetic byte payload generators for storage benchmarks"

from .core.errors import ConfigError
from .core.generator import BaseDataGenerator, GeneratorConfig

__all__ = ["BaseDataGenerator", "GeneratorConfig", "ConfigError"]
