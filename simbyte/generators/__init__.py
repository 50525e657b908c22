"""Built-in payload generators. Importing this package registers them."""

from .motif import MotifConfig, MotifDataGenerator
from .uniform import UniformConfig, UniformDataGenerator

__all__ = ["MotifConfig", "MotifDataGenerator", "UniformConfig", "UniformDataGenerator"]
