"""Uniform data generator: every byte drawn independently from the alphabet."""

import logging
from typing import Mapping, Optional

from ..core import properties
from ..core.generator import BaseDataGenerator, GeneratorConfig, validate_byte_range
from ..core.random_source import RandomSource
from ..core.registry import register_generator

logger = logging.getLogger(__name__)


class UniformConfig(GeneratorConfig):
    """Configuration for uniform random payloads."""


@register_generator("uniform")
class UniformDataGenerator(BaseDataGenerator):
    """Incompressible baseline: independent uniform bytes in [start, end]."""

    config_model = UniformConfig

    def __init__(self, config: Optional[GeneratorConfig] = None):
        if config is None:
            uniform_config = UniformConfig()
        elif isinstance(config, UniformConfig):
            uniform_config = config
        else:
            uniform_config = UniformConfig(**config.model_dump())

        super().__init__(uniform_config)
        self.configure(uniform_config.start_byte, uniform_config.end_byte)

    def configure(self, start: int, end: int) -> None:
        self.range = validate_byte_range(start, end)
        self.start = start
        logger.debug("%s configured: bytes [%d, %d]", self.name, start, end)

    def init_from_properties(self, props: Mapping[str, str], key_prefix: str = "") -> None:
        self.configure(
            properties.get_int(props, key_prefix + properties.STARTBYTE),
            properties.get_int(props, key_prefix + properties.ENDBYTE)
        )

    def estimated_max_compression_ratio(self) -> float:
        return min(1.0, self.range / 255.0)

    def fill(self, rng: RandomSource, data: bytearray) -> bytearray:
        start = self.start
        byte_range = self.range
        data[:] = bytes(start + rng.randrange(byte_range) for _ in range(len(data)))
        return data
