from abc import ABC, abstractmethod
from typing import Iterator, Mapping, Optional, Type
import logging

from pydantic import BaseModel, Field

from .errors import ConfigError
from .random_source import RandomSource, make_random_source

logger = logging.getLogger(__name__)

MIN_BYTE = 0
MAX_BYTE = 255


class GeneratorConfig(BaseModel):
    # Byte alphabet, inclusive at both ends. Range checks happen in
    # configure() so that they surface as ConfigError.
    start_byte: int = Field(default=0, description="Lowest byte value to appear in output")
    end_byte: int = Field(default=255, description="Highest byte value to appear in output")

    # Determinism
    seed: Optional[int] = Field(default=None, description="Seed for sources built by payloads()")


def validate_byte_range(start: int, end: int) -> int:
    """Check an inclusive byte alphabet and return the number of distinct values."""
    if start < MIN_BYTE or start > MAX_BYTE:
        raise ConfigError(f"start {start} out of range [0,255]", field="start", value=start)
    if end < MIN_BYTE or end > MAX_BYTE:
        raise ConfigError(f"end {end} out of range [0,255]", field="end", value=end)
    if start >= end:
        raise ConfigError(f"start {start} >= end {end}", field="start", value=start)
    return end - start + 1


class BaseDataGenerator(ABC):
    """Fills caller-supplied byte buffers.

    Implementations are single-caller objects: nothing here is locked, and any
    lazily built state is shared by every fill on the same instance.
    """

    config_model: Type[GeneratorConfig] = GeneratorConfig

    def __init__(self, config: GeneratorConfig):
        self.config = config
        self._buffers_filled = 0

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def init_from_properties(self, props: Mapping[str, str], key_prefix: str = "") -> None:
        pass

    @abstractmethod
    def fill(self, rng: RandomSource, data: bytearray) -> bytearray:
        pass

    @abstractmethod
    def estimated_max_compression_ratio(self) -> float:
        pass

    def generate(self, rng: RandomSource, size: int) -> bytearray:
        """Allocate a buffer of ``size`` bytes and fill it."""
        return self.fill(rng, bytearray(size))

    def payloads(
        self,
        size: int,
        count: int,
        rng: Optional[RandomSource] = None
    ) -> Iterator[bytearray]:
        """Yield ``count`` buffers of ``size`` bytes from this instance.

        When no source is given, one is seeded from ``config.seed``.
        """
        if rng is None:
            rng = make_random_source(self.config.seed)

        logger.debug("%s: producing %d payloads of %d bytes", self.name, count, size)
        for _ in range(count):
            payload = self.generate(rng, size)
            self._buffers_filled += 1
            yield payload

    @property
    def buffers_filled(self) -> int:
        return self._buffers_filled
