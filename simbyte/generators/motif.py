"""
Motif data generator.

Emulates one property of real data that compression algorithms exploit: the
same byte sequences ("motifs") recur across records. A short buffer from this
generator is not very compressible on its own, because no motif repeats
inside it, but many buffers concatenated together draw on the same fixed
motif buffer and compress well.

Output is produced in chunks of up to MAX_CHUNK_SIZE bytes. Each chunk is
either fresh random bytes or a slice copied from the motif buffer. The
uniqueness parameter is the probability of a fresh chunk:

- uniqueness = 0.0: all data drawn from motifs
- uniqueness = 1.0: completely independent bytes
"""

import logging
import math
from typing import Mapping, Optional

from pydantic import Field

from ..core import properties
from ..core.errors import ConfigError
from ..core.generator import BaseDataGenerator, GeneratorConfig, validate_byte_range
from ..core.random_source import RandomSource
from ..core.registry import register_generator

logger = logging.getLogger(__name__)

MAX_CHUNK_SIZE = 128
DEFAULT_MOTIF_BUFFER_SIZE = 512


class MotifConfig(GeneratorConfig):
    """Configuration for motif-based payload generation."""

    uniqueness: float = Field(default=0.0, description="Probability that a chunk is fresh random bytes")
    motif_length: int = Field(default=DEFAULT_MOTIF_BUFFER_SIZE, ge=1, description="Size of the shared motif buffer")


@register_generator("motif")
class MotifDataGenerator(BaseDataGenerator):
    """Byte generator whose output shares recurring motifs across calls."""

    config_model = MotifConfig

    def __init__(self, config: Optional[GeneratorConfig] = None):
        if config is None:
            motif_config = MotifConfig()
        elif isinstance(config, MotifConfig):
            motif_config = config
        else:
            motif_config = MotifConfig(**config.model_dump())

        super().__init__(motif_config)
        self.motif_config = motif_config

        # Shared motif buffer, built on the first fill so that it consumes
        # the caller's random source
        self._motifs: Optional[bytes] = None

        self.configure(
            motif_config.start_byte,
            motif_config.end_byte,
            motif_config.uniqueness,
            motif_config.motif_length
        )

    def configure(
        self,
        start: int,
        end: int,
        uniqueness: float,
        motif_buffer_size: int = DEFAULT_MOTIF_BUFFER_SIZE
    ) -> None:
        """Generate bytes from ``start`` to ``end``, inclusive at both ends.

        Any existing motif buffer is discarded and rebuilt on the next fill.
        """
        byte_range = validate_byte_range(start, end)
        if motif_buffer_size < 1:
            raise ConfigError(f"motif buffer size {motif_buffer_size} must be >= 1",
                              field="motif_buffer_size", value=motif_buffer_size)

        if not 0.0 <= uniqueness <= 1.0:
            # Only ever compared against a uniform [0,1) draw
            logger.warning("uniqueness %r outside [0.0, 1.0]; fill treats it as %r",
                           uniqueness, _clamp_uniqueness(uniqueness))

        self.start = start
        self.range = byte_range
        self.uniqueness = uniqueness
        self.motif_bytes = motif_buffer_size
        self._motifs = None

        logger.debug("%s configured: bytes [%d, %d], uniqueness=%s, motif_bytes=%d",
                     self.name, start, end, uniqueness, motif_buffer_size)

    def init_from_properties(self, props: Mapping[str, str], key_prefix: str = "") -> None:
        start_byte = properties.get_int(props, key_prefix + properties.STARTBYTE)
        end_byte = properties.get_int(props, key_prefix + properties.ENDBYTE)
        uniqueness = properties.get_float(props, key_prefix + properties.UNIQUENESS)

        motif_key = key_prefix + properties.MOTIF_LENGTH
        if properties.has_key(props, motif_key):
            self.configure(start_byte, end_byte, uniqueness, properties.get_int(props, motif_key))
        else:
            self.configure(start_byte, end_byte, uniqueness)

    @property
    def motifs(self) -> Optional[bytes]:
        """The shared motif buffer, or None before the first fill."""
        return self._motifs

    @property
    def chunk_size(self) -> int:
        return min(MAX_CHUNK_SIZE, self.motif_bytes)

    def estimated_max_compression_ratio(self) -> float:
        """Upper bound on the compression ratio of this generator's output.

        Returns a number between 0.0 (perfectly compressible) and 1.0
        (incompressible). Fresh bytes are uniform over the alphabet, so they
        cost range / 255 of a byte each; motif bytes are assumed to compress
        away entirely.
        """
        char_compression = self.range / 255.0
        return min(1.0, char_compression * _clamp_uniqueness(self.uniqueness))

    def _build_motifs(self, rng: RandomSource) -> bytes:
        motifs = bytes(self.start + rng.randrange(self.range) for _ in range(self.motif_bytes))
        logger.debug("%s: built %d byte motif buffer", self.name, len(motifs))
        return motifs

    def fill(self, rng: RandomSource, data: bytearray) -> bytearray:
        if self._motifs is None:
            self._motifs = self._build_motifs(rng)

        n = len(data)
        chunk = self.chunk_size
        start = self.start
        byte_range = self.range

        for i in range(0, n, chunk):
            chunk_end = min(n, i + chunk)
            if rng.random() < self.uniqueness:
                # New sequence of unique bytes
                data[i:chunk_end] = bytes(start + rng.randrange(byte_range) for _ in range(i, chunk_end))
            else:
                # Copy a slice of the shared motifs
                this_chunk = chunk_end - i
                k = rng.randrange(self.motif_bytes - this_chunk + 1)
                data[i:chunk_end] = self._motifs[k:k + this_chunk]

        return data


def _clamp_uniqueness(uniqueness: float) -> float:
    # NaN never wins a comparison, so fill copies every chunk from motifs
    if math.isnan(uniqueness):
        return 0.0
    return min(1.0, max(0.0, uniqueness))
