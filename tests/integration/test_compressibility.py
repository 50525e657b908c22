"""End-to-end checks that motif reuse produces cross-record compressibility.

zlib stands in for a storage engine's block compressor: records are
concatenated and compressed together, as a storage layer would.
"""

import random
import zlib

from simbyte.generators.motif import MotifConfig, MotifDataGenerator
from simbyte.generators.uniform import UniformConfig, UniformDataGenerator

RECORDS = 200
RECORD_SIZE = 1000


def compression_ratio(generator, seed: int) -> float:
    rng = random.Random(seed)
    blob = b"".join(bytes(p) for p in generator.payloads(RECORD_SIZE, RECORDS, rng))
    return len(zlib.compress(blob, 9)) / len(blob)


def motif_generator(uniqueness: float) -> MotifDataGenerator:
    return MotifDataGenerator(MotifConfig(start_byte=65, end_byte=90, uniqueness=uniqueness))


class TestCrossRecordCompressibility:

    def test_motif_output_beats_uniform(self):
        uniform = UniformDataGenerator(UniformConfig(start_byte=65, end_byte=90))
        uniform_ratio = compression_ratio(uniform, seed=1)
        motif_ratio = compression_ratio(motif_generator(0.0), seed=1)

        assert motif_ratio < uniform_ratio * 0.5, (
            f"motif ratio {motif_ratio:.3f} should be well below uniform {uniform_ratio:.3f}"
        )

    def test_ratio_grows_with_uniqueness(self):
        ratios = [compression_ratio(motif_generator(u), seed=7) for u in (0.0, 0.5, 1.0)]
        assert ratios[0] < ratios[1] < ratios[2]

    def test_single_record_gains_little(self):
        generator = motif_generator(0.0)
        record = bytes(generator.generate(random.Random(5), 100))

        # A lone short record has no repeated motifs to exploit
        assert len(zlib.compress(record, 9)) / len(record) > 0.5
