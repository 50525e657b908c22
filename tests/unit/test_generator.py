import random

import pytest

from simbyte.core.errors import ConfigError
from simbyte.core.generator import GeneratorConfig, validate_byte_range
from simbyte.generators.motif import MotifConfig, MotifDataGenerator


def test_validate_byte_range():
    assert validate_byte_range(0, 255) == 256
    assert validate_byte_range(65, 90) == 26

    with pytest.raises(ConfigError) as exc_info:
        validate_byte_range(10, 300)
    assert exc_info.value.field == "end"
    assert exc_info.value.value == 300

    with pytest.raises(ConfigError) as exc_info:
        validate_byte_range(20, 20)
    assert exc_info.value.field == "start"


def test_generator_config_defaults():
    config = GeneratorConfig()
    assert config.start_byte == 0
    assert config.end_byte == 255
    assert config.seed is None


def test_generate_allocates_buffer():
    generator = MotifDataGenerator(MotifConfig(uniqueness=0.5))
    data = generator.generate(random.Random(1), 1000)

    assert isinstance(data, bytearray)
    assert len(data) == 1000


def test_payloads_share_one_instance():
    generator = MotifDataGenerator(MotifConfig(start_byte=65, end_byte=90, seed=3))
    payloads = list(generator.payloads(size=64, count=5))

    assert len(payloads) == 5
    assert generator.buffers_filled == 5
    for payload in payloads:
        assert len(payload) == 64
        assert bytes(payload) in generator.motifs


def test_payloads_seeded_from_config():
    config = MotifConfig(start_byte=0, end_byte=255, uniqueness=0.5, seed=11)
    first = list(MotifDataGenerator(config).payloads(size=500, count=4))
    second = list(MotifDataGenerator(config).payloads(size=500, count=4))
    assert first == second


def test_generator_name():
    assert MotifDataGenerator().name == "MotifDataGenerator"
