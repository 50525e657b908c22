"""
Typed lookups over flat string property mappings.

Harness configuration arrives as a mapping of string keys to string values,
with each generator's settings sitting under a key prefix
(e.g. "payload.startbyte"). These helpers resolve a single setting and turn
missing or malformed entries into ConfigError.
"""

from typing import Mapping

from .errors import ConfigError

# Setting names shared by the byte generators
STARTBYTE = "startbyte"
ENDBYTE = "endbyte"
UNIQUENESS = "uniqueness"
MOTIF_LENGTH = "motif_length"


def _get_raw(props: Mapping[str, str], key: str) -> str:
    value = props.get(key)
    if value is None:
        raise ConfigError(f"Expected configuration key {key} to be defined", field=key)
    return str(value).strip()


def get_int(props: Mapping[str, str], key: str) -> int:
    raw = _get_raw(props, key)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"Expected key {key} to be an integer but was {raw!r}",
                          field=key, value=raw) from None


def get_float(props: Mapping[str, str], key: str) -> float:
    raw = _get_raw(props, key)
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"Expected key {key} to be a number but was {raw!r}",
                          field=key, value=raw) from None


def has_key(props: Mapping[str, str], key: str) -> bool:
    return key in props
