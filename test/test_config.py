from typing import ClassVar

import pytest
from attrs import define, fields

from fixbytes.config import size_field, size_fields
from fixbytes.json import to_json, from_json
from fixbytes.size import Size, InvalidUnitsError, NoNumberError
from fixbytes.units import Gigabyte, Kibibyte, Mebibyte


@define
class CacheConfig:
    kind: ClassVar[str] = "cache"
    max_entry: Size = size_field(description="Maximum size of a single cache entry")
    size: Size = size_field("512MiB", "Maximum size of the cache")
    chunk: Size = size_field(4 * Kibibyte)
    name: str = "cache"


def test_size_field() -> None:
    cfg = CacheConfig("1mb")
    assert cfg.max_entry == 1000000
    assert cfg.size == 512 * Mebibyte
    assert cfg.chunk == 4096
    assert isinstance(cfg.max_entry, Size)
    assert isinstance(cfg.size, Size)
    assert isinstance(cfg.chunk, Size)
    cfg = CacheConfig(12, size="1gb", chunk=Size(1024))
    assert cfg.max_entry == 12
    assert cfg.size == Gigabyte
    assert cfg.chunk == Kibibyte
    assert fields(CacheConfig).size.metadata["description"] == "Maximum size of the cache"


def test_size_field_errors() -> None:
    with pytest.raises(InvalidUnitsError):
        CacheConfig("12 parsecs")
    with pytest.raises(NoNumberError):
        size_field("huge")


def test_size_fields() -> None:
    assert size_fields(CacheConfig) == [
        {"name": "max_entry", "description": "Maximum size of a single cache entry"},
        {"name": "size", "default": "512MiB", "description": "Maximum size of the cache"},
        {"name": "chunk", "default": "4KiB"},
    ]


def test_config_json() -> None:
    cfg = CacheConfig("1.5mb")
    js = to_json(cfg)
    assert js == {"max_entry": "1.5mb", "size": "512MiB", "chunk": "4KiB", "name": "cache"}
    assert from_json(js, CacheConfig) == cfg
    assert from_json({"max_entry": 100}, CacheConfig).max_entry == 100
