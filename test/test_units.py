import pytest

from fixbytes.units import (
    unit_table,
    lookup_unit,
    MAX_SIZE,
    Kilobyte,
    Megabyte,
    Gigabyte,
    Terabyte,
    Petabyte,
    Exabyte,
    Kibibyte,
    Mebibyte,
    Gibibyte,
    Tebibyte,
    Pebibyte,
    Exbibyte,
)


def test_constants() -> None:
    assert [Kilobyte, Megabyte, Gigabyte, Terabyte, Petabyte, Exabyte] == [1000**i for i in range(1, 7)]
    assert [Kibibyte, Mebibyte, Gibibyte, Tebibyte, Pebibyte, Exbibyte] == [1024**i for i in range(1, 7)]
    assert Exbibyte < MAX_SIZE
    assert 16 * Kibibyte == 16384


def test_unit_table() -> None:
    assert len(unit_table) == 42
    for label, value in unit_table.items():
        assert 1 <= len(label) <= 3
        # the case of the first letter defines the base
        if label[0].islower():
            assert value in (Kilobyte, Megabyte, Gigabyte, Terabyte, Petabyte, Exabyte)
        else:
            assert value in (Kibibyte, Mebibyte, Gibibyte, Tebibyte, Pebibyte, Exbibyte)
    assert unit_table["kB"] == Kilobyte
    assert unit_table["Kb"] == Kibibyte
    assert unit_table["EiB"] == Exbibyte


def test_unit_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        unit_table["b"] = 1  # type: ignore


def test_lookup_unit() -> None:
    assert lookup_unit("mb") == Megabyte
    assert lookup_unit("MB") == Mebibyte
    assert lookup_unit("mib") is None
    assert lookup_unit("") is None
    assert lookup_unit("bytes") is None


def test_first_letter_selects_base() -> None:
    # "KB" is 1024 bytes, not the SI kilobyte
    assert lookup_unit("KB") == Kibibyte
    assert lookup_unit("kb") == Kilobyte
    assert lookup_unit("K") == Kibibyte
    assert lookup_unit("k") == Kilobyte
    prefixes = "kmgtpe"
    for label, value in unit_table.items():
        base = Kibibyte if label[0].isupper() else Kilobyte
        assert value == base ** (prefixes.index(label[0].lower()) + 1)
