from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Decimal (SI) units that fit in 64 bits
Kilobyte = 1000
Megabyte = Kilobyte * 1000
Gigabyte = Megabyte * 1000
Terabyte = Gigabyte * 1000
Petabyte = Terabyte * 1000
Exabyte = Petabyte * 1000

# Binary (ISO/IEC) units that fit in 64 bits
Kibibyte = 1024
Mebibyte = Kibibyte * 1024
Gibibyte = Mebibyte * 1024
Tebibyte = Gibibyte * 1024
Pebibyte = Tebibyte * 1024
Exbibyte = Pebibyte * 1024

# largest byte count a 64 bit unsigned field can hold
MAX_SIZE = 2**64 - 1

# The case of the first letter selects the base: lowercase is base 10, uppercase is base 2.
# | decimal labels | decimal value | binary labels | binary value |
units = [
    (["k", "kb", "kB"], Kilobyte, ["K", "KB", "Kb", "KiB"], Kibibyte),
    (["m", "mb", "mB"], Megabyte, ["M", "MB", "Mb", "MiB"], Mebibyte),
    (["g", "gb", "gB"], Gigabyte, ["G", "GB", "Gb", "GiB"], Gibibyte),
    (["t", "tb", "tB"], Terabyte, ["T", "TB", "Tb", "TiB"], Tebibyte),
    (["p", "pb", "pB"], Petabyte, ["P", "PB", "Pb", "PiB"], Pebibyte),
    (["e", "eb", "eB"], Exabyte, ["E", "EB", "Eb", "EiB"], Exbibyte),
]

unit_table: Mapping[str, int] = MappingProxyType(
    {
        **{label: value for labels, value, _, _ in units for label in labels},
        **{label: value for _, _, labels, value in units for label in labels},
    }
)

# labels and values used to render a byte count: index 0 is a plain number of bytes
decimal_labels: Tuple[str, ...] = ("", "kb", "mb", "gb", "tb", "pb", "eb")
decimal_values: Tuple[int, ...] = (1, Kilobyte, Megabyte, Gigabyte, Terabyte, Petabyte, Exabyte)
binary_labels: Tuple[str, ...] = ("", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
binary_values: Tuple[int, ...] = (1, Kibibyte, Mebibyte, Gibibyte, Tebibyte, Pebibyte, Exbibyte)


def lookup_unit(label: str) -> Optional[int]:
    """
    Find the multiplier of the given unit label.
    The lookup is case-sensitive. Unknown labels yield None.
    """
    return unit_table.get(label)

