"""
Byte sizes in a human-friendly way.

Historically it is ambiguous whether 1KB means 1000 or 1024 bytes.
The case of the first letter of the unit resolves the ambiguity:
lowercase means base 10 and uppercase means base 2.
So 4k, 4kb and 4kB are 4000 bytes, while 4K, 4KB, 4Kb and 4KiB are 4096 bytes.

Sizes are rendered with two-letter lowercase units for base 10 (e.g. "mb")
and three-letter mixed case units for base 2 (e.g. "MiB").
"""
from typing import Any, Union

from parsy import ParseError

from fixbytes.parse_util import (
    delimiter_dp,
    digits_dp,
    fraction_dp,
    surrounding_whitespace,
    unit_label_dp,
)
from fixbytes.units import (
    MAX_SIZE,
    binary_labels,
    binary_values,
    decimal_labels,
    decimal_values,
    lookup_unit,
)


class SizeParseError(ValueError):
    """
    Base class of all errors raised when a size specification can not be parsed.
    """

    reason = "invalid size"

    def __init__(self, text: str) -> None:
        super().__init__(f"{self.reason}: {text!r}")
        self.text = text


class NoNumberError(SizeParseError):
    reason = "no number in size"


class InvalidFractionalPartError(SizeParseError):
    reason = "invalid fractional part"


class MissingUnitsError(SizeParseError):
    reason = "missing units"


class InvalidDelimiterError(SizeParseError):
    reason = "invalid delimiter between number and units"


class InvalidUnitsError(SizeParseError):
    reason = "invalid units"


class SizeOverflowError(SizeParseError):
    reason = "size does not fit into 64 bits"


def _check_range(num_bytes: Any) -> int:
    # bool is an int, but never a byte count
    if isinstance(num_bytes, bool) or not isinstance(num_bytes, int):
        raise TypeError(f"Expected a number of bytes, got {type(num_bytes).__name__}")
    if num_bytes < 0 or num_bytes > MAX_SIZE:
        raise ValueError(f"Number of bytes out of range [0, {MAX_SIZE}]: {num_bytes}")
    return num_bytes


def parse_size(text: str) -> int:
    """
    Convert a size specification like "4MiB" into the number of bytes like 4194304.
    The number has to be a whole number. As special case the fractions ".0" and ".5" are allowed,
    like "1.5mb" to define 1500000 bytes. A single space is allowed between number and units.
    A number without units is an exact number of bytes.
    :param text: the size specification.
    :return: the number of bytes.
    :raises SizeParseError: if the specification is not valid. See the subclasses for details.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a size string, got {type(text).__name__}")
    spec = text.strip(surrounding_whitespace)

    try:
        digits, rest = digits_dp.parse_partial(spec)
    except ParseError:
        raise NoNumberError(text) from None

    # MAX_SIZE has 20 digits: longer numbers can never fit
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_SIZE)):
        raise SizeOverflowError(text)
    num = int(significant)

    if rest:
        # allow half units like 2.5GiB, and .0 for parity
        half = False
        if rest.startswith("."):
            try:
                half, rest = fraction_dp.parse_partial(rest)
            except ParseError:
                raise InvalidFractionalPartError(text) from None

        _, rest = delimiter_dp.parse_partial(rest)
        if not rest:
            raise MissingUnitsError(text)

        try:
            label = unit_label_dp.parse(rest)
        except ParseError:
            raise InvalidDelimiterError(text) from None

        multiplier = lookup_unit(label)
        if multiplier is None:
            raise InvalidUnitsError(text)

        num = num * multiplier + (multiplier // 2 if half else 0)

    if num > MAX_SIZE:
        raise SizeOverflowError(text)
    return num


def size_str(num_bytes: int) -> str:
    """
    Render the number of bytes as size specification.
    Uses the biggest base 10 unit if possible, otherwise the biggest base 2 unit.
    Numbers that can not be expressed exactly with one of the units are rendered as plain number.
    Examples: 1500 -> 1.5kb, 3145728 -> 3MiB, 4321 -> 4321
    :param num_bytes: the number of bytes.
    :return: the size specification.
    """
    _check_range(num_bytes)
    if num_bytes < 1000:
        return str(num_bytes)

    if num_bytes % 500 == 0:
        labels, values, base = decimal_labels, decimal_values, 1000
    elif num_bytes % 512 == 0:
        labels, values, base = binary_labels, binary_values, 1024
    else:
        # not a clean multiple of any unit
        return str(num_bytes)

    # find the biggest unit that still yields a number >= 1
    index = 0
    quotient = num_bytes
    while quotient >= base and index < len(values) - 1:
        quotient //= base
        index += 1

    # The remainder in the biggest unit can be a fraction other than one half (e.g. 1000500).
    # Use the next smaller unit in this case: the divisibility check guarantees success for index 1.
    for idx in range(index, 0, -1):
        num, remainder = divmod(num_bytes, values[idx])
        if remainder == 0:
            return f"{num}{labels[idx]}"
        elif remainder * 2 == values[idx]:
            return f"{num}.5{labels[idx]}"
    return str(num_bytes)


# aliases
as_int = parse_size
as_str = size_str


class Size(int):
    """
    A number of bytes that is written and read as size specification.
    Use it as type of attrs fields to get human-readable sizes in json or configuration:

    >>> Size(105381888).to_text()
    '100.5MiB'
    >>> Size.from_text("50mb")
    Size('50mb')

    Size is an int: arithmetic and comparison work as expected and yield plain ints.
    """

    def __new__(cls, num_bytes: int = 0) -> "Size":
        return super().__new__(cls, _check_range(num_bytes))

    def to_text(self) -> str:
        return size_str(int(self))

    @classmethod
    def from_text(cls, text: str) -> "Size":
        return cls(parse_size(text))

    @classmethod
    def parse(cls, value: Union[str, int]) -> "Size":
        """
        Create a size from either a size specification or a number of bytes.
        """
        if isinstance(value, cls):
            return value
        elif isinstance(value, str):
            return cls.from_text(value)
        else:
            return cls(value)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Size({self.to_text()!r})"
