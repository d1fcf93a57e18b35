"""Field elements and the numeric-literal parser used for CLI inputs.

Three literal formats are accepted:

* hexadecimal with a ``0x``/``0X`` prefix and an even number of digits,
* octal with a leading ``0``,
* plain decimal.

Every literal must fit in an unsigned 64-bit integer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ParseError

__all__ = ["FIELD_MODULUS", "MAX_U64", "FieldElement", "parse_literal", "parse_literals"]

MAX_U64 = (1 << 64) - 1
# Goldilocks prime used by TIP5: 2**64 - 2**32 + 1
FIELD_MODULUS = 0xFFFF_FFFF_0000_0001

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_OCT_DIGITS = re.compile(r"[0-7]+")
_DEC_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class FieldElement:
    """A single unsigned 64-bit input to the hash primitive."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_U64:
            raise ValueError(f"field element out of 64-bit range: {self.value}")

    @property
    def canonical(self) -> int:
        """Return the value reduced into the base field."""

        return self.value % FIELD_MODULUS

    def __int__(self) -> int:
        return self.value


def _split_literal(literal: str) -> tuple[str, int, "re.Pattern[str]"]:
    if literal[:2] in ("0x", "0X"):
        digits = literal[2:]
        if len(digits) % 2 != 0:
            raise ParseError(literal, "hex string length must be even (full bytes)")
        return digits, 16, _HEX_DIGITS
    if literal.startswith("0") and literal != "0":
        return literal[1:], 8, _OCT_DIGITS
    return literal, 10, _DEC_DIGITS


def parse_literal(literal: str) -> FieldElement:
    """Parse ``literal`` into a :class:`FieldElement`.

    Raises :class:`ParseError` carrying the literal when the digits are not
    valid for the detected base or the value overflows 64 bits.
    """

    digits, base, pattern = _split_literal(literal)
    if not digits:
        raise ParseError(literal, "no digits")
    if pattern.fullmatch(digits) is None:
        raise ParseError(literal, f"invalid digit for base {base}")
    value = int(digits, base)
    if value > MAX_U64:
        raise ParseError(literal, "number too large to fit in 64 bits")
    return FieldElement(value)


def parse_literals(literals: list[str]) -> list[FieldElement]:
    """Parse each literal in order, stopping at the first failure."""

    return [parse_literal(item) for item in literals]
