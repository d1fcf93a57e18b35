"""Mode selection, input shaping and dispatch to the hash primitive."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Sequence, Tuple

from .connector import HashBackend
from .errors import ValidationError
from .literals import FieldElement, parse_literals

__all__ = [
    "DIGEST_LEN",
    "Mode",
    "HashRequest",
    "HashResult",
    "embed",
    "validate_count",
    "prepare",
    "compute",
    "confirmation_line",
    "result_line",
    "render",
]

DIGEST_LEN = 5

log = logging.getLogger(__name__)


class Mode(str, Enum):
    PAIR = "pair"
    VARLEN = "varlen"

    @classmethod
    def parse(cls, value: "str | Mode") -> "Mode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"unknown mode '{value}' (choose from {choices})") from None


@dataclass(frozen=True, slots=True)
class HashRequest:
    mode: Mode
    literals: Tuple[str, ...]
    elements: Tuple[FieldElement, ...]


@dataclass(frozen=True, slots=True)
class HashResult:
    request: HashRequest
    digest: Any


def embed(element: FieldElement) -> Tuple[int, ...]:
    """Place ``element`` in the first slot of a zero-filled digest-shaped tuple."""

    return (element.canonical,) + (0,) * (DIGEST_LEN - 1)


def validate_count(mode: Mode, count: int) -> None:
    if mode is Mode.PAIR and count != 2:
        raise ValidationError(mode.value, count, f"pair mode requires exactly 2 inputs (got {count})")
    if mode is Mode.VARLEN and count < 2:
        raise ValidationError(mode.value, count, f"varlen mode requires at least 2 inputs (got {count})")


def prepare(mode: "str | Mode", literals: Sequence[str]) -> HashRequest:
    """Validate the argument count, then parse every literal."""

    resolved = Mode.parse(mode)
    items: List[str] = [str(item) for item in literals]
    validate_count(resolved, len(items))
    elements = parse_literals(items)
    return HashRequest(mode=resolved, literals=tuple(items), elements=tuple(elements))


def compute(request: HashRequest, backend: HashBackend) -> HashResult:
    log.info("hashing %d input(s) in %s mode", len(request.elements), request.mode.value)
    if request.mode is Mode.PAIR:
        left, right = request.elements
        digest = backend.hash_pair(embed(left), embed(right))
    else:
        digest = backend.hash_varlen([element.canonical for element in request.elements])
    return HashResult(request=request, digest=digest)


def confirmation_line(mode: Mode, literals: Sequence[str]) -> str:
    return f"Hash {mode.value} mode [{', '.join(literals)}]:"


def result_line(digest: Any) -> str:
    return f"Result: {digest!r}"


def render(result: HashResult) -> List[str]:
    """Return the stdout lines for a computed hash."""

    request = result.request
    return [confirmation_line(request.mode, request.literals), result_line(result.digest)]
