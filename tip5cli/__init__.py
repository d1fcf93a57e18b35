"""Importable helpers and CLI entrypoints for the TIP5 hash calculator."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from .connector import BackendConfig, BackendConnector, HashBackend, build_connector
from .errors import BackendError, ParseError, Tip5CliError, ValidationError
from .hashing import (
    DIGEST_LEN,
    HashRequest,
    HashResult,
    Mode,
    compute,
    embed,
    prepare,
    render,
)
from .literals import FIELD_MODULUS, MAX_U64, FieldElement, parse_literal, parse_literals
from .version import __version__


def hash_literals(
    literals: Sequence[str],
    *,
    mode: "str | Mode" = Mode.PAIR,
    backend: Optional[HashBackend] = None,
    spec: Optional[str] = None,
) -> HashResult:
    """Parse ``literals`` and hash them with ``backend`` (or the one at ``spec``)."""

    request = prepare(mode, literals)
    if backend is None:
        backend = build_connector(spec=spec).connect()
    return compute(request, backend)


def cli_build_parser(prog: str = "tip5cli") -> argparse.ArgumentParser:
    """Return the argparse parser used by the CLI."""

    from .cli import build_parser as _build_parser

    return _build_parser(prog=prog)


def cli_main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI programmatically."""

    from .cli import main as _main

    return _main(argv)


__all__ = [
    "DIGEST_LEN",
    "FIELD_MODULUS",
    "MAX_U64",
    "BackendConfig",
    "BackendConnector",
    "BackendError",
    "FieldElement",
    "HashBackend",
    "HashRequest",
    "HashResult",
    "Mode",
    "ParseError",
    "Tip5CliError",
    "ValidationError",
    "__version__",
    "build_connector",
    "cli_build_parser",
    "cli_main",
    "compute",
    "embed",
    "hash_literals",
    "parse_literal",
    "parse_literals",
    "prepare",
    "render",
]
