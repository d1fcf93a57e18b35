"""Command-line interface for the TIP5 hash calculator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from interfaces.dotenv import load_local_dotenv

from .colors import color
from .config import Tip5Config, load_config
from .connector import DEFAULT_BACKEND, BackendConnector, build_connector
from .errors import Tip5CliError
from .hashing import Mode, compute, prepare, render
from .version import __version__

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

INPUTS_HELP = """Input numbers.
For pair mode: provide exactly 2 numbers
For varlen mode: provide 2 or more numbers"""

FORMATS_EPILOG = """Supported formats:
  - Hexadecimal: 0x01020304 (must use 0x prefix, even digit count)
  - Decimal:     16909060
  - Octal:       0100401404 (must use 0 prefix)"""

log = logging.getLogger(__name__)


def _path_arg(value: str) -> Path:
    return Path(value).expanduser()


def build_parser(prog: str = "tip5cli") -> argparse.ArgumentParser:
    """Construct the calculator's argument parser."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="TIP5 Hash Calculator",
        epilog=FORMATS_EPILOG,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=[mode.value for mode in Mode],
        default=None,
        help="Hash mode: 'pair' or 'varlen' (default: pair, or the configured mode).",
    )
    parser.add_argument("inputs", nargs="+", metavar="INPUT", help=INPUTS_HELP)
    parser.add_argument(
        "--backend",
        metavar="SPEC",
        default=None,
        help=f"Hash primitive as module[:attribute] (default: {DEFAULT_BACKEND}).",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=_path_arg,
        default=None,
        help="Read configuration from PATH instead of the default locations.",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the resolved runtime configuration before hashing.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v for info, -vv for debug).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None, *, prog: str = "tip5cli") -> argparse.Namespace:
    parser = build_parser(prog=prog)
    return parser.parse_args(list(argv) if argv is not None else None)


def configure_logging(level_name: str, verbose: int = 0) -> int:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbose >= 2:
        level = min(level, logging.DEBUG)
    elif verbose == 1:
        level = min(level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("tip5cli").setLevel(level)
    return level


def _print_runtime_config(config: Tip5Config) -> None:
    print(color("Runtime configuration:", fg="yellow", bold=True))
    for key, value in config.describe().items():
        print(f"  {key}: {value}")
    print()


def _report_error(exc: Exception) -> None:
    print(color(f"Error: {exc}", fg="red", stream=sys.stderr), file=sys.stderr)


def run(
    inputs: Sequence[str],
    config: Tip5Config,
    *,
    connector: Optional[BackendConnector] = None,
) -> List[str]:
    """Hash ``inputs`` as ``config`` describes and return the output lines.

    Every input is validated before the backend is loaded, so a bad literal
    is reported even when no hash primitive is installed.
    """

    request = prepare(config.mode, inputs)
    if connector is None:
        connector = build_connector(spec=config.backend)
    backend = connector.connect()
    return render(compute(request, backend))


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    connector: Optional[BackendConnector] = None,
) -> int:
    """Run the calculator and return the process exit code."""
    args = parse_args(argv)

    load_local_dotenv()
    config = load_config(args.config)
    configure_logging(config.log_level, args.verbose)
    if args.backend:
        config.backend = args.backend
    if args.mode:
        config.mode = Mode.parse(args.mode)

    if args.show_config:
        _print_runtime_config(config)

    try:
        lines = run(args.inputs, config, connector=connector)
    except Tip5CliError as exc:
        log.debug("aborting: %r", exc)
        _report_error(exc)
        return 1

    for line in lines:
        print(line)
    return 0


__all__ = ["build_parser", "configure_logging", "main", "parse_args", "run"]
