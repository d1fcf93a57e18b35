"""Connector utilities for loading the external TIP5 hash primitive."""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from .errors import BackendError

__all__ = [
    "DEFAULT_BACKEND",
    "BACKEND_ENV",
    "HashBackend",
    "BackendConfig",
    "BackendConnector",
    "build_connector",
]

DEFAULT_BACKEND = "tip5"
BACKEND_ENV = "TIP5_BACKEND"

_REQUIRED_OPERATIONS = ("hash_pair", "hash_varlen")

log = logging.getLogger(__name__)


class HashBackend(Protocol):
    """Shape of the hash primitive consumed by the calculator."""

    def hash_pair(self, left: Sequence[int], right: Sequence[int]) -> Any: ...

    def hash_varlen(self, values: Sequence[int]) -> Any: ...


@dataclass(slots=True)
class BackendConfig:
    """Import spec of the hash primitive, ``module`` or ``module:attribute``."""

    spec: str = DEFAULT_BACKEND

    @property
    def module_name(self) -> str:
        return self.spec.partition(":")[0].strip()

    @property
    def attribute(self) -> str | None:
        attr = self.spec.partition(":")[2].strip()
        return attr or None


class BackendConnector:
    """Factory responsible for resolving the hash primitive behind the CLI."""

    def __init__(self, config: BackendConfig) -> None:
        self.config = config

    def connect(self) -> HashBackend:
        """Import the configured backend and check it exposes both operations."""

        spec = self.config.spec
        module_name = self.config.module_name
        if not module_name:
            raise BackendError(spec, "empty module name")
        log.debug("loading hash backend %s", spec)
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as exc:
            raise BackendError(spec, f"cannot import '{module_name}' ({exc})") from exc

        attr = self.config.attribute
        if attr:
            for part in attr.split("."):
                try:
                    target = getattr(target, part)
                except AttributeError as exc:
                    raise BackendError(spec, f"no attribute '{attr}' in '{module_name}'") from exc

        # classes are instantiated so instance methods come back bound
        if isinstance(target, type):
            try:
                target = target()
            except Exception as exc:
                raise BackendError(spec, f"cannot instantiate '{attr}' ({exc})") from exc

        missing = [name for name in _REQUIRED_OPERATIONS if not callable(getattr(target, name, None))]
        if missing:
            raise BackendError(spec, "missing operation(s): " + ", ".join(missing))
        return target


def build_connector(*, spec: str | None = None) -> BackendConnector:
    """Return the default connector used by the CLI.

    Replace ``BackendConnector`` (or pass a custom one to
    :func:`tip5cli.cli.main`) to swap the hash primitive without touching the
    rest of the package.
    """

    return BackendConnector(BackendConfig(spec=spec or DEFAULT_BACKEND))
