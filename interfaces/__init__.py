"""Environment helpers shared by the tip5cli entrypoints."""

from __future__ import annotations

from .dotenv import load_dotenv_files, load_local_dotenv, parse_dotenv

__all__ = ["load_dotenv_files", "load_local_dotenv", "parse_dotenv"]
