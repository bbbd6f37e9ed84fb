"""
Configuration management.

``Settings`` is a plain dataclass.  Values are resolved in order of
precedence: command‑line flag, environment variable, built‑in default.
``Settings.from_env`` covers the last two and ``load_settings`` layers
the command‑line flags on top.  Nothing is read at import time, so a bad
value surfaces where the caller can report it.

Recognised environment variables:

* ``HTTP_ADDR`` – listen address, ``host:port`` (default ``:8080``).
* ``STRICT_PALINDROME`` – strict (true) or normalized (false) mode.
* ``MONGO_URI`` – MongoDB connection string; empty means in‑memory.
* ``MONGO_DATABASE`` / ``MONGO_COLLECTION`` – where messages are kept.
* ``LOG_LEVEL``, ``PROJECT_NAME``, ``API_VERSION``.
"""

import argparse
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Sequence, Tuple

DEFAULT_HTTP_ADDR = ":8080"
DEFAULT_STRICT_PALINDROME = True
DEFAULT_MONGO_URI = ""

_TRUE_VALUES = {"1", "t", "true", "y", "yes", "on"}
_FALSE_VALUES = {"0", "f", "false", "n", "no", "off"}


class ConfigError(ValueError):
    """Raised when a configuration value cannot be parsed."""


def parse_bool(value: str, source: str = "value") -> bool:
    """Parse a boolean flag or environment value.

    ``source`` names the flag or variable in the error message.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f'invalid boolean value "{value}" for {source}')


def split_http_addr(addr: str) -> Tuple[str, int]:
    """Split ``host:port`` into its parts.

    An empty host (``":8080"``) binds every interface.  Bracketed IPv6
    hosts such as ``[::1]:8080`` are accepted.
    """
    host, sep, port = addr.rpartition(":")
    if not sep:
        raise ConfigError(f'invalid HTTP address "{addr}": missing port')
    host = host.strip("[]") or "0.0.0.0"
    try:
        port_number = int(port)
    except ValueError:
        raise ConfigError(f'invalid HTTP address "{addr}": bad port') from None
    if not 0 <= port_number <= 65535:
        raise ConfigError(f'invalid HTTP address "{addr}": port out of range')
    return host, port_number


@dataclass
class Settings:
    """Application settings."""

    project_name: str = "Palindrome Message API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    http_addr: str = DEFAULT_HTTP_ADDR
    strict_palindrome: bool = DEFAULT_STRICT_PALINDROME

    # Connection string for MongoDB.  When empty, messages are kept in
    # memory and lost on restart.
    mongo_uri: str = DEFAULT_MONGO_URI
    mongo_database: str = "palindromedb"
    mongo_collection: str = "messages"

    @property
    def uses_mongo(self) -> bool:
        return bool(self.mongo_uri)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        strict_raw = env.get("STRICT_PALINDROME", "")
        return cls(
            project_name=env.get("PROJECT_NAME", defaults.project_name),
            api_version=env.get("API_VERSION", defaults.api_version),
            log_level=env.get("LOG_LEVEL", defaults.log_level),
            http_addr=env.get("HTTP_ADDR") or defaults.http_addr,
            strict_palindrome=(
                parse_bool(strict_raw, "STRICT_PALINDROME") if strict_raw else defaults.strict_palindrome
            ),
            mongo_uri=env.get("MONGO_URI", defaults.mongo_uri),
            mongo_database=env.get("MONGO_DATABASE") or defaults.mongo_database,
            mongo_collection=env.get("MONGO_COLLECTION") or defaults.mongo_collection,
        )


def build_arg_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Return the command‑line parser.

    Every flag defaults to ``None`` so that an omitted flag can be told
    apart from one set to its default value.
    """
    parser = argparse.ArgumentParser(prog=prog, description="Serve the palindrome message API.")
    parser.add_argument("--http-addr", help=f"HTTP listen address (default {DEFAULT_HTTP_ADDR!r})")
    parser.add_argument(
        "--strict-palindrome",
        nargs="?",
        const="true",
        metavar="BOOL",
        help="Use the strict definition of a palindrome (default true)",
    )
    parser.add_argument(
        "--mongo-uri",
        help="MongoDB connection string; pass an empty string to use the in-memory store",
    )
    parser.add_argument("--log-level", help="Logging level name (default INFO)")
    return parser


def load_settings(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Resolve settings from ``argv`` and ``environ``; flags win.

    Raises ``ConfigError`` for unparseable values and ``SystemExit`` for
    unknown flags (argparse behaviour).
    """
    args = build_arg_parser().parse_args(argv)
    resolved = Settings.from_env(environ)
    overrides = {}
    if args.http_addr is not None:
        overrides["http_addr"] = args.http_addr
    if args.strict_palindrome is not None:
        overrides["strict_palindrome"] = parse_bool(args.strict_palindrome, "--strict-palindrome")
    if args.mongo_uri is not None:
        overrides["mongo_uri"] = args.mongo_uri
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    resolved = replace(resolved, **overrides)
    # Fail early on an unusable listen address.
    split_http_addr(resolved.http_addr)
    return resolved

