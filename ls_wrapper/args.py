"""
Argument parsing for ls-style flags.

argparse is not used here: ls accepts combined short flags (``-laR``), a
lone ``-`` as a path and a ``--color`` option with an optional value, and
unknown flags must be reported by their exact token.
"""

import logging
from dataclasses import fields
from pathlib import PureWindowsPath
from typing import Iterable, Optional

from .domain import FlagSet, Invocation, SortKey
from .exceptions import UnknownFlagError
from .mapping import ALIASES, COLOR_VALUES, LONG_FLAGS, SHORT_FLAGS

_FLAG_FIELDS = frozenset(f.name for f in fields(FlagSet))

_logger = logging.getLogger(__name__)


def alias_flags(prog: Optional[str]) -> tuple[str, ...]:
    """Return the flags implied by the name the executable was invoked as."""
    if not prog:
        return ()
    # PureWindowsPath splits on both separators and drops ".exe".
    stem = PureWindowsPath(prog).stem.lower()
    return ALIASES.get(stem, ())


class _ArgState:
    def __init__(self) -> None:
        self.flags: dict[str, object] = {}
        self.options: dict[str, object] = {}
        self.paths: list[str] = []

    def set(self, name: str, value: object) -> None:
        if name == "sort_by" and self.flags.get("sort_by") is SortKey.TIME:
            # -t wins over -S regardless of order
            return
        if name in _FLAG_FIELDS:
            self.flags[name] = value
        else:
            self.options[name] = value

    def build(self) -> Invocation:
        paths = tuple(self.paths) if self.paths else (".",)
        return Invocation(flags=FlagSet(**self.flags), paths=paths, **self.options)


def _parse_long(state: _ArgState, token: str) -> None:
    name, sep, value = token[2:].partition("=")
    if name == "color":
        color = COLOR_VALUES.get(value if sep else None)
        if color is None:
            raise UnknownFlagError(token, f"Unknown color option: {value}")
        state.set("color", color)
        return
    if name not in LONG_FLAGS or sep:
        raise UnknownFlagError(token)
    state.set(*LONG_FLAGS[name])


def _parse_short(state: _ArgState, token: str) -> None:
    for char in token[1:]:
        if char not in SHORT_FLAGS:
            raise UnknownFlagError(f"-{char}")
        state.set(*SHORT_FLAGS[char])


def parse_args(
    argv: Iterable[str],
    prog: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Invocation:
    """
    Parse ls-style arguments into an Invocation.

    Flags implied by an alias name (``ll``, ``la``, ``l``) are prepended to
    the explicit ones. Every flag only ever switches something on, so
    explicit flags add to the alias defaults and never cancel them.

    Args:
        argv: Arguments without the program name
        prog: Name the executable was invoked as
        logger: Logger instance to use for logging

    Returns:
        The parsed Invocation

    Raises:
        UnknownFlagError: If a token is not a recognized flag
    """
    logger = logger or _logger
    implied = alias_flags(prog)
    if implied:
        logger.debug(f"Alias {prog!r} implies flags {' '.join(implied)}")

    state = _ArgState()
    tokens = iter([*implied, *argv])
    for token in tokens:
        if token == "--":
            state.paths.extend(tokens)
            break
        if token.startswith("--"):
            _parse_long(state, token)
        elif token.startswith("-") and len(token) > 1:
            _parse_short(state, token)
        else:
            state.paths.append(token)

    invocation = state.build()
    logger.debug(f"Parsed invocation: {invocation}")
    return invocation
