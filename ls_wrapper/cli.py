"""
Command-line entry point for ls-wrapper and its ll / la / l aliases.
"""

import logging
import sys
from typing import Optional

from .adapters.process_runner import SubprocessRunner
from .args import parse_args
from .config import Settings
from .exceptions import SpawnError, UnknownFlagError
from .ports import CommandRunnerPort
from .usecases import ListDirectoryUseCase

EXIT_USAGE = 2
EXIT_SPAWN_FAILURE = 127
EXIT_INTERRUPTED = 130


def main(
    argv: list[str] | None = None,
    prog: Optional[str] = None,
    runner: Optional[CommandRunnerPort] = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
        prog = prog if prog is not None else sys.argv[0]

    try:
        invocation = parse_args(argv, prog=prog)
    except UnknownFlagError as e:
        print(f"ls-wrapper: {e}", file=sys.stderr)
        print("Try 'ls --help' for more information.", file=sys.stderr)
        return EXIT_USAGE

    settings = Settings(invocation)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(settings.log_level)
    logging.getLogger(__name__).debug(f"Parsed invocation: {invocation}")

    use_case = ListDirectoryUseCase(runner or SubprocessRunner())
    try:
        return use_case.execute(invocation)
    except SpawnError as e:
        print(f"ls-wrapper: {e}", file=sys.stderr)
        return EXIT_SPAWN_FAILURE
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
