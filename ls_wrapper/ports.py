from typing import Protocol, Sequence


class CommandRunnerPort(Protocol):
    """Port for running a native command with the caller's standard streams.

    A string command is a complete Windows command line and must not be
    re-quoted; a sequence is an argv list.
    """

    def run(self, command: str | Sequence[str]) -> int: ...
