import logging
import subprocess
from typing import Optional, Sequence

from typing_extensions import override

from ..exceptions import SpawnError
from ..ports import CommandRunnerPort


class SubprocessRunner(CommandRunnerPort):
    """Runs native commands as child processes that inherit stdin/stdout/stderr."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def run(self, command: str | Sequence[str]) -> int:
        if isinstance(command, str):
            program = command.split(" ", 1)[0]
        else:
            command = list(command)
            program = command[0]
        self._logger.debug(f"Spawning: {command}")
        try:
            # No capture: output streams straight to the terminal.
            completed = subprocess.run(command, check=False)
        except OSError as e:
            self._logger.error(f"Failed to launch {program}: {e}")
            raise SpawnError(program, e.strerror or str(e))

        code = completed.returncode
        if code < 0:
            # POSIX: killed by signal -code
            code = 128 - code
        self._logger.debug(f"{program} exited with {code}")
        return code
