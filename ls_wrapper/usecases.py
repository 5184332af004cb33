import logging
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text

from . import __version__
from .config import Settings
from .domain import Backend, Invocation, Mode, TranslatedCommand, Translation, quote_arg
from .exceptions import SpawnError
from .ports import CommandRunnerPort
from .rosetta import print_rosetta
from .translate import to_windows_path, translate

HELP_TEXT = """\
ls-wrapper - A lightweight ls transpiler for Windows

USAGE:
    ls [OPTIONS] [PATH]...

OPTIONS:
    -l              Long listing format
    -a, --all       Show hidden files (including . and ..)
    -A, --almost-all  Show hidden files (excluding . and ..)
    -h, --human-readable  Human-readable file sizes
    -1              One entry per line
    -R, --recursive  List subdirectories recursively
    -d, --directory  List directories themselves, not contents
    -F, --classify  Append indicator (/ for directories)
    -s              Show file size (compatibility flag)

    -t              Sort by modification time
    -S              Sort by file size
    -r, --reverse   Reverse sort order
    -U              Do not sort

    --color[=WHEN]  Colorize output (always, never, auto)
    --verbose       Log what the wrapper is doing to stderr

EDUCATIONAL FLAGS:
    --explain       Show Windows translation without executing
    --teach         Execute AND show what command was run
    --native        Output only the Windows command (for scripting)
    --rosetta       Show Unix -> Windows command cheatsheet
    --tree          Tree view of directory structure
    --powershell    Force PowerShell backend
    --cmd           Force cmd.exe backend

ALIASES:
    ll              Same as ls -l  (install or rename the binary as ll)
    la              Same as ls -la (install or rename the binary as la)
    l               Same as ls -F  (install or rename the binary as l)

EXAMPLES:
    ls              List current directory
    ls -la          Long format, show hidden
    ls -lR ./src    Recursive, long format
    ls --explain -la  See how -la translates to Windows
    ls --native -la   Output: Get-ChildItem -Force -Path . | Format-Table ...
"""


class ListDirectoryUseCase:
    """Use case that dispatches one parsed ls invocation to its output mode."""

    def __init__(
        self,
        runner: CommandRunnerPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            runner: Port used to spawn native commands
            logger: Logger instance to use for logging
        """
        self._runner = runner
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, invocation: Invocation) -> int:
        """
        Run the invocation in the mode its flags select.

        Args:
            invocation: Parsed command line

        Returns:
            Exit status for the process

        Raises:
            SpawnError: If a native command could not be launched
        """
        mode = invocation.mode()
        self._logger.info(f"Running in {mode.value} mode")

        if mode is Mode.ROSETTA:
            print_rosetta()
            return 0
        if mode is Mode.HELP:
            print(HELP_TEXT, end="")
            return 0
        if mode is Mode.VERSION:
            print(f"ls-wrapper {__version__}")
            return 0
        if mode is Mode.TREE:
            return self._run_tree(invocation)

        settings = Settings(invocation)
        translation = translate(invocation.flags, invocation.paths)
        command = translation.for_backend(settings.backend)
        self._logger.info(f"Translated to ({settings.backend.value}): {command}")

        if mode is Mode.EXPLAIN:
            self._explain(settings.make_console(), translation)
            return 0
        if mode is Mode.NATIVE:
            print(command.render())
            return 0
        if mode is Mode.TEACH:
            console = settings.make_console()
            self._explain(console, translation)
            console.print(
                Text.assemble(
                    (f"Executing ({settings.backend.value}): ", "bold green"),
                    command.render(),
                )
            )
            console.print("---", markup=False)
        return self._run(settings.backend, command)

    def _explain(self, console: Console, translation: Translation) -> None:
        console.print(
            Text.assemble(("Command (cmd.exe):    ", "bold"), translation.cmd.render())
        )
        console.print(
            Text.assemble(
                ("Command (PowerShell): ", "bold"), translation.powershell.render()
            )
        )
        console.print()
        console.print(
            Text.assemble(("Description: ", "bold"), translation.description)
        )

    def _run(self, backend: Backend, command: TranslatedCommand) -> int:
        shell_command = backend.shell_command(command.render())
        # Anything printed so far must precede the child's output.
        sys.stdout.flush()
        try:
            code = self._runner.run(shell_command)
        except SpawnError:
            raise
        except OSError as e:
            self._logger.error(f"Error running {backend.executable}: {e}")
            raise SpawnError(backend.executable, str(e))
        if code != 0:
            self._logger.info(f"{command.program} exited with status {code}")
        return code

    def _run_tree(self, invocation: Invocation) -> int:
        path = quote_arg(to_windows_path(invocation.paths[0]))
        return self._run(Backend.CMD, TranslatedCommand("tree", ("/F", path)))
