from dataclasses import dataclass, field
from enum import Enum


class SortKey(Enum):
    NONE = "none"
    TIME = "time"
    SIZE = "size"


class ColorOption(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class Backend(Enum):
    """Native shell that runs a translated command."""

    CMD = "cmd.exe"
    POWERSHELL = "PowerShell"

    @property
    def executable(self) -> str:
        if self is Backend.POWERSHELL:
            return "powershell.exe"
        return "cmd.exe"

    def shell_command(self, command_line: str) -> str | list[str]:
        """Wrap a rendered command line for the runner.

        cmd.exe does not understand backslash-escaped quotes, so its command
        line is handed over as one string that subprocess passes verbatim.
        """
        if self is Backend.POWERSHELL:
            return [self.executable, "-NoProfile", "-Command", command_line]
        return f"{self.executable} /C {command_line}"


class Mode(Enum):
    ROSETTA = "rosetta"
    HELP = "help"
    VERSION = "version"
    TREE = "tree"
    EXPLAIN = "explain"
    NATIVE = "native"
    TEACH = "teach"
    EXECUTE = "execute"


@dataclass(frozen=True)
class FlagSet:
    """Listing options requested on the command line."""

    long: bool = False
    all: bool = False
    almost_all: bool = False
    human_readable: bool = False
    one_per_line: bool = False
    recursive: bool = False
    directory: bool = False
    classify: bool = False
    show_size: bool = False
    sort_by: SortKey = SortKey.NONE
    reverse: bool = False
    unsorted: bool = False
    color: ColorOption = ColorOption.AUTO

    @property
    def hidden(self) -> bool:
        return self.all or self.almost_all


def quote_arg(arg: str) -> str:
    if " " in arg and not (arg.startswith('"') and arg.endswith('"')):
        return f'"{arg}"'
    return arg


@dataclass(frozen=True)
class TranslatedCommand:
    """A native command: program, ordered arguments and optional pipeline stages."""

    program: str
    args: tuple[str, ...] = ()
    pipeline: tuple[str, ...] = ()

    def render(self) -> str:
        line = " ".join([self.program, *self.args])
        for stage in self.pipeline:
            line += f" | {stage}"
        return line

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Translation:
    cmd: TranslatedCommand
    powershell: TranslatedCommand
    description: str

    def for_backend(self, backend: Backend) -> TranslatedCommand:
        if backend is Backend.POWERSHELL:
            return self.powershell
        return self.cmd


@dataclass(frozen=True)
class Invocation:
    """Everything parsed from one command line."""

    flags: FlagSet = field(default_factory=FlagSet)
    paths: tuple[str, ...] = (".",)
    explain: bool = False
    teach: bool = False
    native: bool = False
    rosetta: bool = False
    tree: bool = False
    help: bool = False
    version: bool = False
    powershell: bool = False
    cmd: bool = False
    verbose: bool = False

    def mode(self) -> Mode:
        # Checked in precedence order; rosetta ignores everything else.
        for mode, enabled in (
            (Mode.ROSETTA, self.rosetta),
            (Mode.HELP, self.help),
            (Mode.VERSION, self.version),
            (Mode.TREE, self.tree),
            (Mode.EXPLAIN, self.explain),
            (Mode.NATIVE, self.native),
            (Mode.TEACH, self.teach),
        ):
            if enabled:
                return mode
        return Mode.EXECUTE
