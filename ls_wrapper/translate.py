"""
Translation engine: ls flags -> Windows dir / Get-ChildItem commands.
"""

from typing import Sequence

from .domain import (
    Backend,
    FlagSet,
    Invocation,
    SortKey,
    TranslatedCommand,
    Translation,
    quote_arg,
)
from .mapping import MAPPING_TABLE, MappingTable


def to_windows_path(path: str) -> str:
    return path.replace("/", "\\")


def build_dir_command(
    flags: FlagSet, paths: Sequence[str], table: MappingTable = MAPPING_TABLE
) -> TranslatedCommand:
    switches = table.dir_switches
    args: list[str] = []
    if flags.hidden:
        args.append(switches["hidden"])
    if flags.recursive:
        args.append(switches["recursive"])
    if flags.directory:
        args.append(switches["directory"])
    if flags.one_per_line and not flags.long:
        args.append(switches["bare"])
    if not flags.unsorted:
        sort = table.dir_sort.get((flags.sort_by, flags.reverse))
        if sort:
            args.append(sort)
    args.extend(quote_arg(to_windows_path(p)) for p in paths)
    return TranslatedCommand(table.dir_program, tuple(args))


def build_powershell_command(
    flags: FlagSet, paths: Sequence[str], table: MappingTable = MAPPING_TABLE
) -> TranslatedCommand:
    params = table.ps_parameters
    args: list[str] = []
    if flags.hidden:
        args.append(params["hidden"])
    if flags.recursive:
        args.append(params["recursive"])
    if flags.directory:
        args.append(params["directory"])
    if paths:
        windows_paths = [quote_arg(to_windows_path(p)) for p in paths]
        # -Path takes a comma separated array
        args.append(table.ps_path_parameter)
        args.extend(f"{p}," for p in windows_paths[:-1])
        args.append(windows_paths[-1])

    pipeline: list[str] = []
    if not flags.unsorted:
        prop = table.ps_sort.get(flags.sort_by)
        if prop:
            stage = f"Sort-Object {prop}"
            if not flags.reverse:
                stage += " -Descending"
            pipeline.append(stage)
        elif flags.reverse:
            pipeline.append(table.ps_name_reverse)

    formats = table.ps_format
    if flags.long and flags.human_readable:
        pipeline.append(formats["human_readable"])
    elif flags.long:
        pipeline.append(formats["long"])
    elif flags.one_per_line:
        pipeline.append(formats["one_per_line"])
    elif flags.classify:
        pipeline.append(formats["classify"])

    return TranslatedCommand(table.ps_program, tuple(args), tuple(pipeline))


def describe(flags: FlagSet) -> str:
    parts = [
        label
        for label, enabled in (
            ("show hidden files", flags.all),
            ("show hidden files except . and ..", flags.almost_all and not flags.all),
            ("long format", flags.long),
            ("recursive", flags.recursive),
            ("directories only", flags.directory),
            ("sort by time", flags.sort_by is SortKey.TIME),
            ("sort by size", flags.sort_by is SortKey.SIZE),
            ("unsorted", flags.unsorted),
            ("reverse order", flags.reverse),
            ("human-readable sizes", flags.human_readable),
            ("classify entries", flags.classify),
        )
        if enabled
    ]
    if not parts:
        return "list directory contents"
    return f"list directory contents ({', '.join(parts)})"


def translate(
    flags: FlagSet, paths: Sequence[str] = (".",), table: MappingTable = MAPPING_TABLE
) -> Translation:
    """
    Translate ls flags and target paths into native Windows commands.

    The result depends only on the arguments, so identical input always
    yields an identical Translation.

    Args:
        flags: Parsed ls flags
        paths: Target paths, in command-line order
        table: Mapping from ls semantics to native fragments

    Returns:
        Translation holding the cmd.exe and PowerShell commands
    """
    return Translation(
        cmd=build_dir_command(flags, paths, table),
        powershell=build_powershell_command(flags, paths, table),
        description=describe(flags),
    )


def select_backend(invocation: Invocation) -> Backend:
    if invocation.powershell:
        return Backend.POWERSHELL
    if invocation.cmd:
        return Backend.CMD
    flags = invocation.flags
    # dir cannot format long, human-readable or classified output
    if flags.long or flags.human_readable or flags.classify:
        return Backend.POWERSHELL
    return Backend.CMD
