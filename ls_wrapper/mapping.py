"""
Static lookup tables: ls flags, executable aliases and native command fragments.

Everything here is built once at import time and exposed through read-only
mappings.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .domain import ColorOption, SortKey


@dataclass(frozen=True)
class MappingTable:
    """Unix ls semantics mapped to dir switches and Get-ChildItem fragments."""

    dir_program: str
    dir_switches: Mapping[str, str]
    # (sort key, reversed) -> dir /O switch
    dir_sort: Mapping[tuple[SortKey, bool], str]
    ps_program: str
    ps_parameters: Mapping[str, str]
    ps_path_parameter: str
    # sort key -> Sort-Object property
    ps_sort: Mapping[SortKey, str]
    ps_name_reverse: str
    ps_format: Mapping[str, str]


MAPPING_TABLE = MappingTable(
    dir_program="dir",
    dir_switches=MappingProxyType(
        {
            "hidden": "/A",
            "recursive": "/S",
            "directory": "/AD",
            "bare": "/B",
        }
    ),
    # ls shows newest/largest first, dir the opposite: the plain sorts descend.
    dir_sort=MappingProxyType(
        {
            (SortKey.TIME, False): "/O-D",
            (SortKey.TIME, True): "/OD",
            (SortKey.SIZE, False): "/O-S",
            (SortKey.SIZE, True): "/OS",
            (SortKey.NONE, True): "/O-N",
        }
    ),
    ps_program="Get-ChildItem",
    ps_parameters=MappingProxyType(
        {
            "hidden": "-Force",
            "recursive": "-Recurse",
            "directory": "-Directory",
        }
    ),
    ps_path_parameter="-Path",
    ps_sort=MappingProxyType(
        {
            SortKey.TIME: "LastWriteTime",
            SortKey.SIZE: "Length",
        }
    ),
    ps_name_reverse="Sort-Object Name -Descending",
    ps_format=MappingProxyType(
        {
            "long": "Format-Table Mode, LastWriteTime, Length, Name -AutoSize",
            "human_readable": (
                "Select-Object Mode, LastWriteTime, "
                '@{Name="Size";Expression={if($_.PSIsContainer){"<DIR>"}'
                'else{"{0:N2} KB" -f ($_.Length/1KB)}}}, Name '
                "| Format-Table -AutoSize"
            ),
            "one_per_line": "Select-Object -ExpandProperty Name",
            "classify": (
                "ForEach-Object { if($_.PSIsContainer) {$_.Name + \"/\"} "
                "else {$_.Name} }"
            ),
        }
    ),
)


# short flag character -> (attribute, value)
SHORT_FLAGS: Mapping[str, tuple[str, object]] = MappingProxyType(
    {
        "l": ("long", True),
        "a": ("all", True),
        "A": ("almost_all", True),
        "h": ("human_readable", True),
        "1": ("one_per_line", True),
        "R": ("recursive", True),
        "d": ("directory", True),
        "F": ("classify", True),
        "s": ("show_size", True),
        "t": ("sort_by", SortKey.TIME),
        "S": ("sort_by", SortKey.SIZE),
        "r": ("reverse", True),
        "U": ("unsorted", True),
        "?": ("help", True),
    }
)

LONG_FLAGS: Mapping[str, tuple[str, object]] = MappingProxyType(
    {
        "all": ("all", True),
        "almost-all": ("almost_all", True),
        "human-readable": ("human_readable", True),
        "recursive": ("recursive", True),
        "directory": ("directory", True),
        "classify": ("classify", True),
        "reverse": ("reverse", True),
        "explain": ("explain", True),
        "teach": ("teach", True),
        "native": ("native", True),
        "powershell": ("powershell", True),
        "ps": ("powershell", True),
        "cmd": ("cmd", True),
        "help": ("help", True),
        "version": ("version", True),
        "rosetta": ("rosetta", True),
        "cheatsheet": ("rosetta", True),
        "tree": ("tree", True),
        "verbose": ("verbose", True),
    }
)

COLOR_VALUES: Mapping[str | None, ColorOption] = MappingProxyType(
    {
        None: ColorOption.AUTO,
        "auto": ColorOption.AUTO,
        "tty": ColorOption.AUTO,
        "if-tty": ColorOption.AUTO,
        "always": ColorOption.ALWAYS,
        "yes": ColorOption.ALWAYS,
        "force": ColorOption.ALWAYS,
        "never": ColorOption.NEVER,
        "no": ColorOption.NEVER,
        "none": ColorOption.NEVER,
    }
)

# executable stem -> flags implied by invoking the binary under that name
ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "ll": ("-l",),
        "la": ("-la",),
        "l": ("-F",),
    }
)
