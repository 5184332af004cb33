"""
Unix -> Windows cheatsheet (``ls --rosetta``).
"""

from typing import Optional, TextIO

from rich import box
from rich.console import Console
from rich.table import Table

# Fixed so the table never depends on the terminal it is printed to.
ROSETTA_WIDTH = 100

ROSETTA_SECTIONS: tuple[tuple[tuple[str, str, str], ...], ...] = (
    (
        ("ls", "dir /B", "Get-ChildItem"),
        ("ls -l", "dir", "Get-ChildItem | Format-Table"),
        ("ls -la", "dir /A", "Get-ChildItem -Force"),
        ("ls -lt", "dir /O-D", "gci | Sort LastWriteTime -Desc"),
        ("ls -lS", "dir /O-S", "gci | Sort Length -Desc"),
        ("ls -R", "dir /S", "Get-ChildItem -Recurse"),
        ("ls -1", "dir /B", "(gci).Name"),
    ),
    (
        ("cat file", "type file", "Get-Content file"),
        ("head -n 10 file", "(no equivalent)", "Get-Content file -First 10"),
        ("tail -n 10 file", "(no equivalent)", "Get-Content file -Last 10"),
        ("grep pattern file", "findstr pattern file", "Select-String pattern file"),
        ("grep -r pattern .", "findstr /S pattern *", "gci -Recurse | sls pattern"),
    ),
    (
        ("pwd", "cd", "Get-Location  (or pwd)"),
        ("cd dir", "cd dir", "Set-Location dir  (or cd)"),
        ("cd ~", "cd %USERPROFILE%", "cd ~"),
        ("mkdir dir", "mkdir dir", "New-Item -Type Directory dir"),
        ("rm file", "del file", "Remove-Item file"),
        ("rm -rf dir", "rmdir /S /Q dir", "Remove-Item dir -Recurse -Force"),
        ("cp src dst", "copy src dst", "Copy-Item src dst"),
        ("mv src dst", "move src dst", "Move-Item src dst"),
    ),
    (
        ("touch file", "type nul > file", "New-Item file"),
        ("chmod +x file", "(no equivalent)", "(no equivalent)"),
        ("which cmd", "where cmd", "Get-Command cmd"),
        ("whoami", "whoami", "whoami  (or $env:USERNAME)"),
        ("clear", "cls", "Clear-Host  (or cls)"),
        ("history", "doskey /history", "Get-History"),
    ),
    (
        ("tree", "tree", "tree"),
        ('find . -name "*.py"', "dir /S /B *.py", "gci -Recurse -Filter *.py"),
        ("wc -l file", 'find /c /v "" file', "(Get-Content file).Count"),
        ("diff file1 file2", "fc file1 file2", "Compare-Object (gc f1) (gc f2)"),
        ("echo $VAR", "echo %VAR%", "echo $env:VAR"),
        ("export VAR=val", "set VAR=val", '$env:VAR = "val"'),
    ),
)

ROSETTA_FOOTER = (
    "Aliases:  ll = ls -l  │  la = ls -la  │  l = ls -F\n"
    "\n"
    "Tip: Use --explain with any ls command to see its Windows translation!\n"
    "     Example: ls --explain -laR"
)


def build_rosetta_table() -> Table:
    table = Table(title="UNIX → WINDOWS CHEAT SHEET", box=box.SQUARE)
    table.add_column("Unix", no_wrap=True)
    table.add_column("cmd.exe", no_wrap=True)
    table.add_column("PowerShell", no_wrap=True)
    for index, section in enumerate(ROSETTA_SECTIONS):
        if index:
            table.add_section()
        for unix, cmd, powershell in section:
            table.add_row(unix, cmd, powershell)
    return table


def print_rosetta(file: Optional[TextIO] = None) -> None:
    """Print the cheatsheet; output is identical on every call."""
    console = Console(
        file=file,
        width=ROSETTA_WIDTH,
        color_system=None,
        highlight=False,
        emoji=False,
        markup=False,
    )
    console.print(build_rosetta_table())
    console.print(ROSETTA_FOOTER)
