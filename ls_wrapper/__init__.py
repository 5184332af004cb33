"""ls_wrapper package: translate Unix ls flags into native Windows listing commands.

Entry points live in ``ls_wrapper.cli``; the submodules are imported directly.
"""

__version__ = "0.1.0"

__all__: list[str] = []
