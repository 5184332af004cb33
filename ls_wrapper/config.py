"""
Runtime settings for one invocation.
"""

import logging

from rich.console import Console

from .domain import Backend, ColorOption, Invocation
from .translate import select_backend


class Settings:
    """Settings derived from the parsed command line.

    Nothing is read from the environment or from files; the executable name
    (see ``args.alias_flags``) is the only outside input.
    """

    def __init__(self, invocation: Invocation):
        self.backend: Backend = select_backend(invocation)
        self.color: ColorOption = invocation.flags.color
        self.log_level: int = logging.DEBUG if invocation.verbose else logging.WARNING

    def make_console(self) -> Console:
        """Console for explain/teach output, honoring --color."""
        if self.color is ColorOption.ALWAYS:
            return Console(soft_wrap=True, highlight=False, force_terminal=True)
        if self.color is ColorOption.NEVER:
            return Console(soft_wrap=True, highlight=False, color_system=None)
        return Console(soft_wrap=True, highlight=False)
