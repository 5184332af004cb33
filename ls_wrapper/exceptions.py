"""
Custom exceptions for ls-wrapper.
"""


class LsWrapperError(Exception):
    """Base exception class for ls-wrapper errors."""

    pass


class UnknownFlagError(LsWrapperError):
    """Exception raised when a command-line token is not a recognized flag."""

    def __init__(self, token: str, message: str | None = None):
        self.token = token
        super().__init__(message or f"Unknown option: {token}")


class SpawnError(LsWrapperError):
    """Exception raised when a native command could not be launched at all."""

    def __init__(self, program: str, reason: str):
        self.program = program
        self.reason = reason
        super().__init__(f"failed to run {program}: {reason}")
