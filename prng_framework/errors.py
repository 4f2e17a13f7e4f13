"""
Error types raised by the PRNG framework.

Two failure kinds exist: a caller passed something outside the domain of
an operation, or asked a generator for a capability it does not have.
Rejection loops inside sampling are not failures and never raise.

Version: 1.0.0
"""


class PRNGError(Exception):
    """Base class for every error raised by the framework."""


class InvalidArgumentError(PRNGError, ValueError):
    """Parameter outside the operation's domain (bad bound, short buffer, invalid seed)."""


class UnsupportedOperationError(PRNGError, NotImplementedError):
    """Generator does not provide the requested capability (state access, splitting)."""


def require(condition: bool, message: str) -> None:
    """Raise InvalidArgumentError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise InvalidArgumentError(message)
