"""
Exception classes for scmversion.
"""

from typing import Iterable, Optional, Sequence


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class UnknownSCMBackendError(VersioningError):
    """Raised when the configured SCM is not in the backend registry."""

    def __init__(self, scm: str, available: Iterable[str] = ()):
        self.scm = scm
        self.available = sorted(available)
        message = f"Unknown SCM info service: {scm}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class InvalidDisplayModeError(VersioningError):
    """Raised when a display mode name is not registered."""

    def __init__(self, mode: str, available: Iterable[str] = ()):
        self.mode = mode
        self.available = sorted(available)
        message = f"{mode} is not a valid display mode."
        if self.available:
            message += f" Expected one of: {', '.join(self.available)}"
        super().__init__(message)


class InvalidDisplayModeTypeError(VersioningError):
    """Raised when the display mode is neither a name nor a callable."""

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(
            "The `display_mode` must be a registered default mode or a callable, "
            f"got {type(mode).__name__}."
        )


class MalformedTagError(VersioningError):
    """Raised when a release tag does not end with a numeric suffix."""

    def __init__(self, tag: str, base: str):
        self.tag = tag
        self.base = base
        super().__init__(
            f"Tag '{tag}' does not match the expected pattern '{base}.<number>'"
        )


class SCMCommandError(VersioningError):
    """Raised when an SCM command line client fails."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"Command '{' '.join(self.command)}' failed"
        if returncode is not None:
            message += f" with exit status {returncode}"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)
