"""Exception types shared across the package."""

from __future__ import annotations


class SkillGenieError(Exception):
    """Base class for all package errors."""


class StorageError(SkillGenieError):
    """Preference storage could not be read or written."""


class ContentError(SkillGenieError):
    """A remote content request did not produce usable content."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(ContentError):
    """The request never got a response (connection, DNS, timeout)."""


class RemoteError(ContentError):
    """The server answered with an error status or an unusable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"
