"""Exception types raised while decoding extension fragments."""

from __future__ import annotations


class ExtensionError(Exception):
    """Base class for every extension decode failure.

    Parameters
    ----------
    extension:
        Name of the extension whose fragment was being decoded.
    message:
        Full human-readable message.
    """

    def __init__(self, extension: str, message: str) -> None:
        super().__init__(message)
        self.extension = extension

    def __str__(self) -> str:
        return str(self.args[0])


class ExtensionParseError(ExtensionError):
    """Raised when a fragment is not JSON or does not match the schema types."""

    def __init__(self, extension: str, cause: object) -> None:
        super().__init__(extension, f"{extension} parsing failed: {cause}")
        self.cause = cause


class ExtensionValidationError(ExtensionError):
    """Raised when well-formed JSON violates a structural constraint."""

    def __init__(self, extension: str, field: str, reason: str) -> None:
        cause = f"{field}: {reason}" if field else reason
        super().__init__(extension, f"{extension} validation failed: {cause}")
        self.field = field
        self.reason = reason


class UnknownExtensionError(ExtensionError, KeyError):
    """Raised by :meth:`ExtensionRegistry.decode` when no decoder is registered."""

    def __init__(self, extension: str, parent: str | None = None) -> None:
        where = f" on {parent}" if parent else ""
        super().__init__(extension, f"no decoder registered for {extension}{where}")
        self.parent = parent
