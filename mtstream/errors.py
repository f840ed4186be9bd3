# mtstream/errors.py
"""Decode failures raised by the stream reader and record decoders."""
from enum import Enum, auto
from typing import Optional


class DataReadErrorKind(Enum):
    """Why a record failed to decode."""
    TRUNCATED = auto()             # Fewer bytes remain than a field needs
    INVALID_MARKER = auto()        # Fixed validation value mismatch
    INCONSISTENT_LENGTH = auto()   # Declared size disagrees with content
    UNSUPPORTED_REVISION = auto()  # Revision older than any known layout


class DataReadError(Exception):
    """Raised when a record cannot be decoded.

    The reader position after a failure is unreliable, so callers should
    stop walking the stream rather than retry.
    """

    kind: DataReadErrorKind

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at stream offset {position})"
        super().__init__(message)
        self.position = position


class TruncatedError(DataReadError):
    """Raised when a read needs more bytes than the source holds."""

    kind = DataReadErrorKind.TRUNCATED

    def __init__(self, expected: int, found: int, position: Optional[int] = None):
        super().__init__(
            f"Stream truncated: needed {expected} bytes, found {found}",
            position
        )
        self.expected = expected
        self.found = found


class InvalidMarkerError(DataReadError):
    """Raised when a record's fixed validation value does not match."""

    kind = DataReadErrorKind.INVALID_MARKER

    def __init__(self, what: str, expected: int, actual: int,
                 position: Optional[int] = None):
        super().__init__(
            f"Invalid {what}: expected 0x{expected:x}, got 0x{actual:x}",
            position
        )
        self.expected = expected
        self.actual = actual


class InconsistentLengthError(DataReadError):
    """Raised when a declared size cannot be reconciled with the data."""

    kind = DataReadErrorKind.INCONSISTENT_LENGTH


class UnsupportedRevisionError(DataReadError):
    """Raised for a revision older than every layout a decoder knows."""

    kind = DataReadErrorKind.UNSUPPORTED_REVISION

    def __init__(self, record: str, revision: int, known, position: Optional[int] = None):
        super().__init__(
            f"{record} revision {revision} is not supported "
            f"(known revisions: {', '.join(str(r) for r in known)})",
            position
        )
        self.revision = revision
