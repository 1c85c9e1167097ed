"""Error models for per-item reporting.

This module defines the error taxonomy shared by path resolution and
actions. Reported errors are non-fatal: they are attributed to a single
argument or file and never stop the remaining batch.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """Category of a reported, non-fatal error.

    Attributes:
        ITEM_NOT_FOUND: A pattern matched nothing or a path does not exist.
        INVALID_PROVIDER: The path belongs to a namespace other than the filesystem,
            or names a provider that does not exist.
        DRIVE_NOT_FOUND: The path names a drive that does not exist.
        OPERATION_FAILED: The delegated tag reader or shortcut writer failed.
    """

    ITEM_NOT_FOUND = "ItemNotFound"
    INVALID_PROVIDER = "InvalidProvider"
    DRIVE_NOT_FOUND = "DriveNotFound"
    OPERATION_FAILED = "OperationFailed"


@dataclass(frozen=True, slots=True)
class ReportedError:
    """A non-fatal error attributed to one argument or file.

    Attributes:
        category: Error category from the taxonomy.
        error_id: Short identifier of the failure site (e.g. "InvalidProvider").
        message: Human-readable description.
        target: The offending argument or file path.
        cause: Underlying exception, if any.
    """

    category: ErrorCategory
    error_id: str
    message: str
    target: str
    cause: BaseException | None = None

    def __post_init__(self) -> None:
        """Validate error data after initialization."""
        if not self.message:
            msg = "Error message cannot be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"[{self.category.value}] {self.message}"


def operation_failed(error_id: str, target: str, cause: BaseException) -> ReportedError:
    """Create an OperationFailed error wrapping an exception.

    Args:
        error_id: Identifier of the failing operation.
        target: Full path of the file being processed.
        cause: The exception raised by the operation.

    Returns:
        ReportedError in the OPERATION_FAILED category.
    """
    return ReportedError(
        category=ErrorCategory.OPERATION_FAILED,
        error_id=error_id,
        message=f"{target}: {cause}" if str(cause) else f"{target}: {type(cause).__name__}",
        target=target,
        cause=cause,
    )
