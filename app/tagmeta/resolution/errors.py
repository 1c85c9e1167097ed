"""Exceptions raised while resolving path arguments.

Every resolution failure maps onto one error category so the
processor can report it against the offending argument and move on.
"""

from typing import ClassVar

from tagmeta.models.errors import ErrorCategory, ReportedError


class ResolutionError(Exception):
    """Base exception for path resolution failures.

    Attributes:
        argument: The path argument that failed to resolve.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.ITEM_NOT_FOUND
    error_id: ClassVar[str] = "ResolutionFailed"

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message)
        self.argument = argument

    def to_reported(self) -> ReportedError:
        """Convert this exception to a non-fatal reported error."""
        return ReportedError(
            category=self.category,
            error_id=self.error_id,
            message=str(self),
            target=self.argument,
            cause=self,
        )


class ItemNotFoundError(ResolutionError):
    """Raised when a path does not exist or a pattern matches nothing."""

    category = ErrorCategory.ITEM_NOT_FOUND
    error_id = "PathNotFound"

    def __init__(self, argument: str) -> None:
        super().__init__(argument, f"Cannot find path '{argument}' because it does not exist.")


class DriveNotFoundError(ResolutionError):
    """Raised when a drive-qualified path names an unknown drive."""

    category = ErrorCategory.DRIVE_NOT_FOUND
    error_id = "DriveNotFound"

    def __init__(self, argument: str, drive: str) -> None:
        super().__init__(
            argument,
            f"Cannot find drive. A drive with the name '{drive}' does not exist.",
        )
        self.drive = drive


class ProviderNotFoundError(ResolutionError):
    """Raised when a provider-qualified path names an unknown provider."""

    category = ErrorCategory.INVALID_PROVIDER
    error_id = "ProviderNotFound"

    def __init__(self, argument: str, provider: str) -> None:
        super().__init__(argument, f"Cannot find a provider with the name '{provider}'.")
        self.provider = provider
