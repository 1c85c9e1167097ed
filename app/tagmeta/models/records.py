"""Per-file records emitted by actions.

Defines the accepted-file handle handed to actions, the two record types
they produce, and the outcome wrapper streamed back to the caller.
"""

from dataclasses import dataclass
from pathlib import Path

from tagmeta.models.errors import ReportedError


@dataclass(frozen=True, slots=True)
class AcceptedFile:
    """A resolved path confirmed to live on the filesystem.

    Attributes:
        path: Absolute filesystem path.
    """

    path: Path

    @classmethod
    def from_string(cls, path: str) -> "AcceptedFile":
        """Create an AcceptedFile from a provider path string."""
        return cls(path=Path(path))

    @property
    def full_name(self) -> str:
        """Absolute path as a string."""
        return str(self.path)

    @property
    def name(self) -> str:
        """File name including extension."""
        return self.path.name

    @property
    def extension(self) -> str:
        """Extension including the leading dot, or empty string."""
        return self.path.suffix


@dataclass(frozen=True, slots=True)
class TagMetadata:
    """Keywords read from one image file.

    Attributes:
        file: The image file.
        keywords: Keywords in the order the tag reader returned them.
    """

    file: AcceptedFile
    keywords: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-serializable dictionary."""
        return {"file": self.file.full_name, "keywords": list(self.keywords)}


@dataclass(frozen=True, slots=True)
class ShortcutRecord:
    """A shortcut file created for a target file.

    Attributes:
        file: The newly created shortcut file.
        target: The file the shortcut points to.
    """

    file: AcceptedFile
    target: AcceptedFile

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-serializable dictionary."""
        return {"file": self.file.full_name, "target": self.target.full_name}


Record = TagMetadata | ShortcutRecord


@dataclass(frozen=True, slots=True)
class ItemOutcome:
    """One entry of the processing stream: a record or a reported error.

    Attributes:
        record: Result produced by an action, None on failure.
        error: Error reported for an argument or file, None on success.
    """

    record: Record | None = None
    error: ReportedError | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one of record and error is set."""
        if (self.record is None) == (self.error is None):
            msg = "ItemOutcome requires exactly one of record or error"
            raise ValueError(msg)

    @property
    def success(self) -> bool:
        """Check if this outcome carries a record."""
        return self.record is not None

    @property
    def failed(self) -> bool:
        """Check if this outcome carries an error."""
        return self.error is not None

    @classmethod
    def ok(cls, record: Record) -> "ItemOutcome":
        """Wrap a successful record."""
        return cls(record=record)

    @classmethod
    def fail(cls, error: ReportedError) -> "ItemOutcome":
        """Wrap a reported error."""
        return cls(error=error)
