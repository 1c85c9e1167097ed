"""Data models for tagmeta.

This module exports the records, outcomes and error taxonomy used
throughout the processing pipeline.
"""

from tagmeta.models.errors import ErrorCategory, ReportedError, operation_failed
from tagmeta.models.records import (
    AcceptedFile,
    ItemOutcome,
    Record,
    ShortcutRecord,
    TagMetadata,
)

__all__ = [
    "AcceptedFile",
    "ErrorCategory",
    "ItemOutcome",
    "Record",
    "ReportedError",
    "ShortcutRecord",
    "TagMetadata",
    "operation_failed",
]
