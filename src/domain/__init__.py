"""Domain layer: errors and schemas."""

from .errors import ErrorCodes, StorageError
from .schemas import (
    DirectoryEntry,
    DownloadTicket,
    EntryKind,
    FileMetadata,
)

__all__ = [
    "StorageError",
    "ErrorCodes",
    "DirectoryEntry",
    "DownloadTicket",
    "EntryKind",
    "FileMetadata",
]
