"""
Directory Lister: 폴더의 직계 자식 목록.

정렬 규칙 (항상 동일한 결과):
1. 파일 → 폴더
2. 같은 종류 안에서는 이름 (code point 순)
"""

import logging
import os
from pathlib import Path

from src.domain.constants import MSG_DIRECTORY_NOT_FOUND
from src.domain.errors import ErrorCodes, StorageError
from src.domain.schemas import DirectoryEntry, EntryKind

logger = logging.getLogger(__name__)


def _entry_kind(entry: os.DirEntry) -> EntryKind:
    """symlink는 대상 기준으로 판단. 폴더가 아니면 모두 file."""
    try:
        if entry.is_dir(follow_symlinks=True):
            return EntryKind.DIRECTORY
    except OSError:
        # 끊어진 symlink 등
        pass
    return EntryKind.FILE


def _display_name(entry: os.DirEntry) -> str:
    """UTF-8로 디코드되지 않는 이름 (surrogate escape) → U+FFFD 치환."""
    try:
        entry.name.encode("utf-8")
    except UnicodeEncodeError:
        name = entry.name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        logger.warning(f"Non UTF-8 file name in {entry.path!r}, listed as {name!r}")
        return name
    return entry.name


def list_directory(path: Path) -> list[DirectoryEntry]:
    """
    폴더 직계 자식 나열 (재귀 없음, 읽기 전용).

    Args:
        path: resolve된 폴더 경로

    Returns:
        정렬된 DirectoryEntry 목록

    Raises:
        StorageError: NOT_FOUND (폴더 없음), IO_FAILURE (권한/IO 에러)
    """
    if not path.is_dir():
        logger.warning(f"Directory not found: {path}")
        raise StorageError(ErrorCodes.NOT_FOUND, MSG_DIRECTORY_NOT_FOUND, path=str(path))

    try:
        with os.scandir(path) as it:
            entries = [DirectoryEntry(name=_display_name(e), kind=_entry_kind(e)) for e in it]
    except OSError as e:
        logger.error(f"Failed to list directory {path}: {e}", exc_info=True)
        raise StorageError(
            ErrorCodes.IO_FAILURE,
            f"Failed to list directory: {e}",
            path=str(path),
        ) from e

    entries.sort(key=DirectoryEntry.sort_key)
    logger.info(f"Listed directory: {path} ({len(entries)} entries)")
    return entries
