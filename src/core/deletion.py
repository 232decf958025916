"""
Deletion Handler: 파일 삭제 또는 폴더 재귀 삭제.

평가 순서:
1. 파일 있으면 → 파일 하나 삭제 (FILE)
2. 폴더 있으면 → 폴더 + 전체 내용 삭제 (DIRECTORY)
3. 둘 다 없으면 → NOT_FOUND

⚠️ 재귀 삭제는 트랜잭션이 아님:
   중간에 실패하면 IO_FAILURE를 보고하지만, 디스크에서는 일부가 이미
   삭제되었을 수 있음. 롤백 없음.
"""

import logging
import shutil
from pathlib import Path

from src.domain.constants import MSG_TARGET_NOT_FOUND
from src.domain.errors import ErrorCodes, StorageError
from src.domain.schemas import EntryKind

logger = logging.getLogger(__name__)


def delete_path(path: Path) -> EntryKind:
    """
    파일 또는 폴더 삭제 (되돌릴 수 없음).

    symlink는 대상이 아니라 링크 자체만 삭제 (FILE로 보고).

    Args:
        path: resolve된 경로

    Returns:
        삭제한 항목 종류

    Raises:
        StorageError: NOT_FOUND, IO_FAILURE
    """
    try:
        if path.is_file() or path.is_symlink():
            path.unlink()
            logger.info(f"File deleted: {path}")
            return EntryKind.FILE

        if path.is_dir():
            shutil.rmtree(path)
            logger.info(f"Directory deleted: {path}")
            return EntryKind.DIRECTORY

    except OSError as e:
        logger.error(
            f"Delete failed for {path}: {e}. "
            f"Directory contents may be partially removed.",
            exc_info=True,
        )
        raise StorageError(
            ErrorCodes.IO_FAILURE,
            f"Failed to delete: {e}",
            path=str(path),
        ) from e

    logger.warning(f"File or directory not found: {path}")
    raise StorageError(ErrorCodes.NOT_FOUND, MSG_TARGET_NOT_FOUND, path=str(path))
