"""
Metadata Inspector: 파일 크기 + 최종 수정 시각 (HEAD).

본문 전송 없음, 부수 효과 없음. 캐시 없음 (외부에서 언제든 변경 가능).
"""

import logging
from pathlib import Path

from src.domain.constants import MSG_FILE_NOT_FOUND
from src.domain.errors import ErrorCodes, StorageError
from src.domain.schemas import FileMetadata

logger = logging.getLogger(__name__)


def inspect_file(path: Path) -> FileMetadata:
    """
    파일 메타데이터 조회.

    Args:
        path: resolve된 파일 경로

    Returns:
        FileMetadata (size_bytes, last_modified_utc)

    Raises:
        StorageError: NOT_FOUND (파일 없음 또는 폴더), IO_FAILURE
    """
    if not path.is_file():
        logger.warning(f"File not found for metadata: {path}")
        raise StorageError(ErrorCodes.NOT_FOUND, MSG_FILE_NOT_FOUND, path=str(path))

    try:
        stat = path.stat()
    except OSError as e:
        logger.error(f"Failed to read metadata for {path}: {e}", exc_info=True)
        raise StorageError(
            ErrorCodes.IO_FAILURE,
            f"Failed to read metadata: {e}",
            path=str(path),
        ) from e

    metadata = FileMetadata.from_stat(stat.st_size, stat.st_mtime)
    logger.info(f"Metadata sent: {path}")
    return metadata
