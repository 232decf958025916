"""
File Transfer Handler: 업로드(요청 본문 → 디스크) + 다운로드(디스크 → 응답).

규칙:
- 업로드: 상위 폴더 자동 생성, create-or-truncate ("wb"), append 아님
- 업로드 실패 시 이미 쓴 바이트는 남을 수 있음 → 반드시 IO_FAILURE로 보고
- 다운로드: 고정 MIME 타입 (application/octet-stream) + 원본 파일명
- 파일 핸들은 async with 로만 획득 → 완료/에러/클라이언트 끊김 모두 해제
- 경로별 락 없음: 동시 업로드/다운로드는 섞일 수 있음 (last-writer-wins)
"""

import errno
import logging
import os
from collections.abc import AsyncIterable, AsyncIterator
from pathlib import Path

import aiofiles
import aiofiles.os

from src.domain.constants import (
    DEFAULT_CHUNK_SIZE,
    DOWNLOAD_MEDIA_TYPE,
    MSG_FILE_NOT_FOUND,
    MSG_IS_DIRECTORY,
)
from src.domain.errors import ErrorCodes, StorageError
from src.domain.schemas import DownloadTicket

logger = logging.getLogger(__name__)

# =============================================================================
# Upload
# =============================================================================


async def _ensure_parent_dir(path: Path) -> None:
    """상위 폴더 체인 생성 (없을 때만, 생성 시 로그)."""
    directory = path.parent
    if await aiofiles.os.path.isdir(directory):
        return
    await aiofiles.os.makedirs(directory, exist_ok=True)
    logger.info(f"Created directory: {directory}")


async def upload(path: Path, chunks: AsyncIterable[bytes]) -> int:
    """
    요청 본문을 파일로 저장.

    동작:
    - 없는 상위 폴더 모두 생성
    - 기존 파일은 완전히 덮어씀 (짧은 내용으로 덮어도 잔여 바이트 없음)
    - 클라이언트 끊김 등 chunks 쪽 예외는 그대로 전파 (핸들은 해제됨)

    Args:
        path: resolve된 대상 파일 경로
        chunks: 요청 본문 바이트 스트림

    Returns:
        기록한 바이트 수

    Raises:
        StorageError: IO_FAILURE (폴더 생성/쓰기 실패)
    """
    written = 0
    try:
        await _ensure_parent_dir(path)
        async with aiofiles.open(path, "wb") as f:
            async for chunk in chunks:
                if chunk:
                    await f.write(chunk)
                    written += len(chunk)
    except OSError as e:
        logger.error(
            f"Upload failed for {path} after {written} bytes: {e}",
            exc_info=True,
        )
        raise StorageError(
            ErrorCodes.IO_FAILURE,
            f"Failed to upload file: {e}",
            path=str(path),
            bytes_written=written,
        ) from e

    logger.info(f"File uploaded: {path} ({written} bytes)")
    return written


# =============================================================================
# Download
# =============================================================================


def prepare_download(path: Path) -> DownloadTicket:
    """
    다운로드 대상 확인.

    폴더는 dispatcher가 목록 조회로 먼저 보내므로 여기 오면 IS_DIRECTORY.

    Args:
        path: resolve된 파일 경로

    Returns:
        DownloadTicket (경로, 파일명, 크기, MIME 타입)

    Raises:
        StorageError: NOT_FOUND, IS_DIRECTORY, IO_FAILURE
    """
    if path.is_dir():
        raise StorageError(ErrorCodes.IS_DIRECTORY, MSG_IS_DIRECTORY, path=str(path))

    if not path.is_file():
        logger.warning(f"File not found: {path}")
        raise StorageError(ErrorCodes.NOT_FOUND, MSG_FILE_NOT_FOUND, path=str(path))

    try:
        size = path.stat().st_size
        # 응답 헤더를 보내기 전에 읽기 권한 실패를 잡기 위함
        if not os.access(path, os.R_OK):
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), str(path))
    except OSError as e:
        logger.error(f"Failed to download file {path}: {e}", exc_info=True)
        raise StorageError(
            ErrorCodes.IO_FAILURE,
            f"Failed to download file: {e}",
            path=str(path),
        ) from e

    return DownloadTicket(
        path=path,
        filename=path.name,
        size_bytes=size,
        media_type=DOWNLOAD_MEDIA_TYPE,
    )


async def stream_file(
    path: Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> AsyncIterator[bytes]:
    """
    파일을 청크 단위로 읽기.

    핸들은 첫 청크 요청 시 열리고 정상 종료, 읽기 에러, 제너레이터 close
    (클라이언트 끊김) 모두에서 닫힘.

    Args:
        path: prepare_download()로 확인한 파일 경로
        chunk_size: 청크 크기 (바이트)

    Yields:
        파일 내용 청크
    """
    sent = 0
    try:
        async with aiofiles.open(path, "rb") as f:
            while True:
                chunk = await f.read(chunk_size)
                if not chunk:
                    break
                sent += len(chunk)
                yield chunk
    except OSError as e:
        # 헤더가 이미 전송된 뒤라 상태 코드를 바꿀 수 없음 → 로그 후 전파
        logger.error(f"Download interrupted for {path} after {sent} bytes: {e}", exc_info=True)
        raise

    logger.info(f"File sent: {path} ({sent} bytes)")
