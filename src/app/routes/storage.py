"""
Storage Routes: URL 경로 ↔ 스토리지 루트 하위 파일/폴더.

- PUT    /{path} → 업로드 (상위 폴더 자동 생성, 덮어쓰기)
- GET    /{path} → 폴더/루트면 목록(JSON), 파일이면 다운로드
- HEAD   /{path} → 메타데이터 (Content-Length, Last-Modified)
- DELETE /{path} → 파일 삭제 또는 폴더 재귀 삭제

흐름: resolver (항상 먼저) → dispatch table → core 연산.
core의 동기 파일시스템 호출은 threadpool에서 실행 (이벤트 루프 비차단).
"""

import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, Response, StreamingResponse
from starlette.requests import ClientDisconnect

from src.core.deletion import delete_path
from src.core.dispatch import (
    PATH_REQUIRED_METHODS,
    Operation,
    classify,
    requires_kind,
    select_operation,
)
from src.core.listing import list_directory
from src.core.metadata import inspect_file
from src.core.paths import StorageRoot, require_path
from src.core.transfer import prepare_download, stream_file, upload
from src.domain.constants import (
    DEFAULT_CHUNK_SIZE,
    MSG_DIRECTORY_DELETED,
    MSG_FILE_DELETED,
    MSG_UPLOADED,
)
from src.domain.errors import ErrorCodes, StorageError
from src.domain.schemas import EntryKind

logger = logging.getLogger(__name__)

router = APIRouter()

SUPPORTED_METHODS = ["GET", "PUT", "HEAD", "DELETE"]

# StorageError.code → HTTP status
ERROR_STATUS = {
    ErrorCodes.INVALID_PATH: 400,
    ErrorCodes.NOT_FOUND: 404,
    ErrorCodes.IS_DIRECTORY: 409,
    ErrorCodes.IO_FAILURE: 500,
}


def get_storage_root(request: Request) -> StorageRoot:
    """Request에서 storage_root 가져오기."""
    return request.app.state.storage_root


def get_download_chunk_size(request: Request) -> int:
    return getattr(request.app.state, "chunk_size", DEFAULT_CHUNK_SIZE)


def to_http_exception(e: StorageError, method: str, path: str) -> HTTPException:
    """StorageError → HTTPException (detail: code + message)."""
    if e.code == ErrorCodes.INVALID_PATH:
        # 경로 누락/순회 시도는 core에서 로그를 남기지 않음
        logger.warning(f"Rejected {method} request for {path!r}: {e.message}")
    status_code = ERROR_STATUS.get(e.code, 500)
    return HTTPException(
        status_code=status_code,
        detail={"code": e.code, "message": e.message},
    )


# =============================================================================
# Operation Handlers
# =============================================================================

async def handle_upload(request: Request, target: Path) -> Response:
    """요청 본문 → 파일."""
    try:
        await upload(target, request.stream())
    except ClientDisconnect:
        # 핸들은 이미 닫힘, 쓴 바이트는 남아있음 (롤백 없음)
        logger.warning(f"Client disconnected during upload: {target}")
        return PlainTextResponse("Client disconnected.", status_code=400)
    return PlainTextResponse(MSG_UPLOADED)


async def handle_list(request: Request, target: Path) -> Response:
    """폴더 목록 (JSON 배열)."""
    entries = await run_in_threadpool(list_directory, target)
    return JSONResponse([entry.to_dict() for entry in entries])


async def handle_download(request: Request, target: Path) -> Response:
    """파일 스트리밍 다운로드."""
    ticket = await run_in_threadpool(prepare_download, target)
    return StreamingResponse(
        stream_file(ticket.path, get_download_chunk_size(request)),
        media_type=ticket.media_type,
        headers={"Content-Disposition": ticket.content_disposition()},
    )


async def handle_inspect(request: Request, target: Path) -> Response:
    """메타데이터 헤더만 (본문 없음)."""
    metadata = await run_in_threadpool(inspect_file, target)
    return Response(status_code=200, headers=metadata.to_headers())


async def handle_delete(request: Request, target: Path) -> Response:
    """파일 또는 폴더 삭제."""
    kind = await run_in_threadpool(delete_path, target)
    message = MSG_FILE_DELETED if kind is EntryKind.FILE else MSG_DIRECTORY_DELETED
    return PlainTextResponse(message)


OPERATION_HANDLERS: dict[Operation, Callable[[Request, Path], Awaitable[Response]]] = {
    Operation.UPLOAD: handle_upload,
    Operation.LIST: handle_list,
    Operation.DOWNLOAD: handle_download,
    Operation.INSPECT: handle_inspect,
    Operation.DELETE: handle_delete,
}


# =============================================================================
# Route
# =============================================================================

@router.api_route("/{path:path}", methods=SUPPORTED_METHODS)
async def dispatch_request(request: Request, path: str) -> Response:
    """
    모든 스토리지 요청의 진입점.

    1. 경로 필수 메서드(PUT/HEAD/DELETE)는 빈 경로 거부 (resolve 전)
    2. resolve (루트 밖 → 400)
    3. GET만 경로 종류 조회 (폴더 → 목록, 그 외 → 다운로드)
    4. dispatch table로 연산 선택 후 실행
    """
    method = request.method
    root = get_storage_root(request)

    try:
        path_required = method in PATH_REQUIRED_METHODS
        if path_required:
            require_path(path)
        target = root.resolve(path, allow_root=not path_required)

        kind = None
        if requires_kind(method):
            kind = await run_in_threadpool(classify, path, target)

        operation = select_operation(method, kind)
        logger.debug(f"{method} {root.relative(target)} -> {operation.value}")
        return await OPERATION_HANDLERS[operation](request, target)

    except StorageError as e:
        raise to_http_exception(e, method, path) from e
