"""
test_storage_routes.py - Storage Routes 단위 테스트

HTTP 서버 없이 에러 매핑과 핸들러 동작 확인.
"""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from starlette.requests import ClientDisconnect

from src.app.routes.storage import (
    ERROR_STATUS,
    OPERATION_HANDLERS,
    handle_upload,
    to_http_exception,
)
from src.core.dispatch import Operation
from src.domain.errors import ErrorCodes, StorageError


class FakeRequest:
    """request.stream()만 흉내."""

    def __init__(self, *parts: bytes, disconnect_after: int | None = None):
        self.parts = parts
        self.disconnect_after = disconnect_after

    async def stream(self) -> AsyncIterator[bytes]:
        for index, part in enumerate(self.parts):
            if self.disconnect_after is not None and index >= self.disconnect_after:
                raise ClientDisconnect()
            yield part


class TestErrorMapping:
    """StorageError → HTTPException 테스트."""

    @pytest.mark.parametrize(
        "code,status",
        [
            (ErrorCodes.INVALID_PATH, 400),
            (ErrorCodes.NOT_FOUND, 404),
            (ErrorCodes.IS_DIRECTORY, 409),
            (ErrorCodes.IO_FAILURE, 500),
        ],
    )
    def test_status(self, code: str, status: int):
        exc = to_http_exception(StorageError(code, "msg"), "GET", "a")

        assert exc.status_code == status
        assert exc.detail == {"code": code, "message": "msg"}

    def test_unknown_code_500(self):
        exc = to_http_exception(StorageError("SOMETHING_ELSE", "msg"), "GET", "a")

        assert exc.status_code == 500

    def test_all_codes_mapped(self):
        codes = {v for k, v in vars(ErrorCodes).items() if k.isupper()}

        assert codes == set(ERROR_STATUS)

    def test_invalid_path_logged(self, caplog):
        with caplog.at_level("WARNING", logger="src.app.routes.storage"):
            to_http_exception(
                StorageError(ErrorCodes.INVALID_PATH, "Path is required."), "PUT", ""
            )

        assert any("Rejected PUT request" in r.getMessage() for r in caplog.records)


class TestHandlers:
    """연산 핸들러 테스트."""

    def test_every_operation_has_handler(self):
        assert set(OPERATION_HANDLERS) == set(Operation)

    @pytest.mark.asyncio
    async def test_upload_ok(self, storage_dir: Path):
        target = storage_dir / "a" / "b.txt"

        response = await handle_upload(FakeRequest(b"ab", b"cd"), target)

        assert response.status_code == 200
        assert response.body == b"File uploaded successfully."
        assert target.read_bytes() == b"abcd"

    @pytest.mark.asyncio
    async def test_upload_client_disconnect(self, storage_dir: Path):
        """끊김 → 이미 쓴 바이트는 남고 핸들러는 응답 반환."""
        target = storage_dir / "partial.bin"

        response = await handle_upload(
            FakeRequest(b"first", b"second", disconnect_after=1), target
        )

        assert response.status_code == 400
        assert target.read_bytes() == b"first"
