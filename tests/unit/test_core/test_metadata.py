"""
test_metadata.py - Metadata Inspector 테스트

DoD:
1. 크기 정확, 수정 시각은 UTC
2. 헤더 포맷: Content-Length, Last-Modified (RFC 1123)
"""

import os
from datetime import UTC, datetime, timedelta
from email.utils import parsedate_to_datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from src.core.metadata import inspect_file
from src.domain.errors import ErrorCodes, StorageError
from src.domain.schemas import FileMetadata


class TestInspectFile:
    """inspect_file 테스트."""

    def test_size_and_mtime(self, storage_dir: Path):
        # 파일시스템 타임스탬프 해상도 여유
        started = datetime.now(UTC) - timedelta(seconds=1)
        target = storage_dir / "a.bin"
        target.write_bytes(b"x" * 1234)

        metadata = inspect_file(target)

        assert metadata.size_bytes == 1234
        assert metadata.last_modified_utc.tzinfo is UTC
        assert metadata.last_modified_utc >= started

    def test_reads_live_values(self, storage_dir: Path):
        """캐시 없음: 외부 변경이 바로 반영."""
        target = storage_dir / "a.bin"
        target.write_bytes(b"1")
        assert inspect_file(target).size_bytes == 1

        target.write_bytes(b"12345")
        os.utime(target, (0, 86400))

        metadata = inspect_file(target)
        assert metadata.size_bytes == 5
        assert metadata.last_modified_utc == datetime(1970, 1, 2, tzinfo=UTC)

    def test_missing_not_found(self, storage_dir: Path):
        with pytest.raises(StorageError) as exc_info:
            inspect_file(storage_dir / "missing.bin")

        assert exc_info.value.code == ErrorCodes.NOT_FOUND

    def test_directory_not_found(self, storage_dir: Path):
        """폴더는 메타데이터 대상 아님 → NOT_FOUND."""
        (storage_dir / "docs").mkdir()

        with pytest.raises(StorageError) as exc_info:
            inspect_file(storage_dir / "docs")

        assert exc_info.value.code == ErrorCodes.NOT_FOUND

    def test_stat_error_io_failure(self, storage_dir: Path):
        target = storage_dir / "a.bin"
        target.write_bytes(b"x")

        with patch.object(Path, "is_file", return_value=True), \
                patch.object(Path, "stat", side_effect=PermissionError("denied")):
            with pytest.raises(StorageError) as exc_info:
                inspect_file(target)

        assert exc_info.value.code == ErrorCodes.IO_FAILURE


class TestFileMetadataHeaders:
    """FileMetadata.to_headers 테스트."""

    def test_rfc1123_last_modified(self):
        metadata = FileMetadata(
            size_bytes=42,
            last_modified_utc=datetime(2024, 1, 15, 9, 30, 5, tzinfo=UTC),
        )

        headers = metadata.to_headers()

        assert headers == {
            "Content-Length": "42",
            "Last-Modified": "Mon, 15 Jan 2024 09:30:05 GMT",
        }

    def test_header_parses_back(self):
        metadata = FileMetadata.from_stat(10, 1_700_000_000.75)

        parsed = parsedate_to_datetime(metadata.to_headers()["Last-Modified"])

        # 초 단위로 잘림
        assert parsed == datetime.fromtimestamp(1_700_000_000, tz=UTC)

    def test_to_dict(self):
        metadata = FileMetadata.from_stat(0, 0)

        assert metadata.to_dict() == {
            "size_bytes": 0,
            "last_modified_utc": "1970-01-01T00:00:00+00:00",
        }
