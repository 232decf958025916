"""
Data schemas for the storage service.

규칙:
- 모든 값은 요청마다 파일시스템에서 새로 읽음 (캐시 없음)
- wire 포맷 키는 to_dict()/to_headers() 에서만 결정
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import format_datetime
from enum import Enum
from pathlib import Path
from typing import Any
from urllib.parse import quote

# =============================================================================
# Entry Kind
# =============================================================================

class EntryKind(str, Enum):
    """폴더 항목 종류."""
    FILE = "file"
    DIRECTORY = "directory"


# 정렬 우선순위: 파일 → 폴더
ENTRY_KIND_ORDER = {
    EntryKind.FILE: 0,
    EntryKind.DIRECTORY: 1,
}

# =============================================================================
# Core Schemas
# =============================================================================

@dataclass(frozen=True)
class DirectoryEntry:
    """폴더 목록의 한 항목 (직계 자식만)."""
    name: str
    kind: EntryKind

    def sort_key(self) -> tuple[int, str]:
        return (ENTRY_KIND_ORDER[self.kind], self.name)

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 ({Name, Type})."""
        return {
            "Name": self.name,
            "Type": self.kind.value,
        }


@dataclass(frozen=True)
class FileMetadata:
    """
    파일 메타데이터.

    HEAD 응답 헤더로만 전달되며 본문은 전송하지 않음.
    """
    size_bytes: int
    last_modified_utc: datetime

    @classmethod
    def from_stat(cls, size: int, mtime: float) -> "FileMetadata":
        """os.stat 결과에서 생성 (mtime → UTC)."""
        return cls(
            size_bytes=size,
            last_modified_utc=datetime.fromtimestamp(mtime, tz=UTC),
        )

    def to_headers(self) -> dict[str, str]:
        """
        HTTP 헤더 변환.

        Last-Modified: RFC 1123 형식 (예: "Sun, 18 Oct 2026 09:15:00 GMT")
        """
        return {
            "Content-Length": str(self.size_bytes),
            "Last-Modified": format_datetime(self.last_modified_utc, usegmt=True),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "size_bytes": self.size_bytes,
            "last_modified_utc": self.last_modified_utc.isoformat(),
        }


@dataclass(frozen=True)
class DownloadTicket:
    """다운로드 대상 확인 결과. 실제 스트리밍은 transfer.stream_file."""
    path: Path
    filename: str
    size_bytes: int
    media_type: str

    def content_disposition(self) -> str:
        """Content-Disposition 헤더 값 (attachment + 원본 파일명)."""
        ascii_name = self.filename.encode("ascii", "replace").decode("ascii")
        ascii_name = ascii_name.replace('"', "_").replace("\\", "_").replace("?", "_")
        if ascii_name == self.filename:
            return f'attachment; filename="{self.filename}"'
        # 비 ASCII 또는 따옴표/역슬래시 포함 (RFC 5987)
        return (
            f'attachment; filename="{ascii_name}"; '
            f"filename*=utf-8''{quote(self.filename)}"
        )
