"""
Core layer: 요청 경로 → 샌드박스된 파일시스템 연산.

이 레이어만 파일시스템을 건드림 → 가장 보수적으로 관리

역할:
- 경로 confinement (resolver), 목록, 전송, 메타데이터, 삭제
- 요청 간 상태 없음: 매 호출마다 파일시스템을 직접 읽음
"""

from .deletion import delete_path
from .dispatch import Operation, PathKind, classify, select_operation
from .listing import list_directory
from .metadata import inspect_file
from .paths import StorageRoot, require_path
from .transfer import prepare_download, stream_file, upload

__all__ = [
    # paths
    "StorageRoot",
    "require_path",
    # listing
    "list_directory",
    # transfer
    "upload",
    "prepare_download",
    "stream_file",
    # metadata
    "inspect_file",
    # deletion
    "delete_path",
    # dispatch
    "Operation",
    "PathKind",
    "classify",
    "select_operation",
]
