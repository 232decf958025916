"""
Request Dispatcher: (HTTP 메서드 × 경로 종류) → 연산.

분기문 대신 테이블로 관리해서 연산별로 독립 테스트 가능.
로직 없음: 어떤 연산을 부를지만 결정.
"""

from enum import Enum
from pathlib import Path


class PathKind(str, Enum):
    """resolve된 경로가 현재 가리키는 대상."""
    EMPTY = "empty"          # 요청 경로 없음 (루트)
    DIRECTORY = "directory"
    FILE = "file"
    MISSING = "missing"


class Operation(str, Enum):
    """core 연산."""
    UPLOAD = "upload"
    LIST = "list"
    DOWNLOAD = "download"
    INSPECT = "inspect"
    DELETE = "delete"


# (method, kind) 정확히 일치 → 없으면 (method, None) 기본값
DISPATCH_TABLE: dict[tuple[str, PathKind | None], Operation] = {
    ("PUT", None): Operation.UPLOAD,
    ("GET", PathKind.EMPTY): Operation.LIST,
    ("GET", PathKind.DIRECTORY): Operation.LIST,
    ("GET", None): Operation.DOWNLOAD,
    ("HEAD", None): Operation.INSPECT,
    ("DELETE", None): Operation.DELETE,
}


# 빈 경로(루트)를 허용하지 않는 메서드
PATH_REQUIRED_METHODS = frozenset({"PUT", "HEAD", "DELETE"})


def requires_kind(method: str) -> bool:
    """연산 선택에 경로 종류가 필요한 메서드인지 (테이블에 kind별 항목 존재)."""
    method = method.upper()
    return any(m == method and kind is not None for m, kind in DISPATCH_TABLE)


def classify(request_path: str | None, resolved: Path) -> PathKind:
    """
    경로 종류 판단 (파일시스템 조회 1회).

    Args:
        request_path: 원본 요청 경로
        resolved: resolve된 경로
    """
    if not (request_path or "").strip("/"):
        return PathKind.EMPTY
    if resolved.is_dir():
        return PathKind.DIRECTORY
    if resolved.is_file():
        return PathKind.FILE
    return PathKind.MISSING


def select_operation(method: str, kind: PathKind | None = None) -> Operation:
    """
    메서드와 경로 종류로 연산 선택.

    Raises:
        ValueError: 지원하지 않는 메서드
    """
    method = method.upper()
    operation = DISPATCH_TABLE.get((method, kind)) or DISPATCH_TABLE.get((method, None))
    if operation is None:
        raise ValueError(f"Unsupported method: {method}")
    return operation
