"""
Error definitions for the storage service.

규칙:
- 조용한 실패 금지 → StorageError로 명시적 실패
- 모든 core 연산은 에러 코드로 실패 종류를 구분
- OSError는 IO_FAILURE로 감싸고 원인을 체이닝 (raise ... from e)
"""

from typing import Any


class StorageError(Exception):
    """
    스토리지 연산 실패 시 발생하는 에러.

    code로 실패 종류를 구분:
    - INVALID_PATH: 경로 누락/빈 경로, 루트 밖으로 벗어나는 경로
    - NOT_FOUND: 대상 파일/폴더 없음
    - IS_DIRECTORY: 폴더에 대해 다운로드 요청
    - IO_FAILURE: 권한, 디스크 부족, 잠긴 파일 등 파일시스템 에러

    Usage:
        raise StorageError(ErrorCodes.NOT_FOUND, "File not found.", path=str(path))
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수. 새 코드 추가 시 routes의 ERROR_STATUS에도 추가."""

    # === Request ===
    INVALID_PATH = "INVALID_PATH"

    # === Target ===
    NOT_FOUND = "NOT_FOUND"
    IS_DIRECTORY = "IS_DIRECTORY"

    # === Filesystem ===
    IO_FAILURE = "IO_FAILURE"
