"""
Path Resolver: 요청 경로 → 스토리지 루트 내부의 절대 경로.

규칙:
- 모든 요청은 가장 먼저 여기를 통과 (dispatcher → resolver → 연산)
- 루트 밖으로 벗어나는 경로는 INVALID_PATH (".." 순회 차단)
- 파일시스템 접근 없음: 순수 문자열/경로 계산
- 선행 "/" 는 절대 경로로 해석하지 않음 ("//etc/passwd" → <root>/etc/passwd)

한계:
- 검사는 어휘적(lexical). 루트 내부에 외부에서 만든 symlink는 OS가 따라감
"""

import logging
from pathlib import Path

from src.domain.constants import MSG_PATH_IS_ROOT, MSG_PATH_OUTSIDE_ROOT, MSG_PATH_REQUIRED
from src.domain.errors import ErrorCodes, StorageError

logger = logging.getLogger(__name__)

URL_SEPARATOR = "/"


def require_path(request_path: str | None) -> str:
    """
    필수 경로 확인 (PUT/HEAD/DELETE).

    Args:
        request_path: 라우트에서 받은 경로 문자열

    Returns:
        앞뒤 "/" 를 제거한 경로

    Raises:
        StorageError: INVALID_PATH (빈 경로)
    """
    stripped = (request_path or "").strip(URL_SEPARATOR)
    if not stripped:
        raise StorageError(ErrorCodes.INVALID_PATH, MSG_PATH_REQUIRED)
    return stripped


def normalize_segments(request_path: str) -> list[str]:
    """
    URL 경로를 정규화된 세그먼트 목록으로 변환.

    - 빈 세그먼트와 "." 제거
    - ".." 는 직전 세그먼트와 상쇄
    - 루트 위로 올라가는 ".." → INVALID_PATH

    Raises:
        StorageError: INVALID_PATH
    """
    segments: list[str] = []
    for segment in request_path.split(URL_SEPARATOR):
        if segment in ("", "."):
            continue
        if "\x00" in segment:
            raise StorageError(
                ErrorCodes.INVALID_PATH,
                "Path contains a NUL byte.",
                path=request_path,
            )
        if segment == "..":
            if not segments:
                raise StorageError(
                    ErrorCodes.INVALID_PATH,
                    MSG_PATH_OUTSIDE_ROOT,
                    path=request_path,
                )
            segments.pop()
            continue
        segments.append(segment)
    return segments


class StorageRoot:
    """
    스토리지 루트 (프로세스 시작 시 고정).

    사용법:
        root = StorageRoot(Path("/srv/Storage"))
        target = root.resolve("docs/report.txt")
    """

    def __init__(self, path: Path):
        # 절대 경로로 고정 (cwd 변경에 영향 받지 않도록)
        self.path = Path(path).absolute()

    def __repr__(self) -> str:
        return f"StorageRoot({str(self.path)!r})"

    def resolve(self, request_path: str | None, allow_root: bool = True) -> Path:
        """
        요청 경로를 루트 내부 절대 경로로 변환.

        Args:
            request_path: "/" 구분 상대 경로 (빈 문자열 = 루트)
            allow_root: False면 루트 자체를 가리키는 경로 거부 (업로드/조회/삭제)

        Returns:
            루트 또는 그 하위의 절대 경로

        Raises:
            StorageError: INVALID_PATH
        """
        segments = normalize_segments(request_path or "")

        if not segments and not allow_root:
            raise StorageError(
                ErrorCodes.INVALID_PATH,
                MSG_PATH_IS_ROOT,
                path=request_path,
            )

        resolved = self.path.joinpath(*segments)

        # 최종 방어선: Windows 드라이브 문자 등 세그먼트가 루트를 대체하는 경우
        if resolved != self.path and self.path not in resolved.parents:
            raise StorageError(
                ErrorCodes.INVALID_PATH,
                MSG_PATH_OUTSIDE_ROOT,
                path=request_path,
            )

        return resolved

    def relative(self, resolved: Path) -> str:
        """로그/응답용 루트 기준 상대 경로 ("/" 구분)."""
        relative = resolved.relative_to(self.path)
        return relative.as_posix() if relative.parts else URL_SEPARATOR
