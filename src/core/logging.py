"""
Console logging setup.

규칙:
- 모듈마다 logger = logging.getLogger(__name__)
- 성공: info / 클라이언트 에러(경로 없음, 대상 없음): warning / IO 실패: error + exc_info
"""

import logging
import sys

from src.domain.constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ConsoleHandler(logging.StreamHandler):
    """setup_logging이 붙이는 stderr 핸들러 (중복 추가 확인용)."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)
        self.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))


def resolve_level(level: str | int | None) -> int:
    """
    로그 레벨 이름/숫자 → logging 레벨.

    알 수 없는 이름이면 INFO.
    """
    if level is None:
        level = DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """
    콘솔(stderr) 핸들러 설정.

    여러 번 호출해도 핸들러가 중복 추가되지 않음 (레벨만 갱신).

    Args:
        level: "DEBUG", "INFO" 등 또는 logging 상수

    Returns:
        설정된 "src" 패키지 로거
    """
    resolved = resolve_level(level)
    root_logger = logging.getLogger("src")
    root_logger.setLevel(resolved)

    if not any(isinstance(h, ConsoleHandler) for h in root_logger.handlers):
        root_logger.addHandler(ConsoleHandler())

    return root_logger
