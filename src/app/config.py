"""
설정 로드: default.yaml + 환경 변수(.env) 오버라이드.

우선순위: 환경 변수 > default.yaml > 기본값 (constants.py)

스토리지 루트:
- 절대 경로면 그대로 사용
- 상대 경로면 프로젝트 루트 기준 (빌드 산출물 폴더는 건너뜀)
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.domain.constants import (
    BUILD_OUTPUT_DIRNAMES,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_STORAGE_DIRNAME,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_PORT,
    ENV_STORAGE_ROOT,
)

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    설정 파일 로드.

    Args:
        config_path: YAML 경로 (None이면 프로젝트 루트의 default.yaml)

    Returns:
        설정 dict (파일 없으면 빈 dict)
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] | None = yaml.safe_load(f)
        return data or {}


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    환경 변수 오버라이드 적용 (.env 파일 포함).

    원본 config는 수정하지 않고 새 dict 반환.
    """
    load_dotenv()

    merged = {
        "storage": dict(config.get("storage") or {}),
        "server": dict(config.get("server") or {}),
        "logging": dict(config.get("logging") or {}),
    }

    if os.getenv(ENV_STORAGE_ROOT):
        merged["storage"]["root"] = os.environ[ENV_STORAGE_ROOT]
    if os.getenv(ENV_HOST):
        merged["server"]["host"] = os.environ[ENV_HOST]
    if os.getenv(ENV_PORT):
        merged["server"]["port"] = _parse_port(os.environ[ENV_PORT], ENV_PORT)
    if os.getenv(ENV_LOG_LEVEL):
        merged["logging"]["level"] = os.environ[ENV_LOG_LEVEL]

    return merged


def discover_project_root(start: Path | None = None) -> Path:
    """
    작업 디렉터리에서 빌드 산출물 폴더(bin, Debug 등)를 건너뛰며 상위로 이동.

    예: /work/app/bin/Debug → /work/app

    Args:
        start: 시작 경로 (None이면 cwd)
    """
    current = (start or Path.cwd()).absolute()
    while current.name in BUILD_OUTPUT_DIRNAMES and current.parent != current:
        current = current.parent
    return current


def resolve_storage_root(config: dict[str, Any], start: Path | None = None) -> Path:
    """
    설정에서 스토리지 루트 절대 경로 결정 (생성은 하지 않음).

    Args:
        config: 설정 dict
        start: 프로젝트 루트 탐색 시작 경로 (None이면 cwd)
    """
    configured = (config.get("storage") or {}).get("root") or DEFAULT_STORAGE_DIRNAME
    root = Path(configured).expanduser()
    if root.is_absolute():
        return root
    return discover_project_root(start) / root


def ensure_storage_root(root: Path) -> Path:
    """스토리지 루트가 없으면 생성 (로그 남김)."""
    if not root.is_dir():
        root.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created storage directory: {root}")
    return root


def get_chunk_size(config: dict[str, Any]) -> int:
    """다운로드 청크 크기 (양수가 아니면 기본값)."""
    value = (config.get("storage") or {}).get("chunk_size", DEFAULT_CHUNK_SIZE)
    try:
        size = int(value)
    except (TypeError, ValueError):
        return DEFAULT_CHUNK_SIZE
    return size if size > 0 else DEFAULT_CHUNK_SIZE


def _parse_port(value: Any, source: str) -> int:
    """정수가 아니면 경고 후 기본 포트."""
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid port {value!r} in {source}, using {DEFAULT_PORT}")
        return DEFAULT_PORT


def get_server_address(config: dict[str, Any]) -> tuple[str, int]:
    """(host, port)."""
    server = config.get("server") or {}
    port = _parse_port(server.get("port", DEFAULT_PORT), "server.port")
    return server.get("host", DEFAULT_HOST), port


def get_log_level(config: dict[str, Any]) -> str:
    return (config.get("logging") or {}).get("level", DEFAULT_LOG_LEVEL)
