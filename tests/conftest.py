"""
Pytest fixtures for the storage service tests.

테스트 구성:
- core 연산은 tmp_path 아래 스토리지 루트로 직접 호출
- API 테스트는 create_app(config)로 tmp 루트를 가진 앱 생성
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.core.paths import StorageRoot

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """빈 스토리지 루트 폴더."""
    root = tmp_path / "Storage"
    root.mkdir()
    return root


@pytest.fixture
def storage_root(storage_dir: Path) -> StorageRoot:
    """StorageRoot 인스턴스."""
    return StorageRoot(storage_dir)


@pytest.fixture
def populated_dir(storage_dir: Path) -> Path:
    """
    파일 2개 + 폴더 2개가 있는 루트.

    포함:
    - z.txt, a.txt
    - m/, b/ (b/ 안에 inner.txt)
    """
    (storage_dir / "z.txt").write_bytes(b"zzz")
    (storage_dir / "a.txt").write_bytes(b"a")
    (storage_dir / "m").mkdir()
    (storage_dir / "b").mkdir()
    (storage_dir / "b" / "inner.txt").write_bytes(b"inner")
    return storage_dir


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def test_config(tmp_path: Path) -> dict:
    """테스트용 설정 (작은 청크로 다중 청크 스트리밍 확인)."""
    return {
        "storage": {
            "root": str(tmp_path / "Storage"),
            "chunk_size": 4,
        },
        "server": {
            "host": "127.0.0.1",
            "port": 5000,
        },
        "logging": {
            "level": "DEBUG",
        },
    }


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def client(test_config: dict) -> Generator[TestClient, None, None]:
    """
    tmp 스토리지 루트를 사용하는 FastAPI TestClient.

    lifespan 실행 → 루트 폴더 생성까지 포함.
    """
    from src.app.main import create_app

    with TestClient(create_app(test_config)) as client:
        yield client


@pytest.fixture
def client_storage(test_config: dict) -> Path:
    """client fixture가 사용하는 스토리지 루트 경로."""
    return Path(test_config["storage"]["root"])
