"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run file-storage (또는 python -m src.app.main)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.app.config import (
    apply_env_overrides,
    ensure_storage_root,
    get_chunk_size,
    get_log_level,
    get_server_address,
    load_config,
    resolve_storage_root,
)

# Routes
from src.app.routes import storage
from src.core.logging import setup_logging
from src.core.paths import StorageRoot

logger = logging.getLogger(__name__)


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict[str, Any] | None = None) -> FastAPI:
    """
    앱 생성.

    Args:
        config: 설정 dict (None이면 시작 시점에 default.yaml + 환경 변수 로드)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        애플리케이션 생명주기 관리.

        시작 시: 로깅 설정, 스토리지 루트 결정/생성
        종료 시: 정리할 리소스 없음 (요청 간 상태 없음)
        """
        # import 시점에는 .env/환경 변수를 읽지 않음
        settings = config if config is not None else apply_env_overrides(load_config())
        setup_logging(get_log_level(settings))

        root_path = ensure_storage_root(resolve_storage_root(settings))
        app.state.config = settings
        app.state.storage_root = StorageRoot(root_path)
        app.state.chunk_size = get_chunk_size(settings)
        logger.info(f"Serving storage root: {app.state.storage_root.path}")

        yield

    # URL 공간 전체가 스토리지 경로 → docs/openapi 경로 비활성화
    app = FastAPI(
        title="File Storage",
        description="파일시스템 하위 트리를 HTTP로 제공 (업로드/다운로드/목록/메타데이터/삭제)",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.include_router(storage.router, tags=["Storage"])

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """uvicorn 실행 (host/port는 설정 기준)."""
    import uvicorn

    config = apply_env_overrides(load_config())
    host, port = get_server_address(config)

    setup_logging(get_log_level(config))
    logger.info(f"Server starting on http://{host}:{port}")

    uvicorn.run(create_app(config), host=host, port=port)


if __name__ == "__main__":
    run()
