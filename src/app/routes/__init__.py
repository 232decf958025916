"""
FastAPI Routes.

스토리지 라우트 하나가 URL 공간 전체("/{path}")를 담당.
"""

from . import storage

__all__ = ["storage"]
