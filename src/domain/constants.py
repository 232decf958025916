"""
Domain Constants: 서비스 전역 상수.

설정 기본값, 응답 메시지, 경로 탐색 정책 등.
"""

# =============================================================================
# Storage Defaults (스토리지 기본값)
# =============================================================================
# default.yaml 의 storage 섹션으로 오버라이드 가능

DEFAULT_STORAGE_DIRNAME = "Storage"
DEFAULT_CHUNK_SIZE = 64 * 1024

# =============================================================================
# Server Defaults
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000
DEFAULT_LOG_LEVEL = "INFO"

# =============================================================================
# Project Root Discovery (프로젝트 루트 탐색)
# =============================================================================
# 상대 경로 storage.root 는 프로젝트 루트 기준으로 해석.
# 작업 디렉터리가 빌드 산출물 폴더면 상위로 올라감:
# <project>/bin/Debug → <project>

BUILD_OUTPUT_DIRNAMES = frozenset({"bin", "obj", "Debug", "Release", "build", "dist"})

# =============================================================================
# Environment Overrides (.env 지원)
# =============================================================================

ENV_STORAGE_ROOT = "FILE_STORAGE_ROOT"
ENV_HOST = "FILE_STORAGE_HOST"
ENV_PORT = "FILE_STORAGE_PORT"
ENV_LOG_LEVEL = "FILE_STORAGE_LOG_LEVEL"

# =============================================================================
# Wire Format
# =============================================================================

# 다운로드는 항상 고정 MIME 타입 (content sniffing 없음)
DOWNLOAD_MEDIA_TYPE = "application/octet-stream"

MSG_PATH_REQUIRED = "Path is required."
MSG_PATH_OUTSIDE_ROOT = "Path escapes the storage root."
MSG_PATH_IS_ROOT = "Path must not refer to the storage root."
MSG_FILE_NOT_FOUND = "File not found."
MSG_DIRECTORY_NOT_FOUND = "Directory not found."
MSG_TARGET_NOT_FOUND = "File or directory not found."
MSG_IS_DIRECTORY = "Path refers to a directory."

MSG_UPLOADED = "File uploaded successfully."
MSG_FILE_DELETED = "File deleted successfully."
MSG_DIRECTORY_DELETED = "Directory deleted successfully."
