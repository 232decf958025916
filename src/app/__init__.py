"""
App layer: HTTP 서버 (FastAPI).

역할:
- 설정 로드, 스토리지 루트 준비, 라우트 등록
- HTTP 메서드 + 경로 → core 연산 dispatch
- ⚠️ 파일시스템 로직 없음 (core에 위임)
"""
