"""로깅 초기화 모듈."""
# src/phonet/logging_setup.py
import logging
import os

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """
    루트 로거에 핸들러를 한 번만 설치한다.

    레벨 우선순위: 인자 > LOG_LEVEL 환경변수 > INFO
    """
    global _configured

    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    root = logging.getLogger()
    root.setLevel(level_name)

    # 두 번째 호출부터는 레벨만 갱신 (핸들러 중복 방지)
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
