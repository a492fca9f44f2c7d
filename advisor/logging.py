"""앱 로그 설정.

Streamlit은 화면을 다시 그릴 때마다 app.py를 재실행하므로 여러 번 호출돼도
핸들러가 하나만 붙어야 합니다.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# HTTP 요청마다 INFO를 남기는 라이브러리
NOISY_LOGGERS = ("httpx", "httpcore", "anthropic")


def configure_logging(level: str = "INFO") -> None:
    """advisor 로그는 level로, 외부 라이브러리 로그는 WARNING 이상만 남깁니다."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger("advisor").setLevel(level.upper())
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["configure_logging"]
