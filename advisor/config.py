import os
from dotenv import load_dotenv

load_dotenv()

ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
ANALYSIS_MAX_TOKENS = int(os.getenv("ANALYSIS_MAX_TOKENS", "16000"))
APP_LOG_LEVEL = os.getenv("APP_LOG_LEVEL", "INFO")

# AI 응답 대기 한도 (초)
ANALYSIS_TIMEOUT_SECONDS = 20


def load_streamlit_secrets() -> None:
    """Streamlit Cloud secrets → 환경변수로 복사합니다 (이미 있는 값은 유지)."""
    import streamlit as st

    try:
        for key in st.secrets:
            if isinstance(st.secrets[key], str):
                os.environ.setdefault(key, st.secrets[key])
    except FileNotFoundError:
        pass
