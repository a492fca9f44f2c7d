"""API 키 조회.

배포 환경마다 키를 넣는 변수 이름이 달라서, 정해진 순서대로 찾아보고
처음으로 값이 있는 변수를 사용합니다.
"""
import os
from typing import Mapping, Optional

from .errors import MissingCredentialError

# 우선순위 순서
API_KEY_VARIABLES = (
    "VITE_API_KEY",
    "REACT_APP_API_KEY",
    "NEXT_PUBLIC_API_KEY",
    "API_KEY",
    "ANTHROPIC_API_KEY",
)


def resolve_api_key(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """첫 번째로 비어 있지 않은 키를 반환합니다. 없으면 None."""
    env = os.environ if environ is None else environ
    for name in API_KEY_VARIABLES:
        value = (env.get(name) or "").strip()
        if value:
            return value
    return None


def require_api_key(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    API 키를 반환합니다.

    Raises:
        MissingCredentialError: 어떤 변수에도 키가 없음
    """
    key = resolve_api_key(environ)
    if not key:
        raise MissingCredentialError(
            "API 키가 설정되지 않았습니다. "
            "(.env 파일 또는 Streamlit secrets에 API_KEY 환경변수를 설정해주세요. "
            f"확인하는 변수: {', '.join(API_KEY_VARIABLES)})"
        )
    return key
