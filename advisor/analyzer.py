import json
import logging
import time
from typing import Any, Callable, Mapping, Optional

import anthropic

from .config import ANALYSIS_MAX_TOKENS, ANALYSIS_TIMEOUT_SECONDS, ANTHROPIC_MODEL
from .credentials import require_api_key
from .deadline import call_with_deadline
from .errors import AnalysisError, AnalysisTimeoutError, ResponseParseError, UpstreamError
from .models import RECOMMENDATION_COUNT, AnalysisRequest, MonthlyAnalysis
from .schema import ANALYSIS_SCHEMA

logger = logging.getLogger(__name__)

TOOL_NAME = "report_monthly_analysis"

SYSTEM_INSTRUCTION = (
    "You are a smart store partner. Prioritize user safety. "
    "Warn them about trademark risks."
)


def _get_client(api_key: str):
    # 재시도는 사용자가 직접 다시 누르는 것으로만 합니다
    return anthropic.Anthropic(api_key=api_key, max_retries=0)


def build_analysis_prompt(month: int, category: str) -> str:
    return f"""당신은 '해외 구매대행 전문가', '네이버 SEO 전문가', '상표권 리스크 분석가'입니다.

## 분석 대상
- 판매 월: {month}월 (Month: {month})
- 카테고리: {category}

## 절대 제외 (안전 우선)
1. 식품/건강기능식품/영양제 제외
2. 화장품 제외
3. 집중 분야: 인증이 필요 없는 공산품 (디지털/가전, 패션잡화, 캠핑/아웃도어, 공구, 홈/주방)

## 요청 사항
1. 추천 상품 {RECOMMENDATION_COUNT}개를 생성하세요.
2. 가격 분석: 네이버 스마트스토어 평균 판매가와 11번가 아마존 구매가를 추정하세요 (원화).
   estimatedProfit = suggestedSellingPrice - amazonSourcingPrice
3. 마케팅 자료: SEO 상품명, 해시태그, 상세페이지 첫 줄 후킹 멘트
4. 상세페이지 초안: 프롤로그, 핵심 포인트 3가지, 스펙 요약, FAQ 3개
5. 상표권 리스크 분석 (중요):
   - 안전: 일반 명사 키워드 (예: "캠핑의자", "HDMI 케이블"). 위험 없음.
   - 주의: 브랜드명 (예: "Stanley", "Logitech"). 정품 병행수입은 합법이지만 신고 시 구매 영수증(인보이스)으로 소명해야 함.
   - 위험: 국내 독점 유통사가 공격적으로 신고하거나 가품 위험이 높은 브랜드 (예: 나이키, 롤렉스, 일부 명품 패션).
   - riskReason에 그렇게 판단한 이유를 적으세요.

## 작성 지침
- 어조: 격려하는, 전문적인, 수익 중심
- 통화: 원화(KRW), 정수
- 언어: 한국어
- 결과는 반드시 {TOOL_NAME} 도구의 입력(JSON)으로 반환하세요."""


def build_request(request: AnalysisRequest) -> dict:
    """messages.create 호출 인자를 만듭니다."""
    return {
        "model": ANTHROPIC_MODEL,
        "max_tokens": ANALYSIS_MAX_TOKENS,
        "system": SYSTEM_INSTRUCTION,
        "tools": [
            {
                "name": TOOL_NAME,
                "description": "월별 안전 소싱 분석 결과를 정해진 JSON 구조로 보고합니다.",
                "input_schema": ANALYSIS_SCHEMA,
            }
        ],
        "tool_choice": {"type": "tool", "name": TOOL_NAME},
        "messages": [
            {"role": "user", "content": build_analysis_prompt(request.month, request.category)}
        ],
    }


def _strip_code_fence(response_text: str) -> str:
    content = response_text.strip()
    if content.startswith("```"):
        content = content.split("```")[1]
        if content.startswith("json"):
            content = content[4:]
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()


def _load_json(text: str) -> Any:
    try:
        return json.loads(_strip_code_fence(text))
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"AI 응답을 JSON으로 해석할 수 없습니다: {exc}") from exc


def _extract_payload(response: Any) -> Any:
    blocks = getattr(response, "content", None) or []

    for block in blocks:
        if getattr(block, "type", "") == "tool_use" and getattr(block, "name", "") == TOOL_NAME:
            payload = block.input
            if isinstance(payload, str):
                return _load_json(payload)
            return payload

    text = "".join(
        block.text for block in blocks if getattr(block, "type", "") == "text"
    )
    if text.strip():
        return _load_json(text)

    raise UpstreamError("AI가 데이터를 반환하지 않았습니다.")


def parse_analysis_response(response: Any) -> MonthlyAnalysis:
    """Messages API 응답에서 MonthlyAnalysis를 꺼냅니다. 값은 검증/보정하지 않습니다."""
    payload = _extract_payload(response)
    if not payload:
        raise UpstreamError("AI가 빈 데이터를 반환했습니다.")
    return MonthlyAnalysis.from_dict(payload)


def fetch_market_analysis(
    month: int,
    category: str,
    *,
    environ: Optional[Mapping[str, str]] = None,
    client_factory: Optional[Callable[[str], Any]] = None,
    timeout: float = ANALYSIS_TIMEOUT_SECONDS,
) -> MonthlyAnalysis:
    """
    월/카테고리별 안전 소싱 아이템을 AI에게 요청합니다.

    Args:
        month: 판매 준비 월 (1-12)
        category: CATEGORIES 중 하나
        environ: API 키를 찾을 환경 (기본 os.environ)
        client_factory: api_key를 받아 Anthropic 호환 클라이언트를 만드는 함수
        timeout: 응답 대기 한도 (초)

    Returns:
        MonthlyAnalysis

    Raises:
        MissingCredentialError: API 키 미설정 (네트워크 호출 전)
        AnalysisTimeoutError: timeout 안에 응답 없음
        UpstreamError: AI 서비스 오류, 빈 응답, 그 밖의 예상치 못한 SDK 예외
        ResponseParseError: JSON이 아니거나 구조가 다름
    """
    api_key = require_api_key(environ)
    request = AnalysisRequest(month=month, category=category)
    client = (client_factory or _get_client)(api_key)
    kwargs = build_request(request)

    def _invoke():
        try:
            return client.messages.create(**kwargs)
        except anthropic.APIError as exc:
            raise UpstreamError(f"AI 서비스 호출 실패: {exc}") from exc

    logger.info("분석 요청 시작: %d월 / %s", request.month, request.category)
    started = time.monotonic()
    try:
        response = call_with_deadline(_invoke, timeout)
        analysis = parse_analysis_response(response)
    except AnalysisTimeoutError:
        logger.warning("분석 요청 시간 초과: %d월 / %s (%gs)", request.month, request.category, timeout)
        raise
    except Exception as exc:
        logger.exception(
            "분석 요청 실패: %d월 / %s (%.1fs)",
            request.month,
            request.category,
            time.monotonic() - started,
        )
        if isinstance(exc, AnalysisError):
            raise
        raise UpstreamError(f"AI 호출 중 예상치 못한 오류: {exc}") from exc

    logger.info(
        "분석 완료: %d월 / %s, 추천 %d개 (%.1fs)",
        request.month,
        request.category,
        len(analysis.recommendations),
        time.monotonic() - started,
    )
    return analysis
