"""Pytest configuration shared across the suite."""

from __future__ import annotations

import threading
from types import SimpleNamespace
from typing import Any

import pytest

from advisor.analyzer import TOOL_NAME

_STATUSES = ["안전", "주의", "위험", "안전", "안전", "주의", "안전", "위험"]
_DIFFICULTIES = ["하", "중", "상", "하", "중", "하", "상", "중"]


def make_recommendation(index: int = 0) -> dict[str, Any]:
    sourcing = 20000 + index * 1500
    selling = sourcing + 9000 + index * 500
    return {
        "productName": f"캠핑 의자 {index}",
        "englishKeyword": f"camping chair {index}",
        "category": "스포츠/레저/캠핑",
        "reason": "겨울 캠핑 수요가 꾸준하고 인증이 필요 없는 공산품입니다.",
        "difficulty": _DIFFICULTIES[index % len(_DIFFICULTIES)],
        "searchVolume": 70 + index,
        "competitionLevel": 40 + index,
        "targetAudience": "30~40대 캠핑족",
        "salesTip": "알루미늄 프레임 모델을 고르세요.",
        "naverAveragePrice": selling + 3000,
        "amazonSourcingPrice": sourcing,
        "suggestedSellingPrice": selling,
        "estimatedProfit": selling - sourcing,
        "seoTitle": f"초경량 캠핑 의자 {index} 접이식 릴렉스체어",
        "hashtags": ["캠핑의자", "#릴렉스체어", "캠핑용품", "접이식의자", "백패킹"],
        "marketingCopy": "한 번 앉으면 일어나기 싫은 의자",
        "detailedPage": {
            "prologue": "주말마다 떠나는 당신에게.",
            "points": [
                {"title": "초경량", "content": "1.2kg"},
                {"title": "튼튼함", "content": "최대 120kg"},
                {"title": "간편 수납", "content": "30초 설치"},
            ],
            "spec": "크기 52x60x65cm, 무게 1.2kg",
            "faq": [
                {"q": "배송 기간은?", "a": "7~10일 소요됩니다."},
                {"q": "정품인가요?", "a": "11번가 아마존 정식 구매 상품입니다."},
                {"q": "교환 가능한가요?", "a": "해외 반품비가 발생합니다."},
            ],
        },
        "trademarkCheck": {
            "status": _STATUSES[index % len(_STATUSES)],
            "riskLevel": 10 + index * 10,
            "brandDetected": "None",
            "riskReason": "일반 명사 키워드",
        },
    }


def make_payload(month: int = 12, count: int = 8) -> dict[str, Any]:
    return {
        "month": month,
        "summary": "12월은 겨울 캠핑 수요가 정점입니다.",
        "recommendations": [make_recommendation(i) for i in range(count)],
    }


def tool_response(payload: Any) -> SimpleNamespace:
    return SimpleNamespace(
        stop_reason="tool_use",
        content=[SimpleNamespace(type="tool_use", name=TOOL_NAME, input=payload)],
    )


def text_response(text: str) -> SimpleNamespace:
    return SimpleNamespace(stop_reason="end_turn", content=[SimpleNamespace(type="text", text=text)])


class FakeMessages:
    """Stands in for client.messages; records every create() call."""

    def __init__(self, response: Any = None, error: Exception | None = None,
                 gate: threading.Event | None = None) -> None:
        self.response = response
        self.error = error
        self.gate = gate
        self.calls: list[dict[str, Any]] = []
        self.finished = threading.Event()

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        try:
            if self.gate is not None:
                self.gate.wait(timeout=5)
            if self.error is not None:
                raise self.error
            return self.response
        finally:
            self.finished.set()


class FakeClientFactory:
    def __init__(self, messages: FakeMessages) -> None:
        self.messages = messages
        self.api_keys: list[str] = []

    def __call__(self, api_key: str) -> SimpleNamespace:
        self.api_keys.append(api_key)
        return SimpleNamespace(messages=self.messages)


@pytest.fixture
def payload() -> dict[str, Any]:
    return make_payload()


@pytest.fixture
def environ() -> dict[str, str]:
    return {"API_KEY": "test-api-key"}
