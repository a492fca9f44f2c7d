from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ResponseParseError

MONTHS = list(range(1, 13))

CATEGORIES = [
    "전체",
    "디지털/PC/가전",
    "스포츠/레저/캠핑",
    "패션의류/잡화",
    "홈/인테리어/주방",
    "공구/취미/자동차",
]
DEFAULT_CATEGORY = CATEGORIES[0]

# 소싱 난이도: 하(쉬움) / 중 / 상(어려움)
DIFFICULTY_LEVELS = ("하", "중", "상")
# 상표권 위험 등급: 안전 / 주의(정품 소명 필요) / 위험
TRADEMARK_STATUSES = ("안전", "주의", "위험")

RECOMMENDATION_COUNT = 8


class AppState(Enum):
    HOME = "home"
    ANALYZING = "analyzing"
    RESULTS = "results"


def _require(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise ResponseParseError(f"{where}: JSON 객체가 아닙니다 ({type(data).__name__})")
    if key not in data:
        raise ResponseParseError(f"{where}: '{key}' 필드가 없습니다")
    return data[key]


def _require_list(data: Any, key: str, where: str) -> list:
    value = _require(data, key, where)
    if not isinstance(value, list):
        raise ResponseParseError(f"{where}: '{key}' 필드는 배열이어야 합니다")
    return value


@dataclass(frozen=True)
class AnalysisRequest:
    month: int
    category: str

    def __post_init__(self):
        if self.month not in MONTHS:
            raise ValueError(f"월은 1~12 사이여야 합니다: {self.month}")
        if self.category not in CATEGORIES:
            raise ValueError(f"지원하지 않는 카테고리입니다: {self.category}")


@dataclass
class SellingPoint:
    title: str
    content: str

    @classmethod
    def from_dict(cls, data: Any) -> "SellingPoint":
        return cls(
            title=_require(data, "title", "points"),
            content=_require(data, "content", "points"),
        )


@dataclass
class FaqItem:
    q: str
    a: str

    @classmethod
    def from_dict(cls, data: Any) -> "FaqItem":
        return cls(q=_require(data, "q", "faq"), a=_require(data, "a", "faq"))


@dataclass
class DetailedPageContent:
    prologue: str
    points: list[SellingPoint]
    spec: str
    faq: list[FaqItem]

    @classmethod
    def from_dict(cls, data: Any) -> "DetailedPageContent":
        return cls(
            prologue=_require(data, "prologue", "detailedPage"),
            points=[SellingPoint.from_dict(p) for p in _require_list(data, "points", "detailedPage")],
            spec=_require(data, "spec", "detailedPage"),
            faq=[FaqItem.from_dict(f) for f in _require_list(data, "faq", "detailedPage")],
        )


@dataclass
class TrademarkCheck:
    status: str
    risk_level: int
    brand_detected: str
    risk_reason: str

    @classmethod
    def from_dict(cls, data: Any) -> "TrademarkCheck":
        return cls(
            status=_require(data, "status", "trademarkCheck"),
            risk_level=_require(data, "riskLevel", "trademarkCheck"),
            brand_detected=_require(data, "brandDetected", "trademarkCheck"),
            risk_reason=_require(data, "riskReason", "trademarkCheck"),
        )


@dataclass
class ProductRecommendation:
    product_name: str
    english_keyword: str
    category: str
    reason: str
    difficulty: str
    search_volume: int
    competition_level: int
    target_audience: str
    sales_tip: str
    # 가격 (KRW)
    naver_average_price: int
    amazon_sourcing_price: int
    suggested_selling_price: int
    estimated_profit: int
    # 마케팅
    seo_title: str
    hashtags: list[str]
    marketing_copy: str
    detailed_page: DetailedPageContent
    trademark_check: TrademarkCheck

    @classmethod
    def from_dict(cls, item: Any) -> "ProductRecommendation":
        where = "recommendations"
        return cls(
            product_name=_require(item, "productName", where),
            english_keyword=_require(item, "englishKeyword", where),
            category=_require(item, "category", where),
            reason=_require(item, "reason", where),
            difficulty=_require(item, "difficulty", where),
            search_volume=_require(item, "searchVolume", where),
            competition_level=_require(item, "competitionLevel", where),
            target_audience=_require(item, "targetAudience", where),
            sales_tip=_require(item, "salesTip", where),
            naver_average_price=_require(item, "naverAveragePrice", where),
            amazon_sourcing_price=_require(item, "amazonSourcingPrice", where),
            suggested_selling_price=_require(item, "suggestedSellingPrice", where),
            estimated_profit=_require(item, "estimatedProfit", where),
            seo_title=_require(item, "seoTitle", where),
            hashtags=list(_require_list(item, "hashtags", where)),
            marketing_copy=_require(item, "marketingCopy", where),
            detailed_page=DetailedPageContent.from_dict(_require(item, "detailedPage", where)),
            trademark_check=TrademarkCheck.from_dict(_require(item, "trademarkCheck", where)),
        )


@dataclass
class MonthlyAnalysis:
    month: int
    summary: str
    recommendations: list[ProductRecommendation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "MonthlyAnalysis":
        """AI 응답 JSON(camelCase)을 그대로 옮깁니다. 값 보정은 하지 않습니다."""
        return cls(
            month=_require(data, "month", "analysis"),
            summary=_require(data, "summary", "analysis"),
            recommendations=[
                ProductRecommendation.from_dict(item)
                for item in _require_list(data, "recommendations", "analysis")
            ],
        )

