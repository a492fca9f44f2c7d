"""결과 카드에 쓰는 표시용 변환 (가격 표기, 차트, 복사용 텍스트, 배지, 링크)."""
from dataclasses import dataclass
from urllib.parse import quote

import pandas as pd
import plotly.express as px

from .models import DetailedPageContent, ProductRecommendation, TrademarkCheck

AMAZON_MAIN_URL = "https://www.11st.co.kr/amazon/main"
AMAZON_SEARCH_URL = "https://search.11st.co.kr/Search.tmall?kwd={query}"
NAVER_SEARCH_URL = "https://search.shopping.naver.com/search/all?query={query}"

NAVER_GREEN = "#03C75A"
AMBER = "#f59e0b"

RECEIPT_REMINDER = "* 11번가(아마존) 구매 영수증을 반드시 보관하세요."


def format_price(won: int) -> str:
    """12900 → '₩12,900'"""
    if won < 0:
        return f"-₩{-won:,}"
    return f"₩{won:,}"


def format_profit(won: int) -> str:
    return f"+{format_price(won)}" if won >= 0 else format_price(won)


def chart_frame(item: ProductRecommendation) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"지표": "네이버검색", "값": item.search_volume, "color": NAVER_GREEN},
            {"지표": "경쟁강도", "값": item.competition_level, "color": AMBER},
        ]
    )


def metrics_figure(item: ProductRecommendation):
    df = chart_frame(item)
    fig = px.bar(
        df,
        x="값",
        y="지표",
        orientation="h",
        color="지표",
        color_discrete_map=dict(zip(df["지표"], df["color"])),
        text="값",
    )
    fig.update_traces(textposition="outside", width=0.5)
    fig.update_layout(
        height=180,
        showlegend=False,
        xaxis=dict(range=[0, 100], visible=False),
        yaxis=dict(title=None),
        margin=dict(l=10, r=30, t=10, b=10),
    )
    return fig


def detailed_page_text(page: DetailedPageContent) -> str:
    """상세페이지 초안 전체를 붙여넣기용 텍스트로 만듭니다."""
    points = "\n\n".join(
        f"{i}. {p.title}\n{p.content}" for i, p in enumerate(page.points, 1)
    )
    faq = "\n\n".join(f"Q. {f.q}\nA. {f.a}" for f in page.faq)
    return (
        f"[프롤로그]\n{page.prologue}\n\n"
        f"[핵심 포인트 {len(page.points)}가지]\n{points}\n\n"
        f"[제품 스펙]\n{page.spec}\n\n"
        f"[자주 묻는 질문 (FAQ)]\n{faq}"
    )


def hashtags_text(tags: list[str]) -> str:
    return " ".join(f"#{t.lstrip('#')}" for t in tags)


@dataclass(frozen=True)
class Badge:
    label: str
    icon: str
    color: str  # st.badge 색상 이름


_TRADEMARK_BADGES = {
    "안전": Badge("상표권 안전", "🛡️", "green"),
    "주의": Badge("정품소명 주의", "⚠️", "orange"),
    "위험": Badge("상표권 위험", "⛔", "red"),
}
_UNKNOWN_BADGE = Badge("확인 필요", "🛡️", "gray")

_DIFFICULTY_COLORS = {"하": "green", "중": "orange", "상": "red"}


def trademark_badge(status: str) -> Badge:
    return _TRADEMARK_BADGES.get(status, _UNKNOWN_BADGE)


def difficulty_color(difficulty: str) -> str:
    return _DIFFICULTY_COLORS.get(difficulty, "red")


@dataclass(frozen=True)
class TrademarkNotice:
    level: str  # success / warning / error
    headline: str
    reason: str
    footnote: str = ""


def trademark_notice(check: TrademarkCheck) -> TrademarkNotice:
    if check.status == "안전":
        return TrademarkNotice("success", "✅ 상표권 안전 키워드", check.risk_reason)
    if check.status == "위험":
        return TrademarkNotice("error", "⛔️ 상표권 침해 위험", check.risk_reason, RECEIPT_REMINDER)
    return TrademarkNotice("warning", "⚠️ 정품 소명 준비 필요", check.risk_reason, RECEIPT_REMINDER)


def amazon_search_url(item: ProductRecommendation) -> str:
    return AMAZON_SEARCH_URL.format(query=quote(item.english_keyword or item.product_name, safe=""))


def naver_search_url(item: ProductRecommendation) -> str:
    return NAVER_SEARCH_URL.format(query=quote(item.product_name, safe=""))
