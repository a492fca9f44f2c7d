import streamlit as st

from .display import (
    amazon_search_url,
    detailed_page_text,
    difficulty_color,
    format_price,
    format_profit,
    hashtags_text,
    metrics_figure,
    naver_search_url,
    trademark_badge,
    trademark_notice,
)
from .models import ProductRecommendation


def _render_analysis_tab(item: ProductRecommendation, key: str):
    # 예상 수익
    st.markdown("#### 💰 예상 수익 분석")
    c1, c2, c3 = st.columns(3)
    c1.metric("네이버 시세", format_price(item.naver_average_price))
    c2.metric("11번가 소싱가", format_price(item.amazon_sourcing_price))
    c3.metric(
        "예상 마진",
        format_profit(item.estimated_profit),
        help=f"추천 판매가 {format_price(item.suggested_selling_price)} 기준",
    )

    # 상표권
    notice = trademark_notice(item.trademark_check)
    body = f"**{notice.headline}**\n\n{notice.reason}"
    if notice.footnote:
        body += f"\n\n{notice.footnote}"
    getattr(st, notice.level)(body)

    col_text, col_chart = st.columns(2)
    with col_text:
        st.markdown("**📈 추천 이유**")
        st.write(item.reason)
        st.markdown("**💡 소싱 팁**")
        st.info(item.sales_tip)
        st.caption(f"타겟: {item.target_audience}")

    with col_chart:
        st.markdown("**데이터 지표**")
        st.plotly_chart(metrics_figure(item), use_container_width=True, key=f"chart_{key}")


def _render_marketing_tab(item: ProductRecommendation):
    st.markdown("#### 👑 네이버 노출용 상품명 (SEO)")
    st.code(item.seo_title, language=None)
    st.caption("* 브랜드명, 모델명, 핵심 키워드가 모두 포함된 최적의 제목입니다.")

    col_tags, col_copy = st.columns(2)
    with col_tags:
        st.markdown("**🏷️ 필수 해시태그**")
        st.code(hashtags_text(item.hashtags), language=None)
    with col_copy:
        st.markdown("**🔥 상세페이지 후킹 멘트**")
        st.code(f'"{item.marketing_copy}"', language=None)


def _render_detail_tab(item: ProductRecommendation):
    page = item.detailed_page
    st.markdown("#### 📝 AI 상세페이지 초안")

    st.markdown("**01. 프롤로그**")
    st.write(page.prologue)

    st.markdown("**02. 핵심 포인트**")
    for i, point in enumerate(page.points, 1):
        st.markdown(f"{i}. **{point.title}**  \n{point.content}")

    st.markdown("**03. 스펙 요약**")
    st.write(page.spec)

    st.markdown("**04. 자주 묻는 질문 (FAQ)**")
    for faq in page.faq:
        st.markdown(f"**Q. {faq.q}**  \nA. {faq.a}")

    with st.expander("전체 복사하기"):
        st.code(detailed_page_text(page), language=None)

    st.caption("* 위 내용은 AI가 생성한 초안입니다. 실제 제품 정보와 다를 수 있으니 검토 후 사용하세요.")


def render_result_card(item: ProductRecommendation, key: str):
    """추천 아이템 카드 (분석/안전 · 마케팅 · 상세페이지 탭)."""
    with st.container(border=True):
        head, side = st.columns([4, 1])
        with head:
            badge = trademark_badge(item.trademark_check.status)
            b1, b2 = st.columns([1, 3])
            with b1:
                st.badge(item.category, color="violet")
            with b2:
                st.badge(badge.label, icon=badge.icon, color=badge.color)
            st.subheader(item.product_name)
            st.caption(item.english_keyword)
        with side:
            st.badge(f"소싱난이도: {item.difficulty}", color=difficulty_color(item.difficulty))

        tab_analysis, tab_marketing, tab_detail = st.tabs(["📊 분석/안전", "📄 마케팅 (SEO)", "✏️ 상세페이지"])
        with tab_analysis:
            _render_analysis_tab(item, key)
        with tab_marketing:
            _render_marketing_tab(item)
        with tab_detail:
            _render_detail_tab(item)

        f1, f2 = st.columns(2)
        f1.link_button("🔍 네이버 시세", naver_search_url(item), use_container_width=True)
        f2.link_button("🛒 11번가 구매하기", amazon_search_url(item), type="primary", use_container_width=True)
