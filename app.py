import streamlit as st

from advisor.config import APP_LOG_LEVEL, load_streamlit_secrets
from advisor.display import AMAZON_MAIN_URL
from advisor.logging import configure_logging
from advisor.models import CATEGORIES, MONTHS, AppState
from advisor.result_card import render_result_card
from advisor.session import AdvisorSession

# Streamlit Cloud secrets → 환경변수로 복사 (배포 환경 지원)
load_streamlit_secrets()
configure_logging(APP_LOG_LEVEL)

st.set_page_config(
    page_title="나의 스마트 스토어 비서",
    page_icon="🛍️",
    layout="centered",
)

# 세션 상태 초기화
if "advisor" not in st.session_state:
    st.session_state.advisor = AdvisorSession()
session: AdvisorSession = st.session_state.advisor


def render_header():
    st.title("🛍️ 나의 스마트 스토어 비서")
    st.caption("데이터로 찾는 대박 아이템")
    st.divider()


def render_home():
    st.subheader("11번가 아마존에서 무엇을 소싱할까요?")
    st.markdown(
        "복잡한 서류가 필요한 **:red[식품/화장품은 제외]**하고,  \n"
        "누구나 쉽게 팔 수 있는 **:blue[안전한 제품]**만 추천해드립니다."
    )

    st.markdown("##### 1. 판매 준비 월 선택")
    cols = st.columns(4)
    for i, m in enumerate(MONTHS):
        selected = session.selected_month == m
        if cols[i % 4].button(
            f"{m}월",
            key=f"month_{m}",
            type="primary" if selected else "secondary",
            use_container_width=True,
        ):
            session.select_month(m)
            st.rerun()

    st.markdown("##### 2. 카테고리 (인증 불필요 품목 위주)")
    category = st.pills(
        "카테고리",
        CATEGORIES,
        default=session.selected_category,
        label_visibility="collapsed",
    )
    if category and category != session.selected_category:
        session.select_category(category)

    st.write("")
    label = "분석중..." if session.is_loading else "🔍 안전한 소싱 아이템 찾기"
    if st.button(
        label,
        type="primary",
        disabled=not session.selected_month or session.is_loading,
        use_container_width=True,
    ):
        if session.begin_analysis() is not None:
            st.rerun()

    if session.error:
        st.error(f"**오류 발생**\n\n{session.error}")

    # 초보 사장님을 위한 안내
    with st.container(border=True):
        st.markdown("#### 🛡️ 사장님을 위한 '안전 소싱' 원칙")
        st.markdown(
            "✅ **먹고 바르는 건 NO!**  \n"
            "영양제, 간식, 화장품은 수입식품법/화장품법 등 까다로운 인증 절차가 필요합니다. "
            "초보 사장님을 위해 이런 제품은 **자동으로 제외**했습니다."
        )
        st.markdown(
            "✅ **공산품 위주로 시작하세요**  \n"
            "패션 잡화(모자, 가방), PC 부품, 캠핑 용품, 공구 등은 비교적 통관이 쉽고 바로 판매가 가능합니다."
        )


def render_analyzing():
    st.subheader(f"{session.selected_month}월 '안전 소싱' 아이템 발굴 중...")
    st.markdown(
        "통관 걱정 없는 제품 중에서  \n"
        "네이버 검색량이 높고 아마존 가격이 좋은 물건을 찾고 있어요."
    )
    with st.spinner("AI 분석 중..."):
        session.run(session.generation)
    if session.state == AppState.ANALYZING:
        session.reset()
    st.rerun()


def render_results():
    col_back, col_month = st.columns([1, 1])
    with col_back:
        if st.button("← 처음으로", key="reset_top"):
            session.reset()
            st.rerun()
    with col_month:
        st.markdown(f"<div style='text-align:right'>판매 목표 월<br><h2>{session.selected_month}월</h2></div>",
                    unsafe_allow_html=True)

    # 결과 화면 카테고리 전환
    switch_to = st.pills(
        "카테고리 전환",
        CATEGORIES,
        default=session.selected_category,
        key=f"switch_{session.generation}",
        disabled=session.is_loading,
        label_visibility="collapsed",
    )
    if switch_to and session.begin_category_switch(switch_to) is not None:
        st.rerun()

    result = session.result
    if result is None and session.is_loading:
        with st.spinner(f"{session.selected_category} 카테고리 분석 중..."):
            session.run(session.generation)
        st.rerun()

    if result is None:
        return

    with st.container(border=True):
        st.caption(session.selected_category)
        st.markdown("### 🌏 글로벌 소싱 전략")
        st.write(result.summary)

    st.markdown(f"### 추천 아이템 BEST {len(result.recommendations)}")
    for idx, item in enumerate(result.recommendations):
        render_result_card(item, key=f"{session.generation}_{idx}")

    with st.container(border=True):
        st.markdown("#### 더 많은 제품이 궁금하신가요?")
        st.markdown(
            "11번가 아마존 메인 페이지에서  \n"
            "**:red['실시간 베스트']** 탭을 확인해보는 것도 좋은 방법입니다."
        )
        b1, b2 = st.columns(2)
        if b1.button("다른 달 검색하기", use_container_width=True):
            session.reset()
            st.rerun()
        b2.link_button("11번가 아마존 바로가기 🌐", AMAZON_MAIN_URL, type="primary", use_container_width=True)


render_header()

if session.state == AppState.HOME:
    render_home()
elif session.state == AppState.ANALYZING:
    render_analyzing()
else:
    render_results()
