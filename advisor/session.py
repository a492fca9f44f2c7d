"""화면 상태 (홈 → 분석중 → 결과).

Streamlit은 버튼을 누를 때마다 스크립트를 다시 실행하므로, 화면 상태는
st.session_state에 들어 있는 AdvisorSession 하나로 관리합니다.
요청마다 세대 번호(generation)를 올리고, 완료/실패는 번호가 현재 세대와
같을 때만 반영합니다. 그래서 초기화 후에 늦게 도착한 결과는 무시됩니다.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .analyzer import fetch_market_analysis
from .errors import AnalysisError, AnalysisTimeoutError, MissingCredentialError
from .models import DEFAULT_CATEGORY, AnalysisRequest, AppState, MonthlyAnalysis

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "데이터를 불러오는데 실패했습니다. 잠시 후 다시 시도해주세요."


def error_message(exc: AnalysisError) -> str:
    """사용자에게 보여줄 오류 문구."""
    if isinstance(exc, (MissingCredentialError, AnalysisTimeoutError)):
        return str(exc)
    return GENERIC_ERROR_MESSAGE


@dataclass
class AdvisorSession:
    state: AppState = AppState.HOME
    selected_month: Optional[int] = None
    selected_category: str = DEFAULT_CATEGORY
    result: Optional[MonthlyAnalysis] = None
    error: Optional[str] = None
    is_loading: bool = False
    generation: int = 0
    pending: Optional[AnalysisRequest] = None

    def select_month(self, month: int) -> None:
        self.selected_month = month

    def select_category(self, category: str) -> None:
        self.selected_category = category

    def _start(self) -> int:
        self.generation += 1
        self.is_loading = True
        self.error = None
        self.pending = AnalysisRequest(self.selected_month, self.selected_category)
        return self.generation

    def begin_analysis(self) -> Optional[int]:
        """홈 화면의 '찾기' 버튼. 진행 중이거나 월이 없으면 None."""
        if not self.selected_month or self.is_loading:
            return None
        self.state = AppState.ANALYZING
        return self._start()

    def begin_category_switch(self, category: str) -> Optional[int]:
        """결과 화면에서 카테고리 변경. 이전 결과는 비우고 결과 화면에 머뭅니다."""
        if not self.selected_month or self.is_loading or category == self.selected_category:
            return None
        self.selected_category = category
        self.result = None
        return self._start()

    def complete(self, token: int, result: MonthlyAnalysis) -> bool:
        if token != self.generation:
            logger.info("지난 요청(%d)의 결과를 무시합니다 (현재 %d).", token, self.generation)
            return False
        self.result = result
        self.error = None
        self.state = AppState.RESULTS
        self.is_loading = False
        self.pending = None
        return True

    def fail(self, token: int, message: str) -> bool:
        if token != self.generation:
            logger.info("지난 요청(%d)의 오류를 무시합니다 (현재 %d).", token, self.generation)
            return False
        self.result = None
        self.error = message
        self.state = AppState.HOME
        self.is_loading = False
        self.pending = None
        return True

    def run(
        self,
        token: int,
        analyze: Callable[[int, str], MonthlyAnalysis] = fetch_market_analysis,
    ) -> bool:
        """대기 중인 요청을 실행하고 결과를 반영합니다. 반영 여부를 반환합니다."""
        request = self.pending
        if request is None or token != self.generation:
            return False
        try:
            result = analyze(request.month, request.category)
        except AnalysisError as exc:
            # 상세 내용은 analyzer가 이미 남김
            return self.fail(token, error_message(exc))
        except Exception:
            logger.exception("분석 중 예상치 못한 오류: %d월 / %s", request.month, request.category)
            return self.fail(token, GENERIC_ERROR_MESSAGE)
        return self.complete(token, result)

    def reset(self) -> None:
        """처음으로. 결과와 오류를 무조건 지웁니다."""
        self.generation += 1
        self.state = AppState.HOME
        self.result = None
        self.error = None
        self.is_loading = False
        self.pending = None
