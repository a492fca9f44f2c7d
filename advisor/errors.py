"""분석 요청 실패 유형."""


class AnalysisError(RuntimeError):
    """AI 분석 요청이 결과를 돌려주지 못했을 때의 공통 예외."""


class MissingCredentialError(AnalysisError):
    """사용 가능한 API 키가 환경에 없음. 네트워크 호출 전에 발생합니다."""


class AnalysisTimeoutError(AnalysisError):
    """제한 시간 안에 AI 응답이 오지 않음."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(
            f"AI 응답 시간이 초과되었습니다 ({timeout:g}초). 잠시 후 다시 시도해주세요."
        )


class UpstreamError(AnalysisError):
    """AI 서비스가 오류를 반환했거나 데이터가 비어 있음."""


class ResponseParseError(AnalysisError):
    """AI 응답이 JSON이 아니거나 기대한 구조와 다름."""
