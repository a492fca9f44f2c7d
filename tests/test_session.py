import pytest

from advisor.analyzer import fetch_market_analysis
from advisor.errors import AnalysisTimeoutError, MissingCredentialError, ResponseParseError, UpstreamError
from advisor.models import AppState, MonthlyAnalysis
from advisor.session import GENERIC_ERROR_MESSAGE, AdvisorSession, error_message
from conftest import FakeClientFactory, FakeMessages, make_payload, tool_response


def _analysis(month=12, summary="요약", count=8):
    return MonthlyAnalysis.from_dict({**make_payload(month, count), "summary": summary})


class RecordingAnalyzer:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, month, category):
        self.calls.append((month, category))
        if self.error is not None:
            raise self.error
        return self.result


def test_initial_state():
    session = AdvisorSession()
    assert session.state == AppState.HOME
    assert session.selected_category == "전체"
    assert session.result is None and session.error is None
    assert not session.is_loading


def test_begin_requires_month():
    session = AdvisorSession()
    assert session.begin_analysis() is None
    assert session.state == AppState.HOME


def test_scenario_december_camping_reaches_results(environ):
    factory = FakeClientFactory(FakeMessages(response=tool_response(make_payload(12))))
    session = AdvisorSession()
    session.select_month(12)
    session.select_category("스포츠/레저/캠핑")

    token = session.begin_analysis()
    assert session.state == AppState.ANALYZING
    assert session.is_loading

    applied = session.run(
        token,
        analyze=lambda m, c: fetch_market_analysis(m, c, environ=environ, client_factory=factory),
    )

    assert applied
    assert session.state == AppState.RESULTS
    assert session.result.month == 12
    assert not session.is_loading


def test_scenario_missing_credential_returns_home_with_remediation():
    factory = FakeClientFactory(FakeMessages(response=tool_response(make_payload())))
    session = AdvisorSession()
    session.select_month(3)
    token = session.begin_analysis()

    session.run(token, analyze=lambda m, c: fetch_market_analysis(m, c, environ={}, client_factory=factory))

    assert session.state == AppState.HOME
    assert "API_KEY" in session.error
    assert session.result is None
    assert factory.api_keys == []


def test_scenario_timeout_returns_home_with_timeout_message():
    session = AdvisorSession()
    session.select_month(6)
    token = session.begin_analysis()

    session.run(token, analyze=RecordingAnalyzer(error=AnalysisTimeoutError(20)))

    assert session.state == AppState.HOME
    assert "20초" in session.error
    assert not session.is_loading


def test_scenario_sdk_value_error_returns_home_and_unlocks(environ):
    messages = FakeMessages(error=ValueError("Streaming is required for operations that may take longer than 10 minutes."))
    factory = FakeClientFactory(messages)
    session = AdvisorSession()
    session.select_month(11)
    token = session.begin_analysis()

    assert session.run(token, analyze=lambda m, c: fetch_market_analysis(m, c, environ=environ, client_factory=factory))

    assert session.state == AppState.HOME
    assert session.error == GENERIC_ERROR_MESSAGE
    assert not session.is_loading
    assert session.pending is None
    assert len(messages.calls) == 1


def test_unexpected_analyzer_error_still_settles_session():
    session = AdvisorSession()
    session.select_month(4)
    token = session.begin_analysis()

    assert session.run(token, analyze=RecordingAnalyzer(error=RuntimeError("boom")))

    assert session.state == AppState.HOME
    assert session.error == GENERIC_ERROR_MESSAGE
    assert not session.is_loading
    assert session.begin_analysis() is not None


def test_analysis_error_is_logged_once(environ, caplog):
    factory = FakeClientFactory(FakeMessages(error=ValueError("bad request")))
    session = AdvisorSession()
    session.select_month(2)
    token = session.begin_analysis()

    with caplog.at_level("INFO"):
        session.run(token, analyze=lambda m, c: fetch_market_analysis(m, c, environ=environ, client_factory=factory))

    failures = [r for r in caplog.records if r.levelname in ("WARNING", "ERROR")]
    assert len(failures) == 1
    assert failures[0].name == "advisor.analyzer"


def test_busy_guard_blocks_second_trigger():
    session = AdvisorSession()
    session.select_month(1)
    first = session.begin_analysis()
    assert first is not None
    assert session.begin_analysis() is None
    assert session.begin_category_switch("패션의류/잡화") is None
    assert session.generation == first


def test_category_switch_replaces_result_entirely():
    session = AdvisorSession()
    session.select_month(12)
    token = session.begin_analysis()
    session.run(token, analyze=RecordingAnalyzer(result=_analysis(summary="캠핑", count=8)))
    old = session.result

    token = session.begin_category_switch("디지털/PC/가전")
    assert token is not None
    assert session.result is None  # loading sub-state
    assert session.state == AppState.RESULTS
    assert session.is_loading

    new = _analysis(summary="디지털", count=3)
    analyzer = RecordingAnalyzer(result=new)
    session.run(token, analyze=analyzer)

    assert analyzer.calls == [(12, "디지털/PC/가전")]
    assert session.result is new
    assert session.result is not old
    assert len(session.result.recommendations) == 3


def test_switch_to_same_category_is_noop():
    session = AdvisorSession()
    session.select_month(4)
    session.run(session.begin_analysis(), analyze=RecordingAnalyzer(result=_analysis(4)))
    assert session.begin_category_switch("전체") is None
    assert session.result is not None


def test_failed_switch_goes_home_and_discards_result():
    session = AdvisorSession()
    session.select_month(4)
    session.run(session.begin_analysis(), analyze=RecordingAnalyzer(result=_analysis(4)))

    token = session.begin_category_switch("홈/인테리어/주방")
    session.run(token, analyze=RecordingAnalyzer(error=UpstreamError("boom")))

    assert session.state == AppState.HOME
    assert session.result is None
    assert session.error == GENERIC_ERROR_MESSAGE


def test_reset_clears_result_and_error():
    session = AdvisorSession()
    session.select_month(2)
    session.run(session.begin_analysis(), analyze=RecordingAnalyzer(result=_analysis(2)))
    session.error = "이전 오류"

    session.reset()

    assert session.state == AppState.HOME
    assert session.result is None
    assert session.error is None


def test_late_completion_after_reset_is_ignored():
    session = AdvisorSession()
    session.select_month(9)
    token = session.begin_analysis()
    session.reset()

    assert not session.complete(token, _analysis(9))
    assert not session.fail(token, "늦은 오류")
    assert session.state == AppState.HOME
    assert session.result is None
    assert session.error is None


def test_late_completion_of_previous_category_is_ignored():
    session = AdvisorSession()
    session.select_month(9)
    session.run(session.begin_analysis(), analyze=RecordingAnalyzer(result=_analysis(9)))
    first = session.begin_category_switch("패션의류/잡화")
    session.fail(first, "실패")
    session.select_month(9)
    second = session.begin_analysis()
    current = _analysis(9, summary="최신")
    session.complete(second, current)

    assert not session.complete(first, _analysis(9, summary="지난"))
    assert session.result is current


def test_run_without_pending_request_does_nothing():
    session = AdvisorSession()
    analyzer = RecordingAnalyzer(result=_analysis())
    assert not session.run(session.generation, analyze=analyzer)
    assert analyzer.calls == []


@pytest.mark.parametrize(
    "exc, expected",
    [
        (MissingCredentialError("API_KEY를 설정해주세요"), "API_KEY를 설정해주세요"),
        (AnalysisTimeoutError(20), str(AnalysisTimeoutError(20))),
        (UpstreamError("500"), GENERIC_ERROR_MESSAGE),
        (ResponseParseError("bad json"), GENERIC_ERROR_MESSAGE),
    ],
)
def test_error_message_mapping(exc, expected):
    assert error_message(exc) == expected
