import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, TypeVar

from .errors import AnalysisTimeoutError

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _discard_late_result(future) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.info("시간 초과 후 끝난 호출의 오류를 버립니다: %s", exc)
    else:
        logger.info("시간 초과 후 도착한 응답을 버립니다.")


def call_with_deadline(fn: Callable[[], T], timeout: float) -> T:
    """
    fn을 작업 스레드에서 실행하고 timeout 초까지만 기다립니다.

    시간이 지나면 AnalysisTimeoutError를 던지고 호출은 그대로 둡니다
    (전송 계층에서 취소하지 않음). 늦게 끝난 결과는 읽히지 않고 버려집니다.
    fn이 던진 예외는 그대로 전달됩니다.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="analysis-call")
    future = executor.submit(fn)
    try:
        done, _ = wait([future], timeout=timeout)
        if future not in done:
            future.add_done_callback(_discard_late_result)
            raise AnalysisTimeoutError(timeout)
        return future.result()
    finally:
        executor.shutdown(wait=False)
