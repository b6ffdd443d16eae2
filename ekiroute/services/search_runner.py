import asyncio
import functools
import logging
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Any, Callable, Optional, Tuple

from ekiroute.core.config import settings

logger = logging.getLogger(__name__)


class SearchHandle:
    """submit 된 탐색 1건. 더 새로운 탐색이 들어오면 결과는 버려짐"""

    def __init__(self, runner: "SearchRunner", generation: int, future: Future):
        self.runner = runner
        self.generation = generation
        self.future = future

    @property
    def superseded(self) -> bool:
        return not self.runner.is_current(self.generation)

    def cancel(self) -> bool:
        return self.future.cancel()

    def result(self, timeout: Optional[float] = None) -> Any:
        """탐색 결과, 취소되었거나 대체된 탐색이면 None"""
        try:
            value = self.future.result(timeout)
        except CancelledError:
            return None

        if self.superseded:
            logger.debug(f"대체된 탐색 결과 폐기: generation={self.generation}")
            return None
        return value


class SearchRunner:
    """
    오래 걸리는 탐색을 워커 스레드에서 실행

    그래프는 읽기 전용이고 탐색 상태는 호출마다 따로 생성되므로 동기화 불필요
    가장 최근 탐색만 유효 => 이전 탐색은 대기 중이면 취소, 실행 중이면 결과 폐기
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        # CPU 과부하 방지를 위해 워커 수 제한 (config에서 설정)
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers or settings.SEARCH_MAX_WORKERS,
            thread_name_prefix="route_search_",
        )
        self._lock = threading.Lock()
        self._generation = 0
        self._pending: Optional[Future] = None

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _next_generation(self) -> int:
        with self._lock:
            self._generation += 1
            if self._pending is not None and not self._pending.done():
                self._pending.cancel()
            self._pending = None
            return self._generation

    def _start(self, fn: Callable[..., Any], *args, **kwargs) -> Tuple[int, Future]:
        generation = self._next_generation()
        future = self._executor.submit(functools.partial(fn, *args, **kwargs))
        with self._lock:
            if generation == self._generation:
                self._pending = future
        return generation, future

    def submit(self, fn: Callable[..., Any], *args, **kwargs) -> SearchHandle:
        generation, future = self._start(fn, *args, **kwargs)
        return SearchHandle(self, generation, future)

    async def run(self, fn: Callable[..., Any], *args, **kwargs) -> Any:
        """asyncio 용 (대기 중 취소되었거나 대체된 탐색이면 None)"""
        generation, future = self._start(fn, *args, **kwargs)
        try:
            value = await asyncio.wrap_future(future)
        except asyncio.CancelledError:
            # 새 탐색에 밀려 취소된 경우만 None, 호출한 task 취소는 전파
            if future.cancelled() and not self.is_current(generation):
                logger.debug(f"대기 중 취소된 탐색: generation={generation}")
                return None
            raise
        if not self.is_current(generation):
            logger.debug(f"대체된 탐색 결과 폐기: generation={generation}")
            return None
        return value

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=True)

    def __enter__(self) -> "SearchRunner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
