from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class RequestBatcher(Generic[T, R]):
    """Collects requests into batches and fans results back to each caller.

    A batch is dispatched once ``batch_size`` requests are queued or once the
    debounce window opened by the first queued request elapses. Every member
    of a batch is dispatched concurrently. Members that fail inside the batch
    are retried one at a time; a second failure is raised to that caller only.
    """

    def __init__(
        self,
        dispatch: Callable[[T], Awaitable[R]],
        *,
        batch_size: int = 5,
        debounce_s: float = 0.1,
        history_size: int = 50,
    ) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self._dispatch = dispatch
        self._batch_size = batch_size
        self._debounce_s = debounce_s
        self._pending: list[tuple[T, asyncio.Future]] = []
        self._timer: asyncio.TimerHandle | None = None
        self._inflight: set[asyncio.Task] = set()
        self.batch_sizes: deque[int] = deque(maxlen=history_size)
        self.batches_dispatched = 0

    @property
    def queue_size(self) -> int:
        return len(self._pending)

    async def submit(self, item: T) -> R:
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()
        self._pending.append((item, future))

        if len(self._pending) >= self._batch_size:
            self._drain()
        elif self._timer is None:
            self._timer = loop.call_later(self._debounce_s, self._drain)
        return await future

    def _drain(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        batch, self._pending = self._pending, []
        if not batch:
            return

        self.batches_dispatched += 1
        self.batch_sizes.append(len(batch))
        logger.debug("insight_batch_dispatch size=%s", len(batch))
        task = asyncio.ensure_future(self._run_batch(batch))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _run_batch(self, batch: list[tuple[T, asyncio.Future]]) -> None:
        results = await asyncio.gather(
            *(self._dispatch(item) for item, _ in batch),
            return_exceptions=True,
        )

        retry: list[tuple[T, asyncio.Future]] = []
        for (item, future), result in zip(batch, results):
            if isinstance(result, BaseException):
                retry.append((item, future))
            elif not future.done():
                future.set_result(result)

        if retry:
            logger.warning(
                "insight_batch_partial_failure failed=%s size=%s retrying_individually=true",
                len(retry),
                len(batch),
            )
            for item, future in retry:
                await self._dispatch_one(item, future)

    async def _dispatch_one(self, item: T, future: asyncio.Future) -> None:
        try:
            result = await self._dispatch(item)
        except Exception as exc:
            if not future.done():
                future.set_exception(exc)
            return
        if not future.done():
            future.set_result(result)

    async def flush(self) -> None:
        """Dispatch anything still queued and wait for in-flight batches."""
        self._drain()
        if self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    async def aclose(self) -> None:
        await self.flush()
