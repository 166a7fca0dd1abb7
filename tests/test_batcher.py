import asyncio
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from assessor.insights import RequestBatcher  # noqa: E402


class RequestBatcherTests(unittest.IsolatedAsyncioTestCase):
    async def test_concurrent_requests_share_one_batch(self):
        seen = []

        async def dispatch(item):
            seen.append(item)
            return item * 10

        batcher = RequestBatcher(dispatch, batch_size=5, debounce_s=0.01)
        results = await asyncio.gather(batcher.submit(1), batcher.submit(2))

        self.assertEqual(results, [10, 20])
        self.assertEqual(sorted(seen), [1, 2])
        self.assertEqual(batcher.batches_dispatched, 1)
        self.assertEqual(list(batcher.batch_sizes), [2])
        self.assertEqual(batcher.queue_size, 0)

    async def test_full_batch_dispatches_without_waiting_for_debounce(self):
        async def dispatch(item):
            return item

        batcher = RequestBatcher(dispatch, batch_size=2, debounce_s=30)
        results = await asyncio.wait_for(
            asyncio.gather(batcher.submit("a"), batcher.submit("b")),
            timeout=1,
        )
        self.assertEqual(results, ["a", "b"])
        self.assertEqual(list(batcher.batch_sizes), [2])

    async def test_failed_member_is_retried_individually(self):
        calls = []

        async def dispatch(item):
            calls.append(item)
            if item == "flaky" and calls.count("flaky") == 1:
                raise RuntimeError("transient")
            return item.upper()

        batcher = RequestBatcher(dispatch, batch_size=5, debounce_s=0.01)
        results = await asyncio.gather(batcher.submit("ok"), batcher.submit("flaky"))

        self.assertEqual(results, ["OK", "FLAKY"])
        self.assertEqual(calls.count("ok"), 1)
        self.assertEqual(calls.count("flaky"), 2)

    async def test_second_failure_reaches_only_its_caller(self):
        async def dispatch(item):
            if item == "bad":
                raise ValueError("always fails")
            return item

        batcher = RequestBatcher(dispatch, batch_size=5, debounce_s=0.01)
        results = await asyncio.gather(
            batcher.submit("good"),
            batcher.submit("bad"),
            return_exceptions=True,
        )
        self.assertEqual(results[0], "good")
        self.assertIsInstance(results[1], ValueError)

    async def test_flush_dispatches_pending_requests(self):
        async def dispatch(item):
            return item

        batcher = RequestBatcher(dispatch, batch_size=10, debounce_s=30)
        pending = asyncio.ensure_future(batcher.submit("queued"))
        await asyncio.sleep(0)
        self.assertEqual(batcher.queue_size, 1)

        await batcher.flush()
        self.assertEqual(await pending, "queued")
        self.assertEqual(batcher.queue_size, 0)

    async def test_batch_history_is_bounded(self):
        async def dispatch(item):
            return item

        batcher = RequestBatcher(dispatch, batch_size=1, debounce_s=0, history_size=3)
        for item in range(5):
            await batcher.submit(item)
        self.assertEqual(batcher.batches_dispatched, 5)
        self.assertEqual(len(batcher.batch_sizes), 3)

    def test_batch_size_must_be_positive(self):
        async def dispatch(item):
            return item

        with self.assertRaises(ValueError):
            RequestBatcher(dispatch, batch_size=0)


if __name__ == "__main__":
    unittest.main()
