"""
Paginated query channel.

Decouples "someone wants page P with limit L" from "compute that page
against the directory". Requests from any number of callers go into one
asyncio.Queue; a single worker task takes them in arrival order and
computes exactly one PageResult per request. The next request is not
started until the previous result has been delivered, so bursts queue up
instead of fanning out into concurrent directory reads.

Each submission gets its own future (and a request_id), which is how a
caller is paired with its result even when several callers ask for the
same page and limit.
"""

import asyncio
import logging
from typing import Callable, Optional

from .directory import UserDirectory
from .exceptions import InvalidPageRequestError
from .models import ALLOWED_PAGE_LIMITS, PageRequest, PageResult

logger = logging.getLogger(__name__)

PageListener = Callable[[PageRequest, PageResult], None]


class PageQueryChannel:
    """
    Single-flight, ordered pipeline of page queries.

    Pages are 0-indexed and cut from the email-sorted listing, so
    consecutive pages concatenate to the full sorted directory.
    """

    def __init__(
        self,
        directory: UserDirectory,
        allowed_limits: tuple[int, ...] = ALLOWED_PAGE_LIMITS,
    ):
        self._directory = directory
        self._allowed_limits = allowed_limits
        self._queue: Optional[asyncio.Queue] = None
        self._worker: Optional[asyncio.Task] = None
        self._listeners: list[PageListener] = []
        self._processed = 0

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    @property
    def pending(self) -> int:
        """Requests queued and not yet picked up by the worker."""
        return self._queue.qsize() if self._queue is not None else 0

    @property
    def processed(self) -> int:
        """Results delivered since the channel was created."""
        return self._processed

    def start(self) -> None:
        """Start the worker on the running event loop (idempotent)."""
        if self.running:
            return
        if self._queue is None:
            self._queue = asyncio.Queue()
        self._worker = asyncio.get_running_loop().create_task(
            self._run(), name="page-query-channel"
        )
        logger.debug("Page query channel started")

    async def aclose(self) -> None:
        """Stop the worker and cancel every request still waiting in the queue."""
        worker, self._worker = self._worker, None
        if worker is not None:
            worker.cancel()
            try:
                await worker
            except asyncio.CancelledError:
                pass

        queue, self._queue = self._queue, None
        dropped = 0
        while queue is not None and not queue.empty():
            _, future = queue.get_nowait()
            if not future.done():
                future.cancel()
                dropped += 1
            queue.task_done()
        if dropped:
            logger.warning(f"Page query channel closed with {dropped} pending requests")

    async def join(self) -> None:
        """Wait until every request submitted so far has been handled."""
        if self._queue is not None:
            await self._queue.join()

    def add_listener(self, listener: PageListener) -> None:
        """Observe every (request, result) pair the channel delivers."""
        self._listeners.append(listener)

    # -------------------------------------------------------------------------
    # Producer side
    # -------------------------------------------------------------------------

    def validate(self, page: object, limit: object) -> None:
        """
        Reject out-of-domain requests before anything is queued.

        Raises:
            InvalidPageRequestError: If page is not an integer >= 0 or
                limit is not one of the allowed page sizes.
        """
        if isinstance(page, bool) or not isinstance(page, int) or page < 0:
            raise InvalidPageRequestError(
                "Page must be an integer greater or equal to 0", page=page, limit=limit
            )
        if isinstance(limit, bool) or not isinstance(limit, int) or limit not in self._allowed_limits:
            allowed = ", ".join(str(value) for value in self._allowed_limits)
            raise InvalidPageRequestError(
                f"Limit must be one of {allowed}", page=page, limit=limit
            )

    def submit(self, page: int, limit: int) -> tuple[PageRequest, "asyncio.Future[PageResult]"]:
        """
        Queue a page request.

        Returns the request (with its correlation ID) and the future its
        result will be delivered to.
        """
        self.validate(page, limit)
        self.start()

        request = PageRequest(page=page, limit=limit)
        future: asyncio.Future[PageResult] = asyncio.get_running_loop().create_future()
        self._queue.put_nowait((request, future))
        logger.info(
            f"Requesting users for page={page}, limit={limit} "
            f"(request {request.request_id}, {self.pending} queued)"
        )
        return request, future

    async def query(self, page: int, limit: int) -> PageResult:
        """Submit a request and wait for its result."""
        _, future = self.submit(page, limit)
        return await future

    # -------------------------------------------------------------------------
    # Consumer side
    # -------------------------------------------------------------------------

    def _compute(self, request: PageRequest) -> PageResult:
        users = self._directory.sorted_slice(request.offset, request.limit)
        return PageResult(
            users=users,
            total=self._directory.count(),
            page=request.page,
            limit=request.limit,
        )

    async def _run(self) -> None:
        queue = self._queue
        while True:
            request, future = await queue.get()
            try:
                if future.cancelled():
                    logger.debug(f"Skipping abandoned request {request.request_id}")
                    continue

                try:
                    result = self._compute(request)
                except Exception as e:
                    logger.exception(f"Failed to compute page for request {request.request_id}")
                    future.set_exception(e)
                    continue

                future.set_result(result)
                self._processed += 1
                logger.info(
                    f"Delivered {len(result.users)} users for page {result.page} "
                    f"(request {request.request_id})"
                )
                self._notify(request, result)
            finally:
                queue.task_done()

    def _notify(self, request: PageRequest, result: PageResult) -> None:
        for listener in list(self._listeners):
            try:
                listener(request, result)
            except Exception:
                logger.exception("Page listener raised; continuing")
