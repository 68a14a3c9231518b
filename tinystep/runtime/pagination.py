"""Cursor-driven lazy pagination.

Architecture:
    A paginated endpoint is consumed through a page-fetch callable: given an
    optional cursor (``None`` for the first page) it returns a page exposing
    ``items`` and ``next_cursor``, where an empty ``next_cursor`` means there
    is no further page. ``Paginator`` drives a blocking callable as a Python
    iterator; ``AsyncPaginator`` drives a coroutine function as an async
    iterator on the running event loop.

Design Decisions:
    - Pull-based: a page is fetched only when the consumer asks for an item
      past the end of the held page, so partial consumption never fetches
      ahead.
    - One page held, one fetch in flight: the held page is replaced, never
      merged, and the async form keeps at most one pending fetch task.
    - Terminal errors: a failed fetch is raised once from ``next()`` (or
      ``anext()``); every later call ends the iteration without fetching.
    - Empty pages with a cursor are skipped rather than ending the sequence.
    - No retries. Whatever the fetch raises reaches the consumer unchanged.
"""

from __future__ import annotations

import asyncio
import weakref
from collections.abc import Awaitable, Callable, Sequence
from time import perf_counter
from typing import Generic, Optional, Protocol, TypeVar

from .telemetry import log_page_error, log_page_fetched, log_pagination_complete

ItemT = TypeVar("ItemT")
ItemT_co = TypeVar("ItemT_co", covariant=True)


def _retrieve_exception(task: asyncio.Future) -> None:
    # Mark a failed fetch as observed even if no consumer ever collects it
    if not task.cancelled():
        task.exception()


def _cancel_if_running(task: asyncio.Future) -> None:
    if not task.done():
        task.cancel()


class Page(Protocol[ItemT_co]):
    """A decoded page of a paginated endpoint."""

    @property
    def items(self) -> Sequence[ItemT_co]: ...

    @property
    def next_cursor(self) -> str: ...


PageFetcher = Callable[[Optional[str]], Page[ItemT]]
AsyncPageFetcher = Callable[[Optional[str]], Awaitable[Page[ItemT]]]


class Paginator(Generic[ItemT]):
    """Blocking, one-shot iterator over every item of a paginated endpoint.

    Example:
        >>> pages = {None: Page1, "c1": Page2}  # doctest: +SKIP
        >>> for item in Paginator(lambda cursor: pages[cursor]):  # doctest: +SKIP
        ...     print(item)
    """

    def __init__(self, fetch_page: PageFetcher[ItemT], *, endpoint_id: str = "unknown") -> None:
        """Initialize paginator.

        Args:
            fetch_page: Callable returning the page for a cursor
            endpoint_id: Endpoint identifier used in logs
        """
        self._fetch_page = fetch_page
        self._endpoint_id = endpoint_id
        self._page: Page[ItemT] | None = None
        self._position = 0
        self._exhausted = False
        self._fetch_count = 0
        self._yielded = 0

    @property
    def fetch_count(self) -> int:
        """Number of page fetches issued so far."""
        return self._fetch_count

    @property
    def exhausted(self) -> bool:
        """Whether iteration has ended, normally or after a fetch error."""
        return self._exhausted

    def __iter__(self) -> Paginator[ItemT]:
        return self

    def __next__(self) -> ItemT:
        while not self._exhausted:
            if self._page is None:
                self._load(None)
                continue

            items = self._page.items
            if self._position < len(items):
                item = items[self._position]
                self._position += 1
                self._yielded += 1
                return item

            if not self._page.next_cursor:
                self._finish()
                break
            self._load(self._page.next_cursor)

        raise StopIteration

    def _load(self, cursor: str | None) -> None:
        page_index = self._fetch_count
        self._fetch_count += 1
        started = perf_counter()
        try:
            page = self._fetch_page(cursor)
        except Exception as e:
            self._exhausted = True
            self._page = None
            log_page_error(
                endpoint_id=self._endpoint_id,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        self._page = page
        self._position = 0
        log_page_fetched(
            endpoint_id=self._endpoint_id,
            page_index=page_index,
            items=len(page.items),
            has_next=bool(page.next_cursor),
            latency_ms=(perf_counter() - started) * 1000.0,
        )

    def _finish(self) -> None:
        self._exhausted = True
        log_pagination_complete(
            endpoint_id=self._endpoint_id,
            pages_fetched=self._fetch_count,
            items_yielded=self._yielded,
        )


class AsyncPaginator(Generic[ItemT]):
    """Async, one-shot iterator over every item of a paginated endpoint.

    The pending fetch runs as an ``asyncio.Task`` owned by the paginator. A
    consumer that is cancelled while waiting does not cancel the fetch; the
    next ``anext()`` waits on the same task instead of starting another one.
    Concurrent ``anext()`` calls share the pending task as well, but a
    paginator is meant to have a single consumer.

    Dropping the paginator early is fine: a pending fetch is cancelled when
    the paginator is garbage collected, and a fetch that fails after nobody
    is waiting on it is discarded silently. ``aclose()`` cancels the pending
    fetch immediately.
    """

    def __init__(
        self, fetch_page: AsyncPageFetcher[ItemT], *, endpoint_id: str = "unknown"
    ) -> None:
        """Initialize paginator.

        Args:
            fetch_page: Coroutine function returning the page for a cursor
            endpoint_id: Endpoint identifier used in logs
        """
        self._fetch_page = fetch_page
        self._endpoint_id = endpoint_id
        self._page: Page[ItemT] | None = None
        self._position = 0
        self._exhausted = False
        self._pending: asyncio.Task[Page[ItemT]] | None = None
        self._pending_finalizer: weakref.finalize | None = None
        self._fetch_started = 0.0
        self._fetch_count = 0
        self._yielded = 0

    @property
    def fetch_count(self) -> int:
        """Number of page fetches started so far."""
        return self._fetch_count

    @property
    def exhausted(self) -> bool:
        """Whether iteration has ended, normally or after a fetch error."""
        return self._exhausted

    @property
    def pending(self) -> bool:
        """Whether a page fetch is outstanding."""
        return self._pending is not None

    def __aiter__(self) -> AsyncPaginator[ItemT]:
        return self

    async def __anext__(self) -> ItemT:
        while not self._exhausted:
            if self._pending is None:
                if self._page is None:
                    self._start_fetch(None)
                else:
                    items = self._page.items
                    if self._position < len(items):
                        item = items[self._position]
                        self._position += 1
                        self._yielded += 1
                        return item
                    if not self._page.next_cursor:
                        self._finish()
                        break
                    # Never hand out an item in the same step a fetch starts
                    self._start_fetch(self._page.next_cursor)

            task = self._pending
            await asyncio.wait((task,))
            # Another consumer may have taken this result already
            if self._pending is task:
                self._complete_fetch(task)

        raise StopAsyncIteration

    async def aclose(self) -> None:
        """Stop iterating and cancel the pending fetch, if any."""
        task, self._pending = self._pending, None
        self._detach_finalizer()
        self._exhausted = True
        if task is not None and not task.done():
            task.cancel()

    def _start_fetch(self, cursor: str | None) -> None:
        self._fetch_count += 1
        self._fetch_started = perf_counter()
        try:
            task = asyncio.ensure_future(self._fetch_page(cursor))
        except Exception as e:
            # The fetcher failed before producing an awaitable
            self._fail(self._fetch_count - 1, e)
            raise
        task.add_done_callback(_retrieve_exception)
        self._pending = task
        self._pending_finalizer = weakref.finalize(self, _cancel_if_running, task)

    def _detach_finalizer(self) -> None:
        if self._pending_finalizer is not None:
            self._pending_finalizer.detach()
            self._pending_finalizer = None

    def _complete_fetch(self, task: asyncio.Task[Page[ItemT]]) -> None:
        self._pending = None
        self._detach_finalizer()
        page_index = self._fetch_count - 1

        error: BaseException | None
        if task.cancelled():
            error = asyncio.CancelledError("page fetch was cancelled")
        else:
            error = task.exception()
        if error is not None:
            self._fail(page_index, error)
            raise error

        page = task.result()
        self._page = page
        self._position = 0
        log_page_fetched(
            endpoint_id=self._endpoint_id,
            page_index=page_index,
            items=len(page.items),
            has_next=bool(page.next_cursor),
            latency_ms=(perf_counter() - self._fetch_started) * 1000.0,
        )

    def _fail(self, page_index: int, error: BaseException) -> None:
        self._exhausted = True
        self._page = None
        log_page_error(
            endpoint_id=self._endpoint_id,
            page_index=page_index,
            error_type=type(error).__name__,
            error_message=str(error),
        )

    def _finish(self) -> None:
        self._exhausted = True
        log_pagination_complete(
            endpoint_id=self._endpoint_id,
            pages_fetched=self._fetch_count,
            items_yielded=self._yielded,
        )
