"""
Lazy, cancellable iteration over search results.

``ItemStream`` runs a pagination loop on a background thread and hands
items over to the consuming thread one at a time:

    cancel = threading.Event()
    for product in client.products({"keyword": "mug"}, cancel=cancel):
        if done_with(product):
            cancel.set()

Errors raised while fetching pages end the stream early without being
raised to the consumer; they are logged and kept on ``stream.error``.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable, Generic, Iterator, Mapping, Optional, TypeVar

from .errors import APIClientError, IterationCancelled
from .trampoline import SearchFunc, iterate


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Receives the per-item callback and runs the whole iteration with it
Producer = Callable[[Callable[[int, T], None]], Any]


class ItemStream(Generic[T]):
    """
    Single-consumer, order-preserving iterator fed by a producer thread.

    The producer blocks on each handoff until the consumer has taken the
    item or until cancellation, so it never runs ahead of the consumer. A
    cancellation makes the pending handoff raise IterationCancelled,
    which unwinds the producer's pagination loop.
    """

    DEFAULT_POLL_INTERVAL = 0.05  # seconds

    def __init__(
        self,
        producer: Producer,
        cancel: Optional[threading.Event] = None,
        poll_interval: Optional[float] = None,
    ) -> None:
        self._producer = producer
        self._cancel = cancel if cancel is not None else threading.Event()
        self._poll_interval = poll_interval or self.DEFAULT_POLL_INTERVAL

        self._slot: "queue.Queue[T]" = queue.Queue(maxsize=1)
        self._taken = threading.Event()
        self._finished = threading.Event()

        self.error: Optional[Exception] = None
        self.cancelled = False

        self._thread = threading.Thread(
            target=self._run, name="ecwid-item-stream", daemon=True
        )
        self._thread.start()

    # -------------------------------------------------
    # Producer side
    # -------------------------------------------------
    def _handoff(self, index: int, item: T) -> None:
        self._taken.clear()
        self._slot.put_nowait(item)

        while not self._cancel.is_set():
            if self._taken.wait(self._poll_interval):
                return
        raise IterationCancelled(f"Stream cancelled at item {index}")

    def _run(self) -> None:
        try:
            self._producer(self._handoff)
        except IterationCancelled as e:
            self.cancelled = True
            logger.debug(str(e))
        except APIClientError as e:
            # The consumer only sees the end of the stream
            self.error = e
            logger.warning(f"Item stream stopped early: {e}")
        except Exception as e:
            self.error = e
            logger.error(f"Item stream failed: {e!r}")
        finally:
            self._finished.set()

    # -------------------------------------------------
    # Consumer side
    # -------------------------------------------------
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        while True:
            if self._cancel.is_set():
                raise StopIteration
            try:
                item = self._slot.get(timeout=self._poll_interval)
            except queue.Empty:
                if self._finished.is_set() and self._slot.empty():
                    raise StopIteration
                continue
            self._taken.set()
            return item

    def cancel(self) -> None:
        """Stop the stream; no item is produced after this call."""
        self._cancel.set()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the producer thread. Returns True once it has finished."""
        self._thread.join(timeout)
        return self._finished.is_set()

    def __enter__(self) -> "ItemStream[T]":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        self.cancel()


def stream_search(
    filter: Optional[Mapping[str, str]],
    search: SearchFunc[T],
    cancel: Optional[threading.Event] = None,
) -> ItemStream[T]:
    """Stream every item of a paginated search, see ``iterate``."""
    snapshot = dict(filter or {})
    return ItemStream(
        lambda on_item: iterate(snapshot, search, on_item), cancel=cancel
    )
