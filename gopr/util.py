from __future__ import annotations
from collections.abc import Callable, Iterable
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
import threading
from typing import Any, TypeVar

T = TypeVar("T")

MAX_WORKERS = 32


def gather(calls: Iterable[Callable[[], T]]) -> list[T]:
    """
    Run ``calls`` concurrently in a thread pool and return their results in the
    order the calls were given.

    If any call raises, calls that have not started yet are never run, and
    the first exception observed is re-raised once every already-started call
    has finished; results of the other calls are discarded.
    """
    calls = list(calls)
    if not calls:
        return []
    failed = threading.Event()

    def guarded(fn: Callable[[], T]) -> T | None:
        if failed.is_set():
            return None
        try:
            return fn()
        except BaseException:
            failed.set()
            raise

    with ThreadPoolExecutor(max_workers=min(len(calls), MAX_WORKERS)) as pool:
        futures = [pool.submit(guarded, fn) for fn in calls]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        if (exc := first_exception(futures, done)) is not None:
            pool.shutdown(wait=True, cancel_futures=True)
            raise exc
    return [f.result() for f in futures]


def first_exception(
    futures: list[Future[Any]], done: set[Future[Any]]
) -> BaseException | None:
    # Among calls that have already failed, the earliest-submitted one wins.
    for f in futures:
        if f in done and (exc := f.exception()) is not None:
            return exc
    return None
