"""Bounded, order-preserving parallel map over a thread pool."""

import queue
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def parallel_map(
    func: Callable[[T], R],
    items: Sequence[T],
    max_workers: int = 10,
) -> list[R]:
    """Apply ``func`` to every item using at most ``max_workers`` threads.

    Workers claim indices from a shared queue and write each result into
    the matching slot of a pre-sized list, so the output order always equals
    the input order regardless of which worker finishes first.

    Args:
        func: Per-item transform
        items: Input items
        max_workers: Upper bound on worker threads (must be >= 1)

    Returns:
        List of results, ``result[i] == func(items[i])``

    Raises:
        ValueError: If max_workers is less than 1
        Exception: The first exception raised by ``func``, if any
    """
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")

    count = len(items)
    if count == 0:
        return []

    results: list[R | None] = [None] * count
    jobs: queue.SimpleQueue[int] = queue.SimpleQueue()
    for index in range(count):
        jobs.put(index)

    def worker() -> int:
        processed = 0
        while True:
            try:
                index = jobs.get_nowait()
            except queue.Empty:
                return processed
            results[index] = func(items[index])
            processed += 1

    worker_count = min(count, max_workers)
    with ThreadPoolExecutor(max_workers=worker_count, thread_name_prefix="parallel-map") as executor:
        futures = [executor.submit(worker) for _ in range(worker_count)]
        for future in futures:
            future.result()

    return results  # type: ignore[return-value]
