"""Optional thread-pool execution for independent members and folds."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def run_parallel(fn: Callable[[T], R], items: Iterable[T], n_jobs: int = 1) -> list[R]:
    """Map fn over items, in order. n_jobs <= 1 runs sequentially; the first failure propagates."""
    items = list(items)
    if n_jobs is None or n_jobs <= 1 or len(items) <= 1:
        return [fn(item) for item in items]
    with ThreadPoolExecutor(max_workers=min(n_jobs, len(items))) as pool:
        return list(pool.map(fn, items))
