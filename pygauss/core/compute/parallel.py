"""
Fork-join execution over contiguous row ranges.

RowPool splits a half-open row range [lo, hi) into contiguous chunks and
runs a function over them, either inline (one worker) or on a thread pool.
Both map() and reduce() block until every chunk has finished, which gives
the barrier the elimination engine needs between pivot columns.

Threads pay off because the per-chunk work is NumPy slicing arithmetic,
which releases the GIL on large rows.

Usage:
    with RowPool(n_workers=4) as pool:
        pool.map(lambda start, stop: update(start, stop), i + 1, n)
        best = pool.reduce(local_best, pick_better, initial, i + 1, n)
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import reduce as _fold
from typing import Callable, TypeVar

from pygauss.core.validation import check_positive_int

T = TypeVar('T')

# Minimum rows per chunk; smaller chunks cost more in dispatch than they save
DEFAULT_GRAIN = 32


class RowPool:
    """
    Fork-join pool for row-parallel stages.

    The pool owns a ThreadPoolExecutor for the lifetime of a `with` block.
    With n_workers=1 no executor is created and every stage runs on the
    calling thread, which makes serial runs fully deterministic.

    Args:
        n_workers: Number of worker threads (>= 1)
        grain: Minimum number of rows per chunk (>= 1)
    """

    def __init__(self, n_workers: int = 1, grain: int = DEFAULT_GRAIN):
        self._n_workers = check_positive_int(n_workers, 'n_workers')
        self._grain = check_positive_int(grain, 'grain')
        self._executor: ThreadPoolExecutor | None = None

    @property
    def n_workers(self) -> int:
        return self._n_workers

    @property
    def grain(self) -> int:
        return self._grain

    @property
    def is_parallel(self) -> bool:
        return self._n_workers > 1

    def __enter__(self) -> RowPool:
        if self.is_parallel:
            self._executor = ThreadPoolExecutor(
                max_workers=self._n_workers,
                thread_name_prefix='pygauss-row',
            )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def chunks(self, lo: int, hi: int) -> list[tuple[int, int]]:
        """
        Split [lo, hi) into at most n_workers contiguous chunks.

        Every chunk except possibly a lone one holds at least `grain` rows.
        An empty range yields no chunks.
        """
        total = hi - lo
        if total <= 0:
            return []
        n_chunks = max(1, min(self._n_workers, total // self._grain))
        base, extra = divmod(total, n_chunks)
        bounds = []
        start = lo
        for c in range(n_chunks):
            stop = start + base + (1 if c < extra else 0)
            bounds.append((start, stop))
            start = stop
        return bounds

    def map(self, fn: Callable[[int, int], T], lo: int, hi: int) -> list[T]:
        """
        Run fn(start, stop) over every chunk of [lo, hi) and wait for all.

        Returns:
            Per-chunk results in chunk order

        Raises:
            RuntimeError: If a parallel pool is used outside its `with` block
            Any exception raised by fn (re-raised after all chunks finished)
        """
        bounds = self.chunks(lo, hi)
        if len(bounds) <= 1 or not self.is_parallel:
            return [fn(start, stop) for start, stop in bounds]
        if self._executor is None:
            raise RuntimeError("RowPool used outside of its 'with' block")
        futures = [self._executor.submit(fn, start, stop) for start, stop in bounds]
        # Wait for every chunk before surfacing the first failure
        errors = [f.exception() for f in futures]
        for err in errors:
            if err is not None:
                raise err
        return [f.result() for f in futures]

    def reduce(
        self,
        fn: Callable[[int, int], T],
        combine: Callable[[T, T], T],
        initial: T,
        lo: int,
        hi: int,
    ) -> T:
        """
        Fold per-chunk results of fn over [lo, hi) into `initial`.

        combine must be associative and commutative so the outcome does not
        depend on how the range was chunked.
        """
        return _fold(combine, self.map(fn, lo, hi), initial)
