"""Fork-join execution of per-productivity work on a fixed worker pool.

A phase submits one task per productivity slice and blocks until every
task has finished, so the next phase always sees fully written buffers.
The pool is created once and reused for every phase of every iteration.

Example::

    >>> with ProductivityScheduler(n_workers=4) as scheduler:
    ...     squares = scheduler.run_phase(lambda j: j * j, 5)
    >>> squares
    [0, 1, 4, 9, 16]
"""

from __future__ import annotations

import concurrent.futures
import logging
import os
from typing import Callable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProductivityScheduler:
    """Fixed-size thread pool running one task per productivity slice.

    Parameters
    ----------
    n_workers : int, optional
        Number of worker threads.  Defaults to ``os.cpu_count()``.

    Raises
    ------
    ValueError
        If *n_workers* is smaller than 1.
    """

    def __init__(self, n_workers: Optional[int] = None) -> None:
        if n_workers is None:
            n_workers = os.cpu_count() or 1
        if n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {n_workers}.")

        self.n_workers: int = int(n_workers)
        self._executor: Optional[concurrent.futures.ThreadPoolExecutor] = (
            concurrent.futures.ThreadPoolExecutor(
                max_workers=self.n_workers,
                thread_name_prefix="vfi-worker",
            )
        )
        logger.debug("Started worker pool with %d threads.", self.n_workers)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run_phase(self, task: Callable[[int], T], n_slices: int) -> List[T]:
        """Run ``task(j)`` for ``j in range(n_slices)`` and wait for all.

        Parameters
        ----------
        task : callable
            Work for one slice.  Tasks of the same phase must touch
            disjoint output regions.
        n_slices : int
            Number of slices (productivity states).

        Returns
        -------
        list
            Task results in slice order.

        Raises
        ------
        RuntimeError
            If the scheduler has been shut down.
        Exception
            The first (in slice order) exception raised by a task, after
            every task of the phase has finished.
        """
        if self._executor is None:
            raise RuntimeError("Scheduler has been shut down.")

        futures = [self._executor.submit(task, j) for j in range(n_slices)]
        concurrent.futures.wait(futures)
        return [future.result() for future in futures]

    def shutdown(self) -> None:
        """Stop the worker threads.  Safe to call more than once."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            logger.debug("Worker pool shut down.")

    def __enter__(self) -> "ProductivityScheduler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
