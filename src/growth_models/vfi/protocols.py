"""Protocol definitions for VFI solver components.

Defines ``typing.Protocol`` classes that formalise the interfaces
between the orchestrator and its components.  Contains no
implementation, only type signatures.

The orchestrator (``StochasticGrowthVFI.solve``) depends only on these
interfaces, so tests can substitute lightweight stubs.
"""

from __future__ import annotations

from typing import Callable, List, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class PhaseScheduler(Protocol):
    """Interface for fork-join execution over productivity slices."""

    def run_phase(self, task: Callable[[int], T], n_slices: int) -> List[T]:
        """Run every slice task and return results in slice order."""
        ...


@runtime_checkable
class BellmanStep(Protocol):
    """Interface for one application of the Bellman operator."""

    def __call__(self) -> float:
        """Update the value function and return the sup-norm change."""
        ...
