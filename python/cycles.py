"""
Cycle detection for long-running deterministic simulations.

A simulation that revisits a fingerprinted state repeats from there on, so the
remaining steps can be skipped arithmetically: whole cycles are added as
``cycle_gain`` to the measured quantity and only the leftover steps are run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Simulation(Protocol):
    """
    A deterministic simulation advanced one step at a time.

    ``fingerprint`` must capture everything that determines future evolution,
    including the phase of any external repeating input. A fingerprint that
    leaves something out makes two different states look equal and the skip
    produces a wrong answer.
    """

    def step(self) -> None: ...

    def fingerprint(self) -> Hashable: ...

    def measure(self) -> int: ...


class Cycler(Generic[T]):
    """Endless walk over a fixed sequence, exposing the current index."""

    __slots__ = ("content", "index")

    def __init__(self, content: Sequence[T]) -> None:
        if not content:
            raise ValueError("Cycler needs at least one element")
        self.content = content
        self.index = 0

    def next(self) -> T:
        value = self.content[self.index]
        self.index = (self.index + 1) % len(self.content)
        return value


@dataclass(frozen=True)
class CycleInfo:
    """A repeated fingerprint: where it was first seen and where it came back."""

    first_index: int  # Steps taken when the fingerprint was first recorded
    repeat_index: int  # Steps taken when it was seen again
    first_measure: int
    repeat_measure: int

    @property
    def length(self) -> int:
        return self.repeat_index - self.first_index

    @property
    def gain(self) -> int:
        return self.repeat_measure - self.first_measure


@dataclass(frozen=True)
class SkipResult:
    """Final measure after ``target`` steps, and the cycle used to get there."""

    measure: int
    cycle: CycleInfo | None  # None when the target was reached before any repeat
    simulated_steps: int  # Steps actually run, excluding skipped cycles


def run_naive(sim: Simulation, target: int) -> int:
    """Advance ``sim`` to ``target`` steps one at a time and return its measure."""
    for _ in range(target):
        sim.step()
    return sim.measure()


def run_with_cycle_skip(sim: Simulation, target: int) -> SkipResult:
    """
    Advance ``sim`` to ``target`` steps, skipping whole cycles once one is seen.

    After each step the fingerprint is looked up. On the first repeat,
    ``remaining // cycle_length`` whole cycles are skipped (adding their gain
    to the measure) and ``remaining % cycle_length`` steps are simulated.

    Args:
        sim: The simulation, mutated in place
        target: Total number of steps to reach

    Returns:
        SkipResult with the measure the simulation would have after ``target`` steps
    """
    seen: dict[Hashable, tuple[int, int]] = {}
    steps = 0
    while steps < target:
        sim.step()
        steps += 1
        fingerprint = sim.fingerprint()
        measure = sim.measure()
        first = seen.get(fingerprint)
        if first is None:
            seen[fingerprint] = (steps, measure)
            continue

        cycle = CycleInfo(first[0], steps, first[1], measure)
        assert cycle.length > 0, f"Non-positive cycle length {cycle.length}"
        remaining = target - steps
        full_cycles, leftover = divmod(remaining, cycle.length)
        logger.info(
            "cycle detected: first=%d, length=%d, gain=%d; skipping %d cycles, simulating %d steps",
            cycle.first_index,
            cycle.length,
            cycle.gain,
            full_cycles,
            leftover,
        )
        for _ in range(leftover):
            sim.step()
        return SkipResult(sim.measure() + full_cycles * cycle.gain, cycle, steps + leftover)

    logger.debug("no cycle within %d steps (%d fingerprints)", target, len(seen))
    return SkipResult(sim.measure(), None, steps)
