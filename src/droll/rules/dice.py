# rules/dice.py

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from typing import Protocol

import structlog

from droll.errors import RollOutputError
from droll.metrics import inc_counter, observe_histogram
from droll.rules.types import RollInstruction, RollOutcome


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        """Return an integer N with a <= N <= b."""
        ...


class OutputSink(Protocol):
    def write(self, s: str, /) -> object:
        ...


class DiceRNG:
    def __init__(self, seed: int | None = None):
        # seed=None draws from OS entropy / current time
        self._rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)


def format_outcome(outcome: RollOutcome) -> str:
    return f"Rolling a d{outcome.sides}... {outcome.result}\n"


def format_total(total: int) -> str:
    return f"Total: {total}\n"


GROUP_SEPARATOR = "\n"


class Roller:
    """Rolls parsed instructions and streams the results to a sink.

    One line is written per die, a blank line after each instruction group
    and a final total line, so a sink sees ``sum(counts) + len(groups) + 1``
    writes. Nothing is buffered: the first failing write aborts the roll.
    """

    def __init__(self, rng: RandomSource | None = None, *, seed: int | None = None):
        self.rng = rng if rng is not None else DiceRNG(seed)
        self._log = structlog.get_logger()

    def outcomes(self, instruction: RollInstruction) -> Iterator[RollOutcome]:
        for _ in range(instruction.count):
            yield RollOutcome(sides=instruction.sides, result=self.rng.randint(1, instruction.sides))

    def roll(self, instructions: Iterable[RollInstruction], sink: OutputSink) -> int:
        instructions = list(instructions)
        dice = sum(i.count for i in instructions)
        self._log.debug("droll.roll.start", groups=len(instructions), dice=dice)

        total = 0
        for instruction in instructions:
            for outcome in self.outcomes(instruction):
                total += outcome.result
                self._log.debug("droll.roll.die", sides=outcome.sides, result=outcome.result)
                self._write(sink, format_outcome(outcome))
            self._write(sink, GROUP_SEPARATOR)
        self._write(sink, format_total(total))

        inc_counter("roll.completed")
        inc_counter("roll.dice", dice)
        observe_histogram("roll.dice_per_invocation", dice, buckets=[1, 2, 5, 10, 20, 50, 100, 255])
        self._log.debug("droll.roll.result", total=total)
        return total

    def _write(self, sink: OutputSink, text: str) -> None:
        try:
            sink.write(text)
        except OSError as exc:
            inc_counter("roll.write_failed")
            self._log.warning("droll.roll.write_failed", exc_info=True)
            raise RollOutputError(exc) from exc


def roll(
    instructions: Iterable[RollInstruction],
    sink: OutputSink,
    *,
    rng: RandomSource | None = None,
) -> int:
    """Roll every instruction in order into ``sink`` and return the total."""
    return Roller(rng).roll(instructions, sink)
