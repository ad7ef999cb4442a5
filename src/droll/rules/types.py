# rules/types.py

from dataclasses import dataclass

# Closed set of die shapes that can be rolled.
ALLOWED_SIDES: frozenset[int] = frozenset({4, 6, 8, 10, 12, 20})

# Largest number of dice a single term may ask for.
MAX_COUNT = 255

# Default ceiling on the number of dice across all terms of one command.
DEFAULT_MAX_DICE = 255


@dataclass(frozen=True)
class RollInstruction:
    count: int
    sides: int

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


@dataclass(frozen=True)
class RollOutcome:
    sides: int
    result: int


# Rolled when the caller gives no command at all.
DEFAULT_INSTRUCTION = RollInstruction(count=1, sides=20)
