"""droll: a dice rolling simulation for role-playing games.

Parse a roll command such as ``2d6+1d4`` into roll instructions and roll them
into a writable text sink::

    from droll import parse_roll_tokens, roll

    instructions = parse_roll_tokens("2d6+1d4")
    total = roll(instructions, sys.stdout)
"""

from droll.errors import ParseErrorKind, RollOutputError, RollTokenParsingError
from droll.rules.dice import DiceRNG, Roller, roll
from droll.rules.parser import parse_roll_tokens
from droll.rules.types import ALLOWED_SIDES, DEFAULT_INSTRUCTION, RollInstruction

__all__ = [
    "ALLOWED_SIDES",
    "DEFAULT_INSTRUCTION",
    "DiceRNG",
    "ParseErrorKind",
    "RollInstruction",
    "RollOutputError",
    "RollTokenParsingError",
    "Roller",
    "parse_roll_tokens",
    "roll",
]
