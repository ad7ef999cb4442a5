# rules/parser.py

from __future__ import annotations

import re

import structlog

from droll.errors import ParseErrorKind, RollTokenParsingError
from droll.metrics import inc_counter
from droll.rules.types import ALLOWED_SIDES, DEFAULT_MAX_DICE, MAX_COUNT, RollInstruction

log = structlog.get_logger()

TERM_SEPARATOR = "+"
DIE_SEPARATOR = "d"

# ASCII digits only; int() would also take signs, blanks, underscores and
# non-ASCII digits.
_DIGITS_RE = re.compile(r"[0-9]+")

_ALLOWED_SIDES_TEXT = ", ".join(str(s) for s in sorted(ALLOWED_SIDES))


def _fail(details: str, kind: ParseErrorKind, token: str | None = None) -> RollTokenParsingError:
    inc_counter("parse.failed")
    inc_counter(f"parse.failed.{kind.value}")
    log.info("droll.parse.rejected", kind=kind.value, token=token)
    return RollTokenParsingError(details, kind=kind, token=token)


def _parse_count(literal: str) -> int:
    if _DIGITS_RE.fullmatch(literal):
        n = int(literal)
        if 0 < n <= MAX_COUNT:
            return n
    raise _fail(
        f"'{literal}' is not a valid number of dice. "
        f"Acceptable values are greater than 0 and less than {MAX_COUNT + 1}.",
        ParseErrorKind.INVALID_COUNT,
        literal,
    )


def _parse_sides(literal: str) -> int:
    if _DIGITS_RE.fullmatch(literal):
        s = int(literal)
        if s in ALLOWED_SIDES:
            return s
    raise _fail(
        f"'{literal}' is not a valid nor allowable number of sides for dice. "
        f"Acceptable values include: {_ALLOWED_SIDES_TEXT}.",
        ParseErrorKind.INVALID_SIDES,
        literal,
    )


def parse_roll_tokens(text: str, *, max_dice: int | None = DEFAULT_MAX_DICE) -> list[RollInstruction]:
    """Parse a roll command such as ``2d6+1d4`` into roll instructions.

    Terms are kept in input order; repeated die sizes are not merged. The
    first invalid term aborts the whole parse with RollTokenParsingError.
    ``max_dice`` caps the number of dice summed across all terms; pass None
    to disable the cap.
    """
    log.debug("droll.parse.start", text=text)
    if not text:
        raise _fail("No command provided.", ParseErrorKind.EMPTY)

    instructions: list[RollInstruction] = []
    total_dice = 0
    for term in text.split(TERM_SEPARATOR):
        parts = term.split(DIE_SEPARATOR)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise _fail(
                f"Command token not recognized as a valid dice roll: {term}.",
                ParseErrorKind.MALFORMED_TOKEN,
                term,
            )
        count = _parse_count(parts[0])
        sides = _parse_sides(parts[1])

        total_dice += count
        if max_dice is not None and total_dice > max_dice:
            raise _fail(
                "Too many dice requested. "
                f"At most {max_dice} dice may be rolled at once.",
                ParseErrorKind.TOO_MANY_DICE,
                term,
            )
        instructions.append(RollInstruction(count=count, sides=sides))

    inc_counter("parse.ok")
    log.debug("droll.parse.ok", terms=len(instructions), dice=total_dice)
    return instructions
