"""Exceptions raised by the droll core."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    EMPTY = "empty"
    MALFORMED_TOKEN = "malformed_token"
    INVALID_COUNT = "invalid_count"
    INVALID_SIDES = "invalid_sides"
    TOO_MANY_DICE = "too_many_dice"


class RollTokenParsingError(ValueError):
    """A roll command could not be turned into roll instructions.

    ``details`` is the message shown to users; ``kind`` lets callers branch
    without matching on text.
    """

    def __init__(self, details: str, *, kind: ParseErrorKind, token: str | None = None):
        super().__init__(details)
        self.details = details
        self.kind = kind
        self.token = token


class RollOutputError(OSError):
    """Writing roll results to the output sink failed."""

    def __init__(self, cause: OSError):
        if cause.errno is not None:
            super().__init__(cause.errno, cause.strerror or str(cause))
        else:
            super().__init__(str(cause))
        self.cause = cause
