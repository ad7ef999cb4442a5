"""Command line entry point for droll.

Examples:
  droll              # roll a single d20
  droll 2d6+1d4      # roll two six-sided dice and one four-sided die
  droll help
"""
from __future__ import annotations

import sys

import click
import structlog

from droll.config import load_settings
from droll.errors import RollOutputError, RollTokenParsingError
from droll.logging import setup_logging
from droll.rules.dice import Roller
from droll.rules.parser import parse_roll_tokens
from droll.rules.types import DEFAULT_INSTRUCTION

log = structlog.get_logger()

HELP_TOKENS = frozenset({"help", "?", "/?", "/help", "-?", "-help"})

USAGE_TEXT = (
    "\nName: droll\n\n"
    "Description: droll is a dice rolling simulation program. Without any parameters "
    "the program rolls a single d20 (a 20 sided die). However, different number/die "
    "side combinations can be used when provided as command line arguments.\n\n"
    "Example Usage: `droll 2d6` to roll two six-sided dice or `droll 2d6+1d4` to roll "
    "two six-sided dice and one four-sided die.\n"
)

EXIT_IO_ERROR = 1
EXIT_PARSE_ERROR = 2


def is_help_token(arg: str) -> bool:
    return arg.lower() in HELP_TOKENS


@click.command(
    name="droll",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("expr", required=False)
@click.option(
    "--max-dice",
    type=click.IntRange(min=1),
    default=None,
    help="Most dice one command may roll (default from DROLL_MAX_DICE, else 255).",
)
@click.option("--no-max-dice", is_flag=True, default=False, help="Do not cap the number of dice.")
@click.option("--seed", type=int, default=None, help="Seed the dice for a reproducible roll.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "NONE"], case_sensitive=False),
    default=None,
    help="Log level for JSON logs on stderr.",
)
def main(
    expr: str | None,
    max_dice: int | None,
    no_max_dice: bool,
    seed: int | None,
    log_level: str | None,
) -> None:
    """Roll dice described by EXPR, e.g. 2d6+1d4. Rolls 1d20 when EXPR is omitted."""
    overrides = {"logging_level": log_level} if log_level else {}
    settings = load_settings(**overrides)
    setup_logging(settings)

    if expr is not None and is_help_token(expr):
        log.debug("droll.cli.help", token=expr)
        click.echo(USAGE_TEXT)
        return

    if expr is None:
        log.debug("droll.cli.default_roll", instruction=str(DEFAULT_INSTRUCTION))
        instructions = [DEFAULT_INSTRUCTION]
    else:
        ceiling = None if no_max_dice else (max_dice if max_dice is not None else settings.max_dice)
        try:
            instructions = parse_roll_tokens(expr, max_dice=ceiling)
        except RollTokenParsingError as exc:
            log.info("droll.cli.parse_failed", kind=exc.kind.value)
            click.echo(f"\n{exc.details}\n", err=True)
            sys.exit(EXIT_PARSE_ERROR)

    try:
        Roller(seed=seed).roll(instructions, sys.stdout)
    except RollOutputError as exc:
        log.warning("droll.cli.output_failed", errno=exc.errno)
        click.echo(f"Unable to write roll output: {exc.strerror or exc}", err=True)
        sys.exit(EXIT_IO_ERROR)


if __name__ == "__main__":  # pragma: no cover
    main()
