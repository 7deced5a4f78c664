"""The actions a command line can request."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .cli_mode import Mode
from .errors import BadArgument, MissingRequiredOption
from .parser import ParsedArgs, parse_args

_UNSIGNED = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**64 - 1


@dataclass(frozen=True)
class Analyze:
    """Report the ``n`` strongest frequencies of ``file``."""

    file: str
    n: int


@dataclass(frozen=True)
class Cypher:
    """Hide ``message`` in ``input`` and write the result to ``output``."""

    input: str
    output: str
    message: str


@dataclass(frozen=True)
class Decypher:
    """Recover the message hidden in ``input``."""

    input: str


@dataclass(frozen=True)
class Help:
    """Print the usage text."""


@dataclass(frozen=True)
class Visualize:
    """Render ``file`` to the image ``output`` in the given ``mode``."""

    file: str
    output: str
    mode: str


def _parse_count(text: str) -> int:
    if _UNSIGNED.fullmatch(text):
        value = int(text)
        if value <= _MAX_COUNT:
            return value
    raise BadArgument("L'argument doit être un entier positif valide")


def action_from_parsed(args: ParsedArgs):
    """Build the action for a parsed command line.

    Raises MissingRequiredOption when a positional is missing and BadArgument
    when the analysis count is not a non-negative integer.
    """
    remaining = iter(args.positionals)

    def next_arg() -> str:
        value = next(remaining, None)
        if value is None:
            raise MissingRequiredOption("Argument positionnel manquant")
        return value

    if args.mode is Mode.ANALYZE:
        file = next_arg()
        return Analyze(file=file, n=_parse_count(next_arg()))
    if args.mode is Mode.CYPHER:
        return Cypher(input=next_arg(), output=next_arg(), message=next_arg())
    if args.mode is Mode.DECYPHER:
        return Decypher(input=next_arg())
    if args.mode is Mode.HELP:
        return Help()
    return Visualize(file=next_arg(), output=next_arg(), mode=next_arg())


def action_from_argv(argv=None):
    """Parse ``argv`` (or the process arguments) into an action."""
    return action_from_parsed(parse_args(argv))