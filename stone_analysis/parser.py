"""Command-line parsing and the help text."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from .cli_mode import ARG_DEFS, Mode
from .errors import BadArgument
from .lexer import lex
from .validator import resolve_mode, validate_positionals

USAGE = "Usage : stone_analysis [MODE] [OPTIONS] [ARGS...]"


@dataclass
class ParsedArgs:
    """A validated command line: its options, positionals and selected mode."""

    mode: Mode
    flags: dict[str, str] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)

    def value(self, long: str) -> str | None:
        """Return the value of the option ``long``, or None when absent."""
        return self.flags.get(long)

    def has(self, long: str) -> bool:
        """Return whether the option ``long`` was given."""
        return long in self.flags

    def positional(self, index: int) -> str | None:
        """Return the positional argument at ``index``, or None when there is none."""
        if 0 <= index < len(self.positionals):
            return self.positionals[index]
        return None


def _help_line(definition) -> str:
    return f"  {definition.short:<4}  {definition.long:<14}  {definition.help}"


def format_help() -> str:
    """Return the usage text listing modes and options."""
    lines = [USAGE, "", "Modes :"]
    lines.extend(_help_line(d) for d in ARG_DEFS if d.mode is not None)
    options = [d for d in ARG_DEFS if d.mode is None]
    if options:
        lines.extend(["", "Options :"])
        lines.extend(_help_line(d) for d in options)
    return "\n".join(lines) + "\n"


def print_help() -> None:
    """Print the usage text."""
    print(format_help(), end="")


def parse_args(argv=None) -> ParsedArgs:
    """Parse and validate ``argv`` (the arguments after the program name).

    With no arguments the help text is printed and BadArgument is raised.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_help()
        raise BadArgument("Aucun argument fourni")

    lexed = lex(args)
    mode = resolve_mode(lexed.flags)
    validate_positionals(mode, lexed.positionals)
    return ParsedArgs(mode=mode, flags=lexed.flags, positionals=lexed.positionals)