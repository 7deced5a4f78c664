"""Checks that the parsed options select one mode with the right arguments."""

from __future__ import annotations

from .cli_mode import ARG_DEFS, Mode
from .errors import BadArgument


def resolve_mode(flags) -> Mode:
    """Return the single mode selected by ``flags``.

    Raises BadArgument when no mode or more than one mode is selected.
    """
    active = [d.mode for d in ARG_DEFS if d.mode is not None and d.long in flags]
    if not active:
        modes = ", ".join(d.long for d in ARG_DEFS if d.mode is not None)
        raise BadArgument(f"Spécifie un mode : {modes}")
    if len(active) > 1:
        raise BadArgument("Les modes sont exclusifs — choisis-en un seul.")
    return active[0]


def validate_positionals(mode: Mode, positionals) -> None:
    """Raise BadArgument unless ``positionals`` has the count ``mode`` expects."""
    expected = mode.expected_positionals()
    count = len(positionals)
    if count != expected:
        raise BadArgument(
            f"Le mode {mode.value} attend {expected} argument(s) positionnels "
            f"({mode.positional_hint()}) — reçu : {count}."
        )