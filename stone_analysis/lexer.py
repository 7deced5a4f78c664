"""Splitting of raw arguments into recognised options and positionals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .cli_mode import ARG_DEFS, ArgDef, ArgKind
from .errors import BadArgument, MissingRequiredOption


@dataclass
class LexResult:
    """Options keyed by their long name, and the remaining positional arguments."""

    flags: dict[str, str] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)


def lex(raw) -> LexResult:
    """Sort ``raw`` arguments into options and positionals.

    Raises BadArgument for an unknown option and MissingRequiredOption when an
    option that needs a value has none.
    """
    return _lex(raw, ARG_DEFS)


def _lex(raw: Iterable[str], defs: Iterable[ArgDef]) -> LexResult:
    defs = tuple(defs)
    result = LexResult()
    items = iter(raw)
    for arg in items:
        if _looks_like_option(arg):
            long_name, value = _parse_option(arg, items, defs)
            result.flags[long_name] = value
        else:
            result.positionals.append(arg)
    return result


def _parse_option(arg: str, items: Iterator[str], defs: tuple[ArgDef, ...]) -> tuple[str, str]:
    key = arg.split("=", 1)[0]
    definition = next((d for d in defs if key in (d.short, d.long)), None)
    if definition is None:
        raise BadArgument(f"Option inconnue : {arg}")
    if definition.kind is ArgKind.FLAG:
        return definition.long, "true"
    return definition.long, _extract_value(arg, key, items)


def _extract_value(arg: str, key: str, items: Iterator[str]) -> str:
    if "=" in arg:
        return arg.split("=", 1)[1]
    following = next(items, None)
    if following is not None and not _looks_like_option(following):
        return following
    raise MissingRequiredOption(f"Valeur manquante pour {key}")


def _looks_like_option(arg: str) -> bool:
    return arg.startswith("-") and len(arg) > 1 and arg[1] not in "0123456789"