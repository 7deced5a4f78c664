"""Modes of operation and the table of recognised command-line options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ArgKind(Enum):
    """Whether an option stands alone or takes a value."""

    FLAG = "flag"
    VALUE = "value"


class Mode(Enum):
    """The action the program is asked to perform."""

    ANALYZE = "Analyze"
    CYPHER = "Cypher"
    DECYPHER = "Decypher"
    HELP = "Help"
    VISUALIZE = "Visualize"

    def expected_positionals(self) -> int:
        """Return how many positional arguments the mode takes."""
        return _EXPECTED_POSITIONALS[self]

    def positional_hint(self) -> str:
        """Return the names of the positional arguments the mode takes."""
        return _POSITIONAL_HINTS[self]


_EXPECTED_POSITIONALS = {
    Mode.ANALYZE: 2,
    Mode.CYPHER: 3,
    Mode.DECYPHER: 1,
    Mode.HELP: 0,
    Mode.VISUALIZE: 3,
}

_POSITIONAL_HINTS = {
    Mode.ANALYZE: "IN_FILE N",
    Mode.CYPHER: "IN_FILE OUT_FILE MESSAGE",
    Mode.DECYPHER: "IN_FILE",
    Mode.HELP: "",
    Mode.VISUALIZE: "IN_FILE OUT_FILE MODE",
}


@dataclass(frozen=True)
class ArgDef:
    """Definition of one command-line option."""

    short: str
    long: str
    kind: ArgKind
    mode: Mode | None
    help: str


ARG_DEFS: tuple[ArgDef, ...] = (
    ArgDef(
        short="-a",
        long="--analyze",
        kind=ArgKind.FLAG,
        mode=Mode.ANALYZE,
        help="Analyse un fichier de runes (IN_FILE N)",
    ),
    ArgDef(
        short="-c",
        long="--cypher",
        kind=ArgKind.FLAG,
        mode=Mode.CYPHER,
        help="Chiffre un message dans une image (IN_FILE OUT_FILE MESSAGE)",
    ),
    ArgDef(
        short="-d",
        long="--decypher",
        kind=ArgKind.FLAG,
        mode=Mode.DECYPHER,
        help="Déchiffre un message caché (IN_FILE)",
    ),
    ArgDef(
        short="-h",
        long="--help",
        kind=ArgKind.FLAG,
        mode=Mode.HELP,
        help="Affiche l'aide",
    ),
    ArgDef(
        short="-v",
        long="--visualize",
        kind=ArgKind.FLAG,
        mode=Mode.VISUALIZE,
        help="Affiche un spectrogramme (IN_FILE OUT_FILE MODE), graphical ou ascii",
    ),
)