"""Entry point of the command-line program."""

from __future__ import annotations

import sys

from . import analysis, decryption, encryption, visualizer
from .action import Analyze, Cypher, Decypher, Help, Visualize, action_from_argv
from .errors import AudioError, CliError, StegoError
from .parser import print_help

EXIT_FAILURE = 84


def describe_error(error: BaseException) -> str:
    """Return the message shown to the user for ``error``."""
    if isinstance(error, AudioError):
        return f"[Erreur Pipeline Audio] {error}"
    if isinstance(error, StegoError):
        return f"[Erreur Stéganographie] {error}"
    return str(error)


def execute_action(action) -> None:
    """Carry out one action."""
    match action:
        case Analyze(file=file, n=n):
            analysis.run(file, n)
        case Cypher(input=source, output=output, message=message):
            encryption.run_encryption(source, output, message)
        case Decypher(input=source):
            decryption.run_decryption(source)
        case Help():
            print_help()
        case Visualize(file=file, output=output, mode=mode):
            visualizer.run(file, mode, output)
        case _:
            raise TypeError(f"unknown action: {action!r}")


def main(argv=None) -> int:
    """Run the program and return its exit status."""
    try:
        execute_action(action_from_argv(argv))
    except (AudioError, StegoError, CliError) as error:
        print(f"\x1b[31merr\x1b[0m {describe_error(error)}", file=sys.stderr)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())