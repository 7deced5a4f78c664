import pytest

from stone_analysis.action import (
    Analyze,
    Cypher,
    Decypher,
    Help,
    Visualize,
    action_from_argv,
    action_from_parsed,
)
from stone_analysis.cli_mode import Mode
from stone_analysis.errors import BadArgument, MissingRequiredOption
from stone_analysis.parser import ParsedArgs


def test_analyze():
    assert action_from_argv(["-a", "song.wav", "3"]) == Analyze(file="song.wav", n=3)


def test_analyze_accepts_plus_sign():
    assert action_from_argv(["-a", "song.wav", "+7"]).n == 7


@pytest.mark.parametrize("count", ["abc", "1.5", " 3", "1_0", "", "+", "99999999999999999999999"])
def test_analyze_rejects_bad_count(count):
    args = ParsedArgs(mode=Mode.ANALYZE, positionals=["song.wav", count])
    with pytest.raises(BadArgument, match="entier positif"):
        action_from_parsed(args)


def test_cypher():
    action = action_from_argv(["--cypher", "in.wav", "out.wav", "hello"])
    assert action == Cypher(input="in.wav", output="out.wav", message="hello")


def test_decypher():
    assert action_from_argv(["-d", "hidden.wav"]) == Decypher(input="hidden.wav")


def test_help():
    assert action_from_argv(["-h"]) == Help()


def test_visualize_keeps_argument_order():
    action = action_from_argv(["-v", "in.wav", "out.ppm", "frequency"])
    assert action == Visualize(file="in.wav", output="out.ppm", mode="frequency")


@pytest.mark.parametrize(
    "mode, positionals",
    [
        (Mode.ANALYZE, ["song.wav"]),
        (Mode.CYPHER, ["in.wav", "out.wav"]),
        (Mode.DECYPHER, []),
        (Mode.VISUALIZE, []),
    ],
)
def test_missing_positional(mode, positionals):
    with pytest.raises(MissingRequiredOption, match="Argument positionnel manquant"):
        action_from_parsed(ParsedArgs(mode=mode, positionals=positionals))


def test_invalid_command_line_is_rejected():
    with pytest.raises(BadArgument):
        action_from_argv(["-d"])