import pytest

from stone_analysis.cli_mode import ArgDef, ArgKind
from stone_analysis.errors import BadArgument, MissingRequiredOption
from stone_analysis.lexer import LexResult, _lex, lex

OUTPUT_DEF = ArgDef("-o", "--output", ArgKind.VALUE, None, "output file")


def test_short_flag_is_stored_under_long_name():
    result = lex(["-a", "song.wav", "5"])
    assert result.flags == {"--analyze": "true"}
    assert result.positionals == ["song.wav", "5"]


def test_long_flag_and_positionals_keep_order():
    result = lex(["in.wav", "--cypher", "out.wav", "msg"])
    assert result.flags == {"--cypher": "true"}
    assert result.positionals == ["in.wav", "out.wav", "msg"]


@pytest.mark.parametrize("arg", ["-1", "-42", "-"])
def test_negative_numbers_and_lone_dash_are_positionals(arg):
    assert lex([arg]).positionals == [arg]
    assert lex([arg]).flags == {}


def test_flag_ignores_equals_suffix():
    assert lex(["--help=yes"]).flags == {"--help": "true"}


def test_repeated_flag_is_stored_once():
    result = lex(["-d", "--decypher", "x.wav"])
    assert result.flags == {"--decypher": "true"}


def test_unknown_option_is_rejected():
    with pytest.raises(BadArgument, match="Option inconnue : --bogus"):
        lex(["--bogus"])


def test_empty_input():
    assert lex([]) == LexResult()


def test_value_option_with_equals():
    assert _lex(["-o=out.ppm"], [OUTPUT_DEF]).flags == {"--output": "out.ppm"}


def test_value_option_takes_next_argument():
    result = _lex(["--output", "out.ppm", "rest"], [OUTPUT_DEF])
    assert result.flags == {"--output": "out.ppm"}
    assert result.positionals == ["rest"]


def test_value_option_at_end_is_missing():
    with pytest.raises(MissingRequiredOption, match="Valeur manquante pour -o"):
        _lex(["-o"], [OUTPUT_DEF])


def test_value_option_followed_by_option_is_missing():
    with pytest.raises(MissingRequiredOption):
        _lex(["--output", "--output"], [OUTPUT_DEF])