import sys

import pytest

from stone_analysis.cli_mode import ARG_DEFS, Mode
from stone_analysis.errors import BadArgument
from stone_analysis.parser import ParsedArgs, format_help, parse_args, print_help


def test_parse_analyze():
    parsed = parse_args(["-a", "song.wav", "3"])
    assert parsed.mode is Mode.ANALYZE
    assert parsed.positionals == ["song.wav", "3"]
    assert parsed.has("--analyze")
    assert not parsed.has("--cypher")
    assert parsed.value("--analyze") == "true"
    assert parsed.value("--cypher") is None


def test_positional_access():
    parsed = parse_args(["--decypher", "hidden.wav"])
    assert parsed.positional(0) == "hidden.wav"
    assert parsed.positional(1) is None
    assert parsed.positional(-1) is None


def test_no_arguments_prints_help_and_fails(capsys):
    with pytest.raises(BadArgument, match="Aucun argument fourni"):
        parse_args([])
    assert capsys.readouterr().out == format_help()


def test_wrong_positional_count_fails():
    with pytest.raises(BadArgument, match="Analyze"):
        parse_args(["-a", "song.wav"])


def test_missing_mode_fails():
    with pytest.raises(BadArgument, match="Spécifie un mode"):
        parse_args(["song.wav"])


def test_reads_sys_argv_by_default(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "-h"])
    assert parse_args().mode is Mode.HELP


def test_help_text_lists_every_mode():
    text = format_help()
    lines = text.splitlines()
    assert lines[0] == "Usage : stone_analysis [MODE] [OPTIONS] [ARGS...]"
    assert lines[1] == ""
    assert lines[2] == "Modes :"
    assert len(lines) == 3 + len(ARG_DEFS)
    for definition, line in zip(ARG_DEFS, lines[3:]):
        assert line.split() [:2] == [definition.short, definition.long]
        assert line.endswith(definition.help)


def test_help_columns_are_aligned():
    lines = format_help().splitlines()[3:]
    starts = {line.index(d.help) for line, d in zip(lines, ARG_DEFS)}
    assert len(starts) == 1


def test_print_help_writes_format_help(capsys):
    print_help()
    assert capsys.readouterr().out == format_help()


def test_parsed_args_built_directly():
    parsed = ParsedArgs(mode=Mode.HELP, flags={"--help": "true"})
    assert parsed.has("--help")
    assert parsed.positional(0) is None