import pytest

from simpleargparse.exceptions import (
    HelpRequested,
    MissingArgumentError,
    RequiredOptionMissingError,
)
from simpleargparse.parser import ArgumentParser


@pytest.fixture
def parser():
    parser = ArgumentParser("Prints greetings.")
    parser.add_option("-n", "--name", dest="name", required=True, help="Who to greet.")
    return parser


def test_help_requested_prints_help_to_stdout(parser, capsys):
    with pytest.raises(HelpRequested) as excinfo:
        parser.parse_args(["--help"])
    parser.handle_error(excinfo.value)

    captured = capsys.readouterr()
    assert "Help requested" in captured.out
    assert "Usage: [--help] -n, --name NAME" in captured.out
    assert "Who to greet." in captured.out
    assert captured.err == ""


def test_error_prints_message_and_help_to_stderr(parser, capsys):
    with pytest.raises(MissingArgumentError) as excinfo:
        parser.parse_args(["--name"])
    parser.handle_error(excinfo.value)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "MissingArgumentError" in captured.err
    assert "No argument supplied: --name" in captured.err
    assert "Usage: [--help] -n, --name NAME" in captured.err
    assert "Help requested\n\n" not in captured.err


def test_required_missing_report(parser, capsys):
    with pytest.raises(RequiredOptionMissingError) as excinfo:
        parser.parse_args([])
    parser.handle_error(excinfo.value)

    captured = capsys.readouterr()
    assert "Required options not supplied: -n" in captured.err


def test_printed_help_uses_configured_tab_width(capsys):
    parser = ArgumentParser("word word word word word", screen_width=30, tab_width=4)
    parser.add_option("--opt", help="Indented by four columns.")
    parser.handle_error(HelpRequested())

    captured = capsys.readouterr()
    assert "\n    word word word word word\n" in captured.out
    assert "\n    Indented by four columns.\n" in captured.out
    assert "        word" not in captured.out
    assert all(len(line) <= 30 for line in captured.out.splitlines())
    assert captured.out.rstrip("\n") == parser.generate_help_screen(
        requested=True
    ).expandtabs(4).rstrip("\n")
