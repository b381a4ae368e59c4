import pytest
from pydantic import ValidationError

from simpleargparse.help import HelpFormat, HelpFormatter
from simpleargparse.parser import ArgumentParser, OptionType


@pytest.fixture
def parser():
    parser = ArgumentParser("Does things with files.")
    parser.add_option("--opt1", help="First option.")
    parser.add_option("--req", required=True, help="Required option.")
    parser.add_option("--tag", repeatable=True, help="Tags.\nMay be repeated.")
    parser.add_option("-v", "--verbose", takes_value=False, help="Be chatty.")
    parser.add_option("--out", type=OptionType.FILE, display_name="PATH")
    return parser


def test_help_format_defaults():
    help_format = HelpFormat()
    assert help_format.screen_width == 80
    assert help_format.tab_width == 8
    assert help_format.break_chars == " ,;!?"
    assert help_format.option_help_width == 72


@pytest.mark.parametrize(
    "kwargs",
    [
        {"screen_width": 0},
        {"tab_width": 0},
        {"break_chars": ""},
        {"screen_width": 8, "tab_width": 8},
    ],
)
def test_help_format_validation(kwargs):
    with pytest.raises(ValidationError):
        HelpFormat(**kwargs)


def test_parser_builds_help_format_from_arguments():
    parser = ArgumentParser("test", screen_width=100, tab_width=4, break_chars=" ")
    assert parser.help_format == HelpFormat(screen_width=100, tab_width=4, break_chars=" ")
    with pytest.raises(ValidationError):
        ArgumentParser("test", screen_width=4, tab_width=8)


def test_full_help_screen(parser):
    assert parser.generate_help_screen(requested=True) == (
        "Help requested\n\n"
        "\tDoes things with files.\n\n"
        "Usage: [--help] [--opt1 OPT1] --req REQ [--tag TAG...] [-v, --verbose]\n"
        "       [--out PATH]\n\n"
        "Options:\n"
        "--opt1 OPT1\n\tFirst option.\n\n"
        "--req REQ\n\tRequired option.\n\n"
        "--tag TAG\n\tTags.\n\tMay be repeated.\n\n"
        "-v, --verbose\n\tBe chatty.\n\n"
        "--out PATH\n\tout\n\n"
    )


def test_blocks_can_be_disabled(parser):
    assert parser.generate_help_screen(description=False, usage=False, options=False) == ""
    usage_only = parser.generate_help_screen(description=False, options=False)
    assert usage_only.startswith("Usage: [--help]")
    assert "Options:" not in usage_only
    assert not parser.generate_help_screen().startswith("Help requested")


def test_empty_description_is_skipped():
    parser = ArgumentParser()
    assert parser.generate_help_screen() == "Usage: [--help]\n\nOptions:\n"


def test_usage_wraps_on_current_line_width():
    parser = ArgumentParser("test", screen_width=30, tab_width=4)
    for name in ["alpha", "beta", "gamma", "delta", "epsilon"]:
        parser.add_option(f"--{name}")
    usage = parser.generate_help_screen(description=False, options=False)
    lines = usage.rstrip("\n").split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 30 for line in lines)
    assert all(line.startswith("       [--") for line in lines[1:])
    assert "".join(lines).count("[--") == 6


def test_option_help_is_wrapped_below_screen_width():
    long_help = "word " * 60 + "end"
    parser = ArgumentParser("test", screen_width=40, tab_width=8)
    parser.add_option("--long", help=long_help)
    options = HelpFormatter(
        parser.description, parser.options, parser.help_format
    ).render_options()
    help_lines = [line for line in options.split("\n") if line.startswith("\t")]
    assert len(help_lines) > 1
    assert all(len(line[1:]) <= 32 for line in help_lines)
    assert " ".join(line[1:] for line in help_lines).split() == long_help.split()


def test_description_is_wrapped_and_indented():
    formatter = HelpFormatter(
        "alpha beta gamma delta", [], HelpFormat(screen_width=12, tab_width=2)
    )
    assert formatter.render_description() == "\talpha beta\n\tgamma delta\n\n"
