import pytest

from simpleargparse.exceptions import InvalidArgumentError, MissingArgumentError
from simpleargparse.parser import ArgumentParser, OptionType


@pytest.fixture
def parser():
    parser = ArgumentParser("test")
    parser.add_option("--name", required=True)
    parser.add_option("--count", type=OptionType.INTEGER)
    return parser


def test_help_is_recorded_and_parsing_continues(parser):
    namespace = parser.parse_args(["--help", "--name", "x"], suppress_errors=True)
    assert parser.help_requested
    assert namespace.help_requested
    assert namespace["name"] == "x"


def test_required_missing_is_swallowed(parser):
    namespace = parser.parse_args(["--count", "4"], suppress_errors=True)
    assert namespace["count"] == 4
    assert namespace["name"] == ""
    assert not namespace.help_requested


def test_invalid_argument_still_raises(parser):
    with pytest.raises(InvalidArgumentError):
        parser.parse_args(["--count", "four"], suppress_errors=True)


def test_missing_argument_still_raises(parser):
    with pytest.raises(MissingArgumentError):
        parser.parse_args(["--count"], suppress_errors=True)
