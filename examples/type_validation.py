"""
Shows how values are validated before they are stored.

    python type_validation.py --port 8080 --ratio 0.5 --out build
    python type_validation.py --port 99999
"""
import sys

from simpleargparse import ArgumentParser, ArgumentParserError, OptionType

parser = ArgumentParser("Type validation demo.", screen_width=60, tab_width=4)
parser.add_option("--port", type=OptionType.SHORT, help="Port to listen on.")
parser.add_option("--ratio", type=OptionType.FLOAT, default="1.0")
parser.add_option(
    "--out",
    type=OptionType.NONEXISTING_DIRECTORY,
    help="Directory to create; it must not exist yet.",
)

if __name__ == "__main__":
    try:
        namespace = parser.parse_args(sys.argv[1:], suppress_errors=True)
    except ArgumentParserError as error:
        parser.handle_error(error)
    else:
        print(namespace)
