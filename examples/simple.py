import sys

from simpleargparse import ArgumentParser, ArgumentParserError, OptionType
from simpleargparse.utils import configure_logging

configure_logging()

parser = ArgumentParser(
    "Copies the head of a text file, optionally upper-casing it. "
    "Run with --help to see this screen, or leave out --input to see the "
    "error report."
)
parser.add_option(
    "-i",
    "--input",
    dest="input",
    type=OptionType.EXISTING_FILE,
    required=True,
    display_name="FILE",
    help="The file to read.",
)
parser.add_option(
    "-n",
    "--lines",
    dest="lines",
    type=OptionType.SHORT,
    default=10,
    help="How many lines to copy.\nDefaults to 10.",
)
parser.add_option(
    "-u", "--upper", dest="upper", takes_value=False, help="Upper-case the text."
)


def main() -> None:
    try:
        namespace = parser.parse_args(sys.argv[1:])
    except ArgumentParserError as error:
        parser.handle_error(error)
        return

    path = namespace.get_file("input")
    count = namespace.get_short("lines")
    with open(path, encoding="UTF-8") as file:
        head = [line.rstrip("\n") for _, line in zip(range(count), file)]
    for line in head:
        print(line.upper() if namespace.get_boolean("upper") else line)


if __name__ == "__main__":
    main()
