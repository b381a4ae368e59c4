"""
Two parsers sharing one argument vector.

The global parser consumes the flags it owns and blanks them out, so the
tool parser only sees what is left.

    python layered_parsers.py --log-level debug --retries 3 --tag a --tag b
"""
import sys

from simpleargparse import ArgumentParser, ArgumentParserError, OptionType

global_parser = ArgumentParser("Global options.")
global_parser.add_option("--log-level", dest="log_level", default="info")
global_parser.add_option("--dry-run", dest="dry_run", takes_value=False)

tool_parser = ArgumentParser("Tool options.")
tool_parser.add_option("--retries", type=OptionType.BYTE, default=1)
tool_parser.add_option("--tag", repeatable=True, help="Tag to apply. May be repeated.")


def main() -> None:
    args = sys.argv[1:]
    try:
        global_namespace = global_parser.parse_args(args, remove=True)
        tool_namespace = tool_parser.parse_args(args, remove=True)
    except ArgumentParserError as error:
        tool_parser.handle_error(error)
        return

    print("global:", global_namespace.to_dict())
    print("tool:", tool_namespace.to_dict())
    print("left over:", [token for token in args if token])


if __name__ == "__main__":
    main()
