from argparse import ArgumentParser
import logging
import sys

from textrules import __version__
from textrules.host import MemoryHost, run_command
from textrules.result import Rule


def main(argv=None):
    parser = ArgumentParser(
        prog="textrules",
        description="Regex-based checks and rewrites for selected editor text.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # regex command
    regex_parser = subparsers.add_parser(
        "regex",
        help="Check whether 'inputStr @Regex pattern' matches",
    )
    _add_input_arguments(regex_parser, "Selection text (reads from stdin if not provided)")

    # alnum command
    alnum_parser = subparsers.add_parser(
        "alnum",
        help="Check whether the selection is purely ASCII letters and digits",
    )
    _add_input_arguments(alnum_parser, "Selection text (reads from stdin if not provided)")

    # wrap command
    wrap_parser = subparsers.add_parser(
        "wrap",
        help="Bind a single call or construction statement to a local variable",
    )
    _add_input_arguments(wrap_parser, "Line of code (reads from stdin if not provided)")
    wrap_parser.add_argument(
        "--file-name",
        type=str,
        default="Program.cs",
        help="Name of the document the line belongs to (default: Program.cs)",
    )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version information",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.command == "version":
        handle_version()
    elif args.command == "wrap":
        handle_wrap(args)
    else:
        handle_check(args, Rule(args.command))


def _add_input_arguments(subparser, text_help):
    subparser.add_argument(
        "text",
        nargs="?",
        help=text_help,
    )
    subparser.add_argument(
        "-f",
        "--file",
        type=str,
        help="Path to a file holding the selection",
    )


def read_input(args):
    """Read the selection from --file, the positional argument, or stdin."""
    if args.file:
        try:
            with open(args.file, "r") as f:
                return f.read()
        except FileNotFoundError:
            print(f"Error: File not found: {args.file}", file=sys.stderr)
            sys.exit(1)
    elif args.text is not None:
        return args.text
    # Read from stdin if no file or text argument provided
    return sys.stdin.read()


def handle_version():
    """Display version information."""
    print(f"textrules version {__version__}")


def handle_check(args, rule):
    """Run a check rule on the selection and print its message."""
    host = MemoryHost(selection=read_input(args))
    run_command(host, rule)

    for message in host.messages:
        print(message)


def handle_wrap(args):
    """Run the statement wrap on a line and print the resulting line."""
    line = read_input(args)
    host = MemoryHost(current_line=line, file_name=args.file_name)
    run_command(host, Rule.STATEMENT_WRAP)

    for message in host.messages:
        print(message)
    if host.messages:
        return

    # Unchanged line on a no-op, so the command can be used as a filter
    output = host.current_line
    print(output, end="" if output.endswith("\n") else "\n")


if __name__ == "__main__":
    main()
