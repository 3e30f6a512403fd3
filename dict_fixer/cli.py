"""
Command line entry point for the dictionary fixer.

Usage:
    dict-fixer <input file> <output file> [-h]
"""

import argparse
import logging
import sys

from dict_fixer.config import load_config
from dict_fixer.errors import ReadError, WriteError
from dict_fixer.pipeline import fix_dictionary

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class HelpOnErrorParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = HelpOnErrorParser(
        prog="dict-fixer",
        usage="%(prog)s <input file> <output file> [-h]",
        description="Given an input file, strip out all words that contain an apostrophe.",
        epilog="Paths starting with '-' are read as options; pass ./-words.txt instead.",
        add_help=False,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="input file / output file",
        help="New line delimited dictionary to be read in, then the file to be created/overwritten with the result. "
        "Either may be an s3://bucket/key URI.",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Prints this help message.")
    return parser


def main(argv: list = None) -> int:  # type: ignore
    """
    Parses the command line and runs the read, filter and write steps.

    Args:
        argv (list): Arguments without the program name, sys.argv[1:] when None.

    Returns:
        int: 0 on success or help, 1 if the input could not be read or the output written, 2 on bad usage.
    """
    parser = build_parser()
    try:
        args, unknown = parser.parse_known_intermixed_args(sys.argv[1:] if argv is None else argv)
    except UsageError as err:
        logger.debug(f"Unparseable command line: {err}")
        parser.print_help()
        return EXIT_USAGE

    if args.help:
        parser.print_help()
        return EXIT_OK

    # Exactly an input and an output are required
    if unknown or len(args.paths) != 2:
        parser.print_help()
        return EXIT_USAGE

    config = load_config()
    logging.basicConfig(level=config["Logging"].get("LogLevel", logging.INFO))

    input_file, output_file = args.paths
    print(f"Input File:\t{input_file!r}\nOutput File:\t{output_file!r}")

    try:
        summary = fix_dictionary(input_file, output_file, config)
    except ReadError:
        print("Error, failed to read in file")
        return EXIT_IO_ERROR
    except WriteError as err:
        print(f"Did not write to {err.path}")
        return EXIT_IO_ERROR

    print(f"Removed {summary['removed']} of {summary['loaded']} words, wrote {summary['written']}.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
