"""
This module loads a newline delimited word list into memory.
"""

import logging

from dict_fixer.errors import ReadError
from dict_fixer.storage import is_s3_uri, read_s3_text

logger = logging.getLogger(__name__)


def load_text(path: str, encoding: str = "utf-8", region: str = None) -> str:  # type: ignore
    """
    Reads the full content of a local file or S3 object as text.

    Line endings are returned untouched, so a carriage return stays part of its line.

    Raises:
        ReadError: If the source is missing, unreadable or not valid text.
    """
    if is_s3_uri(path):
        return read_s3_text(path, encoding=encoding, region=region)

    try:
        with open(path, "r", encoding=encoding, newline="") as file:
            return file.read()
    except (OSError, UnicodeDecodeError, LookupError) as err:
        logger.error(f"An error occurred while reading {path}: {err}")
        raise ReadError(path, str(err)) from err


def read_word_list(path: str, encoding: str = "utf-8", region: str = None) -> list:  # type: ignore
    """
    Reads a word list, given a full file path or S3 URI.

    Args:
        path (str): The path to the input file.
        encoding (str): The text codec of the file.
        region (str): AWS region used for S3 sources.

    Returns:
        list: The lines of the file in file order. An empty file yields a single empty entry.

    Raises:
        ReadError: If the file cannot be opened, read or decoded.
    """
    words = load_text(path, encoding=encoding, region=region).split("\n")
    logger.info(f"Read {len(words)} lines from {path}")
    return words
