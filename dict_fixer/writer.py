"""
This module writes a word list to disk or S3.

Note: the destination is *overwritten*, no backup of the previous content is kept.
"""

import logging

from dict_fixer.errors import WriteError
from dict_fixer.storage import is_s3_uri, write_s3_text

logger = logging.getLogger(__name__)


def write_word_list(path: str, words: list, encoding: str = "utf-8", region: str = None) -> None:  # type: ignore
    """
    Writes the words to a file, one per line, with no newline after the last word.

    Args:
        path (str): Path or S3 URI of the output file.
        words (list): Dictionary data to be written.
        encoding (str): The text codec of the output file.
        region (str): AWS region used for S3 destinations.

    Raises:
        WriteError: If the destination cannot be created or written.
    """
    content = "\n".join(words)

    if is_s3_uri(path):
        write_s3_text(path, content, encoding=encoding, region=region)
    else:
        try:
            with open(path, "w", encoding=encoding, newline="") as file:
                file.write(content)
        except (OSError, UnicodeEncodeError, LookupError) as err:
            logger.error(f"An error occurred while writing {path}: {err}")
            raise WriteError(path, str(err)) from err

    logger.info(f"Wrote {len(words)} lines to {path}")
