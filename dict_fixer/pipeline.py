"""
Read, filter and write a word list in a single pass.
"""

import logging

from dict_fixer.config import DEFAULT_CONFIG
from dict_fixer.loader import read_word_list
from dict_fixer.word_filter import remove_invalid_words
from dict_fixer.writer import write_word_list

logger = logging.getLogger(__name__)


def fix_dictionary(input_path: str, output_path: str, config: dict = None) -> dict:  # type: ignore
    """
    Loads the input word list, strips invalid words and overwrites the output with the rest.

    Args:
        input_path (str): Path or S3 URI of the word list to read.
        output_path (str): Path or S3 URI of the word list to write.
        config (dict): Loaded configuration, defaults when None.

    Returns:
        dict: Line counts for the run under "loaded", "removed" and "written".

    Raises:
        ReadError: If the input cannot be read. The output is left untouched.
        WriteError: If the output cannot be written.
    """
    config = config or DEFAULT_CONFIG
    encoding = config.get("WordList", {}).get("Encoding", "utf-8")
    region = config.get("Aws", {}).get("Region")

    words = read_word_list(input_path, encoding=encoding, region=region)
    valid_words = remove_invalid_words(words)
    write_word_list(output_path, valid_words, encoding=encoding, region=region)

    summary = {
        "loaded": len(words),
        "removed": len(words) - len(valid_words),
        "written": len(valid_words),
    }
    logger.info(f"Removed {summary['removed']} of {summary['loaded']} words")
    return summary
