"""
Removal of words that contain an apostrophe.
"""

APOSTROPHE = "'"


def is_invalid_word(word: str) -> bool:
    return APOSTROPHE in word


def remove_invalid_words(words: list) -> list:
    """
    Remove words from the dictionary that contain an apostrophe.

    Args:
        words (list): Dictionary of words, left unmodified.

    Returns:
        list: The remaining words in their original order.
    """
    return [word for word in words if not is_invalid_word(word)]
