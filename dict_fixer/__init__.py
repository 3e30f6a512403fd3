"""
Dictionary Fixer: strips words containing an apostrophe from a newline delimited word list.
"""

__version__ = "0.1.0"
