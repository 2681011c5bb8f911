"""Alphanumeric classification of a selection."""

import re

from textrules.result import Message

PROMPT_MESSAGE = "You are using the alphanumeric check. Select some text first"
IS_ALNUM = "is alphanumeric"
IS_NOT_ALNUM = "is not alphanumeric"

ALNUM_PATTERN = re.compile(r"[0-9a-zA-Z]+")


def is_alphanumeric(text: str) -> bool:
    """Return True if every character of text is an ASCII digit or letter."""
    # fullmatch, so a trailing newline counts as a non-alphanumeric character
    return ALNUM_PATTERN.fullmatch(text) is not None


def classify_alnum(selection: str) -> Message:
    """Report whether the whole selection is purely alphanumeric.

    The selection is tested as-is, surrounding whitespace included.

    Args:
        selection: Selected text

    Returns:
        Message with the prompt or the classification verdict
    """
    if not selection or not selection.strip():
        return Message(PROMPT_MESSAGE)

    if is_alphanumeric(selection):
        return Message(IS_ALNUM)
    return Message(IS_NOT_ALNUM)
