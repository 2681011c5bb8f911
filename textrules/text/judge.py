"""Regex match judge for selections written as ``inputStr @Regex pattern``.

The selection carries both the subject text and the pattern, separated by the
``@Regex`` marker. The judge reports whether the pattern finds a match in the
subject, or why the selection could not be judged.
"""

import logging
import re
from typing import List

from textrules.result import Message

logger = logging.getLogger(__name__)

REGEX_MARKER = "@Regex"

PROMPT_MESSAGE = (
    "You are using the regex match check. Select some text first, in the format:\n"
    " inputStr @Regex pattern"
)
FORMAT_ERROR = "format error"
MATCH_SUCCEEDED = "match succeeded"
MATCH_FAILED = "match failed"
INVALID_PATTERN = "invalid pattern"

# Non-empty content on both sides of the marker
_SHAPE_PATTERN = re.compile(r"^.+" + re.escape(REGEX_MARKER) + r".+$")


def split_on_marker(text: str) -> List[str]:
    """Split text on the ``@Regex`` marker, dropping empty pieces.

    Whitespace-only pieces are kept, so ``"a @Regex @Regex b"`` yields three
    parts and is rejected by the caller.

    Args:
        text: Trimmed selection text

    Returns:
        List of non-empty pieces in their original order
    """
    return [part for part in text.split(REGEX_MARKER) if part]


def judge_regex(selection: str) -> Message:
    """Check whether the input half of the selection matches its pattern half.

    The search is unanchored: ``123qwe @Regex [0-9]+`` succeeds because
    ``[0-9]+`` is found inside ``123qwe``. Anchors in the pattern itself
    still apply.

    Args:
        selection: Selected text, expected as ``inputStr @Regex pattern``

    Returns:
        Message with the prompt, format error, invalid pattern, or match verdict
    """
    if not selection or not selection.strip():
        return Message(PROMPT_MESSAGE)

    text = selection.strip()
    if not _SHAPE_PATTERN.search(text):
        logger.debug(f"Selection has no {REGEX_MARKER} marker with content on both sides")
        return Message(FORMAT_ERROR)

    parts = split_on_marker(text)
    if len(parts) != 2:
        logger.debug(f"Selection split into {len(parts)} parts, expected 2")
        return Message(FORMAT_ERROR)

    subject = parts[0].strip()
    pattern = parts[1].strip()

    try:
        compiled = re.compile(pattern)
    except re.error as e:
        logger.warning(f"Invalid pattern {pattern!r}: {e}")
        return Message(INVALID_PATTERN)

    if compiled.search(subject):
        return Message(MATCH_SUCCEEDED)
    return Message(MATCH_FAILED)
