"""Statement-wrap rewrite rule for single-statement lines of C# code.

A line holding one call or construction statement is prefixed with a local
variable binding so the returned value can be inspected, e.g.
``obj.Method();`` becomes ``var aaa = obj.Method();``. Lines are classified
against shape patterns in a fixed priority order and the first match wins.
"""

import logging
import re
from enum import Enum
from typing import List, Optional, Tuple

from textrules.result import Replacement

logger = logging.getLogger(__name__)

BINDING_NAME = "aaa"
BINDING_PREFIX = f"var {BINDING_NAME} = "

SOURCE_EXTENSION = ".cs"
WRONG_FILE_MESSAGE = f"Use variable completion in a {SOURCE_EXTENSION} file"


class StatementShape(str, Enum):
    """Statement shapes recognised by the rewrite, in priority order."""

    CHAINED_CALL = "chained_call"
    MEMBER_CALL = "member_call"
    BARE_CALL = "bare_call"
    CONSTRUCTION = "construction"


# Order matters: a chained construction is checked before a plain member call.
SHAPE_PATTERNS: List[Tuple[StatementShape, "re.Pattern[str]"]] = [
    # new Class().Method();
    (
        StatementShape.CHAINED_CALL,
        re.compile(r"^\s*new\s+\w+\s*\(\s*.*\s*\)\s*\.\s*\w+\s*\(\s*.*\s*\)\s*;\s*$"),
    ),
    # obj.Method(); or StaticClass.Method();
    (
        StatementShape.MEMBER_CALL,
        re.compile(r"^\s*\w+\s*\.\s*\w+\s*\(\s*.*\s*\)\s*;\s*$"),
    ),
    # Method();
    (
        StatementShape.BARE_CALL,
        re.compile(r"^\s*\w+\s*\(\s*.*\s*\)\s*;\s*$"),
    ),
    # new Class();
    (
        StatementShape.CONSTRUCTION,
        re.compile(r"^\s*new\s*\w+\s*\(\s*.*\s*\)\s*;\s*$"),
    ),
]


def classify_statement(line: str) -> Optional[StatementShape]:
    """Return the first statement shape the line matches, or None.

    Args:
        line: Full text of the current line

    Returns:
        Matching StatementShape, or None for blank or unrecognised lines
    """
    if not line or not line.strip():
        return None

    for shape, pattern in SHAPE_PATTERNS:
        if pattern.search(line):
            return shape
    return None


def wrap_statement(line: str) -> Optional[Replacement]:
    """Prefix a single call or construction statement with a variable binding.

    Blank lines and lines matching no shape are left alone. Wrapping is
    idempotent: the bound line no longer matches any shape.

    Args:
        line: Full text of the current line

    Returns:
        Replacement holding the bound statement, or None for a no-op
    """
    shape = classify_statement(line)
    if shape is None:
        logger.debug(f"No statement shape matched: {line.strip()!r}")
        return None

    logger.debug(f"Line matched {shape.value}")
    return Replacement(BINDING_PREFIX + line.strip())


def is_source_file(file_name: Optional[str]) -> bool:
    """Return True if file_name has the extension the rewrite is limited to."""
    if not file_name:
        return False
    return file_name.lower().endswith(SOURCE_EXTENSION)
