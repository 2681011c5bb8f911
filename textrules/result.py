"""Rule identifiers and result types shared by every text rule."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class Rule(str, Enum):
    """Closed set of rules a selection can be evaluated against."""

    REGEX_CHECK = "regex"
    ALNUM_CHECK = "alnum"
    STATEMENT_WRAP = "wrap"


@dataclass(frozen=True)
class Message:
    """Informational text to surface to the user."""

    text: str
    kind: str = "message"

    def to_dict(self) -> Dict[str, str]:
        """Convert message to dictionary."""
        return {"kind": self.kind, "text": self.text}


@dataclass(frozen=True)
class Replacement:
    """New text that should replace the selection."""

    text: str
    kind: str = "replacement"

    def to_dict(self) -> Dict[str, str]:
        """Convert replacement to dictionary."""
        return {"kind": self.kind, "text": self.text}


RuleResult = Union[Message, Replacement]

# Evaluation returns None when a rule decides to leave the selection alone.
OptionalResult = Optional[RuleResult]
