"""Textrules: regex-based checks and rewrites for editor selections."""

from typing import Union

from textrules.result import Message, OptionalResult, Replacement, Rule, RuleResult
from textrules.rewrite.rules import StatementShape, classify_statement, wrap_statement
from textrules.text.classify import classify_alnum
from textrules.text.judge import judge_regex

__version__ = "0.1.0"

__all__ = [
    "Message",
    "Replacement",
    "Rule",
    "RuleResult",
    "StatementShape",
    "classify_statement",
    "evaluate",
]


def evaluate(selection: str, rule: Union[Rule, str]) -> OptionalResult:
    """Canonical entry point for evaluating a rule against a selection.

    Dispatches to one of the three rules:
    1. Regex check: judges ``inputStr @Regex pattern`` and returns a Message
    2. Alnum check: classifies the selection and returns a Message
    3. Statement wrap: treats the selection as the current line and returns a
       Replacement, or None when the line is blank or has no known shape

    Evaluation is pure; the caller is responsible for showing the message or
    writing the replacement back into the editor.

    Args:
        selection: Selected text (the full current line for statement wrap)
        rule: Rule member or its string value ("regex", "alnum", "wrap")

    Returns:
        Message, Replacement, or None for a silent no-op

    Raises:
        ValueError: If rule is not a known rule name
    """
    rule = Rule(rule)

    if rule is Rule.REGEX_CHECK:
        return judge_regex(selection)
    if rule is Rule.ALNUM_CHECK:
        return classify_alnum(selection)
    return wrap_statement(selection)
