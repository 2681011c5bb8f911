"""Editor host interface and the command flow around each rule.

An editor host supplies the selection, the current line and the active file
name, and presents results: messages are shown to the user, replacements are
written over the current line. ``run_command`` drives one invocation the way
the editor command does.
"""

import logging
import os
from typing import List, Optional

from textrules import evaluate
from textrules.result import Message, OptionalResult, Replacement, Rule
from textrules.rewrite.rules import WRONG_FILE_MESSAGE, is_source_file

logger = logging.getLogger(__name__)


class EditorHost:
    """Capabilities a host editor provides to the text rules.

    Subclasses implement the accessors for their editor. ``get_selected_text``
    and ``get_current_line`` return None when no text document is active.
    """

    def get_selected_text(self) -> Optional[str]:
        raise NotImplementedError

    def get_current_line(self) -> Optional[str]:
        raise NotImplementedError

    def get_active_file_name(self) -> Optional[str]:
        raise NotImplementedError

    def get_active_file_extension(self) -> str:
        """Extension of the active document including the dot, or ''."""
        name = self.get_active_file_name()
        if not name:
            return ""
        return os.path.splitext(name)[1]

    def show_message(self, text: str) -> None:
        raise NotImplementedError

    def replace_selection(self, text: str) -> None:
        raise NotImplementedError


def _line_terminator(line: str) -> str:
    for ending in ("\r\n", "\n", "\r"):
        if line.endswith(ending):
            return ending
    return ""


def run_command(host: EditorHost, rule: Rule) -> OptionalResult:
    """Run one editor command: read from the host, evaluate, present the result.

    Check rules need an active text document and always end in a message.
    The statement wrap only runs in C# source files; elsewhere a guidance
    message is shown. A wrapped line keeps its original line terminator.

    Args:
        host: Editor host to read from and write to
        rule: Rule to run

    Returns:
        The result that was presented, or None if nothing happened
    """
    rule = Rule(rule)

    if rule is Rule.STATEMENT_WRAP:
        extension = host.get_active_file_extension()
        if not is_source_file(extension):
            logger.info(f"Statement wrap skipped for extension {extension!r}")
            message = Message(WRONG_FILE_MESSAGE)
            host.show_message(message.text)
            return message

        line = host.get_current_line()
        if line is None:
            return None

        result = evaluate(line, rule)
        if isinstance(result, Replacement):
            host.replace_selection(result.text + _line_terminator(line))
        return result

    selection = host.get_selected_text()
    if selection is None:
        logger.debug("No active text document")
        return None

    result = evaluate(selection, rule)
    if isinstance(result, Message):
        host.show_message(result.text)
    return result


class MemoryHost(EditorHost):
    """In-memory host holding one document's selection and current line.

    Shown messages and written replacements are recorded in ``messages`` and
    ``replacements``. A replacement also becomes the new current line.
    """

    def __init__(
        self,
        selection: Optional[str] = None,
        current_line: Optional[str] = None,
        file_name: Optional[str] = None,
    ):
        self.selection = selection
        self.current_line = current_line
        self.file_name = file_name
        self.messages: List[str] = []
        self.replacements: List[str] = []

    def get_selected_text(self) -> Optional[str]:
        return self.selection

    def get_current_line(self) -> Optional[str]:
        if self.current_line is None:
            return self.selection
        return self.current_line

    def get_active_file_name(self) -> Optional[str]:
        return self.file_name

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    def replace_selection(self, text: str) -> None:
        self.replacements.append(text)
        self.current_line = text
