"""States of the line classifier turning source lines into Markdown.

A file starts in a closed :class:`CodeBlock`. A line holding only ``##``
switches to a :class:`VerbatimBlock` whose lines are unwrapped from their
comment marker; the first blank line switches back to code. Code fences are
opened lazily, on the first non blank line, and closed as soon as the region
ends.
"""

from __future__ import annotations

import re

from attrs import define

from .settings import Settings
from .types import Block

# Line consisting only of the region switch marker.
_MARKER_RE = re.compile(r"[ \t]*##")

# Comment marker and at most one space following it.
_COMMENT_PREFIX_RE = re.compile(r"^\s*# ?")

CODE_FENCE = "```"


@define(slots=True, frozen=True)
class CodeBlock:
    """Region of source code rendered inside a fenced block.

    Attributes:
        settings: Formatting policy for terminators and the fence language.
        open: Whether the opening fence was already emitted.
    """

    settings: Settings
    open: bool = False

    def convert(self, line: str) -> tuple[str, Block]:
        """Render ``line`` and return the text with the next state."""

        eol = self.settings.end_of_line

        # Leading blank lines never open a fence.
        if not self.open and not line:
            return "", self

        if _MARKER_RE.fullmatch(line):
            return self.close(double_terminal=True), VerbatimBlock(
                self.settings
            )

        result = ""
        if not self.open:
            result += CODE_FENCE + self.settings.code_language + eol
        result += line + eol
        return result, CodeBlock(self.settings, open=True)

    def close(self, double_terminal: bool = False) -> str:
        """Return the closing fence if one is pending.

        Args:
            double_terminal: Append a blank line after the fence.

        Returns:
            The closing fence, or an empty string when nothing is open.
        """

        if not self.open:
            return ""

        terminal = self.settings.end_of_line
        if double_terminal:
            terminal += self.settings.end_of_line
        return CODE_FENCE + terminal


@define(slots=True, frozen=True)
class VerbatimBlock:
    """Region of commentary emitted as plain Markdown prose."""

    settings: Settings

    def convert(self, line: str) -> tuple[str, Block]:
        eol = self.settings.end_of_line
        if not line.strip():
            return eol, CodeBlock(self.settings)
        return _COMMENT_PREFIX_RE.sub("", line, count=1) + eol, self

    def close(self) -> str:
        return ""
