"""Drive the line classifier over the lines of a single file."""

from __future__ import annotations

from typing import Iterable

from .block import CodeBlock
from .settings import DEFAULT_SETTINGS, Settings
from .types import Block


class Parser:
    """Feed lines one by one through the current classifier state.

    Attributes:
        block: State that will receive the next line.
    """

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self.block: Block = CodeBlock(settings)

    def parse_line(self, line: str) -> str:
        """Render one line, already stripped of its terminator.

        Args:
            line: Source line to classify.

        Returns:
            Text emitted for the line, possibly empty.
        """

        emitted, self.block = self.block.convert(line)
        return emitted

    def close(self) -> str:
        """Terminate the current region after the last line."""

        return self.block.close()

    def parse_lines(self, lines: Iterable[str]) -> str:
        """Render all ``lines`` and close the last region.

        Args:
            lines: Source lines in file order, without terminators.

        Returns:
            The complete rendered buffer.
        """

        chunks = [self.parse_line(line) for line in lines]
        chunks.append(self.close())
        return "".join(chunks)
