"""Section rendered from a single annotated source file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from attrs import define, field

from .parser import Parser
from .settings import DEFAULT_SETTINGS, Settings
from .titles import anchor_from, make_heading, section_title_from

logger = logging.getLogger(__name__)


@define(slots=True, frozen=True)
class Section:
    """Titled unit holding the Markdown rendered from one source file.

    Attributes:
        title: Heading text derived from the file name.
        buffer: Rendered body, computed once when the section is built.
        settings: Formatting policy used for the heading.
    """

    title: str
    buffer: str = field(repr=False)
    settings: Settings = field(default=DEFAULT_SETTINGS, repr=False)

    @classmethod
    def from_lines(
        cls,
        title: str,
        lines: Iterable[str],
        settings: Settings = DEFAULT_SETTINGS,
    ) -> Section:
        """Build a section by classifying every line of a file.

        Args:
            title: Heading text of the section.
            lines: Source lines in file order; terminators are removed.
            settings: Formatting policy.

        Returns:
            The fully rendered section.
        """

        parser = Parser(settings)
        buffer = parser.parse_lines(line.rstrip("\r\n") for line in lines)
        return cls(title=title, buffer=buffer, settings=settings)

    @classmethod
    def from_path(
        cls, path: Path, settings: Settings = DEFAULT_SETTINGS
    ) -> Section:
        """Build a section from the source file at ``path``."""

        title = section_title_from(path, settings.source_suffix)
        logger.debug(f"Parsing section {title!r} from {path}")
        with path.open(encoding="utf-8") as fd:
            return cls.from_lines(title, fd, settings)

    @property
    def anchor(self) -> str:
        return anchor_from(self.title)

    @property
    def is_empty(self) -> bool:
        """Whether the file produced no Markdown at all."""

        return not self.buffer

    def table_of_content_elements(self, depth: int) -> str:
        return ""

    def dump(self, depth: int = 1, toc: bool = False) -> str:
        """Render the heading at ``depth`` followed by the body.

        Args:
            depth: Heading level of the section.
            toc: Accepted for symmetry with chapters; sections have no
                table of contents.

        Returns:
            The rendered section.
        """

        return make_heading(self.title, depth, self.settings) + self.buffer
