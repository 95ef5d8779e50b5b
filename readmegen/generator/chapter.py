"""Chapter composed from a directory of sections and nested chapters."""

from __future__ import annotations

import logging
from pathlib import Path

from attrs import define, field

from readmegen.exceptions import SourceDirectoryError

from .section import Section
from .settings import DEFAULT_SETTINGS, Settings
from .titles import anchor_from, chapter_title_from, make_heading
from .types import NodeList

logger = logging.getLogger(__name__)


@define(slots=True, frozen=True)
class Chapter:
    """Chapter composed from a directory of sections and nested chapters.

    Attributes:
        title: Heading text, derived from the directory name unless given.
        sections: Non empty children in directory order.
        intro: Raw introduction text inserted before the table of contents.
        settings: Formatting policy used while rendering.
    """

    title: str
    sections: NodeList = field(factory=list, repr=False)
    intro: str | None = field(default=None, repr=False)
    settings: Settings = field(default=DEFAULT_SETTINGS, repr=False)

    @classmethod
    def from_directory(
        cls,
        path: Path,
        title: str | None = None,
        settings: Settings = DEFAULT_SETTINGS,
    ) -> Chapter:
        """Scan ``path`` recursively and build the chapter tree.

        Args:
            path: Directory holding source files and sub-directories.
            title: Explicit title; defaults to one derived from ``path``.
            settings: Formatting and discovery policy.

        Returns:
            The chapter with every empty child already discarded.

        Throws:
            SourceDirectoryError: If ``path`` is not a directory.
        """

        path = Path(path)
        if not path.is_dir():
            raise SourceDirectoryError(f"{path} must be a directory")

        if title is None:
            title = chapter_title_from(path)

        logger.debug(f"Scanning chapter {title!r} in {path}")

        sections: NodeList = []
        intro: str | None = None
        for subpath in sorted(path.iterdir()):
            # Hidden entries are never part of the guide.
            if subpath.name.startswith("."):
                continue

            if subpath.is_dir():
                sub_chapter = cls.from_directory(subpath, settings=settings)
                if not sub_chapter.is_empty:
                    sections.append(sub_chapter)
            elif subpath.name.endswith(settings.source_suffix):
                section = Section.from_path(subpath, settings)
                if not section.is_empty:
                    sections.append(section)
            elif subpath.name == settings.intro_name:
                intro = subpath.read_text(encoding="utf-8")
            else:
                logger.warning(f"Ignoring file {subpath}")

        return cls(
            title=title, sections=sections, intro=intro, settings=settings
        )

    @property
    def anchor(self) -> str:
        return anchor_from(self.title)

    @property
    def is_empty(self) -> bool:
        """Whether no child contributes content."""

        return all(section.is_empty for section in self.sections)

    def table_of_content(self, depth: int) -> str:
        """Render the table of contents with its heading at ``depth``."""

        eol = self.settings.end_of_line
        result = make_heading(self.settings.toc_title, depth, self.settings)
        result += eol
        result += self.table_of_content_elements(depth)
        result += eol
        return result

    def table_of_content_elements(self, depth: int) -> str:
        """Render one list entry per descendant in pre-order.

        Args:
            depth: Nesting level of the direct children; each level below
                the first is indented by two spaces.

        Returns:
            The list entries, children immediately after their parent.
        """

        eol = self.settings.end_of_line
        prefix = "  " * (depth - 1)
        result = ""
        for section in self.sections:
            result += f"{prefix}1. [{section.title}](#{section.anchor}){eol}"
            result += section.table_of_content_elements(depth + 1)
        return result

    def dump(self, depth: int = 1, toc: bool = True) -> str:
        """Render the chapter and all of its descendants.

        Args:
            depth: Heading level of the chapter title.
            toc: Include the table of contents after the introduction.

        Returns:
            The rendered Markdown.
        """

        eol = self.settings.end_of_line
        result = make_heading(self.title, depth, self.settings)
        result += eol
        if self.intro is not None:
            result += self.intro
        if toc:
            result += self.table_of_content(depth)
        for section in self.sections:
            result += section.dump(depth=depth + 1, toc=False)
            result += eol
        return result
