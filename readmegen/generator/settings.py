"""Formatting and discovery policy shared by blocks and nodes."""

from __future__ import annotations

from attrs import define


@define(slots=True, frozen=True)
class Settings:
    """Formatting and discovery policy shared by blocks and nodes.

    Attributes:
        end_of_line: Terminator appended to every emitted line.
        code_language: Language tag placed after the opening code fence.
        source_suffix: File name suffix of the files turned into sections.
        intro_name: Exact file name of a chapter introduction.
        toc_title: Heading shown above the table of contents.
    """

    end_of_line: str = "\n"
    code_language: str = "ruby"
    source_suffix: str = ".rb"
    intro_name: str = "intro.md"
    toc_title: str = "Table of content"


DEFAULT_SETTINGS = Settings()
