"""Pure helpers deriving titles, anchors and headings from names."""

from __future__ import annotations

import re
from pathlib import Path

from readmegen.exceptions import InvalidDepthError

from .settings import DEFAULT_SETTINGS, Settings

# Ordering prefix such as "01 " left once underscores became spaces.
_ORDER_PREFIX_RE = re.compile(r"^[0-9]* *")


def title_from(name: str) -> str:
    """Return a human readable title for a file or directory name.

    Args:
        name: Base name without any source suffix, e.g. ``01_first_steps``.

    Returns:
        The title, e.g. ``First steps``.
    """

    spaced = name.replace("_", " ")
    return _ORDER_PREFIX_RE.sub("", spaced, count=1).capitalize()


def section_title_from(path: Path, suffix: str) -> str:
    """Return the title of the section built from the file at ``path``."""

    name = path.name
    if suffix and name.endswith(suffix):
        name = name[: -len(suffix)]
    return title_from(name)


def chapter_title_from(path: Path) -> str:
    """Return the title of the chapter built from the directory at ``path``."""

    return title_from(path.name)


def anchor_from(title: str) -> str:
    """Return the in-document anchor linking to a heading titled ``title``."""

    return title.replace(" ", "_").lower()


def make_heading(
    title: str, depth: int, settings: Settings = DEFAULT_SETTINGS
) -> str:
    """Render an ATX heading line.

    Args:
        title: Heading text.
        depth: Heading level, starting at one.
        settings: Formatting policy providing the line terminator.

    Returns:
        The heading followed by a line terminator.

    Throws:
        InvalidDepthError: If ``depth`` is lower than one.
    """

    if depth < 1:
        raise InvalidDepthError(f"Invalid depth {depth}")
    return "#" * depth + " " + title + settings.end_of_line
