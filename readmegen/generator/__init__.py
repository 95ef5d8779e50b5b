"""Turn a directory of annotated sources into a single Markdown guide."""

from __future__ import annotations

from pathlib import Path

from .chapter import Chapter
from .settings import DEFAULT_SETTINGS, Settings


def generate(
    source_dir: Path,
    title: str,
    settings: Settings = DEFAULT_SETTINGS,
    toc: bool = True,
) -> str:
    """Build the chapter tree rooted at ``source_dir`` and render it.

    Args:
        source_dir: Root directory of the annotated sources.
        title: Title of the generated guide.
        settings: Formatting and discovery policy.
        toc: Include the consolidated table of contents.

    Returns:
        The complete Markdown document.
    """

    root = Chapter.from_directory(
        Path(source_dir), title=title, settings=settings
    )
    return root.dump(depth=1, toc=toc)
