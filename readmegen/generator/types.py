"""Common type aliases for generator structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .block import CodeBlock, VerbatimBlock  # noqa: F401
    from .chapter import Chapter  # noqa: F401
    from .section import Section  # noqa: F401


Block = Union["CodeBlock", "VerbatimBlock"]
DocumentNode = Union["Section", "Chapter"]
NodeList = list[DocumentNode]
LineList = list[str]
