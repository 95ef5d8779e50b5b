"""Tests for sections built from annotated source files."""

from pathlib import Path

import pytest

from readmegen.exceptions import InvalidDepthError
from readmegen.generator.section import Section

SAMPLE_SOURCE = [
    "",
    "##",
    "# some md",
    "",
    "puts 'ruby'",
    "",
    "class FooBar",
    "  ##",
    "  # Some more md:",
    "  # 1. item 1",
    "  # 2. item 2",
    " ",
    "  # Genuine comment",
    "  def some_method",
    "    42",
    "  end",
    "end",
]

EXPECTED_MARKDOWN = """# title
some md

```ruby
puts 'ruby'

class FooBar
```

Some more md:
1. item 1
2. item 2

```ruby
  # Genuine comment
  def some_method
    42
  end
end
```
"""


def test_parse_markdown_in_comments_preceded_by_marker() -> None:
    """Render commentary as prose and the rest as fenced code."""

    section = Section.from_lines("title", SAMPLE_SOURCE)
    assert section.dump() == EXPECTED_MARKDOWN


def test_dump_uses_requested_depth() -> None:
    """Defer the heading level until the section is rendered."""

    section = Section.from_lines("Title", ["x = 1"])
    assert section.dump(depth=3) == "### Title\n```ruby\nx = 1\n```\n"


def test_dump_is_idempotent() -> None:
    """Render byte-identical output on repeated calls."""

    section = Section.from_lines("title", SAMPLE_SOURCE)
    assert section.dump(depth=2) == section.dump(depth=2)


def test_dump_rejects_invalid_depth() -> None:
    """Refuse headings below level one."""

    section = Section.from_lines("Title", ["x = 1"])
    with pytest.raises(InvalidDepthError):
        section.dump(depth=0)


def test_blank_file_is_empty() -> None:
    """Treat a file without renderable output as empty."""

    section = Section.from_lines("Title", ["", "", "##"])
    assert section.is_empty
    assert section.buffer == ""


def test_line_terminators_are_removed() -> None:
    """Strip terminators from raw file lines."""

    section = Section.from_lines("Title", ["a\r\n", "b\n"])
    assert section.buffer == "```ruby\na\nb\n```\n"


def test_from_path_derives_title_and_anchor(tmp_path: Path) -> None:
    """Build the title from the file name without ordering prefix."""

    source = tmp_path / "02_fake_abstract_interface.rb"
    source.write_text("##\n# Prose\n\nx = 1\n", encoding="utf-8")

    section = Section.from_path(source)

    assert section.title == "Fake abstract interface"
    assert section.anchor == "fake_abstract_interface"
    assert section.buffer == "Prose\n\n```ruby\nx = 1\n```\n"
    assert section.table_of_content_elements(1) == ""


def test_from_path_missing_file_propagates(tmp_path: Path) -> None:
    """Abort when the source file cannot be read."""

    with pytest.raises(FileNotFoundError):
        Section.from_path(tmp_path / "missing.rb")
