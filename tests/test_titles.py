"""Tests for title and anchor helpers."""

from pathlib import Path

import pytest

from readmegen.exceptions import InvalidDepthError
from readmegen.generator import titles


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("01_securing_parameters", "Securing parameters"),
        ("04_constants_are_lovely", "Constants are lovely"),
        ("design_tips", "Design tips"),
        ("10_API_Usage", "Api usage"),
        ("2019", ""),
    ],
)
def test_title_from(name: str, expected: str) -> None:
    """Strip the ordering prefix, replace underscores and capitalize."""

    assert titles.title_from(name) == expected


def test_section_title_strips_suffix() -> None:
    """Drop the source suffix from file names only."""

    path = Path("src/01_make_it_easy_to_test.rb")
    assert titles.section_title_from(path, ".rb") == "Make it easy to test"
    assert titles.chapter_title_from(Path("src/02_design_tips")) == (
        "Design tips"
    )


def test_anchor_from() -> None:
    """Lowercase the title and join words with underscores."""

    assert titles.anchor_from("Make it Easy") == "make_it_easy"


def test_make_heading() -> None:
    """Repeat the hash once per depth level."""

    assert titles.make_heading("Title", 2) == "## Title\n"
    with pytest.raises(InvalidDepthError):
        titles.make_heading("Title", 0)
