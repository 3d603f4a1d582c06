"""SVG cover rendering and file output."""

from colletro.infrastructure.external.covers import SvgCoverGenerator, render_svg_cover
from colletro.infrastructure.external.covers.svg_cover import (
    DEFAULT_COLORS,
    category_colors,
    wrap_title,
)


def test_category_colors_match_exact_then_substring() -> None:
    assert category_colors("Comics") == ("#FF6B6B", "#FF8787")
    assert category_colors("Vintage Comics") == ("#FF6B6B", "#FF8787")
    assert category_colors("Stamps") == DEFAULT_COLORS
    assert category_colors(None) == DEFAULT_COLORS


def test_wrap_title_wraps_on_words() -> None:
    assert wrap_title("Harry Potter Books") == ["Harry Potter Books"]
    assert wrap_title("The Complete Marvel Masterworks") == ["The Complete Marvel", "Masterw..."]


def test_render_escapes_markup_and_adds_badge() -> None:
    svg = render_svg_cover("Tom & Jerry <DVD>", "Movies")
    assert svg.startswith('<?xml version="1.0"')
    assert "Tom &amp; Jerry &lt;DVD&gt;" in svg
    assert ">Movies</text>" in svg
    assert "#4ECDC4" in svg


def test_render_without_category_has_no_badge() -> None:
    assert "<rect x=" not in render_svg_cover("Stamps")


async def test_generator_writes_file_and_returns_public_path(tmp_path) -> None:
    generator = SvgCoverGenerator(str(tmp_path / "covers"), "/collection-covers/")

    path = await generator.generate("col1", "Coins", "Coins")

    assert path == "/collection-covers/cover-col1.svg"
    written = (tmp_path / "covers" / "cover-col1.svg").read_text(encoding="utf-8")
    assert ">Coins</text>" in written
