"""Cover image rendering."""

from colletro.infrastructure.external.covers.svg_cover import (
    SvgCoverGenerator,
    render_svg_cover,
)

__all__ = ["SvgCoverGenerator", "render_svg_cover"]
