"""SVG collection covers written to the public cover directory."""

from __future__ import annotations

import logging
from pathlib import Path
from xml.sax.saxutils import escape

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)

COVER_WIDTH = 400
COVER_HEIGHT = 600
MAX_NAME_LENGTH = 30
MAX_LINE_CHARS = 20
MAX_LINES = 3
LINE_HEIGHT = 60

BACKGROUND_START = "#1a1d24"
BACKGROUND_END = "#2a2d35"
TEXT_PRIMARY = "#fafafa"
DEFAULT_COLORS = ("#34C759", "#34C759")

# category -> (gradient tint, badge colour)
CATEGORY_COLORS: dict[str, tuple[str, str]] = {
    "books": ("#8B4513", "#CD853F"),
    "book": ("#8B4513", "#CD853F"),
    "comics": ("#FF6B6B", "#FF8787"),
    "comic": ("#FF6B6B", "#FF8787"),
    "movies": ("#4ECDC4", "#6EDCD4"),
    "movie": ("#4ECDC4", "#6EDCD4"),
    "films": ("#4ECDC4", "#6EDCD4"),
    "music": ("#9B59B6", "#BB8FCE"),
    "vinyl": ("#9B59B6", "#BB8FCE"),
    "games": ("#F39C12", "#F5B041"),
    "game": ("#F39C12", "#F5B041"),
    "trading cards": ("#3498DB", "#5DADE2"),
    "cards": ("#3498DB", "#5DADE2"),
    "toys": ("#E74C3C", "#EC7063"),
    "art": ("#E91E63", "#F06292"),
}

_FONT = "system-ui, -apple-system, sans-serif"


def category_colors(category: str | None) -> tuple[str, str]:
    """Exact match first, then substring match either way, else the default green."""
    if not category:
        return DEFAULT_COLORS
    lowered = category.lower()
    if lowered in CATEGORY_COLORS:
        return CATEGORY_COLORS[lowered]
    for key, colors in CATEGORY_COLORS.items():
        if key in lowered or lowered in key:
            return colors
    return DEFAULT_COLORS


def wrap_title(name: str) -> list[str]:
    """Truncate to MAX_NAME_LENGTH, wrap on words at MAX_LINE_CHARS, keep MAX_LINES."""
    if len(name) > MAX_NAME_LENGTH:
        name = name[: MAX_NAME_LENGTH - 3] + "..."
    lines: list[str] = []
    current = ""
    for word in name.split(" "):
        if len(current + word) <= MAX_LINE_CHARS:
            current = f"{current} {word}" if current else word
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    if len(lines) > MAX_LINES:
        lines = lines[:MAX_LINES]
        lines[-1] = lines[-1][:17] + "..."
    return lines


def render_svg_cover(name: str, category: str | None = None) -> str:
    """Return the SVG document for a collection cover."""
    tint, badge = category_colors(category)
    lines = wrap_title(name)
    start_y = COVER_HEIGHT / 2 - ((len(lines) - 1) * LINE_HEIGHT) / 2
    center_x = COVER_WIDTH / 2

    text_rows = "".join(
        f'\n  <text x="{center_x:g}" y="{start_y + i * LINE_HEIGHT:g}" font-family="{_FONT}" '
        f'font-size="48" font-weight="700" fill="{TEXT_PRIMARY}" text-anchor="middle" '
        f'letter-spacing="-1px" dominant-baseline="central">{escape(line)}</text>'
        for i, line in enumerate(lines)
    )
    badge_svg = ""
    if category:
        badge_y = COVER_HEIGHT * 0.75
        badge_svg = (
            f'\n  <rect x="{center_x - 60:g}" y="{badge_y:g}" width="120" height="32" rx="16" '
            f'fill="{badge}" opacity="0.25"/>'
            f'\n  <text x="{center_x:g}" y="{badge_y + 16:g}" font-family="{_FONT}" font-size="14" '
            f'font-weight="600" fill="{badge}" text-anchor="middle" '
            f'dominant-baseline="central">{escape(category)}</text>'
        )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg width="{COVER_WIDTH}" height="{COVER_HEIGHT}" '
        f'viewBox="0 0 {COVER_WIDTH} {COVER_HEIGHT}" xmlns="http://www.w3.org/2000/svg">\n'
        "  <defs>\n"
        f'    <linearGradient id="bg-gradient" x1="0" y1="0" x2="{COVER_WIDTH}" y2="{COVER_HEIGHT}">\n'
        f'      <stop offset="0%" style="stop-color:{BACKGROUND_START};stop-opacity:1" />\n'
        f'      <stop offset="50%" style="stop-color:{tint};stop-opacity:0.15" />\n'
        f'      <stop offset="100%" style="stop-color:{BACKGROUND_END};stop-opacity:1" />\n'
        "    </linearGradient>\n"
        "  </defs>\n"
        f'  <rect width="{COVER_WIDTH}" height="{COVER_HEIGHT}" fill="url(#bg-gradient)"/>'
        f"{text_rows}{badge_svg}\n"
        "</svg>\n"
    )


class SvgCoverGenerator:
    """Writes cover-{collection_id}.svg under output_dir; returns public_prefix/filename."""

    def __init__(self, output_dir: str, public_prefix: str) -> None:
        self.output_dir = Path(output_dir)
        self.public_prefix = public_prefix.rstrip("/")

    async def generate(self, collection_id: str, name: str, category: str | None) -> str:
        filename = f"cover-{collection_id}.svg"
        await aiofiles.os.makedirs(self.output_dir, exist_ok=True)
        async with aiofiles.open(self.output_dir / filename, "w", encoding="utf-8") as f:
            await f.write(render_svg_cover(name, category))
        logger.debug("Wrote cover %s", filename)
        return f"{self.public_prefix}/{filename}"
