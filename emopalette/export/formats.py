"""
Text exports for a finished palette: CSS variables, SCSS variables, JSON map, hex list, SVG strip.
"""
import json
from typing import Callable

from ..color.schema import Color


def to_css(colors: list[Color]) -> str:
    lines = "\n".join(f"  --color-{i + 1}: {c.hex};" for i, c in enumerate(colors))
    return f":root {{\n{lines}\n}}"


def to_scss(colors: list[Color]) -> str:
    return "\n".join(f"$color-{i + 1}: {c.hex};" for i, c in enumerate(colors))


def to_json(colors: list[Color]) -> str:
    return json.dumps({f"color-{i + 1}": c.hex for i, c in enumerate(colors)}, indent=2)


def to_hex_list(colors: list[Color]) -> str:
    return ", ".join(c.hex for c in colors)


def to_svg(colors: list[Color], width: int = 500, height: int = 100) -> str:
    """Swatch strip with each hex code labelled under its swatch."""
    if not colors:
        return f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"></svg>'
    w = width / len(colors)
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height + 30}" '
        f'viewBox="0 0 {width} {height + 30}">'
    ]
    for i, c in enumerate(colors):
        parts.append(f'  <rect x="{i * w:g}" y="0" width="{w:g}" height="{height}" fill="{c.hex}" />')
        parts.append(
            f'  <text x="{i * w + w / 2:g}" y="{height + 20}" font-family="Arial" font-size="12" '
            f'text-anchor="middle">{c.hex}</text>'
        )
    parts.append("</svg>")
    return "\n".join(parts)


EXPORT_FORMATS: dict[str, Callable[[list[Color]], str]] = {
    "css": to_css,
    "scss": to_scss,
    "json": to_json,
    "hex": to_hex_list,
    "svg": to_svg,
}


def export_palette(colors: list[Color], fmt: str = "css") -> str:
    """Serialize colors in one of EXPORT_FORMATS."""
    fn = EXPORT_FORMATS.get(fmt)
    if fn is None:
        raise ValueError(f"Unknown export format {fmt!r}; expected one of {sorted(EXPORT_FORMATS)}")
    return fn(list(colors))
