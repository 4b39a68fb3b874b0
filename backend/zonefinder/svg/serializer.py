"""Write SVG markup from element definitions."""

from __future__ import annotations

from html import escape
from typing import Any


def serialize_svg(
    elements: list[dict[str, Any]],
    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 24.0, 24.0),
    title: str = "",
    description: str = "",
) -> str:
    """Generate SVG markup; each element is a dict of attributes plus an optional ``tag``."""
    vb = " ".join(format_number(v) for v in viewbox)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{vb}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{escape(str(v))}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def format_number(value: float) -> str:
    """Compact number formatting: 12.0 -> '12', 1.23456 -> '1.23'."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
