"""Generate the triangle visualization SVG from a computed layout."""

from __future__ import annotations

from typing import Any

from trilemma.engine.layout import Layout
from trilemma.svg.serializer import serialize_svg

_STYLES = {
    "svg": "background: #0f172a; font-family: sans-serif",
    ".glyph": "font-size: 36px; font-weight: 900; fill: white",
    ".caption": "font-size: 14px; fill: rgba(255, 255, 255, 0.8); letter-spacing: 0.1em",
    ".pair": "font-size: 14px; font-weight: 700; fill: white",
    ".utopia": "font-size: 18px; font-weight: 700; fill: white",
    ".impossible": "font-size: 12px; font-family: monospace; fill: #f87171; opacity: 0.8",
}

# Caption sits below the glyph
_CAPTION_OFFSET = 40


def _fmt(v: float) -> str:
    return str(round(v, 2))


def _text(x: float, y: float, text: str, css_class: str) -> dict[str, Any]:
    return {
        "tag": "text",
        "x": _fmt(x),
        "y": _fmt(y),
        "dy": "0.35em",
        "text-anchor": "middle",
        "class": css_class,
        "text": text,
    }


def layout_to_svg_dicts(layout: Layout) -> list[dict[str, Any]]:
    """Circles first, then pairwise labels, then the centre marker (paint order)."""
    elements: list[dict[str, Any]] = []

    for circle in layout.circles:
        cx, cy = circle.center
        elements.append({
            "tag": "g",
            "id": circle.identity.value,
            "children": [
                {
                    "tag": "circle",
                    "cx": _fmt(cx),
                    "cy": _fmt(cy),
                    "r": _fmt(circle.radius),
                    "fill": circle.color,
                    "stroke": "white",
                    "stroke-width": "2",
                    "stroke-opacity": "0.3",
                    "style": "mix-blend-mode: screen",
                },
                _text(cx, cy, circle.label, "glyph"),
                _text(cx, cy + _CAPTION_OFFSET, circle.caption.upper(), "caption"),
            ],
        })

    for label in layout.pairwise_labels:
        x, y = label.position
        elements.append(_text(x, y, label.text, "pair"))

    cx, cy = layout.centroid
    if layout.has_common_overlap:
        marker = _text(cx, cy, "Utopia", "utopia")
        dot_fill = "white"
    else:
        marker = _text(cx, cy, "IMPOSSIBLE", "impossible")
        dot_fill = "red"
    elements.append({
        "tag": "g",
        "id": "center",
        "children": [
            marker,
            {
                "tag": "circle",
                "cx": _fmt(cx),
                "cy": _fmt(cy),
                "r": "3",
                "fill": dot_fill,
                "opacity": "0.5",
            },
        ],
    })

    return elements


def render_layout_svg(
    layout: Layout,
    canvas_w: float = 800.0,
    canvas_h: float = 600.0,
) -> str:
    """Full pipeline: layout → SVG string."""
    status = "center overlap" if layout.has_common_overlap else "center void"
    return serialize_svg(
        layout_to_svg_dicts(layout),
        canvas_w,
        canvas_h,
        title="The Impossible Triangle",
        description=(
            f"Speed, Quality and Cost circles, radius {layout.params.radius:g}, "
            f"separation {layout.params.separation:g}: {status}"
        ),
        styles=_STYLES,
    )
