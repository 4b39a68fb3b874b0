"""Zone rendering configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

# Zone fills by community index
DEFAULT_PALETTE = [
    "rgba(135,206,250,0.2)",
    "rgba(255,192,203,0.2)",
    "rgba(230,230,250,0.5)",
    "rgba(100,149,237,0.2)",
    "rgba(135,206,250,0.2)",
    "rgba(127,255,170,0.2)",
    "rgba(255,255,224,0.4)",
    "rgba(255,228,181,0.2)",
    "rgba(255,218,185,0.2)",
    "rgba(250,128,114,0.2)",
    "rgba(178,34,34,0.2)",
]


@dataclass
class ZoneStyleConfig:
    """Controls how zones are painted into an SVG document."""

    palette: list[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    # Used once the palette runs out
    fallback_fill: str = "rgba(135,206,250,0.2)"

    # Margin around the fitted viewBox, as a fraction of the larger extent
    padding_pct: float = 0.05
    # Minimum viewBox size when everything collapses to a point
    min_extent: float = 24.0

    # Node markers
    draw_nodes: bool = True
    node_radius: float = 3.0
    node_fill: str = "#333333"

    def fill_for(self, index: int) -> str:
        if 0 <= index < len(self.palette):
            return self.palette[index]
        return self.fallback_fill
