from typing import Literal

from patterns.renderer.core import Renderer, TSize
from patterns.square import render_regions


class SquareRenderer(Renderer):
    """
    Concentric square printed from the two-region diagonal formula.
    """

    kind: Literal["square"] = "square"
    # Only show the region map for smaller sizes to avoid clutter
    region_preview_limit: int = 7

    @property
    def name(self) -> str:
        return self.kind

    def generate_preamble(self, size: TSize) -> str:
        if size > self.region_preview_limit:
            return ""
        return render_regions(size)
