from typing import Literal

from patterns.renderer.core import Renderer, TSize


class TriangleRenderer(Renderer):
    """
    Right triangle printed from a single linear counter.
    """

    kind: Literal["triangle"] = "triangle"

    @property
    def name(self) -> str:
        return self.kind

    def generate_preamble(self, size: TSize) -> str:
        return ""
