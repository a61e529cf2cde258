import importlib
from functools import lru_cache
from pathlib import Path
from types import ModuleType
from typing import List, Union, Optional, Iterable

import yaml
from pydantic import BaseModel

from patterns.renderer.core import Renderer
from patterns.renderer.square_renderer import SquareRenderer
from patterns.renderer.triangle_renderer import TriangleRenderer

CONFIG_PATH: Path = Path(__file__).with_name("patterns.yaml")


class Config(BaseModel):
    reference_module: str
    renderers: List[Union[TriangleRenderer, SquareRenderer]]

    @property
    def reference_module_object(self) -> ModuleType:
        return importlib.import_module(self.reference_module)

    def get_renderer(self, name: str) -> Optional[Renderer]:
        for renderer in self.renderers:
            if renderer.name == name:
                return renderer
        return None

    def get_renderers(self, names: Optional[Iterable[str]] = None) -> List[Renderer]:
        if not names:
            return list(self.renderers)

        renderers: List[Renderer] = []
        for name in names:
            renderer = self.get_renderer(name)
            if renderer is None:
                raise KeyError(f"Pattern '{name}' is not configured")
            renderers.append(renderer)
        return renderers


def load_config(file_path) -> Config:
    with open(file_path, "r") as file:
        config_data = yaml.safe_load(file)
    return Config.model_validate(config_data)


PATTERN_CONFIG: Config = load_config(CONFIG_PATH)


@lru_cache
def get_config() -> Config:
    pattern_config: Config = PATTERN_CONFIG
    return pattern_config
