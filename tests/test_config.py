"""
Tests for the YAML pattern configuration.
"""

import pytest
import yaml

from patterns.exceptions import RendererAccessException
from patterns.renderer.config import Config, get_config, load_config
from patterns.renderer.core import SizeArgument
from patterns.renderer.square_renderer import SquareRenderer
from patterns.renderer.triangle_renderer import TriangleRenderer
from patterns.square import print_concentric_square
from patterns.triangle import print_triangle


def _renderer_data(**overrides) -> dict:
    data = {
        "kind": "triangle",
        "module": "patterns.triangle",
        "function_name": "print_triangle",
        "reference_name": "triangle",
        "title": "Triangle",
        "description": "A triangle.",
        "max_time": 100,
        "example_sizes": [2],
        "size": {"default": "1", "increment": "lambda x: x + 1", "limit": 3},
    }
    data.update(overrides)
    return data


class TestPackagedConfig:
    def test_renderer_kinds(self):
        config = get_config()

        assert config.reference_module == "references.nested"
        assert isinstance(config.get_renderer("triangle"), TriangleRenderer)
        assert isinstance(config.get_renderer("square"), SquareRenderer)

    def test_functions_resolve(self):
        config = get_config()

        assert config.get_renderer("triangle").function is print_triangle
        assert config.get_renderer("square").function is print_concentric_square

    def test_region_preview_limit(self):
        assert get_config().get_renderer("square").region_preview_limit == 7

    def test_pattern_label(self):
        config = get_config()

        assert config.get_renderer("square").pattern_label == "Concentric square pattern:"
        assert config.get_renderer("triangle").pattern_label is None

    def test_get_renderers_in_requested_order(self):
        names = [r.name for r in get_config().get_renderers(["square", "triangle"])]
        assert names == ["square", "triangle"]

    def test_get_renderers_defaults_to_all(self):
        assert len(get_config().get_renderers()) == 2

    def test_unknown_renderer(self):
        assert get_config().get_renderer("hexagon") is None
        with pytest.raises(KeyError):
            get_config().get_renderers(["hexagon"])


class TestLoadConfig:
    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "patterns.yaml"
        config_file.write_text(
            yaml.safe_dump(
                {"reference_module": "references.nested", "renderers": [_renderer_data()]}
            )
        )

        config = load_config(config_file)

        assert isinstance(config, Config)
        assert list(config.renderers[0].sizes()) == [1, 2, 3]

    def test_default_above_limit_is_rejected(self):
        with pytest.raises(ValueError):
            TriangleRenderer.model_validate(
                _renderer_data(
                    size={"default": "5", "increment": "lambda x: x + 1", "limit": 3}
                )
            )

    def test_missing_function(self):
        renderer = TriangleRenderer.model_validate(
            _renderer_data(function_name="print_hexagon")
        )
        with pytest.raises(RendererAccessException) as exc_info:
            renderer.function

        assert "print_hexagon" in exc_info.value.message


class TestSizeArgument:
    def test_doubling_increment(self):
        size = SizeArgument(default="1", increment="lambda x: x * 2", limit=10)
        assert size.apply_increment(4) == 8

    def test_not_a_lambda(self):
        size = SizeArgument(default="1", increment="x + 1", limit=10)
        with pytest.raises(ValueError):
            size.apply_increment(1)

    def test_banner(self):
        renderer = TriangleRenderer.model_validate(_renderer_data(title="Tri"))
        assert renderer.generate_banner() == "Tri\n===\n"

    def test_time_budget_in_seconds(self):
        renderer = TriangleRenderer.model_validate(_renderer_data(max_time=1500))
        assert renderer.max_time_seconds == 1.5
