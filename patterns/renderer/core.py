import abc
import importlib
import math
from types import ModuleType
from typing import Callable, Iterator, Any, Optional

from pydantic import BaseModel
from typing_extensions import TypeAlias

from patterns.config import RenderRunInfo
from patterns.exceptions import RendererAccessException
from patterns.utils import capture_output

TSize: TypeAlias = int


class SizeArgument(BaseModel):
    default: str
    increment: str
    limit: int
    description: str = ""

    @property
    def default_value(self) -> TSize:
        return eval(self.default)

    @property
    def increment_lambda(self) -> Callable:
        # Some libraries are required to be available for import by lambdas
        return eval(self.increment, {"math": math})

    def apply_increment(self, size: TSize) -> TSize:
        if isinstance(self.increment, str) and self.increment.startswith("lambda"):
            try:
                return self.increment_lambda(size)
            except Exception as e:
                raise ValueError(f"Invalid lambda function: {e}")
        raise ValueError("Invalid format for lambda function")


class Renderer(BaseModel, abc.ABC):
    module: str
    function_name: str
    reference_name: str
    title: str
    description: str
    max_time: int
    example_sizes: list[int]
    size: SizeArgument
    pattern_label: Optional[str] = None

    def model_post_init(self, __context: Any):
        if self.size.default_value > self.size.limit:
            raise ValueError(
                f"Default size for '{self.function_name}' exceeds its limit of {self.size.limit}"
            )

    @property
    @abc.abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def generate_preamble(self, size: TSize) -> str:
        """
        Text shown before the pattern when it is printed from the command line.
        """
        raise NotImplementedError

    @property
    def max_time_seconds(self) -> float:
        return self.max_time / 1_000

    @property
    def module_object(self) -> ModuleType:
        return importlib.import_module(self.module)

    @property
    def function(self) -> Callable:
        try:
            return getattr(self.module_object, self.function_name)
        except AttributeError:
            raise RendererAccessException(self.module_object, self.function_name)

    def generate_banner(self) -> str:
        return f"{self.title}\n{'=' * len(self.title)}\n"

    def sizes(self) -> Iterator[TSize]:
        size: TSize = self.size.default_value
        while size <= self.size.limit:
            yield size
            size = self.size.apply_increment(size)

    def run_with_size(
        self, size: TSize, *, module: ModuleType, function_name: str
    ) -> RenderRunInfo:
        try:
            func = getattr(module, function_name)
        except AttributeError:
            raise RendererAccessException(module, function_name)

        return capture_output(func, size)
