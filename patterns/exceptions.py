from types import ModuleType
from typing import Any


class InvalidArgumentException(ValueError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "Error: n must be a positive integer"


class RendererAccessException(Exception):
    def __init__(self, module: ModuleType, function_name: str):
        self.module = module
        self.function_name = function_name
        super().__init__(self.message)

    @property
    def module_name(self) -> str:
        return self.module.__name__

    @property
    def message(self) -> str:
        return (
            f"Cannot access renderer '{self.function_name}' "
            f"as it does not exist in module {self.module_name}"
        )


def validate_size(size: Any) -> int:
    """
    Ensure a pattern size is a positive integer.

    :raises InvalidArgumentException: for zero, negatives and non-integers (bools included)
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidArgumentException(size)
    return size
