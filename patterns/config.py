from dataclasses import dataclass
from typing import Optional, List, Tuple, NamedTuple, Any


@dataclass
class VerificationResult:
    name: str
    result: int = 0
    error: Optional[str] = None
    details: List[Tuple[int, float]] = None

    def __post_init__(self):
        if self.result is None and self.error is None:
            raise RuntimeError("Either result or error must not be None")
        if self.details is None:
            self.details = []

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def largest_size(self) -> Optional[int]:
        if not self.details:
            return None
        return self.details[-1][0]


class RenderRunInfo(NamedTuple):
    return_value: Any
    std_output: str
    exec_time: float
