from __future__ import annotations
from dataclasses import dataclass
from .types import ConfigurationError, Float


@dataclass(frozen=True)
class TriangularSet:
    """
    Fuzzy set with triangular membership function.
    Support is the open interval (left, right); membership is 1 at top.
    A zero-width side is a vertical edge.
    """
    left: Float
    top: Float
    right: Float
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("fuzzy set name must not be empty")
        if not (self.left <= self.top <= self.right):
            raise ConfigurationError(
                f"fuzzy set '{self.name}': left <= top <= right required "
                f"(got {self.left}, {self.top}, {self.right})"
            )

    def intersects(self, x: Float) -> bool:
        return self.left < x < self.right

    def mu(self, x: Float) -> Float:
        if x <= self.left or x >= self.right:
            return 0.0
        # x is strictly inside (left, right), so a vertical side is never divided by
        if x <= self.top:
            return (x - self.left) / (self.top - self.left)
        return (x - self.top) / (self.top - self.right) + 1.0

    def support(self) -> tuple[Float, Float]:
        return (self.left, self.right)
