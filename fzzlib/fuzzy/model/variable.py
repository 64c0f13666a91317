# LinguisticVariable: named, fixed-length list of triangular fuzzy sets

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from ..core.mfs import TriangularSet
from ..core.types import ConfigurationError, Float


@dataclass
class LinguisticVariable:
    name: str
    length: int
    sets: List[Optional[TriangularSet]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("variable name must not be empty")
        if self.length < 0:
            raise ConfigurationError(f"variable '{self.name}': negative set count {self.length}")
        if not self.sets:
            self.sets = [None] * self.length

    def set_fcn(self, index: int, left: Float, top: Float, right: Float, name: str) -> TriangularSet:
        if not 0 <= index < self.length:
            raise ConfigurationError(
                f"variable '{self.name}': set index {index} out of range (0..{self.length - 1})"
            )
        fset = TriangularSet(float(left), float(top), float(right), name)
        other = self.index_of(name)
        if other is not None and other != index:
            raise ConfigurationError(f"variable '{self.name}': duplicate fuzzy set name '{name}'")
        self.sets[index] = fset
        return fset

    def index_of(self, name: str) -> Optional[int]:
        for i, fset in enumerate(self.sets):
            if fset is not None and fset.name == name:
                return i
        return None
