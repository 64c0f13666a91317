from dataclasses import dataclass
from typing import Tuple
from .types import Float, Index

# (input_index, set_index)
Clause = Tuple[Index, Index]


@dataclass(frozen=True)
class ParsedRule:
    antecedents: Tuple[Clause, ...]
    output: Index
    output_set: Index


@dataclass(frozen=True)
class FuzzifyRes:
    set_index: Index
    membership: Float


@dataclass(frozen=True)
class InferenceRes:
    set_index: Index
    strength: Float
