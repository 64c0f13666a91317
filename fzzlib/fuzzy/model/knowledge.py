from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from .variable import LinguisticVariable
from ..core.mfs import TriangularSet
from ..core.types import ConfigurationError, Float
from ..io.rule_parser import count_clauses


@dataclass(frozen=True)
class Capacity:
    """
    Configuration-time limits of one fuzzy system:
      - max_inputs / max_outputs: number of linguistic variables
      - max_sets: fuzzy sets per variable
      - max_rules: rules in the rule list
      - max_antecedents: 'and'-joined clauses per rule
    """
    max_inputs: int = 4
    max_outputs: int = 2
    max_sets: int = 16
    max_rules: int = 256
    max_antecedents: int = 4

    def __post_init__(self) -> None:
        for key, value in asdict(self).items():
            if value < 1:
                raise ConfigurationError(f"capacity {key} must be >= 1 (got {value})")

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> "Capacity":
        d = dict(d or {})
        unknown = set(d) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"unknown capacity keys: {', '.join(sorted(unknown))}")
        return cls(**{k: int(v) for k, v in d.items()})


@dataclass
class KnowledgeBase:
    n_inputs: int
    n_outputs: int
    capacity: Capacity = field(default_factory=Capacity)

    # --- variables and rules ---
    inputs: List[Optional[LinguisticVariable]] = field(default_factory=list)
    outputs: List[Optional[LinguisticVariable]] = field(default_factory=list)
    rules: List[str] = field(default_factory=list)

    # bumped on every mutation; parse caches compare against it
    revision: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.n_inputs <= self.capacity.max_inputs:
            raise ConfigurationError(
                f"required number of inputs {self.n_inputs} outside 1..{self.capacity.max_inputs}"
            )
        if not 1 <= self.n_outputs <= self.capacity.max_outputs:
            raise ConfigurationError(
                f"required number of outputs {self.n_outputs} outside 1..{self.capacity.max_outputs}"
            )
        self.inputs = [None] * self.n_inputs
        self.outputs = [None] * self.n_outputs

    def _touch(self) -> None:
        self.revision += 1

    # ---------- variables ----------

    def _check_index(self, index: int, length: int, what: str) -> None:
        if not 0 <= index < length:
            raise ConfigurationError(f"{what} index {index} out of range (0..{length - 1})")

    def _check_var_name(self, name: str, replacing: Optional[LinguisticVariable]) -> None:
        for var in self.inputs + self.outputs:
            if var is not None and var is not replacing and var.name == name:
                raise ConfigurationError(f"duplicate variable name: {name}")

    def _new_variable(self, slots: List[Optional[LinguisticVariable]], index: int,
                      length: int, name: str) -> LinguisticVariable:
        if not 0 <= length <= self.capacity.max_sets:
            raise ConfigurationError(
                f"required number of fuzzy sets {length} for '{name}' exceeds maximum {self.capacity.max_sets}"
            )
        self._check_var_name(name, slots[index])
        var = LinguisticVariable(name, length)
        slots[index] = var
        self._touch()
        return var

    def init_input_fcns(self, index: int, length: int, name: str) -> LinguisticVariable:
        self._check_index(index, self.n_inputs, "input")
        return self._new_variable(self.inputs, index, length, name)

    def init_output_fcns(self, index: int, length: int, name: str) -> LinguisticVariable:
        self._check_index(index, self.n_outputs, "output")
        return self._new_variable(self.outputs, index, length, name)

    def input_var(self, index: int) -> LinguisticVariable:
        self._check_index(index, self.n_inputs, "input")
        var = self.inputs[index]
        if var is None:
            raise ConfigurationError(f"input {index} has no fuzzy sets initialized")
        return var

    def output_var(self, index: int) -> LinguisticVariable:
        self._check_index(index, self.n_outputs, "output")
        var = self.outputs[index]
        if var is None:
            raise ConfigurationError(f"output {index} has no fuzzy sets initialized")
        return var

    def set_input_fcn(self, index: int, fc_set: int, left: Float, top: Float, right: Float,
                      name: str) -> TriangularSet:
        fset = self.input_var(fc_set).set_fcn(index, left, top, right, name)
        self._touch()
        return fset

    def set_output_fcn(self, index: int, fc_set: int, left: Float, top: Float, right: Float,
                       name: str) -> TriangularSet:
        fset = self.output_var(fc_set).set_fcn(index, left, top, right, name)
        self._touch()
        return fset

    # ---------- lookups used by the rule parser ----------

    @staticmethod
    def _find(slots: List[Optional[LinguisticVariable]], name: str) -> Optional[int]:
        for i, var in enumerate(slots):
            if var is not None and var.name == name:
                return i
        return None

    def input_index(self, name: str) -> Optional[int]:
        return self._find(self.inputs, name)

    def output_index(self, name: str) -> Optional[int]:
        return self._find(self.outputs, name)

    def input_set_index(self, index: int, name: str) -> Optional[int]:
        return self.input_var(index).index_of(name)

    def output_set_index(self, index: int, name: str) -> Optional[int]:
        return self.output_var(index).index_of(name)

    # ---------- rules ----------

    def _check_rule(self, text: str) -> str:
        if not isinstance(text, str) or not text:
            raise ConfigurationError("rule must be a non-empty string")
        n = count_clauses(text)
        if n > self.capacity.max_antecedents:
            raise ConfigurationError(
                f"rule has {n} antecedent clauses, maximum is {self.capacity.max_antecedents}: {text}"
            )
        return text

    def add_rule(self, text: str) -> int:
        if len(self.rules) >= self.capacity.max_rules:
            raise ConfigurationError(f"maximum number of rules exceeded ({self.capacity.max_rules})")
        self.rules.append(self._check_rule(text))
        self._touch()
        return len(self.rules) - 1

    def set_rule(self, index: int, text: str) -> None:
        self._check_index(index, len(self.rules), "rule")
        self.rules[index] = self._check_rule(text)
        self._touch()

    def remove_rule(self, index: int) -> str:
        self._check_index(index, len(self.rules), "rule")
        text = self.rules.pop(index)
        self._touch()
        return text

    def clear_rules(self) -> None:
        self.rules.clear()
        self._touch()
