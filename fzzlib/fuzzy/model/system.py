from __future__ import annotations
import logging
from typing import Dict, List, Mapping, Optional

from ..core.defuzz import COG_STEP
from ..core.mfs import TriangularSet
from ..core.rule import ParsedRule
from ..core.types import ConfigurationError, Float, FuzzyError, NoMatchError
from ..io.rule_parser import parse_rule
from .engine import CycleTrace, MamdaniEngine
from .knowledge import Capacity, KnowledgeBase
from .variable import LinguisticVariable

logger = logging.getLogger(__name__)


class FuzzySystem:
    """
    Caller-owned fuzzy system: configuration, current inputs/outputs and the
    scratch state of the last cycle. One instance must not be evaluated from
    several threads at once.
    """

    def __init__(self, inputs: int, outputs: int, capacity: Optional[Capacity] = None,
                 cache_rules: bool = True, step: Float = COG_STEP) -> None:
        self.kb = KnowledgeBase(inputs, outputs, capacity or Capacity())
        self.engine = MamdaniEngine(self.kb, cache_rules=cache_rules, step=step)
        self._input: List[Float] = [0.0] * inputs
        self._output: List[Optional[Float]] = [None] * outputs
        self.last_cycle: Optional[CycleTrace] = None

    # ---------- configuration ----------

    def init_input_fcns(self, index: int, length: int, name: str) -> LinguisticVariable:
        return self.kb.init_input_fcns(index, length, name)

    def init_output_fcns(self, index: int, length: int, name: str) -> LinguisticVariable:
        return self.kb.init_output_fcns(index, length, name)

    def set_input_fcn(self, index: int, fc_set: int, left: Float, top: Float, right: Float,
                      name: str) -> TriangularSet:
        return self.kb.set_input_fcn(index, fc_set, left, top, right, name)

    def set_output_fcn(self, index: int, fc_set: int, left: Float, top: Float, right: Float,
                       name: str) -> TriangularSet:
        return self.kb.set_output_fcn(index, fc_set, left, top, right, name)

    def add_rule(self, text: str) -> int:
        return self.kb.add_rule(text)

    def set_rule(self, index: int, text: str) -> None:
        self.kb.set_rule(index, text)

    def remove_rule(self, index: int) -> str:
        return self.kb.remove_rule(index)

    def clear_rules(self) -> None:
        self.kb.clear_rules()

    @property
    def rules(self) -> List[str]:
        return list(self.kb.rules)

    @property
    def input_names(self) -> List[str]:
        return [self.kb.input_var(i).name for i in range(self.kb.n_inputs)]

    @property
    def output_names(self) -> List[str]:
        return [self.kb.output_var(i).name for i in range(self.kb.n_outputs)]

    def validate_rules(self) -> List[ParsedRule]:
        """Parse every rule once; raises the first RuleSyntaxError / NameNotFoundError."""
        return [parse_rule(text, self.kb, i) for i, text in enumerate(self.kb.rules)]

    # ---------- evaluation ----------

    def set_input(self, index: int, value: Float) -> None:
        if not 0 <= index < self.kb.n_inputs:
            raise ConfigurationError(f"input index {index} out of range (0..{self.kb.n_inputs - 1})")
        self._input[index] = float(value)

    def set_inputs(self, values: Mapping[str, Float]) -> None:
        for name, value in values.items():
            index = self.kb.input_index(name)
            if index is None:
                raise ConfigurationError(f"unknown input '{name}'")
            self.set_input(index, value)

    def get_input(self, index: int) -> Float:
        if not 0 <= index < self.kb.n_inputs:
            raise ConfigurationError(f"input index {index} out of range (0..{self.kb.n_inputs - 1})")
        return self._input[index]

    def get_output(self, index: int) -> Float:
        if not 0 <= index < self.kb.n_outputs:
            raise ConfigurationError(f"output index {index} out of range (0..{self.kb.n_outputs - 1})")
        value = self._output[index]
        if value is None:
            if self.last_cycle is not None and index in self.last_cycle.undefined:
                raise self.last_cycle.undefined[index]
            raise NoMatchError(self.kb.output_var(index).name)
        return value

    def outputs(self) -> Dict[str, Optional[Float]]:
        return {self.kb.output_var(i).name: v for i, v in enumerate(self._output)}

    def calculate_output(self) -> CycleTrace:
        """Fuzzification, inference and defuzzification over the current inputs."""
        self._output = [None] * self.kb.n_outputs
        self.last_cycle = None
        try:
            trace = self.engine.run(self._input)
        except FuzzyError as e:
            logger.error("output calculation failed: %s", e)
            raise
        self._output = list(trace.outputs)
        self.last_cycle = trace
        return trace
