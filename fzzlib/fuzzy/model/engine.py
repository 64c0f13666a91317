from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.defuzz import COG_STEP, centroid
from ..core.fuzzify import fuzzify
from ..core.norms import t_min
from ..core.rule import FuzzifyRes, InferenceRes, ParsedRule
from ..core.types import ConfigurationError, Float, NoMatchError
from ..io.rule_parser import parse_rule
from .knowledge import KnowledgeBase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FiredRule:
    rule_index: int
    text: str
    rule: ParsedRule
    strength: Float


@dataclass
class CycleTrace:
    """Scratch state of one calculate_output cycle."""
    inputs: List[Float]
    fuzzified: List[List[FuzzifyRes]] = field(default_factory=list)
    inferred: List[List[InferenceRes]] = field(default_factory=list)
    fired: List[FiredRule] = field(default_factory=list)
    outputs: List[Optional[Float]] = field(default_factory=list)
    # output index -> why that output has no value
    undefined: Dict[int, NoMatchError] = field(default_factory=dict)


class RuleCache:
    """Parsed rules keyed by rule text, dropped whenever the knowledge base changes."""

    def __init__(self) -> None:
        self._revision = -1
        self._parsed: Dict[str, ParsedRule] = {}

    def get(self, kb: KnowledgeBase, index: int, text: str) -> ParsedRule:
        if kb.revision != self._revision:
            self._parsed.clear()
            self._revision = kb.revision
        rule = self._parsed.get(text)
        if rule is None:
            rule = parse_rule(text, kb, index)
            self._parsed[text] = rule
        return rule


class MamdaniEngine:
    """
    Mamdani: min for conjunction and implication, max for aggregation,
    center of gravity for defuzzification.
    """
    def __init__(self, kb: KnowledgeBase, cache_rules: bool = True, step: Float = COG_STEP) -> None:
        if not step > 0.0:
            raise ConfigurationError(f"integration step must be > 0 (got {step})")
        self.kb = kb
        self.step = step
        self._cache: Optional[RuleCache] = RuleCache() if cache_rules else None

    # ---------- stages ----------

    def parse_rules(self) -> List[ParsedRule]:
        parsed = []
        for i, text in enumerate(self.kb.rules):
            if self._cache is not None:
                parsed.append(self._cache.get(self.kb, i, text))
            else:
                parsed.append(parse_rule(text, self.kb, i))
        return parsed

    def fuzzify_all(self, values: Sequence[Float]) -> List[List[FuzzifyRes]]:
        out = []
        for i, x in enumerate(values):
            var = self.kb.input_var(i)
            res = fuzzify(var, x)
            for r in res:
                logger.debug("%s - %s: x=%f, A(x)=%f", var.name, var.sets[r.set_index].name, x, r.membership)
            out.append(res)
        return out

    @staticmethod
    def evaluate_rule(rule: ParsedRule,
                      fuzzified: Sequence[Sequence[FuzzifyRes]]) -> Optional[Tuple[int, int, Float]]:
        """(output, output_set, strength) when every clause matched, else None."""
        degrees: List[Float] = []
        for input_index, set_index in rule.antecedents:
            matched = [r.membership for r in fuzzified[input_index] if r.set_index == set_index]
            if not matched:
                return None
            degrees.extend(matched)
        if not degrees:
            return None
        return rule.output, rule.output_set, t_min(degrees)

    def infer(self, parsed: Sequence[ParsedRule],
              fuzzified: Sequence[Sequence[FuzzifyRes]]) -> Tuple[List[List[InferenceRes]], List[FiredRule]]:
        inferred: List[List[InferenceRes]] = [[] for _ in range(self.kb.n_outputs)]
        fired: List[FiredRule] = []
        for i, rule in enumerate(parsed):
            res = self.evaluate_rule(rule, fuzzified)
            if res is None:
                continue
            output, out_set, strength = res
            inferred[output].append(InferenceRes(set_index=out_set, strength=strength))
            fired.append(FiredRule(i, self.kb.rules[i], rule, strength))
            logger.debug("%s -> passed (%s(%d) - %s(%d): %f)", self.kb.rules[i],
                         self.kb.outputs[output].name, output,
                         self.kb.outputs[output].sets[out_set].name, out_set, strength)
        return inferred, fired

    def defuzzify_all(self, inferred: Sequence[Sequence[InferenceRes]]
                      ) -> Tuple[List[Optional[Float]], Dict[int, NoMatchError]]:
        outputs: List[Optional[Float]] = []
        undefined: Dict[int, NoMatchError] = {}
        for o, res in enumerate(inferred):
            var = self.kb.output_var(o)
            try:
                value = centroid(var, res, self.step)
            except NoMatchError as e:
                logger.warning("%s; output is undefined this cycle", e)
                undefined[o] = e
                value = None
            else:
                logger.debug("%s: centroid=%f from %d rule(s)", var.name, value, len(res))
            outputs.append(value)
        return outputs, undefined

    # ---------- API ----------

    def run(self, values: Sequence[Float]) -> CycleTrace:
        trace = CycleTrace(inputs=list(values))
        parsed = self.parse_rules()
        trace.fuzzified = self.fuzzify_all(values)
        trace.inferred, trace.fired = self.infer(parsed, trace.fuzzified)
        trace.outputs, trace.undefined = self.defuzzify_all(trace.inferred)
        return trace
