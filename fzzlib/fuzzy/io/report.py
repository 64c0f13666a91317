"""Plain-text dumps of a fuzzy system (sets, rules, whole system)."""

from __future__ import annotations
from typing import List

from ..model.variable import LinguisticVariable


def _format_sets(var: LinguisticVariable) -> List[str]:
    lines = []
    for i, fset in enumerate(var.sets):
        if fset is None:
            lines.append(f"Fuzzy set {i}: <undefined>")
            continue
        lines.append(
            f'Fuzzy set {i} named "{fset.name}": '
            f"[{fset.left:f},0],[{fset.top:f},1],[{fset.right:f},0]"
        )
    return lines


def format_input_set(system, index: int) -> str:
    var = system.kb.input_var(index)
    head = f'Input set for input {index} named "{var.name}":'
    return "\n".join([head] + _format_sets(var)) + "\n"


def format_output_set(system, index: int) -> str:
    var = system.kb.output_var(index)
    head = f'Output set for output {index} named "{var.name}":'
    return "\n".join([head] + _format_sets(var)) + "\n"


def format_rules(system) -> str:
    rules = system.kb.rules
    lines = [f"System contains {len(rules)} rules of inferential mechanism:"]
    lines += [f"{i:3d}: {text}" for i, text in enumerate(rules)]
    return "\n".join(lines) + "\n"


def format_system(system) -> str:
    parts = [
        "+----------------------------------------+\n"
        "|              Fuzzy system              |\n"
        "+----------------------------------------+\n"
    ]
    for i in range(system.kb.n_inputs):
        parts.append(format_input_set(system, i))
    for i in range(system.kb.n_outputs):
        parts.append(format_output_set(system, i))
    parts.append(format_rules(system))
    return "\n".join(parts)
