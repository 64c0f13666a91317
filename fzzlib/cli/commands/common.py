from typing import Dict, List, Optional

from ...fuzzy.model.system import FuzzySystem


def fmt_value(value: Optional[float]) -> str:
    return "undefined" if value is None else f"{value:+f}"


def frange(start: float, stop: float, step: float) -> List[float]:
    """start, start+step, ... up to stop inclusive (half a step of slack)."""
    if step <= 0.0:
        raise SystemExit(f"--step must be > 0 (got {step})")
    out = []
    i = 0
    x = start
    while x <= stop + step / 2:
        out.append(x)
        i += 1
        x = start + i * step
    return out


def evaluate(system: FuzzySystem, values: Dict[str, float]) -> Dict[str, Optional[float]]:
    system.set_inputs(values)
    system.calculate_output()
    return system.outputs()
