from __future__ import annotations
from typing import Callable, List, Sequence, Tuple
from .norms import clip, s_max
from .rule import InferenceRes
from .types import Float, NoMatchError

# integration step used when searching for the center of gravity
COG_STEP = 0.02


def _grid(x_from: Float, x_to: Float, step: Float) -> List[Float]:
    # x = from + i*step avoids drift; the bound is to+step so the endpoint is sampled
    xs = []
    i = 0
    x = x_from
    while x < x_to + step:
        xs.append(x)
        i += 1
        x = x_from + i * step
    return xs


def integration_range(variable, inferred: Sequence[InferenceRes]) -> Tuple[Float, Float]:
    if not inferred:
        raise NoMatchError(variable.name)
    lefts = [variable.sets[r.set_index].left for r in inferred]
    rights = [variable.sets[r.set_index].right for r in inferred]
    return min(lefts), max(rights)


def aggregated_membership(variable, inferred: Sequence[InferenceRes]) -> Callable[[Float], Float]:
    """mu(x) = max over fired rules of min(mu_set(x), strength)."""
    pairs = [(variable.sets[r.set_index], r.strength) for r in inferred]

    def mu(x: Float) -> Float:
        return s_max(clip(fset.mu(x), strength) for fset, strength in pairs)
    return mu


def centroid_on_grid(x_from: Float, x_to: Float, step: Float, mu: Callable[[Float], Float]) -> Float:
    if step <= 0.0:
        raise ValueError(f"integration step must be > 0 (got {step})")
    num = 0.0
    den = 0.0
    for x in _grid(x_from, x_to, step):
        w = mu(x)
        num += x * w
        den += w
    if den <= 0.0:
        raise ZeroDivisionError("aggregated membership is zero on the whole range")
    return num / den


def centroid(variable, inferred: Sequence[InferenceRes], step: Float = COG_STEP) -> Float:
    """Center of gravity of the aggregated output region of one output variable."""
    x_from, x_to = integration_range(variable, inferred)
    try:
        return centroid_on_grid(x_from, x_to, step, aggregated_membership(variable, inferred))
    except ZeroDivisionError as e:
        raise NoMatchError(variable.name, "fired rules leave zero area on the sampling grid") from e
