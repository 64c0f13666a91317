from typing import Iterable
from .types import Float

# Mamdani uses min for conjunction/implication and max for aggregation only.


def t_min(vals: Iterable[Float]) -> Float:
    """Conjunction; an empty antecedent list is neutral (1.0)."""
    return float(min(vals, default=1.0))


def s_max(vals: Iterable[Float]) -> Float:
    """Aggregation; nothing to aggregate gives 0.0."""
    return float(max(vals, default=0.0))


def clip(mu: Float, strength: Float) -> Float:
    """Mamdani implication: cut membership at the rule's firing strength."""
    return min(mu, strength)
