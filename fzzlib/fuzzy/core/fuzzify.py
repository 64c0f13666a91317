from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
from .mfs import TriangularSet
from .rule import FuzzifyRes
from .types import Float


def fuzzify_sets(sets: Iterable[Optional[TriangularSet]], x: Float) -> List[FuzzifyRes]:
    """
    Membership of x in every set whose open support contains it, in declaration order.
    Undefined slots (None) are skipped; no match is an empty list.
    """
    out: List[FuzzifyRes] = []
    for i, fset in enumerate(sets):
        if fset is None or not fset.intersects(x):
            continue
        out.append(FuzzifyRes(set_index=i, membership=fset.mu(x)))
    return out


def fuzzify(variable, x: Float) -> List[FuzzifyRes]:
    return fuzzify_sets(variable.sets, x)


def membership_table(variable, x: Float) -> List[Tuple[str, Float]]:
    """(name, mu) for every defined set, including zeros; used by reports."""
    return [(fset.name, fset.mu(x)) for fset in variable.sets if fset is not None]
