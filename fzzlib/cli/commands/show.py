import sys
from typing import Dict

from ..argtypes import assignments_to_dict
from ...fuzzy.core.fuzzify import membership_table
from ...fuzzy.io.config_loader import load_system
from ...fuzzy.io.report import format_system


# ========= utils: ANSI / pretty =========

_RESET = "\x1b[0m"

def _use_ansi() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False

def _ansi_color(mu: float) -> str:
    """
    Color by membership:
      >= 0.50 -> green
      >  0.00 -> yellow
      == 0.00 -> grey
    """
    if not _use_ansi():
        return ""
    if mu >= 0.50:
        return "\x1b[32m"  # green
    if mu > 0.0:
        return "\x1b[33m"  # yellow
    return "\x1b[90m"      # grey


def format_memberships(system, xdict: Dict[str, float]) -> str:
    lines = ["Memberships:"]
    for i in range(system.kb.n_inputs):
        var = system.kb.input_var(i)
        if var.name not in xdict:
            continue
        x = xdict[var.name]
        parts = []
        for name, mu in membership_table(var, x):
            color = _ansi_color(mu)
            reset = _RESET if color else ""
            parts.append(f"{color}{name}({mu:.2f}){reset}")
        lines.append(f"  {var.name}={x:g} -> " + ", ".join(parts))
    return "\n".join(lines)


# ========= main =========

def cmd_show(args) -> None:
    """
    --config PATH                 : system definition
    --at x=1 y=2 / --at "x=1,y=2" : point for membership values (optional)
    """
    system = load_system(args.config)
    print(format_system(system))

    xdict = assignments_to_dict(getattr(args, "at", None))
    unknown = [k for k in xdict if system.kb.input_index(k) is None]
    if unknown:
        raise SystemExit(f"Unknown input(s) in --at: {', '.join(unknown)}")
    if xdict:
        print(format_memberships(system, xdict))
