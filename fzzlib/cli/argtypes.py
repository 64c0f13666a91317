import argparse
import os

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVEL_DEFAULT = os.environ.get("FZZ_LOG_LEVEL", "WARNING").upper()


def parse_assignment(s: str):
    """'distance=0.2' -> ('distance', 0.2)."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"Invalid element: '{s}' (expected 'name=value').")
    k, v = (t.strip() for t in s.split("=", 1))
    if not k or not v:
        raise argparse.ArgumentTypeError(f"Empty name or value in: '{s}'.")
    try:
        return k, float(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Value of '{k}' is not a number: '{v}'.")


def assignments_to_dict(items):
    """Accepts ['a=1', 'b=2'], ['a=1,b=2'], {'a': 1} or already parsed (name, value) pairs."""
    if isinstance(items, dict):
        return {str(k): float(v) for k, v in items.items()}
    out = {}
    for item in items or []:
        if isinstance(item, (tuple, list)):
            k, v = item
            out[k] = float(v)
            continue
        for tok in str(item).split(","):
            tok = tok.strip()
            if tok:
                k, v = parse_assignment(tok)
                out[k] = v
    return out
