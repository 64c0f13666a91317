from ..argtypes import assignments_to_dict
from .common import evaluate, fmt_value
from ...fuzzy.io.config_loader import load_samples, load_system

def cmd_predict(args):
    system = load_system(args.config)
    samples = load_samples(args.config) if getattr(args, "samples", False) else []
    kv = getattr(args, "kv", None)
    if kv:
        samples.append(assignments_to_dict(kv))
    if not samples:
        raise SystemExit("Nothing to predict: give name=value pairs or --samples.")
    for values in samples:
        out = evaluate(system, values)
        if len(samples) > 1:
            print(", ".join(f"{k}={v:g}" for k, v in values.items()))
        for oname, val in out.items():
            print(f"{oname}: {fmt_value(val)}")
