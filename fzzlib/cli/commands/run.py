import os
from argparse import Namespace

from .explain import cmd_explain
from .predict import cmd_predict
from .show import cmd_show
from .sweep import cmd_sweep
from .validate import cmd_validate
from ...fuzzy.io.config_loader import load_document

# sections run in this order
_SECTIONS = (
    ("validate", cmd_validate, {}),
    ("show", cmd_show, {"at": None}),
    ("predict", cmd_predict, {"kv": [], "samples": False}),
    ("explain", cmd_explain, {"json": False}),
    ("sweep", cmd_sweep, {"input2": None, "step": 0.1, "fixed": []}),
)

def _ns(d: dict, defaults: dict) -> Namespace:
    return Namespace(**{**defaults, **d})

def _resolve(path: str, base_dir: str) -> str:
    # relative system paths are taken from the pipeline file's directory
    return path if os.path.isabs(path) else os.path.join(base_dir, path)

def cmd_run(args):
    cfg = load_document(args.config)
    unknown = set(cfg) - {name for name, _, _ in _SECTIONS} - {"config"}
    if unknown:
        raise SystemExit(f"Unknown section(s) in {args.config}: {', '.join(sorted(unknown))}")

    base_dir = os.path.dirname(os.path.abspath(args.config))
    # a top-level 'config' is the default system definition for every section
    shared = {"config": cfg["config"]} if "config" in cfg else {}
    status = 0
    for name, fn, defaults in _SECTIONS:
        if name not in cfg:
            continue
        section = {**shared, **(cfg[name] or {})}
        if "config" not in section:
            raise SystemExit(f"Section '{name}' in {args.config} has no 'config'.")
        section["config"] = _resolve(str(section["config"]), base_dir)
        print(f"[run] {name}")
        rc = fn(_ns(section, defaults))
        status = status or (rc or 0)
    return status
