import argparse
from ..argtypes import LOG_LEVELS, LOG_LEVEL_DEFAULT, parse_assignment
# command handlers
from .demo import cmd_demo
from .explain import cmd_explain
from .predict import cmd_predict
from .run import cmd_run
from .show import cmd_show
from .sweep import cmd_sweep
from .validate import cmd_validate

def build_parser():
    fmt = argparse.ArgumentDefaultsHelpFormatter
    ap = argparse.ArgumentParser(
        prog="fzz",
        description="Mamdani fuzzy inference with triangular sets and text rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fzz demo\n"
            "  fzz validate --config throttle_brake.yaml\n"
            "  fzz show --config throttle_brake.yaml --at distance=0.2 speed=1.25\n"
            "  fzz predict --config throttle_brake.yaml distance=0.2 speed=1.25\n"
            "  fzz explain --config throttle_brake.yaml distance=0.2 speed=1.25 --json\n"
            "  fzz sweep --config throttle_brake.yaml --input distance --start 0 --stop 1 --step 0.1 \\\n"
            "            --fixed speed=1.0\n"
            "  fzz run --config pipeline.yaml\n"
        )
    )
    ap.add_argument("--log-level", choices=LOG_LEVELS, default=LOG_LEVEL_DEFAULT,
                    help="logging level (env FZZ_LOG_LEVEL)")

    sub = ap.add_subparsers(dest="cmd", required=True)

    # demo
    sp_d = sub.add_parser("demo", help="Distance/speed -> throttle/brake example", formatter_class=fmt)
    sp_d.add_argument("--at", nargs=2, type=float, default=[0.2, 1.25], metavar=("DISTANCE", "SPEED"))
    sp_d.set_defaults(func=cmd_demo)

    # validate
    sp_v = sub.add_parser("validate", help="Parse every rule of a system definition", formatter_class=fmt)
    sp_v.add_argument("--config", required=True)
    sp_v.set_defaults(func=cmd_validate)

    # show
    sp_s = sub.add_parser("show", help="Show sets and rules; optionally memberships at a point",
                          formatter_class=fmt)
    sp_s.add_argument("--config", required=True)
    sp_s.add_argument("--at", nargs="*", help="name=value pairs")
    sp_s.set_defaults(func=cmd_show)

    # predict
    sp_p = sub.add_parser("predict", help="Crisp outputs for one sample", formatter_class=fmt)
    sp_p.add_argument("--config", required=True)
    sp_p.add_argument("kv", nargs="*", type=parse_assignment, help="name=value pairs")
    sp_p.add_argument("--samples", action="store_true", help="evaluate the 'samples' section of the config")
    sp_p.set_defaults(func=cmd_predict)

    # explain
    sp_e = sub.add_parser("explain", help="Fuzzification and fired rules for one sample",
                          formatter_class=fmt)
    sp_e.add_argument("--config", required=True)
    sp_e.add_argument("kv", nargs="+", type=parse_assignment, help="name=value pairs")
    sp_e.add_argument("--json", action="store_true")
    sp_e.set_defaults(func=cmd_explain)

    # sweep
    sp_w = sub.add_parser("sweep", help="Output table over a range of one or two inputs",
                          formatter_class=fmt)
    sp_w.add_argument("--config", required=True)
    sp_w.add_argument("--input", required=True, help="swept input")
    sp_w.add_argument("--input2", help="second swept input (grid of the first output)")
    sp_w.add_argument("--start", type=float, required=True)
    sp_w.add_argument("--stop", type=float, required=True)
    sp_w.add_argument("--step", type=float, default=0.1)
    sp_w.add_argument("--fixed", nargs="*", type=parse_assignment, default=[],
                      help="name=value for inputs that are not swept")
    sp_w.set_defaults(func=cmd_sweep)

    # run
    sp_run = sub.add_parser("run", help="Run the command sections of a pipeline file")
    sp_run.add_argument("--config", required=True, help="path to pipeline .yaml/.json")
    sp_run.set_defaults(func=cmd_run)

    return ap
