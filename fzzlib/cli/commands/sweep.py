from ..argtypes import assignments_to_dict
from .common import evaluate, fmt_value, frange
from ...fuzzy.io.config_loader import load_system


def _grid_cell(value):
    return "undef" if value is None else f"{value:+1.2f}"


def cmd_sweep(args):
    """
    One input: 'x => out1 out2 ...' per step.
    Two inputs: grid of the first output, rows = --input, columns = --input2.
    """
    system = load_system(args.config)
    fixed = assignments_to_dict(getattr(args, "fixed", None))
    swept = [args.input] + ([args.input2] if getattr(args, "input2", None) else [])
    for name in swept + list(fixed):
        if system.kb.input_index(name) is None:
            raise SystemExit(f"Unknown input '{name}'.")
    xs = frange(args.start, args.stop, args.step)

    if len(swept) == 1:
        print(f"{args.input} => {' '.join(system.output_names)}")
        for x in xs:
            out = evaluate(system, {**fixed, args.input: x})
            print(f"{x:+f} => " + " ".join(fmt_value(v) for v in out.values()))
        return

    first = system.output_names[0]
    print(f"{first}: rows {args.input}, columns {args.input2}")
    corner = "x1\\x2"
    header = f" {corner:>5} |" + "".join(f" {x2:+1.2f} |" for x2 in xs)
    print(header)
    print("-" * len(header))
    for x1 in xs:
        cells = []
        for x2 in xs:
            out = evaluate(system, {**fixed, args.input: x1, args.input2: x2})
            cells.append(f" {_grid_cell(out[first])} |")
        print(f" {x1:+1.2f} |" + "".join(cells))
    print("-" * len(header))
