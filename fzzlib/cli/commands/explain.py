import json
from ..argtypes import assignments_to_dict
from .common import fmt_value
from ...fuzzy.io.config_loader import load_system

def explain(system, values):
    """Fuzzification and fired rules of one cycle as a JSON-able dict."""
    system.set_inputs(values)
    trace = system.calculate_output()
    kb = system.kb
    fuzzified = {}
    for i, res in enumerate(trace.fuzzified):
        var = kb.input_var(i)
        fuzzified[var.name] = {
            "value": trace.inputs[i],
            "sets": {var.sets[r.set_index].name: r.membership for r in res},
        }
    fired = []
    for f in trace.fired:
        ovar = kb.output_var(f.rule.output)
        fired.append({
            "rule_index": f.rule_index,
            "rule": f.text,
            "output": ovar.name,
            "set": ovar.sets[f.rule.output_set].name,
            "strength": f.strength,
        })
    return {"fuzzified": fuzzified, "fired": fired, "outputs": system.outputs()}

def cmd_explain(args):
    system = load_system(args.config)
    res = explain(system, assignments_to_dict(args.kv))
    if getattr(args, "json", False):
        print(json.dumps(res, indent=2))
        return
    print("Fuzzification:")
    for name, item in res["fuzzified"].items():
        sets = ", ".join(f"{s}(μ={mu:.3f})" for s, mu in item["sets"].items()) or "(no set)"
        print(f"  {name}={item['value']:g}: {sets}")
    print("Fired rules:")
    for r in res["fired"]:
        print(f"  R{r['rule_index']}: {r['rule']}  strength={r['strength']:.4f}")
    if not res["fired"]:
        print("  (none)")
    print("Outputs:")
    for oname, val in res["outputs"].items():
        print(f"  {oname}: {fmt_value(val)}")
