from ...fuzzy.core.types import RuleError
from ...fuzzy.io.config_loader import load_system
from ...fuzzy.io.rule_parser import parse_rule

def cmd_validate(args):
    system = load_system(args.config)
    kb = system.kb
    errors = []
    for i, text in enumerate(kb.rules):
        try:
            parse_rule(text, kb, i)
        except RuleError as e:
            errors.append(e)
    for e in errors:
        print(f"ERROR {e}")
    if errors:
        print(f"FAILED: {len(errors)} of {len(kb.rules)} rules invalid")
        return 1
    print(f"OK: inputs={kb.n_inputs}, outputs={kb.n_outputs}, rules={len(kb.rules)}")
    return 0
