from .common import fmt_value
from ...fuzzy.io.report import format_input_set, format_output_set, format_rules, format_system
from ...fuzzy.model.system import FuzzySystem


def build_example_system(**kwargs) -> FuzzySystem:
    """
    Speed control when following a moving object:
    distance, speed -> throttle, brake (3x3 sets, 9 rules per output).
    """
    system = FuzzySystem(2, 2, **kwargs)

    system.init_input_fcns(0, 3, "distance")
    system.init_input_fcns(1, 3, "speed")
    system.init_output_fcns(0, 5, "throttle")
    system.init_output_fcns(1, 3, "brake")

    system.set_input_fcn(0, 0, -0.5, 0.0, 0.5, "small")
    system.set_input_fcn(1, 0, 0.0, 0.5, 1.0, "medium")
    system.set_input_fcn(2, 0, 0.5, 1.0, 1.5, "big")

    system.set_input_fcn(0, 1, -1.0, 0.0, 1.0, "slow")
    system.set_input_fcn(1, 1, 0.0, 1.0, 2.0, "medium")
    system.set_input_fcn(2, 1, 1.0, 2.0, 3.0, "fast")

    system.set_output_fcn(0, 0, -1.5, -1.0, -0.5, "negativeBig")
    system.set_output_fcn(1, 0, -1.0, -0.5, 0.0, "negative")
    system.set_output_fcn(2, 0, -0.5, 0.0, 0.5, "zero")
    system.set_output_fcn(3, 0, 0.0, 0.5, 1.0, "positive")
    system.set_output_fcn(4, 0, 0.5, 1.0, 1.5, "positiveBig")

    system.set_output_fcn(0, 1, -0.5, 0.0, 0.5, "none")
    system.set_output_fcn(1, 1, 0.0, 0.5, 1.0, "light")
    system.set_output_fcn(2, 1, 0.5, 1.0, 1.5, "hard")

    for rule in (
        "if distance is small and speed is slow then throttle is zero",
        "if distance is small and speed is medium then throttle is negative",
        "if distance is small and speed is fast then throttle is negativeBig",
        "if distance is medium and speed is slow then throttle is positive",
        "if distance is medium and speed is medium then throttle is zero",
        "if distance is medium and speed is fast then throttle is negative",
        "if distance is big and speed is slow then throttle is positiveBig",
        "if distance is big and speed is medium then throttle is positive",
        "if distance is big and speed is fast then throttle is zero",
        "if distance is small and speed is slow then brake is light",
        "if distance is small and speed is medium then brake is hard",
        "if distance is small and speed is fast then brake is hard",
        "if distance is medium and speed is slow then brake is none",
        "if distance is medium and speed is medium then brake is light",
        "if distance is medium and speed is fast then brake is hard",
        "if distance is big and speed is slow then brake is none",
        "if distance is big and speed is medium then brake is none",
        "if distance is big and speed is fast then brake is light",
    ):
        system.add_rule(rule)
    return system


def cmd_demo(args):
    system = build_example_system()

    print(format_input_set(system, 1))
    print(format_output_set(system, 0))
    print(format_rules(system))
    print(format_system(system))

    distance, speed = getattr(args, "at", None) or (0.2, 1.25)
    print(f"Setting input to ({distance:g}, {speed:g})")
    system.set_input(0, distance)
    system.set_input(1, speed)
    system.calculate_output()
    for name, value in system.outputs().items():
        print(f"{name}: {fmt_value(value)}")
