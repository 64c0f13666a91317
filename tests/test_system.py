import logging

import pytest

from fzzlib.fuzzy.core.types import ConfigurationError, NameNotFoundError, NoMatchError, RuleSyntaxError
from fzzlib.fuzzy.model.knowledge import Capacity
from fzzlib.fuzzy.model.system import FuzzySystem
from fzzlib.cli.commands.demo import build_example_system


@pytest.mark.parametrize("x,expected", [(0.0, 0.0), (-1.0, 1.0), (1.0, -1.0), (-0.5, 0.5), (0.5, -0.5)])
def test_sign_inversion(sign_system, x, expected):
    sign_system.set_input(0, x)
    sign_system.calculate_output()
    assert sign_system.get_output(0) == pytest.approx(expected, abs=1e-9)


def test_sign_off_grid_point(sign_system):
    # 0.3 is not a set vertex, so the aggregated region is asymmetric
    sign_system.set_input(0, 0.3)
    sign_system.calculate_output()
    assert sign_system.get_output(0) == pytest.approx(-0.3347107438, abs=1e-6)


# throttle regression values, independently computed for the same rule set
THROTTLE_GOLDEN = [
    ((0.2, 1.25), -0.4408053691),
    ((0.9, 0.3), 0.6861520999),
    ((0.05, 2.5), -0.9147834275),
    ((1.2, 0.6), 0.7096774194),
]
# no independent value exists for brake; pinned to this library's own result (24.5 / 31)
BRAKE_AT_DEMO_POINT = 0.7903225806


@pytest.mark.parametrize("point,expected", THROTTLE_GOLDEN)
def test_throttle_golden(example_system, point, expected):
    example_system.set_input(0, point[0])
    example_system.set_input(1, point[1])
    example_system.calculate_output()
    assert example_system.get_output(0) == pytest.approx(expected, abs=1e-6)


def test_throttle_and_brake(example_system):
    example_system.set_input(0, 0.2)
    example_system.set_input(1, 1.25)
    trace = example_system.calculate_output()
    assert example_system.get_output(0) == pytest.approx(-0.4408053691, abs=1e-6)
    assert example_system.get_output(1) == pytest.approx(BRAKE_AT_DEMO_POINT, abs=1e-6)
    assert len(trace.fired) == 8
    assert example_system.last_cycle is trace


def test_repeat_cycle_is_identical(example_system):
    example_system.set_inputs({"distance": 0.9, "speed": 0.3})
    example_system.calculate_output()
    first = example_system.outputs()
    example_system.calculate_output()
    assert example_system.outputs() == first
    assert build_example_system(cache_rules=False).engine.run([0.9, 0.3]).outputs == list(first.values())


def test_no_rule_fires(sign_system, caplog):
    sign_system.set_input(0, 5.0)
    with caplog.at_level(logging.WARNING):
        sign_system.calculate_output()
    assert "no rule fired for output 'output'" in caplog.text
    assert sign_system.outputs() == {"output": None}
    with pytest.raises(NoMatchError):
        sign_system.get_output(0)

    # system stays usable
    sign_system.set_input(0, 0.0)
    sign_system.calculate_output()
    assert sign_system.get_output(0) == pytest.approx(0.0, abs=1e-9)


def test_no_match_on_one_output_only(make_sign_system):
    system = make_sign_system(1, 2)
    system.add_rule("if input is zero then output1 is zero")
    system.set_input(0, 0.0)
    system.calculate_output()
    assert system.get_output(0) == pytest.approx(0.0, abs=1e-9)
    assert system.outputs()["output2"] is None


def test_bad_rule_then_recovery(sign_system):
    sign_system.add_rule("if input is tiny then output is zero")
    with pytest.raises(NameNotFoundError):
        sign_system.calculate_output()
    assert sign_system.last_cycle is None
    assert sign_system.outputs() == {"output": None}

    sign_system.remove_rule(3)
    sign_system.set_input(0, -1.0)
    sign_system.calculate_output()
    assert sign_system.get_output(0) == pytest.approx(1.0, abs=1e-9)


def test_rule_list_mutations(sign_system):
    assert len(sign_system.rules) == 3
    assert sign_system.remove_rule(1) == "if input is zero then output is zero"
    sign_system.clear_rules()
    assert sign_system.rules == []
    sign_system.calculate_output()
    assert sign_system.outputs() == {"output": None}


def test_validate_rules(example_system):
    assert len(example_system.validate_rules()) == 18
    example_system.set_rule(4, "if distance is medium and speed is medium then throttle")
    with pytest.raises(RuleSyntaxError) as exc:
        example_system.validate_rules()
    assert "[rule 4]" in str(exc.value)


def test_names(example_system):
    assert example_system.input_names == ["distance", "speed"]
    assert example_system.output_names == ["throttle", "brake"]


def test_set_inputs_by_name(example_system):
    example_system.set_inputs({"speed": 1.5})
    assert example_system.get_input(1) == 1.5
    assert example_system.get_input(0) == 0.0
    with pytest.raises(ConfigurationError):
        example_system.set_inputs({"altitude": 1.0})


def test_index_errors(sign_system):
    with pytest.raises(ConfigurationError):
        sign_system.set_input(1, 0.0)
    with pytest.raises(ConfigurationError):
        sign_system.get_input(-1)
    with pytest.raises(ConfigurationError):
        sign_system.get_output(1)
    with pytest.raises(ConfigurationError):
        sign_system.set_input_fcn(3, 0, 0.0, 1.0, 2.0, "extra")
    with pytest.raises(ConfigurationError):
        sign_system.set_rule(5, "if input is zero then output is zero")
    with pytest.raises(ConfigurationError):
        sign_system.remove_rule(3)


def test_capacity_limits():
    with pytest.raises(ConfigurationError):
        FuzzySystem(5, 1)
    with pytest.raises(ConfigurationError):
        FuzzySystem(1, 3)
    with pytest.raises(ConfigurationError):
        FuzzySystem(0, 1)

    system = FuzzySystem(1, 1, Capacity(max_rules=2, max_sets=3))
    with pytest.raises(ConfigurationError):
        system.init_input_fcns(0, 4, "input")
    system.init_input_fcns(0, 3, "input")
    system.add_rule("if input is a then output is b")
    system.add_rule("if input is a then output is c")
    with pytest.raises(ConfigurationError):
        system.add_rule("if input is a then output is d")


def test_antecedent_limit(make_sign_system):
    system = make_sign_system(4, 1)
    clauses = " and ".join(f"input{i} is zero" for i in (1, 2, 3, 4))
    system.add_rule(f"if {clauses} then output is zero")
    with pytest.raises(ConfigurationError):
        system.add_rule(f"if {clauses} and input1 is zero then output is zero")


def test_duplicate_names(make_sign_system):
    system = make_sign_system()
    with pytest.raises(ConfigurationError):
        system.set_input_fcn(1, 0, -1.0, 0.0, 1.0, "negative")
    # redefining a slot under its own name is fine
    system.set_input_fcn(1, 0, -1.5, 0.0, 1.5, "zero")
    with pytest.raises(ConfigurationError):
        system.init_output_fcns(0, 3, "input")


def test_invalid_set_parameters(sign_system):
    with pytest.raises(ConfigurationError):
        sign_system.set_output_fcn(0, 0, 1.0, 0.0, -1.0, "negative")


def test_uninitialized_variable():
    system = FuzzySystem(1, 1)
    with pytest.raises(ConfigurationError):
        system.set_input_fcn(0, 0, 0.0, 1.0, 2.0, "a")


@pytest.mark.parametrize("step", [0.0, -0.02])
def test_integration_step_must_be_positive(step):
    with pytest.raises(ConfigurationError):
        build_example_system(step=step)


def test_fired_rule_with_zero_area(caplog):
    # output set narrower than the sampling step: every grid point has membership 0
    system = FuzzySystem(1, 1)
    system.init_input_fcns(0, 1, "x")
    system.set_input_fcn(0, 0, -1.0, 0.0, 1.0, "on")
    system.init_output_fcns(0, 1, "o")
    system.set_output_fcn(0, 0, 0.001, 0.005, 0.011, "spike")
    system.add_rule("if x is on then o is spike")

    with caplog.at_level(logging.WARNING):
        trace = system.calculate_output()
    assert len(trace.fired) == 1
    assert system.outputs() == {"o": None}
    assert "zero area" in caplog.text
    assert "no rule fired" not in caplog.text
    with pytest.raises(NoMatchError) as exc:
        system.get_output(0)
    assert "zero area" in str(exc.value)
    assert exc.value.output == "o"
