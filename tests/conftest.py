import pytest

from fzzlib.cli.commands.demo import build_example_system
from fzzlib.fuzzy.model.system import FuzzySystem


def create_sign_system(inputs=1, outputs=1, **kwargs):
    """negative/zero/positive triangles over [-2, 2] on every variable."""
    system = FuzzySystem(inputs, outputs, **kwargs)
    for i in range(inputs):
        name = "input" if inputs == 1 else f"input{i + 1}"
        system.init_input_fcns(i, 3, name)
        system.set_input_fcn(0, i, -2.0, -1.0, 0.0, "negative")
        system.set_input_fcn(1, i, -1.0, 0.0, 1.0, "zero")
        system.set_input_fcn(2, i, 0.0, 1.0, 2.0, "positive")
    for o in range(outputs):
        name = "output" if outputs == 1 else f"output{o + 1}"
        system.init_output_fcns(o, 3, name)
        system.set_output_fcn(0, o, -2.0, -1.0, 0.0, "negative")
        system.set_output_fcn(1, o, -1.0, 0.0, 1.0, "zero")
        system.set_output_fcn(2, o, 0.0, 1.0, 2.0, "positive")
    return system


# One input, one output, inverting rules
@pytest.fixture
def sign_system():
    system = create_sign_system()
    system.add_rule("if input is negative then output is positive")
    system.add_rule("if input is zero then output is zero")
    system.add_rule("if input is positive then output is negative")
    return system


# distance, speed -> throttle, brake
@pytest.fixture
def example_system():
    return build_example_system()


SIGN_YAML = """
inputs:
  - name: input
    sets:
      - {name: negative, left: -2.0, top: -1.0, right: 0.0}
      - {name: zero,     left: -1.0, top: 0.0,  right: 1.0}
      - {name: positive, left: 0.0,  top: 1.0,  right: 2.0}
outputs:
  - name: output
    sets:
      - {name: negative, left: -2.0, top: -1.0, right: 0.0}
      - {name: zero,     left: -1.0, top: 0.0,  right: 1.0}
      - {name: positive, left: 0.0,  top: 1.0,  right: 2.0}
rules:
  - if input is negative then output is positive
  - if input is zero then output is zero
  - if input is positive then output is negative
samples:
  - {input: -1.0}
  - {input: 0.0}
"""


@pytest.fixture
def sign_yaml(tmp_path):
    path = tmp_path / "sign.yaml"
    path.write_text(SIGN_YAML, encoding="utf-8")
    return str(path)


@pytest.fixture
def make_sign_system():
    return create_sign_system
