"""
System definition (YAML or JSON):

  capacity:                 # optional, see Capacity
    max_rules: 64
  inputs:
    - name: distance
      sets:
        - {name: small, left: -0.5, top: 0.0, right: 0.5}
  outputs:
    - name: throttle
      sets: [...]
  rules:
    - if distance is small then throttle is zero
  samples:                  # optional, used by the CLI
    - {distance: 0.2}

Notes:
- .yml/.yaml files go through yaml.safe_load, anything else through json.
- Rules are not parsed here; `fzz validate` or the first cycle reports rule errors.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional

import yaml

from ..core.types import ConfigurationError
from ..model.knowledge import Capacity
from ..model.system import FuzzySystem

logger = logging.getLogger(__name__)

_SET_KEYS = ("name", "left", "top", "right")


def load_document(path: str) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            if path.lower().endswith((".yml", ".yaml")):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"{path}: cannot read file ({e.strerror})") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"{path}: malformed document: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: top level must be a mapping")
    return data


def _variables(data: Dict[str, Any], key: str, where: str) -> List[Dict[str, Any]]:
    items = data.get(key)
    if not isinstance(items, list) or not items:
        raise ConfigurationError(f"{where}: '{key}' must be a non-empty list")
    for i, item in enumerate(items):
        if not isinstance(item, dict) or "name" not in item:
            raise ConfigurationError(f"{where}: {key}[{i}] needs a 'name'")
        if not isinstance(item.get("sets", []), list):
            raise ConfigurationError(f"{where}: {key}[{i}].sets must be a list")
    return items


def _set_params(raw: Any, where: str) -> tuple:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{where}: fuzzy set must be a mapping with {', '.join(_SET_KEYS)}")
    missing = [k for k in _SET_KEYS if k not in raw]
    if missing:
        raise ConfigurationError(f"{where}: fuzzy set missing {', '.join(missing)}")
    try:
        return float(raw["left"]), float(raw["top"]), float(raw["right"]), str(raw["name"])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{where}: non-numeric fuzzy set bound ({e})") from e


def system_from_dict(data: Dict[str, Any], where: str = "<dict>", cache_rules: bool = True) -> FuzzySystem:
    capacity = data.get("capacity")
    if capacity is not None and not isinstance(capacity, dict):
        raise ConfigurationError(f"{where}: 'capacity' must be a mapping")
    inputs = _variables(data, "inputs", where)
    outputs = _variables(data, "outputs", where)

    system = FuzzySystem(len(inputs), len(outputs), Capacity.from_dict(capacity), cache_rules=cache_rules)

    for kind, items in (("input", inputs), ("output", outputs)):
        for vi, var in enumerate(items):
            sets = var.get("sets", [])
            if kind == "input":
                system.init_input_fcns(vi, len(sets), str(var["name"]))
            else:
                system.init_output_fcns(vi, len(sets), str(var["name"]))
            for si, raw in enumerate(sets):
                left, top, right, name = _set_params(raw, f"{where}: {kind} '{var['name']}' set {si}")
                if kind == "input":
                    system.set_input_fcn(si, vi, left, top, right, name)
                else:
                    system.set_output_fcn(si, vi, left, top, right, name)

    rules = data.get("rules", [])
    if not isinstance(rules, list):
        raise ConfigurationError(f"{where}: 'rules' must be a list of strings")
    for i, rule in enumerate(rules):
        if not isinstance(rule, str):
            raise ConfigurationError(f"{where}: rules[{i}] must be a string")
        system.add_rule(rule)

    logger.debug("%s: %d input(s), %d output(s), %d rule(s)", where, len(inputs), len(outputs), len(rules))
    return system


def load_system(path: str, cache_rules: bool = True) -> FuzzySystem:
    return system_from_dict(load_document(path), where=path, cache_rules=cache_rules)


def load_samples(path: str) -> List[Dict[str, float]]:
    """Optional 'samples' section: list of {input_name: value} mappings."""
    samples: Optional[list] = load_document(path).get("samples")
    if samples is None:
        return []
    if not isinstance(samples, list) or not all(isinstance(s, dict) for s in samples):
        raise ConfigurationError(f"{path}: 'samples' must be a list of mappings")
    return [{str(k): float(v) for k, v in s.items()} for s in samples]
