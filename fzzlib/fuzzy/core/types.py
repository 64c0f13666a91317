from __future__ import annotations
from typing import Optional

Float = float
Index = int


class FuzzyError(Exception):
    """Domain error for fuzzy framework."""


class ConfigurationError(FuzzyError):
    """Invalid configuration call: capacity exceeded, bad index, bad set parameters."""


class RuleError(FuzzyError):
    """Base for errors raised while parsing one rule."""

    def __init__(self, msg: str, rule: str, index: Optional[int] = None):
        where = f"rule {index}" if index is not None else "rule"
        super().__init__(f"[{where}] {msg}\n  >> {rule}")
        self.rule = rule
        self.index = index


class RuleSyntaxError(RuleError):
    def __init__(self, rule: str, token: Optional[str], expected: str, index: Optional[int] = None):
        if token is None:
            msg = f"unexpected end of rule, expected {expected}"
        else:
            msg = f"unexpected token '{token}', expected {expected}"
        super().__init__(msg, rule, index)
        self.token = token
        self.expected = expected


class NameNotFoundError(RuleError):
    def __init__(self, rule: str, category: str, token: str, index: Optional[int] = None):
        super().__init__(f"{category} '{token}' not found", rule, index)
        self.category = category
        self.token = token


class NoMatchError(FuzzyError):
    """An output has no centroid this cycle: no rule fired, or the fired sets leave zero area."""

    def __init__(self, output: str, reason: str = "no rule fired"):
        super().__init__(f"{reason} for output '{output}'")
        self.output = output
        self.reason = reason
