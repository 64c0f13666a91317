"""
Rule grammar:
  if <input> is <set> (and <input> is <set>)* then <output> is <set>

Notes:
- Tokens are separated by exactly one space; keywords are lowercase and case-sensitive.
- Names are resolved against the knowledge base as soon as they are read.
- The output set name runs to the end of the text.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import List, Optional, Tuple

from ..core.rule import ParsedRule
from ..core.types import NameNotFoundError, RuleSyntaxError


class ParserState(Enum):
    EXPECT_IF = auto()
    EXPECT_INPUT = auto()
    EXPECT_INPUT_IS = auto()
    EXPECT_INPUT_SET = auto()
    EXPECT_AND_OR_THEN = auto()
    EXPECT_OUTPUT = auto()
    EXPECT_OUTPUT_IS = auto()
    EXPECT_OUTPUT_SET = auto()


_EXPECTED = {
    ParserState.EXPECT_IF: "'if'",
    ParserState.EXPECT_INPUT: "input name",
    ParserState.EXPECT_INPUT_IS: "'is'",
    ParserState.EXPECT_INPUT_SET: "input fuzzy set name",
    ParserState.EXPECT_AND_OR_THEN: "'and' or 'then'",
    ParserState.EXPECT_OUTPUT: "output name",
    ParserState.EXPECT_OUTPUT_IS: "'is'",
    ParserState.EXPECT_OUTPUT_SET: "output fuzzy set name",
}


def count_clauses(text: str) -> int:
    """Number of antecedent clauses, without resolving any name."""
    n = 1
    for tok in text.split(" "):
        if tok == "then":
            break
        if tok == "and":
            n += 1
    return n


def parse_rule(text: str, kb, index: Optional[int] = None) -> ParsedRule:
    state = ParserState.EXPECT_IF
    tokens = text.split(" ")

    antecedents: List[Tuple[int, int]] = []
    var = -1
    output = -1

    for pos, tok in enumerate(tokens):
        if state is ParserState.EXPECT_OUTPUT_SET:
            # last token has no trailing delimiter, take the rest of the text
            name = " ".join(tokens[pos:])
            break

        if state is ParserState.EXPECT_IF:
            if tok != "if":
                raise RuleSyntaxError(text, tok, _EXPECTED[state], index)
            state = ParserState.EXPECT_INPUT

        elif state is ParserState.EXPECT_INPUT:
            found = kb.input_index(tok)
            if found is None:
                raise NameNotFoundError(text, "input variable", tok, index)
            var = found
            state = ParserState.EXPECT_INPUT_IS

        elif state in (ParserState.EXPECT_INPUT_IS, ParserState.EXPECT_OUTPUT_IS):
            if tok != "is":
                raise RuleSyntaxError(text, tok, _EXPECTED[state], index)
            state = (ParserState.EXPECT_INPUT_SET if state is ParserState.EXPECT_INPUT_IS
                     else ParserState.EXPECT_OUTPUT_SET)

        elif state is ParserState.EXPECT_INPUT_SET:
            found = kb.input_set_index(var, tok)
            if found is None:
                raise NameNotFoundError(text, "input set", tok, index)
            antecedents.append((var, found))
            state = ParserState.EXPECT_AND_OR_THEN

        elif state is ParserState.EXPECT_AND_OR_THEN:
            if tok == "and":
                state = ParserState.EXPECT_INPUT
            elif tok == "then":
                state = ParserState.EXPECT_OUTPUT
            else:
                raise RuleSyntaxError(text, tok, _EXPECTED[state], index)

        elif state is ParserState.EXPECT_OUTPUT:
            found = kb.output_index(tok)
            if found is None:
                raise NameNotFoundError(text, "output variable", tok, index)
            output = found
            state = ParserState.EXPECT_OUTPUT_IS
    else:
        raise RuleSyntaxError(text, None, _EXPECTED[state], index)

    if not name:
        raise RuleSyntaxError(text, None, _EXPECTED[state], index)
    out_set = kb.output_set_index(output, name)
    if out_set is None:
        raise NameNotFoundError(text, "output set", name, index)

    return ParsedRule(antecedents=tuple(antecedents), output=output, output_set=out_set)
