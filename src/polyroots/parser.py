# -----------------------------------------------------------------------------
# Polynomial parser
# Purpose:
#   Turn a human-written single-variable polynomial ("x^2 - 3x + 2") into a
#   dense coefficient vector in descending powers ([1, -3, 2]).
# Grammar (after removing whitespace and lowercasing):
#   polynomial := term (SIGN term)*
#   term       := SIGN? (NUMBER? 'x' ('^' INTEGER)? | NUMBER)
# Errors:
#   - EmptyExpression when nothing is left after stripping whitespace
#   - InvalidExpression with the offending position for anything else
# -----------------------------------------------------------------------------

# src/polyroots/parser.py
from __future__ import annotations
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .types import EmptyExpression, InvalidExpression

_WS = re.compile(r"\s+")

# Highest exponent accepted; larger degrees are rejected before allocation
MAX_DEGREE = 100

# Literals returned without tokenizing
_SHORTCUTS = {"0": [0.0], "1": [1.0]}

SIGN, NUMBER, X, CARET = "SIGN", "NUMBER", "X", "CARET"

@dataclass
class Token:
    kind: str
    text: str
    pos: int


def normalize(expression: str) -> str:
    # Whitespace is insignificant; 'X' and 'x' are the same variable
    return _WS.sub("", expression or "").lower()

def tokenize(text: str) -> List[Token]:
    """
    Split normalised text into SIGN / NUMBER / X / CARET tokens.
    NUMBER is DIGITS with an optional '.DIGITS' fraction.
    """
    tokens: List[Token] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch in "+-":
            tokens.append(Token(SIGN, ch, i))
            i += 1
        elif ch.isdigit():
            j = i
            while j < n and text[j].isdigit():
                j += 1
            if j + 1 < n and text[j] == "." and text[j + 1].isdigit():
                j += 1
                while j < n and text[j].isdigit():
                    j += 1
            tokens.append(Token(NUMBER, text[i:j], i))
            i = j
        elif ch == "x":
            tokens.append(Token(X, ch, i))
            i += 1
        elif ch == "^":
            tokens.append(Token(CARET, ch, i))
            i += 1
        else:
            raise InvalidExpression(f"Invalid polynomial expression: unexpected {ch!r}", i)
    return tokens


class _TermParser:
    """
    Recursive-descent parser over the token list.
    Produces (exponent, coefficient, has_x) triples in input order.
    """
    def __init__(self, tokens: List[Token], text: str):
        self.tokens = tokens
        self.text = text
        self.i = 0

    def _peek(self) -> Optional[Token]:
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def _advance(self) -> Token:
        tok = self.tokens[self.i]
        self.i += 1
        return tok

    def _fail(self, what: str, tok: Optional[Token]):
        pos = tok.pos if tok is not None else len(self.text)
        found = repr(tok.text) if tok is not None else "end of input"
        raise InvalidExpression(f"Invalid polynomial expression: expected {what}, found {found}", pos)

    def parse(self) -> List[Tuple[int, float, bool]]:
        terms = [self._term()]
        while self._peek() is not None:
            tok = self._peek()
            if tok.kind != SIGN:
                self._fail("'+' or '-'", tok)
            terms.append(self._term())
        return terms

    def _term(self) -> Tuple[int, float, bool]:
        sign = ""
        tok = self._peek()
        if tok is not None and tok.kind == SIGN:
            sign = self._advance().text
            tok = self._peek()

        if tok is None or tok.kind not in (NUMBER, X):
            self._fail("a number or 'x'", tok)

        number: Optional[Token] = None
        if tok.kind == NUMBER:
            number = self._advance()
            nxt = self._peek()
            if nxt is None or nxt.kind != X:
                return 0, _coefficient(sign, number), False

        self._advance()  # the 'x'
        return self._exponent(), _x_coefficient(sign, number), True

    def _exponent(self) -> int:
        tok = self._peek()
        if tok is None or tok.kind != CARET:
            return 1
        self._advance()
        tok = self._peek()
        if tok is None or tok.kind != NUMBER or "." in tok.text:
            self._fail("a whole-number exponent", tok)
        digits = tok.text.lstrip("0") or "0"
        # compare lengths first; int() refuses very long digit strings
        if len(digits) > len(str(MAX_DEGREE)) or int(digits) > MAX_DEGREE:
            raise InvalidExpression(
                f"Invalid polynomial expression: exponent exceeds maximum degree {MAX_DEGREE}", tok.pos)
        self._advance()
        return int(digits)


def _coefficient(sign: str, number: Token) -> float:
    value = float(sign + number.text)
    if not math.isfinite(value):
        raise InvalidExpression("Invalid polynomial expression: coefficient out of range", number.pos)
    return value

def _x_coefficient(sign: str, number: Optional[Token]) -> float:
    # "x" / "+x" → 1, "-x" → -1, otherwise the signed number
    if number is None:
        return -1.0 if sign == "-" else 1.0
    return _coefficient(sign, number)

def parse_polynomial(expression: str) -> List[float]:
    """
    Parse text into a descending-power coefficient vector.

    The vector length is the highest exponent among the x-terms plus one; a
    text without any x-term yields a single constant. Terms that repeat an
    exponent overwrite the earlier value.
    """
    text = normalize(expression)
    if not text:
        raise EmptyExpression()
    if text in _SHORTCUTS:
        return list(_SHORTCUTS[text])

    terms = _TermParser(tokenize(text), text).parse()

    highest = max((exp for exp, _, has_x in terms if has_x), default=0)
    ascending = [0.0] * (highest + 1)
    for exp, coeff, _ in terms:
        ascending[exp] = coeff
    return list(reversed(ascending))
