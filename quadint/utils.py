from functools import cache
from typing import Iterable

from sympy import factorint

# Coordinates are kept inside the signed 32-bit range; anything outside is an overflow.
INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

MINUS_SIGN = "−"
SQRT_SIGN = "√"


def fits(*values: int) -> bool:
    """True iff every value lies in [INT_MIN, INT_MAX]."""
    return all(INT_MIN <= v <= INT_MAX for v in values)


def overflow(lhs: object, op: str, rhs: object, result: object = None) -> ArithmeticError:
    """
    Build the error for an operation whose exact result, or an operand, left the 32-bit coordinate range.

    The message names both operands so the offending computation can be reproduced. Without a result it is the
    operand that is out of range.
    """
    if result is None:
        return ArithmeticError(f"{lhs!r} {op} {rhs!r}: operand exceeds the range [{INT_MIN}, {INT_MAX}]")

    return ArithmeticError(f"{lhs!r} {op} {rhs!r} = {result} exceeds the range [{INT_MIN}, {INT_MAX}]")


@cache
def is_squarefree(n: int) -> bool:
    """True iff no square of a prime divides n. 0 is not squarefree; -1 and 1 are."""
    if n == 0:
        return False

    return all(e == 1 for e in factorint(abs(n)).values())


def render_terms(terms: Iterable[tuple[int, str]], minus: str = MINUS_SIGN, term_format: str = "{}") -> str:
    """
    Render a sum of coefficient*symbol terms, e.g. [(3, ""), (-2, "i")] -> "3 − 2i".

    Zero terms are dropped and a coefficient of 1 is omitted in front of a non-empty symbol. Each term without
    its sign goes through term_format, so "\\frac{{{}}}{{2}}" puts every term over 2.
    """
    out = ""
    for coeff, sym in terms:
        if coeff == 0:
            continue

        mag = -coeff if coeff < 0 else coeff
        body = term_format.format(sym if (mag == 1 and sym) else f"{mag}{sym}")
        if not out:
            out = f"{minus}{body}" if coeff < 0 else body
        else:
            out += f" {minus} {body}" if coeff < 0 else f" + {body}"

    return out or "0"
