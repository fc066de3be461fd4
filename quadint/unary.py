from fractions import Fraction
from math import ceil, floor
from typing import Union

from quadint.exceptions import NotDivisibleError
from quadint.rings import Z, UnaryRing
from quadint.utils import MINUS_SIGN, fits, overflow

OP_TYPES = Union["unaryint", int]


class unaryint:
    """
    A rational integer seen as an algebraic integer of degree 1.

    Arithmetic is checked against the signed 32-bit range: a result that does not fit raises ArithmeticError
    naming both operands instead of wrapping around.
    """

    __slots__ = ("n",)

    n: int

    def __init__(self, n: int) -> None:
        n = int(n)
        if not fits(n):
            raise ArithmeticError(f"{n} exceeds the 32-bit range")

        self.n = n

    @property
    def ring(self) -> UnaryRing:
        return Z

    def norm(self) -> int:
        return self.n

    def trace(self) -> int:
        return self.n

    def algebraic_degree(self) -> int:
        return 1 if self.n else 0

    def _value(self, other: object) -> int:
        if isinstance(other, unaryint):
            return other.n
        if isinstance(other, int):
            return other
        raise TypeError(f"Unable to combine unaryint and type {type(other)}")

    def _checked(self, result: int, op: str, other: object) -> "unaryint":
        if not fits(result):
            raise overflow(self, op, other, result)
        return unaryint(result)

    def plus(self, other: OP_TYPES) -> "unaryint":
        return self._checked(self.n + self._value(other), "+", other)

    def minus(self, other: OP_TYPES) -> "unaryint":
        return self._checked(self.n - self._value(other), "-", other)

    def times(self, other: OP_TYPES) -> "unaryint":
        return self._checked(self.n * self._value(other), "*", other)

    def divides(self, other: OP_TYPES) -> "unaryint":
        """
        Exact division.

        Raises:
            NotDivisibleError: With the floor and ceiling of the quotient as bounding integers.
            ZeroDivisionError: If other == 0.
        """
        m = self._value(other)
        if m == 0:
            raise ZeroDivisionError(f"{self!r} / {other!r}")

        q = Fraction(self.n, m)
        if q.denominator == 1:
            return self._checked(q.numerator, "/", other)

        candidates = tuple(sorted({floor(q), ceil(q)}, key=lambda c: (abs(q - c), c)))
        raise NotDivisibleError(self, unaryint(m), (q,), tuple(unaryint(c) for c in candidates))

    def __add__(self, other: OP_TYPES) -> "unaryint":
        if not isinstance(other, (int, unaryint)):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: int) -> "unaryint":
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> "unaryint":
        if not isinstance(other, (int, unaryint)):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: int) -> "unaryint":
        return unaryint(other).minus(self)

    def __mul__(self, other: OP_TYPES) -> "unaryint":
        if not isinstance(other, (int, unaryint)):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other: int) -> "unaryint":
        return self.__mul__(other)

    def __truediv__(self, other: OP_TYPES) -> "unaryint":
        if not isinstance(other, (int, unaryint)):
            return NotImplemented
        return self.divides(other)

    def __neg__(self) -> "unaryint":
        return self._checked(-self.n, "*", -1)

    def __abs__(self) -> int:
        return abs(self.n)

    def __int__(self) -> int:
        return self.n

    def __bool__(self) -> bool:
        return self.n != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, unaryint):
            return self.n == other.n
        return False

    def __hash__(self) -> int:
        return hash((2 * self.n, 0, 2))

    def __str__(self) -> str:
        return f"{MINUS_SIGN}{-self.n}" if self.n < 0 else str(self.n)

    def to_ascii_string(self) -> str:
        return str(self.n)

    def to_tex_string(self) -> str:
        return str(self.n)

    def to_html_string(self) -> str:
        return f"&minus;{-self.n}" if self.n < 0 else str(self.n)

    def __repr__(self) -> str:
        return f"unaryint({self.n})"
