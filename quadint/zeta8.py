"""
Integers of the eighth cyclotomic field, a + b*z + c*z^2 + d*z^3 with z = zeta_8 = (1 + i)/sqrt(2).

z^4 = -1, so z^2 = i and the ring contains Z[i], Z[sqrt(2)] (sqrt(2) = z - z^3) and Z[sqrt(-2)] (sqrt(-2) = z + z^3).
"""
from fractions import Fraction
from math import ceil, floor
from typing import Iterator, Union

from quadint.exceptions import NotDivisibleError
from quadint.quad import quadint
from quadint.rings import ZETA8, QuadraticRing, Zeta8Ring
from quadint.utils import MINUS_SIGN, fits, overflow, render_terms

OP_TYPES = Union["zeta8int", int, quadint]

RING_GAUSSIAN = QuadraticRing(-1)
RING_SQRT2 = QuadraticRing(2)
RING_SQRT_NEG2 = QuadraticRing(-2)


def _mul4(x: tuple[int, int, int, int], y: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
    a, b, c, d = x
    e, f, g, h = y
    return (
        a * e - b * h - c * g - d * f,
        a * f + b * e - c * h - d * g,
        a * g + b * f + c * e - d * h,
        a * h + b * g + c * f + d * e,
    )


class zeta8int:
    """A member of Z[zeta_8], stored as its four integer coordinates on the power basis."""

    __slots__ = ("a", "b", "c", "d")

    a: int
    b: int
    c: int
    d: int

    def __init__(self, a: int, b: int = 0, c: int = 0, d: int = 0) -> None:
        a, b, c, d = int(a), int(b), int(c), int(d)
        if not fits(a, b, c, d):
            raise ArithmeticError(f"({a}, {b}, {c}, {d}) exceeds the 32-bit range")

        self.a, self.b, self.c, self.d = a, b, c, d

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.b, self.c, self.d))

    def _coords(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    def _checked(self, coords: tuple[int, int, int, int], op: str, other: object) -> "zeta8int":
        if not fits(*coords):
            raise overflow(self, op, other, coords)
        return zeta8int(*coords)

    @staticmethod
    def _from_obj(other: object) -> "zeta8int":
        if isinstance(other, zeta8int):
            return other
        if isinstance(other, int):
            return zeta8int(other)
        if isinstance(other, quadint):
            return zeta8int.from_quadint(other)
        raise TypeError(f"Unable to combine zeta8int and type {type(other)}")

    @property
    def ring(self) -> Zeta8Ring:
        return ZETA8

    # region galois
    def galois(self, k: int) -> "zeta8int":
        """The image under z -> z^k, for k in (1, 3, 5, 7)."""
        a, b, c, d = self._coords()
        if k == 1:
            return zeta8int(a, b, c, d)
        if k == 3:
            return zeta8int(a, d, -c, b)
        if k == 5:
            return zeta8int(a, -b, c, -d)
        if k == 7:
            return zeta8int(a, -d, -c, -b)
        raise ValueError(f"k must be a unit mod 8, got {k}")

    def _conjugate_product(self) -> tuple[int, int, int, int]:
        """sigma_3(x) * sigma_5(x) * sigma_7(x), so that x times this is N(x)."""
        return _mul4(_mul4(self.galois(3)._coords(), self.galois(5)._coords()), self.galois(7)._coords())

    def norm(self) -> int:
        n = _mul4(self._coords(), self._conjugate_product())
        assert n[1] == n[2] == n[3] == 0
        return n[0]

    def trace(self) -> int:
        return 4 * self.a

    def algebraic_degree(self) -> int:
        a, b, c, d = self._coords()
        if b == 0 and c == 0 and d == 0:
            return 1 if a else 0
        if b == 0 and d == 0:
            return 2  # Q(i)
        if c == 0 and (b == -d or b == d):
            return 2  # Q(sqrt(2)), Q(sqrt(-2))
        return 4
    # endregion

    # region arithmetic
    def plus(self, other: OP_TYPES) -> "zeta8int":
        o = self._from_obj(other)
        return self._checked((self.a + o.a, self.b + o.b, self.c + o.c, self.d + o.d), "+", other)

    def minus(self, other: OP_TYPES) -> "zeta8int":
        o = self._from_obj(other)
        return self._checked((self.a - o.a, self.b - o.b, self.c - o.c, self.d - o.d), "-", other)

    def times(self, other: OP_TYPES) -> "zeta8int":
        o = self._from_obj(other)
        return self._checked(_mul4(self._coords(), o._coords()), "*", other)

    def divides(self, other: OP_TYPES) -> "zeta8int":
        """
        Exact division, x / y = x * sigma_3(y) * sigma_5(y) * sigma_7(y) / N(y).

        Raises:
            NotDivisibleError: With the floor/ceiling candidates of the quotient coordinates, nearest first.
            ZeroDivisionError: If other == 0.
        """
        o = self._from_obj(other)
        n = o.norm()
        if n == 0:
            raise ZeroDivisionError(f"{self!r} / {other!r}")

        num = _mul4(self._coords(), o._conjugate_product())
        fracs = tuple(Fraction(x, n) for x in num)
        if all(f.denominator == 1 for f in fracs):
            return self._checked((fracs[0].numerator, fracs[1].numerator, fracs[2].numerator, fracs[3].numerator),
                                 "/", other)

        points = {
            (p, q, r, s)
            for p in (floor(fracs[0]), ceil(fracs[0]))
            for q in (floor(fracs[1]), ceil(fracs[1]))
            for r in (floor(fracs[2]), ceil(fracs[2]))
            for s in (floor(fracs[3]), ceil(fracs[3]))
        }

        def distance(p: tuple[int, int, int, int]) -> Fraction:
            return sum(((f - x) * (f - x) for f, x in zip(fracs, p)), Fraction(0))

        candidates = sorted(points, key=lambda p: (distance(p), p))
        raise NotDivisibleError(self, o, fracs, tuple(zeta8int(*p) for p in candidates))

    def __add__(self, other: OP_TYPES) -> "zeta8int":
        if not isinstance(other, (int, zeta8int, quadint)):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: Union[int, quadint]) -> "zeta8int":
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> "zeta8int":
        if not isinstance(other, (int, zeta8int, quadint)):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: Union[int, quadint]) -> "zeta8int":
        if not isinstance(other, (int, quadint)):
            return NotImplemented
        return self._from_obj(other).minus(self)

    def __mul__(self, other: OP_TYPES) -> "zeta8int":
        if not isinstance(other, (int, zeta8int, quadint)):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other: Union[int, quadint]) -> "zeta8int":
        return self.__mul__(other)

    def __truediv__(self, other: OP_TYPES) -> "zeta8int":
        if not isinstance(other, (int, zeta8int, quadint)):
            return NotImplemented
        return self.divides(other)

    def __rtruediv__(self, other: Union[int, quadint]) -> "zeta8int":
        if not isinstance(other, (int, quadint)):
            return NotImplemented
        return self._from_obj(other).divides(self)

    def __neg__(self) -> "zeta8int":
        return self._checked((-self.a, -self.b, -self.c, -self.d), "*", -1)
    # endregion

    # region quadratic subfields
    @classmethod
    def from_quadint(cls, x: quadint) -> "zeta8int":
        """Embed a member of Z[i], Z[sqrt(2)] or Z[sqrt(-2)]."""
        reg, surd = x.regular_part, x.surd_part
        if x.ring == RING_GAUSSIAN:
            return cls(reg, 0, surd, 0)
        if x.ring == RING_SQRT2:
            return cls(reg, surd, 0, -surd)
        if x.ring == RING_SQRT_NEG2:
            return cls(reg, surd, 0, surd)
        if x.surd_part == 0:
            return cls(reg)
        raise ValueError(f"{x.ring.to_ascii_string()} is not a subring of Z[zeta_8]")

    def to_quadint(self) -> quadint:
        """
        The same number as a quadratic integer, when it lies in Q(i), Q(sqrt(2)) or Q(sqrt(-2)).

        Rational values are returned in Z[i].

        Raises:
            ValueError: If the number has algebraic degree 4.
        """
        a, b, c, d = self._coords()
        if b == 0 and d == 0:
            return quadint(a, c, RING_GAUSSIAN)
        if c == 0 and b == -d:
            return quadint(a, b, RING_SQRT2)
        if c == 0 and b == d:
            return quadint(a, b, RING_SQRT_NEG2)
        raise ValueError(f"{self!r} is not in a quadratic subfield")
    # endregion

    def __abs__(self) -> int:
        return abs(self.norm())

    def __bool__(self) -> bool:
        return any(self._coords())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, zeta8int):
            return self._coords() == other._coords()
        return False

    def __hash__(self) -> int:
        return hash((2 * self.a, 2 * self.b, 2 * self.c, 2 * self.d))

    def __str__(self) -> str:
        return render_terms([(self.a, ""), (self.b, "ζ"), (self.c, "ζ²"), (self.d, "ζ³")], MINUS_SIGN)

    def to_ascii_string(self) -> str:
        return render_terms([(self.a, ""), (self.b, "z"), (self.c, "z^2"), (self.d, "z^3")], "-")

    def to_tex_string(self) -> str:
        return render_terms(
            [(self.a, ""), (self.b, "\\zeta_8"), (self.c, "\\zeta_8^2"), (self.d, "\\zeta_8^3")], "-")

    def to_html_string(self) -> str:
        return render_terms(
            [(self.a, ""), (self.b, "&zeta;"), (self.c, "&zeta;<sup>2</sup>"), (self.d, "&zeta;<sup>3</sup>")],
            "&minus;")

    def __repr__(self) -> str:
        return self.to_ascii_string()
