from fractions import Fraction
from math import sqrt
from typing import Optional, Union

from quadint.bounding import bounding_numerators, lattice_numerators
from quadint.exceptions import AlgebraicDegreeOverflowError, NotDivisibleError
from quadint.rings import QuadraticRing
from quadint.utils import INT_MAX, INT_MIN, MINUS_SIGN, SQRT_SIGN, fits, overflow, render_terms

OTHER_OP_TYPES = int
_OTHER_OP_TYPES = (int,)  # mypyc-friendly for isinstance
OP_TYPES = Union["quadint", OTHER_OP_TYPES]

RING_EISENSTEIN = QuadraticRing(-3)


class quadint:
    """
    Quadratic integer in the ring of integers of Q(sqrt(d)).

    Internally stored in "numerator units" as (A, B) representing:
        (A + B*sqrt(d)) / 2

    Integrality constraint:
        A and B both even (the Z[sqrt(d)] points), or
        A and B both odd, which is only allowed when d = 1 (mod 4).

    Notes:
      - The norm A^2 - d*B^2 is always divisible by 4 for valid elements.
      - Every coordinate is confined to the signed 32-bit range; results outside it raise ArithmeticError.
    """

    __slots__ = ("a", "b", "ring")

    a: int
    b: int
    ring: QuadraticRing

    def __init__(self, a: int, b: int, ring: QuadraticRing, *, half: bool = False) -> None:
        """
        Initialize a quadint.

        Args:
            a:
                If half=False (default): the regular part, q = a + b*sqrt(d).
                If half=True: numerator of the regular part, q = (a + b*sqrt(d)) / 2.
                (So the golden ratio is quadint(1, 1, QuadraticRing(5), half=True).)
            b: The surd part, see a.
            ring: The quadratic ring the number belongs to.
            half: Whether inputs are already in numerator-units for the /2 representation.

        Raises:
            ValueError: If the parity does not give an element of the ring.
            ArithmeticError: If a coordinate is outside the 32-bit range.
        """
        a0, b0 = int(a), int(b)

        if not half:
            a0 *= 2
            b0 *= 2

        if (a0 ^ b0) & 1:
            raise ValueError("Both parts of a half-integer must have the same parity")

        if (a0 & 1) and not ring.has_half_integers:
            raise ValueError(f"{ring.to_ascii_string()} has no half-integers")

        reg, surd = (a0, b0) if (a0 & 1) else (a0 // 2, b0 // 2)
        if not fits(reg, surd):
            raise ArithmeticError(f"({reg} + {surd}*sqrt({ring.radicand}))/{2 if (a0 & 1) else 1} "
                                  f"exceeds the range [{INT_MIN}, {INT_MAX}]")

        self.a, self.b, self.ring = a0, b0, ring

    # region constructors / conversions
    @classmethod
    def _make(cls, A: int, B: int, ring: QuadraticRing) -> "quadint":
        """Construct a new value from internal numerators A, B."""
        return cls(A, B, ring, half=True)

    @classmethod
    def from_omega(cls, m: int, n: int) -> "quadint":
        """m + n*omega in Z[omega], with omega = (-1 + sqrt(-3))/2."""
        return cls(2 * m - n, n, RING_EISENSTEIN, half=True)

    def _align(self, other: object, op: str) -> Optional[tuple["quadint", "quadint"]]:
        """
        Bring self and other into one ring, keeping their order.

        An int, or a rational quadint from another ring, is treated as a scalar of the other operand's ring.

        Raises:
            AlgebraicDegreeOverflowError: If both are irrational and from different rings.
            ArithmeticError: If other is an int outside the 32-bit range.
        """
        if isinstance(other, _OTHER_OP_TYPES):
            if not fits(int(other)):
                raise overflow(self, op, other)

            return self, self._make(2 * int(other), 0, self.ring)

        if not isinstance(other, quadint):
            return None

        if other.ring == self.ring:
            return self, other

        if other.b == 0:
            return self, self._make(other.a, 0, self.ring)

        if self.b == 0:
            return self._make(self.a, 0, other.ring), other

        raise AlgebraicDegreeOverflowError(
            f"{self!r} is from {self.ring.to_ascii_string()} but {other!r} is from "
            f"{other.ring.to_ascii_string()}; the result would be of degree 4", 4, self, other)

    def _result(self, A: int, B: int, op: str, other: object) -> "quadint":
        """Construct the result of `self op other` from numerators, naming the operands if it overflows."""
        reg, surd = (A, B) if (A & 1) else (A // 2, B // 2)
        if not fits(reg, surd):
            raise overflow(self, op, other, f"({A} + {B}*sqrt({self.ring.radicand}))/2")

        return self._make(A, B, self.ring)
    # endregion

    # region components
    @property
    def regular_part(self) -> int:
        """Numerator of the regular part when written over `denominator`."""
        return self.a if (self.a & 1) else self.a // 2

    @property
    def surd_part(self) -> int:
        """Numerator of the surd part when written over `denominator`."""
        return self.b if (self.a & 1) else self.b // 2

    @property
    def denominator(self) -> int:
        """2 for a true half-integer, otherwise 1."""
        return 2 if (self.a & 1) else 1

    @property
    def real_part_numeric(self) -> float:
        if self.ring.radicand < 0:
            return self.a / 2
        return (self.a + self.b * sqrt(self.ring.radicand)) / 2

    @property
    def imag_part_numeric(self) -> float:
        if self.ring.radicand < 0:
            return self.b * sqrt(self.ring.abs_radicand) / 2
        return 0.0

    def components2(self) -> tuple[int, int]:
        """Return the stored numerator components (A, B) for (...)/2."""
        return (self.a, self.b)

    def conjugate(self) -> "quadint":
        """a + b*sqrt(d) -> a - b*sqrt(d)"""
        return self._make(self.a, -self.b, self.ring)
    # endregion

    # region invariants
    def norm(self) -> int:
        """
        Field norm:
            N((A + B*sqrt(d))/2) = (A^2 - d*B^2)/4

        Negative for some elements of real quadratic rings.

        Raises:
            ArithmeticError: If there is a non-integral norm due to parity violation.
        """
        q, r = divmod(self.a * self.a - self.ring.radicand * self.b * self.b, 4)
        if r != 0:
            raise ArithmeticError("Non-integral norm; parity constraint violated")

        return q

    def trace(self) -> int:
        """The number plus its conjugate: A."""
        return self.a

    def algebraic_degree(self) -> int:
        """0 for zero, 1 for a nonzero rational integer, 2 otherwise."""
        if self.b != 0:
            return 2

        return 1 if self.a != 0 else 0

    def min_polynomial_coeffs(self) -> tuple[int, int, int]:
        """Coefficients (c0, c1, c2) of the minimal polynomial c2*x^2 + c1*x + c0, lowest degree first."""
        degree = self.algebraic_degree()
        if degree == 2:
            return self.norm(), -self.trace(), 1
        if degree == 1:
            return -self.regular_part, 1, 0
        return 0, 1, 0

    def _min_polynomial(self, x: str, x_squared: str, minus: str) -> str:
        c0, c1, c2 = self.min_polynomial_coeffs()
        if c2 == 0 and c0 == 0:
            return x
        return render_terms([(c2, x_squared), (c1, x), (c0, "")], minus)

    def min_polynomial_string(self) -> str:
        return self._min_polynomial("x", "x²", MINUS_SIGN)

    def min_polynomial_string_tex(self) -> str:
        return self._min_polynomial("x", "x^2", "-")

    def min_polynomial_string_html(self) -> str:
        return self._min_polynomial("<i>x</i>", "<i>x</i><sup>2</sup>", "&minus;")
    # endregion

    # region arithmetic
    def __add__(self, other: OP_TYPES) -> "quadint":
        pair = self._align(other, "+")
        if pair is None:
            return NotImplemented

        x, y = pair
        return x._result(x.a + y.a, x.b + y.b, "+", y)

    def __radd__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> "quadint":
        pair = self._align(other, "-")
        if pair is None:
            return NotImplemented

        x, y = pair
        return x._result(x.a - y.a, x.b - y.b, "-", y)

    def __rsub__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__neg__().__add__(other)

    def __neg__(self) -> "quadint":
        return self._result(-self.a, -self.b, "*", -1)

    def __pos__(self) -> "quadint":
        return self._make(self.a, self.b, self.ring)

    def __mul__(self, other: OP_TYPES) -> "quadint":
        pair = self._align(other, "*")
        if pair is None:
            return NotImplemented

        x, y = pair
        d = x.ring.radicand

        # If q=(A+B*sqrt(d))/2 and r=(E+F*sqrt(d))/2, then qr has denominator 4;
        # we store with denominator 2, so we must divide resulting numerators by 2.
        A, B = x.a, x.b
        E, F = y.a, y.b
        P = A * E + d * B * F
        Q = A * F + B * E

        if (P & 1) or (Q & 1):
            raise ArithmeticError("Non-integral product; parity constraint violated")

        return x._result(P // 2, Q // 2, "*", y)

    def __rmul__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__mul__(other)

    def __pow__(self, exp: int) -> "quadint":
        e = int(exp)
        if e < 0:
            raise ValueError("Negative powers not supported")

        result = self._make(2, 0, self.ring)  # multiplicative identity
        base: quadint = self
        while e:
            if e & 1:
                result = result * base

            e >>= 1
            if e:
                base = base * base

        return result

    def plus(self, other: OP_TYPES) -> "quadint":
        return self + other

    def minus(self, other: OP_TYPES) -> "quadint":
        return self - other

    def times(self, other: OP_TYPES) -> "quadint":
        return self * other

    def negate(self) -> "quadint":
        return -self
    # endregion

    # region division
    def divides(self, other: OP_TYPES) -> "quadint":
        """
        Exact division on the lattice.

        The quotient is computed exactly in the field of fractions:
            self / other = self * conj(other) / N(other)
        and returned only if it is itself an element of the ring.

        Raises:
            NotDivisibleError: If the quotient is not a lattice point. The error carries the rational
                coordinates of the quotient and up to four nearby lattice points, nearest first.
            ZeroDivisionError: If other == 0.
            TypeError: If other is not an int or quadint.
        """
        pair = self._align(other, "/")
        if pair is None:
            raise TypeError(f"Unable to divide quadint and type {type(other)}")

        x, y = pair
        n = y.norm()
        if n == 0:
            raise ZeroDivisionError(f"{x!r} / {y!r}")

        d = x.ring.radicand
        A, B = x.a, x.b
        E, F = y.a, y.b

        # (A + B*sqrt(d))(E - F*sqrt(d)) / 4, then divided by the norm
        reg = Fraction(A * E - d * B * F, 4 * n)
        surd = Fraction(B * E - A * F, 4 * n)

        nums = lattice_numerators(reg, surd, x.ring.has_half_integers)
        if nums is None:
            candidates = tuple(
                self._make(P, Q, x.ring)
                for P, Q in bounding_numerators(reg, surd, d, x.ring.has_half_integers)
            )
            raise NotDivisibleError(x, y, (reg, surd), candidates)

        return x._result(nums[0], nums[1], "/", y)

    def __truediv__(self, other: OP_TYPES) -> "quadint":
        if not isinstance(other, (int, quadint)):
            return NotImplemented

        return self.divides(other)

    def __rtruediv__(self, other: OTHER_OP_TYPES) -> "quadint":
        if isinstance(other, _OTHER_OP_TYPES):
            if not fits(int(other)):
                raise overflow(other, "/", self)

            return self._make(2 * int(other), 0, self.ring).divides(self)

        return NotImplemented

    def __divmod__(self, other: OP_TYPES) -> tuple["quadint", "quadint"]:
        """
        Division with remainder on the lattice:
            self = q * other + r

        q is the exact quotient when there is one, otherwise the bounding integer that leaves
        the remainder of smallest absolute norm (first one wins ties).

        Raises:
            ZeroDivisionError: if other == 0
            NotImplementedError: if other is unsupported type
        """
        if not isinstance(other, (int, quadint)):
            raise NotImplementedError

        try:
            q = self.divides(other)
        except NotDivisibleError as e:
            best: Optional[tuple[quadint, quadint]] = None
            for c in e.bounding_integers:
                assert isinstance(c, quadint)
                r = self - c * other
                if best is None or abs(r) < abs(best[1]):
                    best = (c, r)

            assert best is not None
            return best

        return q, self - q * other

    def __floordiv__(self, other: OP_TYPES) -> "quadint":
        q, _ = divmod(self, other)
        return q

    def __mod__(self, other: OP_TYPES) -> "quadint":
        _, r = divmod(self, other)
        return r
    # endregion

    def __abs__(self) -> int:
        """Absolute value of the norm, the size the Euclidean algorithm compares."""
        return abs(self.norm())

    def __bool__(self) -> bool:
        return (self.a | self.b) != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, quadint):
            return False

        return (self.a, self.b, self.ring) == (other.a, other.b, other.ring)

    def __hash__(self) -> int:
        # hash(-1) == hash(-2) in CPython; doubling keeps small components apart
        return hash((2 * self.a, 2 * self.b, 2 * self.ring.radicand))

    # region string forms
    def _render(self, surd_symbol: str, minus: str, half_format: str) -> str:
        if self.a & 1:
            return half_format.format(render_terms([(self.a, ""), (self.b, surd_symbol)], minus))

        return render_terms([(self.a // 2, ""), (self.b // 2, surd_symbol)], minus)

    def __str__(self) -> str:
        d = self.ring.radicand
        if d == -1:
            sym = "i"
        elif d < 0:
            sym = f"{SQRT_SIGN}({MINUS_SIGN}{-d})"
        else:
            sym = f"{SQRT_SIGN}{d}"

        return self._render(sym, MINUS_SIGN, "({})/2")

    def to_ascii_string(self) -> str:
        d = self.ring.radicand
        return self._render("i" if d == -1 else f"sqrt({d})", "-", "({})/2")

    def to_tex_string(self) -> str:
        """TeX, with the regular and surd parts over separate denominators, e.g. \\frac{1}{2} + \\frac{\\sqrt{5}}{2}"""
        d = self.ring.radicand
        sym = "i" if d == -1 else f"\\sqrt{{{d}}}"
        if self.a & 1:
            return render_terms([(self.a, ""), (self.b, sym)], "-", "\\frac{{{}}}{{2}}")

        return self._render(sym, "-", "{}")

    def to_tex_string_single_denom(self) -> str:
        """TeX with a single denominator, e.g. \\frac{1 + \\sqrt{5}}{2}"""
        d = self.ring.radicand
        return self._render("i" if d == -1 else f"\\sqrt{{{d}}}", "-", "\\frac{{{}}}{{2}}")

    def to_html_string(self) -> str:
        d = self.ring.radicand
        if d == -1:
            sym = "<i>i</i>"
        elif d < 0:
            sym = f"&radic;(&minus;{-d})"
        else:
            sym = f"&radic;{d}"

        return self._render(sym, "&minus;", "({})/2")

    def _render_alt(self, theta: str, omega: str, phi: str, minus: str) -> str:
        # (A + B*sqrt(d))/2 == (A - B)/2 + B*theta, with theta = (1 + sqrt(d))/2 and omega = (-1 + sqrt(-3))/2
        d = self.ring.radicand
        if d == -3:
            return render_terms([((self.a + self.b) // 2, ""), (self.b, omega)], minus)

        return render_terms([((self.a - self.b) // 2, ""), (self.b, phi if d == 5 else theta)], minus)

    def to_alt_string(self) -> str:
        """
        Unicode in terms of the ring's generator when the ring has half-integers.

        The generator is θ = (1 + √d)/2, written φ for d = 5, except in O_Q(√−3) which uses ω = (−1 + √−3)/2.
        For example (5 + √−7)/2 is "2 + θ". In rings without half-integers this is the same as str().
        """
        if not self.ring.has_half_integers:
            return str(self)

        return self._render_alt("θ", "ω", "φ", MINUS_SIGN)

    def to_ascii_alt_string(self) -> str:
        if not self.ring.has_half_integers:
            return self.to_ascii_string()

        return self._render_alt("theta", "omega", "phi", "-")

    def to_tex_alt_string(self) -> str:
        if not self.ring.has_half_integers:
            return self.to_tex_string()

        return self._render_alt("\\theta", "\\omega", "\\phi", "-")

    def to_html_alt_string(self) -> str:
        if not self.ring.has_half_integers:
            return self.to_html_string()

        return self._render_alt("&theta;", "&omega;", "&phi;", "&minus;")

    def __repr__(self) -> str:
        return self.to_ascii_string()
    # endregion
