"""
The Euclidean algorithm on quadratic integers, and some number-theoretic helpers built on it.

Only a handful of quadratic rings are norm-Euclidean, but the Euclidean algorithm with the absolute norm
can still succeed on particular pairs from other rings. ``euclidean_gcd_attempt`` runs it anyway and reports
whether the run reached a remainder of zero; ``euclidean_gcd`` only accepts the rings where that is guaranteed.
"""
import logging

from dataclasses import dataclass
from math import gcd, isqrt
from typing import Optional, Union

from sympy import isprime
from sympy.ntheory import legendre_symbol

from quadint.algebraic import ALGEBRAIC_TYPES, AnyAlgebraicInteger
from quadint.bounding import euclidean_numerators
from quadint.exceptions import (
    AlgebraicDegreeOverflowError,
    NonEuclideanDomainError,
    NotDivisibleError,
    UnsupportedNumberDomainError,
)
from quadint.quad import quadint
from quadint.rings import QuadraticRing, UnaryRing, Zeta8Ring
from quadint.unary import unaryint
from quadint.zeta8 import zeta8int

_logger = logging.getLogger(__name__)

NORM_EUCLIDEAN_QUADRATIC_IMAGINARY_RINGS_D = (-11, -7, -3, -2, -1)
NORM_EUCLIDEAN_QUADRATIC_REAL_RINGS_D = (2, 3, 5, 6, 7, 11, 13, 17, 19, 21, 29, 33, 37, 41, 57, 73)
NORM_EUCLIDEAN_QUADRATIC_RINGS_D = NORM_EUCLIDEAN_QUADRATIC_IMAGINARY_RINGS_D + NORM_EUCLIDEAN_QUADRATIC_REAL_RINGS_D

# The imaginary quadratic rings with unique factorization
HEEGNER_NUMBERS = (-163, -67, -43, -19, -11, -7, -3, -2, -1)

GCD_TYPES = Union[int, AnyAlgebraicInteger]


# TODO: Once Py3.9 support has been dropped, add slots=True
# @dataclass(frozen=True, slots=True)
@dataclass(frozen=True)
class GCDAttempt:
    """
    Outcome of running the Euclidean algorithm on a pair from a ring that may not be Euclidean.

    - value: the last nonzero divisor reached, sign-normalized so that its regular part is non-negative
      exactly when the run was certified (see ``try_euclidean_gcd_anyway``).
    - certified: True iff the run reached a zero remainder, so value is a gcd.
    - steps: how many divisions were performed.
    """
    value: quadint
    certified: bool
    steps: int


def _check_same_ring(a: AnyAlgebraicInteger, b: AnyAlgebraicInteger) -> None:
    if a.ring != b.ring:
        degree = max(a.algebraic_degree(), b.algebraic_degree())
        raise AlgebraicDegreeOverflowError(
            f"{a.to_ascii_string()} is from {a.ring.to_ascii_string()} but {b.to_ascii_string()} is from "
            f"{b.ring.to_ascii_string()}", degree, a, b)


def _euclid(a: quadint, b: quadint) -> tuple[quadint, bool, int]:
    """
    The Euclidean loop, recovering from inexact divisions with the bounding candidates.

    Returns:
        tuple: (last divisor, whether the run converged, number of steps). No sign normalization is applied.
    """
    if abs(a) < abs(b):
        a, b = b, a

    steps = 0
    while b:
        steps += 1
        try:
            q = a / b
        except NotDivisibleError as e:
            remainder: Optional[quadint] = None
            for candidate in e.bounding_integers:
                assert isinstance(candidate, quadint)
                tentative = a - candidate * b
                if abs(tentative) < abs(b):
                    _logger.debug("step %d: %r / %r, chose %r, remainder %r",
                                  steps, a, b, candidate, tentative)
                    remainder = tentative
                    break

            if remainder is None:
                _logger.debug("step %d: no candidate for %r / %r reduces the norm below %d, giving up at %r",
                              steps, a, b, abs(b), b)
                return b, False, steps
        else:
            remainder = a - q * b
            _logger.debug("step %d: %r / %r = %r exactly", steps, a, b, q)

        a, b = b, remainder

    return a, True, steps


def euclidean_gcd_attempt(a: AnyAlgebraicInteger, b: AnyAlgebraicInteger) -> GCDAttempt:
    """
    Run the Euclidean algorithm on a and b even if their ring is not known to be Euclidean.

    Whenever a division is inexact, the bounding integers of the quotient are tried in order and the first
    one that leaves a remainder of smaller absolute norm than the divisor is taken. If none does, the run stops
    and the divisor it got stuck on is reported, uncertified.

    Raises:
        AlgebraicDegreeOverflowError: If a and b are from different rings.
        UnsupportedNumberDomainError: If a and b are not quadratic integers.
        TypeError: If a or b is not an algebraic integer.
    """
    for n in (a, b):
        if not isinstance(n, ALGEBRAIC_TYPES):
            raise TypeError(f"Expected an algebraic integer, got {type(n)}")

    _check_same_ring(a, b)

    if not isinstance(a, quadint) or not isinstance(b, quadint):
        raise UnsupportedNumberDomainError(f"Euclidean gcd is not supported for {a.ring.to_ascii_string()}", a, b)

    value, certified, steps = _euclid(a, b)
    if (value.a < 0 and certified) or (value.a > 0 and not certified):
        value = -value

    if certified:
        _logger.debug("gcd(%r, %r) = %r after %d steps", a, b, value, steps)
    else:
        _logger.debug("gcd(%r, %r) not certified, got as far as %r after %d steps", a, b, value, steps)

    return GCDAttempt(value, certified, steps)


def try_euclidean_gcd_anyway(a: AnyAlgebraicInteger, b: AnyAlgebraicInteger) -> quadint:
    """
    Same as euclidean_gcd_attempt, but returns only the value.

    The sign of the regular part tells whether the result can be trusted: non-negative means the algorithm
    converged and the value is a gcd, negative means it got stuck and the value is only the farthest point
    reached. A zero regular part carries no such signal; use euclidean_gcd_attempt to tell those apart.
    """
    return euclidean_gcd_attempt(a, b).value


def _lift(n: Union[int, unaryint, quadint], ring: QuadraticRing) -> quadint:
    """Treat a rational integer as a member of the given ring."""
    if isinstance(n, quadint):
        return quadint(n.regular_part, 0, ring)
    return quadint(int(n), 0, ring)


def _certified_euclid(a: quadint, b: quadint) -> quadint:
    """
    The Euclidean loop for a norm-Euclidean ring.

    Every inexact quotient has a lattice point within absolute norm 1, though in a real ring it may be far from the
    quotient, so the search for it widens until one is found.

    Raises:
        NonEuclideanDomainError: If no such lattice point is found within the search radius.
    """
    ring = a.ring
    if abs(a) < abs(b):
        a, b = b, a

    steps = 0
    while b:
        steps += 1
        try:
            q = a / b
        except NotDivisibleError as e:
            reg, surd = e.fractions
            nums = euclidean_numerators(reg, surd, ring.radicand, ring.has_half_integers)
            if nums is None:
                raise NonEuclideanDomainError(
                    f"No quotient within norm 1 of {a!r} / {b!r} in {ring.to_ascii_string()}", a, b) from e

            q = quadint._make(nums[0], nums[1], ring)
            _logger.debug("step %d: %r / %r, chose %r", steps, a, b, q)
        else:
            _logger.debug("step %d: %r / %r = %r exactly", steps, a, b, q)

        a, b = b, a - q * b

    return a


def euclidean_gcd(a: GCD_TYPES, b: GCD_TYPES) -> GCD_TYPES:
    """
    Greatest common divisor by the Euclidean algorithm, for rings where it is guaranteed to work.

    Rational operands (ints, unaryints, or quadints with no surd part) are moved into the ring of the other
    operand. The result is normalized: a Gaussian gcd is rotated off the imaginary axis, then its regular part is
    made non-negative.

    Raises:
        NonEuclideanDomainError: If the ring is not norm-Euclidean, or if a quotient within norm 1 was not
            found within the search radius. In both cases try_euclidean_gcd_anyway may still be applied to the
            operands.
        AlgebraicDegreeOverflowError: If a and b are irrational members of different rings.
        UnsupportedNumberDomainError: For number types without a Euclidean gcd here.
    """
    if isinstance(a, (int, unaryint)) and isinstance(b, (int, unaryint)):
        g = gcd(int(a), int(b))
        return unaryint(g) if isinstance(a, unaryint) or isinstance(b, unaryint) else g

    if isinstance(a, zeta8int) or isinstance(b, zeta8int):
        raise UnsupportedNumberDomainError("Euclidean gcd is not supported for Z[zeta_8]", a, b)

    if not isinstance(a, quadint):
        assert isinstance(b, quadint)
        a = _lift(a, b.ring)
    elif not isinstance(b, quadint):
        b = _lift(b, a.ring)
    elif a.ring != b.ring:
        if a.surd_part == 0 and b.surd_part != 0:
            a = _lift(a, b.ring)
        elif b.surd_part == 0:
            b = _lift(b, a.ring)
        else:
            raise AlgebraicDegreeOverflowError(
                f"{a!r} is from {a.ring.to_ascii_string()} but {b!r} is from {b.ring.to_ascii_string()}",
                max(a.algebraic_degree(), b.algebraic_degree()), a, b)

    ring = a.ring
    if ring.radicand not in NORM_EUCLIDEAN_QUADRATIC_RINGS_D:
        raise NonEuclideanDomainError(f"{ring.to_ascii_string()} is not a norm-Euclidean domain", a, b)

    value = _certified_euclid(a, b)

    if ring.radicand == -1 and value.regular_part == 0:
        value = value * quadint(0, -1, ring)

    if value.regular_part < 0:
        value = -value

    return value


def is_divisible_by(a: GCD_TYPES, b: GCD_TYPES) -> bool:
    """
    True iff b divides a in their ring.

    Raises:
        ZeroDivisionError: If b is zero.
    """
    if isinstance(a, int) and isinstance(b, int):
        if b == 0:
            raise ZeroDivisionError(f"{a} / 0")
        return a % b == 0

    if isinstance(a, int):
        assert not isinstance(b, int)
        a = get_one_in_ring(b.ring).times(a)

    try:
        a.divides(b)  # type: ignore[arg-type]
    except NotDivisibleError:
        return False

    return True


def _splitting_symbol(discriminant: int, p: int) -> int:
    """The Kronecker symbol (D/p) for a prime p: 1 if p splits, -1 if p is inert, 0 if p ramifies."""
    if discriminant % p == 0:
        return 0

    if p == 2:
        return 1 if discriminant % 8 == 1 else -1

    return legendre_symbol(discriminant % p, p)


def is_prime(num: GCD_TYPES) -> bool:
    """
    Whether num is a prime element of its ring.

    A quadratic integer is prime if its absolute norm is a rational prime, or if its absolute norm is p^2
    for a rational prime p that stays inert in the ring (then num is a unit times p).

    Raises:
        UnsupportedNumberDomainError: For Z[zeta_8].
    """
    if isinstance(num, int):
        return bool(isprime(abs(num)))

    if isinstance(num, unaryint):
        return bool(isprime(abs(num.n)))

    if isinstance(num, zeta8int):
        raise UnsupportedNumberDomainError("Primality is not supported for Z[zeta_8]", num)

    n = abs(num)
    if isprime(n):
        return True

    p = _isqrt_exact(n)
    if p is None or not isprime(p):
        return False

    return _splitting_symbol(num.ring.discriminant, p) == -1


def _isqrt_exact(n: int) -> Optional[int]:
    r = isqrt(n)
    return r if r * r == n else None


def is_ufd(ring: Union[QuadraticRing, UnaryRing, Zeta8Ring]) -> bool:
    """
    Whether the ring has unique factorization.

    Raises:
        UnsupportedNumberDomainError: For a real quadratic ring that is not norm-Euclidean, since deciding it
            requires the class number.
    """
    if not isinstance(ring, QuadraticRing):
        return True

    if ring.radicand < 0:
        return ring.radicand in HEEGNER_NUMBERS

    if ring.radicand in NORM_EUCLIDEAN_QUADRATIC_REAL_RINGS_D:
        return True

    raise UnsupportedNumberDomainError(f"Class number of {ring.to_ascii_string()} is not known here", ring)


def get_one_in_ring(ring: Union[QuadraticRing, UnaryRing, Zeta8Ring]) -> AnyAlgebraicInteger:
    """The multiplicative identity of ring."""
    if isinstance(ring, QuadraticRing):
        return quadint(1, 0, ring)
    if isinstance(ring, UnaryRing):
        return unaryint(1)
    if isinstance(ring, Zeta8Ring):
        return zeta8int(1)

    raise UnsupportedNumberDomainError(f"1 is not available for {ring!r}", ring)
