from fractions import Fraction
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from quadint.algebraic import AnyAlgebraicInteger


class NotDivisibleError(ArithmeticError):
    """
    Raised when a division is exact in the field of fractions but the quotient is not a lattice point of the ring.

    The payload is everything a caller needs to recover: the exact rational coordinates of the quotient and the
    lattice points surrounding it (``bounding_integers``), ordered nearest first.
    """

    def __init__(self,
                 dividend: "AnyAlgebraicInteger",
                 divisor: "AnyAlgebraicInteger",
                 fractions: tuple[Fraction, ...],
                 bounding_integers: tuple["AnyAlgebraicInteger", ...],
                 message: Optional[str] = None) -> None:
        if message is None:
            message = f"{dividend!r} is not divisible by {divisor!r}"
        super().__init__(message)

        self.dividend = dividend
        self.divisor = divisor
        self.fractions = fractions
        self.bounding_integers = bounding_integers

    @property
    def ring(self) -> Any:
        return self.dividend.ring

    def round_towards_zero(self) -> "AnyAlgebraicInteger":
        """The bounding integer of smallest absolute norm (first one wins ties)."""
        return min(self.bounding_integers, key=lambda n: abs(n))

    def round_away_from_zero(self) -> "AnyAlgebraicInteger":
        """The bounding integer of largest absolute norm (first one wins ties)."""
        return max(self.bounding_integers, key=lambda n: abs(n))


class AlgebraicDegreeOverflowError(ArithmeticError):
    """
    Raised when two operands cannot be combined within the degree their representation supports.

    Typically the operands come from two different rings, so their sum, product or gcd would live in a ring of
    higher degree (e.g. sqrt(-2) and sqrt(2) as two quadratic integers rather than one quartic one).
    """

    def __init__(self, message: str, max_degree: int, first: Any, second: Any) -> None:
        super().__init__(message)
        self.max_degree = max_degree
        self.first = first
        self.second = second

    @property
    def operands(self) -> tuple[Any, Any]:
        return self.first, self.second


class UnsupportedNumberDomainError(NotImplementedError):
    """Raised when an operation has no implementation yet for the number domain of its operands."""

    def __init__(self, message: str, *operands: Any) -> None:
        super().__init__(message)
        self.operands = operands


class NonEuclideanDomainError(ArithmeticError):
    """
    Raised by the certified Euclidean gcd when the ring is not known to be norm-Euclidean,
    or when the division search stopped making progress.

    ``quadint.euclid.try_euclidean_gcd_anyway`` can still be applied to ``operands``.
    """

    def __init__(self, message: str, first: Any, second: Any) -> None:
        super().__init__(message)
        self.first = first
        self.second = second

    @property
    def operands(self) -> tuple[Any, Any]:
        return self.first, self.second
