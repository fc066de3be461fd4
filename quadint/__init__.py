from quadint.algebraic import ALGEBRAIC_TYPES, AlgebraicInteger, AnyAlgebraicInteger, is_algebraic_integer, is_in_ring
from quadint.euclid import (
    GCDAttempt,
    euclidean_gcd,
    euclidean_gcd_attempt,
    get_one_in_ring,
    is_divisible_by,
    is_prime,
    is_ufd,
    try_euclidean_gcd_anyway,
)
from quadint.exceptions import (
    AlgebraicDegreeOverflowError,
    NonEuclideanDomainError,
    NotDivisibleError,
    UnsupportedNumberDomainError,
)
from quadint.quad import quadint
from quadint.rings import Z, ZETA8, IntegerRing, QuadraticRing, UnaryRing, Zeta8Ring
from quadint.unary import unaryint
from quadint.zeta8 import zeta8int

__all__ = [
    "ALGEBRAIC_TYPES",
    "AlgebraicDegreeOverflowError",
    "AlgebraicInteger",
    "AnyAlgebraicInteger",
    "GCDAttempt",
    "IntegerRing",
    "NonEuclideanDomainError",
    "NotDivisibleError",
    "QuadraticRing",
    "UnaryRing",
    "UnsupportedNumberDomainError",
    "Z",
    "ZETA8",
    "Zeta8Ring",
    "euclidean_gcd",
    "euclidean_gcd_attempt",
    "get_one_in_ring",
    "is_algebraic_integer",
    "is_divisible_by",
    "is_in_ring",
    "is_prime",
    "is_ufd",
    "quadint",
    "try_euclidean_gcd_anyway",
    "unaryint",
    "zeta8int",
]
