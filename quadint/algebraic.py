from typing import Any, Protocol, Union, runtime_checkable

from quadint.quad import quadint
from quadint.unary import unaryint
from quadint.zeta8 import zeta8int


@runtime_checkable
class AlgebraicInteger(Protocol):
    """
    What every number type in this package provides.

    The set of implementations is closed (see ALGEBRAIC_TYPES); algorithms that need more than this contract
    dispatch on the concrete type and reject the ones they do not support.
    """

    @property
    def ring(self) -> Any: ...

    def norm(self) -> int: ...

    def trace(self) -> int: ...

    def algebraic_degree(self) -> int: ...

    def plus(self, other: Any) -> Any: ...

    def minus(self, other: Any) -> Any: ...

    def times(self, other: Any) -> Any: ...

    def divides(self, other: Any) -> Any: ...

    def to_ascii_string(self) -> str: ...

    def to_tex_string(self) -> str: ...

    def to_html_string(self) -> str: ...


ALGEBRAIC_TYPES = (unaryint, quadint, zeta8int)
AnyAlgebraicInteger = Union[unaryint, quadint, zeta8int]


def is_algebraic_integer(n: object) -> bool:
    """True iff n is one of the concrete algebraic integer types."""
    return isinstance(n, ALGEBRAIC_TYPES)


def is_in_ring(n: object, ring: object) -> bool:
    """True iff n is an algebraic integer belonging to the given ring."""
    return isinstance(n, ALGEBRAIC_TYPES) and n.ring == ring
