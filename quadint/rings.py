from dataclasses import dataclass
from typing import ClassVar, Protocol, runtime_checkable

from quadint.utils import MINUS_SIGN, SQRT_SIGN, is_squarefree


@runtime_checkable
class IntegerRing(Protocol):
    """What every ring descriptor exposes to the number types and their collaborators."""

    @property
    def max_algebraic_degree(self) -> int: ...

    @property
    def is_purely_real(self) -> bool: ...

    @property
    def discriminant(self) -> int: ...

    def to_ascii_string(self) -> str: ...

    def to_tex_string(self) -> str: ...

    def to_html_string(self) -> str: ...


# TODO: Once Py3.9 support has been dropped, add slots=True
# @dataclass(frozen=True, slots=True)
@dataclass(frozen=True)
class QuadraticRing:
    """
    The ring of algebraic integers of Q(sqrt(d)), for a squarefree radicand d.

    When d = 1 (mod 4) the ring also contains the "half-integers" (a + b*sqrt(d))/2 with a and b both odd.
    """
    radicand: int

    MAX_ALGEBRAIC_DEGREE: ClassVar[int] = 2

    def __post_init__(self) -> None:
        d = self.radicand
        if d == 0 or d == 1:
            raise ValueError(f"{d} is not a valid radicand for a quadratic ring")

        if not is_squarefree(d):
            raise ValueError(f"Squarefree integer required for the radicand, {d} is not squarefree")

    @property
    def has_half_integers(self) -> bool:
        """True iff d = 1 (mod 4)."""
        return self.radicand % 4 == 1

    @property
    def is_purely_real(self) -> bool:
        return self.radicand > 0

    @property
    def abs_radicand(self) -> int:
        return abs(self.radicand)

    @property
    def discriminant(self) -> int:
        """d if d = 1 (mod 4), otherwise 4d."""
        return self.radicand if self.has_half_integers else 4 * self.radicand

    @property
    def max_algebraic_degree(self) -> int:
        return self.MAX_ALGEBRAIC_DEGREE

    # region string forms
    def _radicand_str(self, minus: str) -> str:
        return f"{minus}{self.abs_radicand}" if self.radicand < 0 else str(self.radicand)

    def __str__(self) -> str:
        if self.radicand == -1:
            return "Z[i]"
        if self.radicand == -3:
            return "Z[ω]"
        if self.radicand == 5:
            return "Z[φ]"

        d = self._radicand_str(MINUS_SIGN)
        if self.has_half_integers:
            return f"O_(Q({SQRT_SIGN}{d}))"
        return f"Z[{SQRT_SIGN}{d}]"

    def to_ascii_string(self) -> str:
        if self.radicand == -1:
            return "Z[i]"
        if self.radicand == -3:
            return "Z[omega]"
        if self.radicand == 5:
            return "Z[phi]"

        if self.has_half_integers:
            return f"O_(Q(sqrt({self.radicand})))"
        return f"Z[sqrt({self.radicand})]"

    def to_tex_string(self, *, blackboard_bold: bool = False) -> str:
        q_symbol = "\\mathbb Q" if blackboard_bold else "\\mathbf Q"
        z_symbol = "\\mathbb Z" if blackboard_bold else "\\mathbf Z"

        if self.radicand == -1:
            return f"{z_symbol}[i]"
        if self.radicand == -3:
            return f"{z_symbol}[\\omega]"
        if self.radicand == 5:
            return f"{z_symbol}[\\phi]"

        if self.has_half_integers:
            return f"\\mathcal O_{{{q_symbol}(\\sqrt{{{self.radicand}}})}}"
        return f"{z_symbol}[\\sqrt{{{self.radicand}}}]"

    def to_html_string(self, *, blackboard_bold: bool = False) -> str:
        q_symbol = "&#x211A;" if blackboard_bold else "<b>Q</b>"
        z_symbol = "&#x2124;" if blackboard_bold else "<b>Z</b>"

        if self.radicand == -1:
            return f"{z_symbol}[<i>i</i>]"
        if self.radicand == -3:
            return f"{z_symbol}[&omega;]"
        if self.radicand == 5:
            return f"{z_symbol}[&phi;]"

        d = self._radicand_str("&minus;")
        if self.has_half_integers:
            return f"<i>O</i><sub>{q_symbol}(&radic;{d})</sub>"
        return f"{z_symbol}[&radic;{d}]"

    def to_filename_string(self) -> str:
        """Short name safe for file names, e.g. ZI2 for Z[sqrt(-2)] or OQ13 for O_(Q(sqrt(13)))."""
        if self.radicand == -1:
            return "ZI"
        if self.radicand == -3:
            return "ZW"
        if self.radicand == 5:
            return "ZPHI"

        prefix = "OQ" if self.has_half_integers else "Z"
        if self.radicand < 0:
            prefix += "I"
        return f"{prefix}{self.abs_radicand}"
    # endregion


@dataclass(frozen=True)
class UnaryRing:
    """The rational integers Z, seen as the ring of integers of Q."""

    @property
    def max_algebraic_degree(self) -> int:
        return 1

    @property
    def is_purely_real(self) -> bool:
        return True

    @property
    def discriminant(self) -> int:
        return 1

    def __str__(self) -> str:
        return "Z"

    def to_ascii_string(self) -> str:
        return "Z"

    def to_tex_string(self, *, blackboard_bold: bool = False) -> str:
        return "\\mathbb Z" if blackboard_bold else "\\mathbf Z"

    def to_html_string(self, *, blackboard_bold: bool = False) -> str:
        return "&#x2124;" if blackboard_bold else "<b>Z</b>"


@dataclass(frozen=True)
class Zeta8Ring:
    """Z[zeta_8], the ring of integers of the eighth cyclotomic field (a quartic ring)."""

    @property
    def max_algebraic_degree(self) -> int:
        return 4

    @property
    def is_purely_real(self) -> bool:
        return False

    @property
    def discriminant(self) -> int:
        return 256

    def __str__(self) -> str:
        return "Z[ζ₈]"

    def to_ascii_string(self) -> str:
        return "Z[zeta_8]"

    def to_tex_string(self, *, blackboard_bold: bool = False) -> str:
        z_symbol = "\\mathbb Z" if blackboard_bold else "\\mathbf Z"
        return f"{z_symbol}[\\zeta_8]"

    def to_html_string(self, *, blackboard_bold: bool = False) -> str:
        z_symbol = "&#x2124;" if blackboard_bold else "<b>Z</b>"
        return f"{z_symbol}[&zeta;<sub>8</sub>]"


Z = UnaryRing()
ZETA8 = Zeta8Ring()
