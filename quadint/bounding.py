"""
Lattice membership and bounding candidates for quotients in a quadratic field.

Points of Q(sqrt(d)) are given by their exact rational coordinates (reg, surd), meaning reg + surd*sqrt(d).
Lattice points are returned in "numerator units" (A, B), meaning (A + B*sqrt(d))/2, which is also how quadint
stores them internally.
"""
from fractions import Fraction
from math import ceil, floor, sqrt
from typing import Optional

MAX_CANDIDATES = 4
MAX_SEARCH_RADIUS = 64


def lattice_numerators(reg: Fraction, surd: Fraction, half_integers: bool) -> Optional[tuple[int, int]]:
    """
    Return (A, B) with reg + surd*sqrt(d) == (A + B*sqrt(d))/2 if that point is in the ring, else None.

    Args:
        reg: Rational coordinate of the regular part.
        surd: Rational coordinate of the surd part.
        half_integers: Whether the ring contains half-integers (d = 1 mod 4).
    """
    x, y = 2 * reg, 2 * surd
    if x.denominator != 1 or y.denominator != 1:
        return None

    A, B = x.numerator, y.numerator
    if half_integers:
        if (A ^ B) & 1:
            return None
    elif (A | B) & 1:
        return None

    return A, B


def norm_distance(reg: Fraction, surd: Fraction, A: int, B: int, radicand: int) -> Fraction:
    """|N(q - c)| for q = reg + surd*sqrt(d) and c = (A + B*sqrt(d))/2."""
    dx = reg - Fraction(A, 2)
    dy = surd - Fraction(B, 2)
    return abs(dx * dx - radicand * dy * dy)


def bounding_numerators(reg: Fraction,
                        surd: Fraction,
                        radicand: int,
                        half_integers: bool,
                        limit: int = MAX_CANDIDATES) -> list[tuple[int, int]]:
    """
    The lattice points surrounding a (usually non-lattice) point of the field, nearest first.

    Without half-integers the candidates are the floor/ceiling combinations of the two coordinates.
    With half-integers the lattice is the set of same-parity numerator pairs, so we look at the same-parity
    pairs in a one-step band around the doubled coordinates instead.

    "Nearest" is measured by |N(q - c)|, which is what decides whether c is a usable Euclidean quotient:
        |N(a - c*b)| = |N(b)| * |N(a/b - c)|
    Ties keep numerator-coordinate order, so the result is deterministic.

    Returns:
        list: At most `limit` numerator pairs (A, B).
    """
    if half_integers:
        x, y = 2 * reg, 2 * surd
        points = [
            (A, B)
            for A in range(floor(x) - 1, ceil(x) + 2)
            for B in range(floor(y) - 1, ceil(y) + 2)
            if ((A ^ B) & 1) == 0
        ]
    else:
        regs = sorted({floor(reg), ceil(reg)})
        surds = sorted({floor(surd), ceil(surd)})
        points = [(2 * r, 2 * s) for r in regs for s in surds]

    points.sort(key=lambda p: (norm_distance(reg, surd, p[0], p[1], radicand), p[0], p[1]))
    return points[:limit]


def euclidean_numerators(reg: Fraction,
                         surd: Fraction,
                         radicand: int,
                         half_integers: bool,
                         max_radius: int = MAX_SEARCH_RADIUS) -> Optional[tuple[int, int]]:
    """
    A lattice point c with |N(q - c)| < 1, searching outwards from q until one is found.

    In a real quadratic field such a point may lie far from q along the hyperbolas |x^2 - d*y^2| = const, so for
    every surd numerator B in the band we also look next to the two regular parts where the norm of q - c
    vanishes, reg +- sqrt(d)*|surd - B/2|.

    Returns:
        tuple: The numerator pair (A, B) of the nearest such point in the narrowest band holding one. Each
            band after the first adds only its two outer rows. None if the band reached max_radius without finding
            one.
    """
    x, y = 2 * reg, 2 * surd
    rows = list(range(floor(y) - 1, ceil(y) + 2))
    for radius in range(1, max_radius + 1):
        if radius > 1:
            rows = [floor(y) - radius, ceil(y) + radius]

        points: set[tuple[int, int]] = set()
        for B in rows:
            centers = [float(x)]
            if radicand > 0:
                offset = 2 * sqrt(radicand) * abs(float(surd - Fraction(B, 2)))
                centers += [x - offset, x + offset]

            for center in centers:
                for A in range(floor(center) - 1, ceil(center) + 2):
                    if half_integers:
                        if (A ^ B) & 1:
                            continue
                    elif (A | B) & 1:
                        continue
                    points.add((A, B))

        found = [(norm_distance(reg, surd, A, B, radicand), A, B) for A, B in points]
        found = [p for p in found if p[0] < 1]
        if found:
            _, A, B = min(found)
            return A, B

    return None
