import pytest

from quadint import NotDivisibleError, Z, unaryint
from quadint.utils import INT_MAX, INT_MIN

EDGE_VALUES = [INT_MIN, INT_MIN + 1, -(1 << 30), -2, -1, 0, 1, 2, 1 << 30, INT_MAX - 1, INT_MAX]


class TestUnaryInt:
    """Tests for unaryint"""

    def test_invariants(self):
        """Norm and trace are the number itself"""
        n = unaryint(-7)
        assert n.norm() == -7
        assert n.trace() == -7
        assert n.algebraic_degree() == 1
        assert unaryint(0).algebraic_degree() == 0
        assert n.ring == Z

    def test_add_overflow(self):
        """Addition either matches the wide result or raises with a message"""
        for x in EDGE_VALUES:
            for y in EDGE_VALUES:
                expected = x + y
                if INT_MIN <= expected <= INT_MAX:
                    assert unaryint(x).plus(unaryint(y)) == unaryint(expected)
                    assert unaryint(x) + y == unaryint(expected)
                else:
                    with pytest.raises(ArithmeticError) as e:
                        unaryint(x).plus(unaryint(y))
                    assert str(e.value).strip()

    def test_sub_overflow(self):
        """Subtraction either matches the wide result or raises with a message"""
        for x in EDGE_VALUES:
            for y in EDGE_VALUES:
                expected = x - y
                if INT_MIN <= expected <= INT_MAX:
                    assert unaryint(x).minus(unaryint(y)) == unaryint(expected)
                else:
                    with pytest.raises(ArithmeticError) as e:
                        unaryint(x).minus(unaryint(y))
                    assert str(e.value).strip()

    def test_mul_overflow(self):
        """Multiplication outside the range raises"""
        assert unaryint(1 << 15) * (1 << 15) == unaryint(1 << 30)
        with pytest.raises(ArithmeticError):
            unaryint(1 << 16) * (1 << 16)

        with pytest.raises(ArithmeticError):
            -unaryint(INT_MIN)

    def test_construct_overflow(self):
        """Values outside the range cannot be constructed"""
        with pytest.raises(ArithmeticError):
            unaryint(INT_MAX + 1)

    def test_div(self):
        """Exact division"""
        assert unaryint(12) / 4 == unaryint(3)
        assert unaryint(-12).divides(unaryint(4)) == unaryint(-3)

        with pytest.raises(ZeroDivisionError):
            unaryint(1) / 0

    def test_not_divisible(self):
        """Inexact division offers the floor and ceiling, nearest first"""
        with pytest.raises(NotDivisibleError) as e:
            unaryint(7) / 2
        assert e.value.bounding_integers == (unaryint(3), unaryint(4))

        with pytest.raises(NotDivisibleError) as e:
            unaryint(-7) / 2
        assert e.value.bounding_integers == (unaryint(-4), unaryint(-3))

        with pytest.raises(NotDivisibleError) as e:
            unaryint(10) / 3
        assert e.value.bounding_integers == (unaryint(3), unaryint(4))
        assert e.value.round_towards_zero() == unaryint(3)
        assert e.value.round_away_from_zero() == unaryint(4)

    def test_str(self):
        """String forms"""
        assert str(unaryint(-3)) == "−3"
        assert unaryint(-3).to_ascii_string() == "-3"
        assert unaryint(-3).to_html_string() == "&minus;3"
        assert unaryint(3).to_tex_string() == "3"

    def test_hash(self):
        """Distinct small values hash differently"""
        values = [unaryint(i) for i in range(-500, 500)]
        assert len({hash(v) for v in values}) == len(values)
