import itertools

import pytest

from quadint import ZETA8, NotDivisibleError, QuadraticRing, quadint, zeta8int
from quadint.utils import INT_MAX


class Zeta8IntTests:
    """Support methods for testing zeta8int"""

    def setup_method(self, _):
        """Setup some test data"""
        self.z = zeta8int(0, 1)
        self.a_int = zeta8int(1, 2, 3, 4)
        self.b_int = zeta8int(2, -1, 0, 1)

    @staticmethod
    def assert_equal(res, res_int: zeta8int):
        """Validate the zeta8int coordinates, and that it is still backed by integers"""
        assert list(res) == list(res_int)
        for part in res_int:
            assert isinstance(part, int)


class TestArithmetic(Zeta8IntTests):
    """Tests for + - * /"""

    def test_zeta_powers(self):
        """zeta^4 == -1 and zeta^2 == i"""
        assert self.z * self.z * self.z * self.z == zeta8int(-1)
        self.assert_equal((0, 0, 1, 0), self.z * self.z)

    def test_sqrt2(self):
        """zeta - zeta^3 squares to 2, zeta + zeta^3 squares to -2"""
        sqrt2 = zeta8int(0, 1, 0, -1)
        sqrt_neg2 = zeta8int(0, 1, 0, 1)
        assert sqrt2 * sqrt2 == zeta8int(2)
        assert sqrt_neg2 * sqrt_neg2 == zeta8int(-2)

    def test_add_sub(self):
        """Coordinate-wise sums and round trips"""
        self.assert_equal((3, 1, 3, 5), self.a_int + self.b_int)
        self.assert_equal((-1, 3, 3, 3), self.a_int - self.b_int)
        assert self.a_int.plus(self.b_int).minus(self.b_int) == self.a_int
        self.assert_equal((6, 2, 3, 4), self.a_int + 5)
        self.assert_equal((4, -2, -3, -4), 5 - self.a_int)

    def test_mul(self):
        """Products are commutative and distribute over addition"""
        c = zeta8int(-3, 0, 2, 1)
        assert self.a_int * self.b_int == self.b_int * self.a_int
        assert self.a_int * (self.b_int + c) == self.a_int * self.b_int + self.a_int * c
        self.assert_equal((3, 6, 9, 12), 3 * self.a_int)

    def test_div(self):
        """(a * b) / b == a"""
        values = [zeta8int(*p) for p in itertools.product((-1, 0, 2), repeat=4)]
        for x, y in itertools.product(values[::5], values[::7]):
            if y:
                assert (x * y) / y == x

    def test_not_divisible(self):
        """1 + zeta has norm 2, so it does not divide 1"""
        with pytest.raises(NotDivisibleError) as e:
            zeta8int(1) / zeta8int(1, 1)

        assert len(e.value.fractions) == 4
        assert e.value.ring == ZETA8
        assert e.value.bounding_integers

        with pytest.raises(ZeroDivisionError):
            self.a_int / 0

    def test_overflow(self):
        """Results outside the 32-bit range raise"""
        with pytest.raises(ArithmeticError) as e:
            zeta8int(INT_MAX) + 1
        assert str(e.value).strip()


class TestInvariants(Zeta8IntTests):
    """Tests for norm, trace and algebraic_degree"""

    def test_norm(self):
        """Norm is the product of the four conjugates"""
        assert self.z.norm() == 1
        assert zeta8int(1, 1).norm() == 2
        assert zeta8int(2).norm() == 16
        assert zeta8int(1, 0, 1).norm() == 4  # N(1 + i) = 2 over Q(i), squared
        assert (self.a_int * self.b_int).norm() == self.a_int.norm() * self.b_int.norm()
        assert abs(zeta8int(1, 1)) == 2

    def test_trace(self):
        """Trace is 4a"""
        assert self.a_int.trace() == 4

    def test_degree(self):
        """0, 1, 2 in the quadratic subfields, otherwise 4"""
        assert zeta8int(0).algebraic_degree() == 0
        assert zeta8int(5).algebraic_degree() == 1
        assert zeta8int(1, 0, 2).algebraic_degree() == 2
        assert zeta8int(1, 2, 0, -2).algebraic_degree() == 2
        assert zeta8int(1, 2, 0, 2).algebraic_degree() == 2
        assert self.a_int.algebraic_degree() == 4

    def test_galois(self):
        """The conjugates are ring automorphisms"""
        for k in (3, 5, 7):
            assert (self.a_int * self.b_int).galois(k) == self.a_int.galois(k) * self.b_int.galois(k)

        with pytest.raises(ValueError):
            self.a_int.galois(2)


class TestSubfields(Zeta8IntTests):
    """Tests for conversions to and from quadint"""

    def test_round_trip(self):
        """quadint -> zeta8int -> quadint"""
        for d in (-1, 2, -2):
            ring = QuadraticRing(d)
            for a, b in itertools.product(range(-3, 4), repeat=2):
                if b == 0:
                    continue
                x = quadint(a, b, ring)
                assert zeta8int.from_quadint(x).to_quadint() == x

    def test_mul_matches(self):
        """Embedding respects multiplication"""
        for d in (-1, 2, -2):
            ring = QuadraticRing(d)
            x, y = quadint(3, -2, ring), quadint(-1, 5, ring)
            assert zeta8int.from_quadint(x * y) == zeta8int.from_quadint(x) * zeta8int.from_quadint(y)
            assert zeta8int.from_quadint(x).norm() == x.norm() ** 2

    def test_operators_with_quadint(self):
        """Operators take the same quadint operands as plus, minus, times and divides"""
        gaussian = quadint(2, 1, QuadraticRing(-1))
        x = zeta8int(1, 1)
        self.assert_equal((3, 1, 1, 0), x + gaussian)
        self.assert_equal((3, 1, 1, 0), gaussian + x)
        assert x + gaussian == x.plus(gaussian)
        self.assert_equal((-1, 1, -1, 0), x - gaussian)
        self.assert_equal((1, -1, 1, 0), gaussian - x)
        assert x * gaussian == x.times(gaussian)
        assert gaussian * x == x.times(gaussian)
        assert (x * gaussian) / gaussian == x
        assert (x * gaussian) / x == zeta8int.from_quadint(gaussian)

        with pytest.raises(ValueError):
            x + quadint(1, 1, QuadraticRing(-5))

    def test_not_subfield(self):
        """Only Q(i), Q(sqrt(2)) and Q(sqrt(-2)) embed"""
        with pytest.raises(ValueError):
            zeta8int.from_quadint(quadint(1, 1, QuadraticRing(-5)))

        with pytest.raises(ValueError):
            self.a_int.to_quadint()


class TestStr(Zeta8IntTests):
    """Tests for the string forms"""

    def test_forms(self):
        """Unicode, ASCII, TeX and HTML"""
        x = zeta8int(1, -1, 0, 2)
        assert str(x) == "1 − ζ + 2ζ³"
        assert x.to_ascii_string() == "1 - z + 2z^3"
        assert repr(x) == "1 - z + 2z^3"
        assert x.to_tex_string() == "1 - \\zeta_8 + 2\\zeta_8^3"
        assert x.to_html_string() == "1 &minus; &zeta; + 2&zeta;<sup>3</sup>"
        assert str(zeta8int(0)) == "0"

    def test_hash(self):
        """Distinct small values hash differently"""
        values = {zeta8int(*p) for p in itertools.product(range(-3, 4), repeat=4)}
        assert len({hash(v) for v in values}) == len(values)
