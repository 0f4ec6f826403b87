import pytest

from uniquote.exceptions import TokenMismatchError
from uniquote.model.fraction import Fraction


class TestCurrencyAmount:
    def test_add(self, usdc, amount):
        assert amount(usdc, 5).add(amount(usdc, 7)) == amount(usdc, 12)

    def test_subtract(self, usdc, amount):
        result = amount(usdc, 5).subtract(amount(usdc, 7))
        assert result.quotient == -2
        assert result.currency == usdc

    def test_add_other_currency(self, usdc, dai, amount):
        with pytest.raises(TokenMismatchError):
            amount(usdc, 5).add(amount(dai, 7))

    def test_divide(self, usdc, dai, amount):
        # Not reduced.
        assert amount(usdc, 10).divide(amount(dai, 4)) == Fraction(10, 4)

    def test_comparisons(self, usdc, amount):
        small = amount(usdc, 1)
        large = amount(usdc, 2)
        assert large.greater_than(small)
        assert small.less_than(large)
        assert small.less_than_or_equal(small)
        assert small.equal_to(amount(usdc, 1))
        assert not small.greater_than(large)

    def test_compare_other_currency(self, usdc, dai, amount):
        with pytest.raises(TokenMismatchError):
            amount(usdc, 1).greater_than(amount(dai, 1))

    @pytest.mark.parametrize(
        "quotient,expected",
        [(0, "0"), (1_500_000, "1.5"), (100 * 10**6, "100"), (1, "0.000001")],
    )
    def test_to_exact(self, usdc, amount, quotient, expected):
        assert amount(usdc, quotient).to_exact() == expected


class TestFraction:
    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (6, 3, 2)],
    )
    def test_quotient_truncates(self, numerator, denominator, expected):
        assert Fraction(numerator, denominator).quotient == expected

    def test_remainder(self):
        assert Fraction(7, 2).remainder == Fraction(1, 2)

    def test_invert(self):
        assert Fraction(3, 4).invert() == Fraction(4, 3)

    def test_compare(self):
        assert Fraction(1, 3).less_than(Fraction(1, 2))
        assert Fraction(2, 4).equal_to(Fraction(1, 2))
        assert Fraction(4, 2).equal_to(2)
